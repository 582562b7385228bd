"""Vestigia Foundation Domain -- pure Python domain primitives.

This package provides the foundational building blocks for coordinated
domain and link deletion: value objects, exceptions, and port interfaces
for the backing stores.
"""

from vestigia.foundation.domain.exceptions import (
    DeletionEnqueueError,
    DomainError,
    ExternalServiceError,
    ValidationError,
)
from vestigia.foundation.domain.link_value_objects import (
    DeferredDeletion,
    DomainState,
    LinkRecord,
    OperationOutcome,
    TombstoneEvent,
    link_cache_key,
    normalize_domain_name,
)
from vestigia.foundation.domain.ports import (
    AnalyticsSinkPort,
    DeletionSchedulerPort,
    DomainProviderPort,
    LinkCachePort,
    LinkStorePort,
    ObjectStoragePort,
)

__all__ = [
    "AnalyticsSinkPort",
    "DeferredDeletion",
    "DeletionEnqueueError",
    "DeletionSchedulerPort",
    "DomainError",
    "DomainProviderPort",
    "DomainState",
    "ExternalServiceError",
    "LinkCachePort",
    "LinkRecord",
    "LinkStorePort",
    "ObjectStoragePort",
    "OperationOutcome",
    "TombstoneEvent",
    "ValidationError",
    "link_cache_key",
    "normalize_domain_name",
]
