"""Domain port interfaces for hexagonal architecture.

Ports define abstract interfaces that the deletion components use to talk
to backing stores. Implementations (adapters) live in infrastructure.
"""

from vestigia.foundation.domain.ports.analytics_sink import AnalyticsSinkPort
from vestigia.foundation.domain.ports.deletion_scheduler import DeletionSchedulerPort
from vestigia.foundation.domain.ports.domain_provider import DomainProviderPort
from vestigia.foundation.domain.ports.link_cache import LinkCachePort
from vestigia.foundation.domain.ports.link_store import LinkStorePort
from vestigia.foundation.domain.ports.object_storage import ObjectStoragePort

__all__ = [
    "AnalyticsSinkPort",
    "DeletionSchedulerPort",
    "DomainProviderPort",
    "LinkCachePort",
    "LinkStorePort",
    "ObjectStoragePort",
]
