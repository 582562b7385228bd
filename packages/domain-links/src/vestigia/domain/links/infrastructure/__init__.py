"""Vestigia Domain Links Infrastructure: backing-store adapters."""

from vestigia.domain.links.infrastructure.analytics_sink import (
    AnalyticsSettings,
    EventsApiSink,
    get_analytics_settings,
)
from vestigia.domain.links.infrastructure.deletion_scheduler import (
    DELETE_DOMAIN_TASK_NAME,
    TaskiqDeletionScheduler,
)
from vestigia.domain.links.infrastructure.domain_provider import (
    HostingProviderClient,
    HostingProviderSettings,
    get_hosting_provider_settings,
)
from vestigia.domain.links.infrastructure.link_cache import RedisLinkCache
from vestigia.domain.links.infrastructure.link_store import SqlLinkStore
from vestigia.domain.links.infrastructure.object_storage import (
    ObjectStorageSettings,
    S3ObjectStorage,
    get_object_storage_settings,
)

__all__ = [
    "DELETE_DOMAIN_TASK_NAME",
    "AnalyticsSettings",
    "EventsApiSink",
    "HostingProviderClient",
    "HostingProviderSettings",
    "ObjectStorageSettings",
    "RedisLinkCache",
    "S3ObjectStorage",
    "SqlLinkStore",
    "TaskiqDeletionScheduler",
    "get_analytics_settings",
    "get_hosting_provider_settings",
    "get_object_storage_settings",
]
