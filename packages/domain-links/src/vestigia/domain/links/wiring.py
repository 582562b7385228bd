"""Process-wide wiring of the deletion components to their adapters.

Components never reach for global clients; this module is the one place
that builds them from settings, cached like the other ``get_*`` singletons.

Usage:
    from vestigia.domain.links.wiring import get_detach_coordinator

    result = await get_detach_coordinator().detach("go.example", "ws_1")
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import TYPE_CHECKING, Any

from vestigia.domain.links.convergence import ConvergenceChecker
from vestigia.domain.links.detach import DetachCoordinator
from vestigia.domain.links.fan_out import FanOutDeleter
from vestigia.domain.links.infrastructure.analytics_sink import (
    EventsApiSink,
    get_analytics_settings,
)
from vestigia.domain.links.infrastructure.deletion_scheduler import TaskiqDeletionScheduler
from vestigia.domain.links.infrastructure.domain_provider import (
    HostingProviderClient,
    get_hosting_provider_settings,
)
from vestigia.domain.links.infrastructure.link_cache import RedisLinkCache
from vestigia.domain.links.infrastructure.link_store import SqlLinkStore
from vestigia.domain.links.infrastructure.object_storage import (
    S3ObjectStorage,
    get_object_storage_settings,
)
from vestigia.domain.links.locator import RecordLocator
from vestigia.domain.links.pipeline import DomainDeletionPipeline
from vestigia.domain.links.scheduler_bridge import DeletionSchedulerBridge
from vestigia.domain.links.settings import get_link_deletion_settings
from vestigia.foundation.application.contributions import (
    LIFESPAN_PRIORITY_LINKS,
    LifespanContribution,
)
from vestigia.foundation.application.lifespan import compose_lifespan
from vestigia.infra.observability import lifespan_contribution as observability_lifespan
from vestigia.infra.persistence import (
    get_redis_factory,
    get_session_factory,
)
from vestigia.infra.persistence import lifespan_contribution as persistence_lifespan
from vestigia.infra.taskiq import lifespan_contribution as taskiq_lifespan
from vestigia.infra.taskiq.broker import get_broker, get_schedule_source

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Callable
    from contextlib import AbstractAsyncContextManager

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_link_store() -> SqlLinkStore:
    return SqlLinkStore(get_session_factory())


@lru_cache(maxsize=1)
def get_link_cache() -> RedisLinkCache:
    return RedisLinkCache(get_redis_factory())


@lru_cache(maxsize=1)
def get_object_storage() -> S3ObjectStorage:
    return S3ObjectStorage(get_object_storage_settings())


@lru_cache(maxsize=1)
def get_analytics_sink() -> EventsApiSink:
    return EventsApiSink(get_analytics_settings())


@lru_cache(maxsize=1)
def get_domain_provider() -> HostingProviderClient:
    return HostingProviderClient(get_hosting_provider_settings())


@lru_cache(maxsize=1)
def get_scheduler_bridge() -> DeletionSchedulerBridge:
    return DeletionSchedulerBridge(TaskiqDeletionScheduler(get_broker(), get_schedule_source()))


@lru_cache(maxsize=1)
def get_deletion_pipeline() -> DomainDeletionPipeline:
    """Build the immediate deletion pipeline from environment settings."""
    settings = get_link_deletion_settings()
    store = get_link_store()
    storage = get_object_storage()
    return DomainDeletionPipeline(
        locator=RecordLocator(store, batch_size=settings.batch_size),
        fan_out=FanOutDeleter(
            store=store,
            cache=get_link_cache(),
            storage=storage,
            sink=get_analytics_sink(),
            asset_base_url=storage.public_url,
        ),
        convergence=ConvergenceChecker(store),
        store=store,
        bridge=get_scheduler_bridge(),
        retry_delay_seconds=settings.retry_delay_seconds,
    )


@lru_cache(maxsize=1)
def get_detach_coordinator() -> DetachCoordinator:
    """Build the detach coordinator from environment settings."""
    return DetachCoordinator(
        provider=get_domain_provider(),
        store=get_link_store(),
        bridge=get_scheduler_bridge(),
    )


@asynccontextmanager
async def _links_lifespan(app: Any) -> AsyncIterator[None]:
    """Close the HTTP clients owned by the analytics sink and hosting provider.

    Args:
        app: The host instance (unused but required by protocol).
    """
    try:
        yield
    finally:
        for name, client in (
            ("analytics_sink", get_analytics_sink()),
            ("domain_provider", get_domain_provider()),
        ):
            try:
                await client.aclose()
            except Exception:
                logger.warning("links_lifespan: failed to close %s", name, exc_info=True)
        logger.info("links_lifespan: http clients closed")


lifespan_contribution = LifespanContribution(
    hook=_links_lifespan,
    priority=LIFESPAN_PRIORITY_LINKS,
)


def worker_lifespan() -> Callable[[Any], AbstractAsyncContextManager[None]]:
    """Composite lifespan for the taskiq worker process.

    The worker starts its own broker; the taskiq hook only opens and closes
    the schedule source deferred passes are written to.
    """
    return compose_lifespan(
        [
            observability_lifespan,
            persistence_lifespan,
            taskiq_lifespan,
            lifespan_contribution,
        ]
    )
