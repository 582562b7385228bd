"""Persistence lifespan hook for startup/shutdown resource management.

Handles:
- Database health check on startup (SELECT 1)
- Engine disposal on shutdown
- Redis client close on shutdown

Priority 75 ensures persistence starts AFTER observability (50) but
BEFORE the taskiq broker (150) and the link deletion wiring (300).
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any

from sqlalchemy import text

from vestigia.foundation.application.contributions import (
    LIFESPAN_PRIORITY_PERSISTENCE,
    LifespanContribution,
)
from vestigia.infra.persistence.database import get_database_manager
from vestigia.infra.persistence.redis_client import get_redis_factory

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _persistence_lifespan(app: Any) -> AsyncIterator[None]:
    """Manage persistence resources across the worker lifecycle.

    Startup:
        Execute ``SELECT 1`` health check on the async engine.

    Shutdown:
        1. Dispose database engine and connection pool.
        2. Close Redis client connections.

    Args:
        app: The host instance (unused but required by protocol).
    """
    manager = get_database_manager()

    engine = manager.get_engine()
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))
    logger.info("persistence_lifespan: database health check passed")

    try:
        yield
    finally:
        await manager.dispose()
        logger.info("persistence_lifespan: database engine disposed")

        try:
            await get_redis_factory().close()
            logger.info("persistence_lifespan: redis client closed")
        except Exception:
            logger.warning("persistence_lifespan: failed to close redis client", exc_info=True)


lifespan_contribution = LifespanContribution(
    hook=_persistence_lifespan,
    priority=LIFESPAN_PRIORITY_PERSISTENCE,
)
