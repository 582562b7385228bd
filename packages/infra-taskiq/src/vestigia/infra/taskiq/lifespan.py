"""TaskIQ lifespan hook for the delayed-job schedule source.

The taskiq worker starts and stops its own broker, so this hook only owns
the Redis schedule source that deferred deletion passes are written to.

Priority 150 ensures TaskIQ starts AFTER persistence (75).
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any

from vestigia.foundation.application.contributions import (
    LIFESPAN_PRIORITY_TASKIQ,
    LifespanContribution,
)
from vestigia.infra.taskiq.broker import get_schedule_source

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _taskiq_lifespan(app: Any) -> AsyncIterator[None]:
    """Manage schedule source lifecycle.

    Args:
        app: The host instance (unused but required by protocol).
    """
    source = get_schedule_source()
    await source.startup()
    logger.info("taskiq_lifespan: schedule source started")

    try:
        yield
    finally:
        await source.shutdown()
        logger.info("taskiq_lifespan: schedule source shut down")


lifespan_contribution = LifespanContribution(
    hook=_taskiq_lifespan,
    priority=LIFESPAN_PRIORITY_TASKIQ,
)
