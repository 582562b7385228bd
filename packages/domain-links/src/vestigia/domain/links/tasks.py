"""TaskIQ task re-running the deletion pipeline, plus worker lifecycle hooks.

Start a worker, and the single scheduler process that fires delayed
passes, with::

    taskiq worker vestigia.domain.links.tasks:broker
    taskiq scheduler vestigia.domain.links.tasks:scheduler
"""

from __future__ import annotations

from contextlib import AsyncExitStack

from taskiq import TaskiqEvents, TaskiqState

from vestigia.domain.links.infrastructure.deletion_scheduler import DELETE_DOMAIN_TASK_NAME
from vestigia.domain.links.wiring import get_deletion_pipeline, worker_lifespan
from vestigia.infra.observability import bind_deletion_context, get_logger
from vestigia.infra.taskiq.broker import broker, scheduler

logger = get_logger(__name__)

__all__ = ["broker", "delete_domain_task", "scheduler"]


@broker.task(task_name=DELETE_DOMAIN_TASK_NAME)
async def delete_domain_task(domain: str, workspace_id: str) -> str:
    """Run one pass of the immediate deletion pipeline for ``domain``.

    Returns:
        The resulting domain state.
    """
    with bind_deletion_context(domain=domain, workspace_id=workspace_id):
        logger.info("domain_deletion_started")
        result = await get_deletion_pipeline().run(domain, workspace_id)
        return result.state.value


@broker.on_event(TaskiqEvents.WORKER_STARTUP)
async def _on_worker_startup(state: TaskiqState) -> None:
    stack = AsyncExitStack()
    await stack.enter_async_context(worker_lifespan()(state))
    state.lifespan_stack = stack


@broker.on_event(TaskiqEvents.WORKER_SHUTDOWN)
async def _on_worker_shutdown(state: TaskiqState) -> None:
    stack: AsyncExitStack | None = getattr(state, "lifespan_stack", None)
    if stack is not None:
        await stack.aclose()
