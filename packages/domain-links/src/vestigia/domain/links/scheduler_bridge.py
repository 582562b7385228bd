"""Deletion Scheduler Bridge: hands deferred pipeline runs to the scheduler."""

from __future__ import annotations

from typing import TYPE_CHECKING

from vestigia.foundation.domain.exceptions import DeletionEnqueueError
from vestigia.foundation.domain.link_value_objects import DeferredDeletion
from vestigia.infra.observability import get_logger

if TYPE_CHECKING:
    from vestigia.foundation.domain.ports import DeletionSchedulerPort

logger = get_logger(__name__)


class DeletionSchedulerBridge:
    """Publishes "run the deletion pipeline for this domain" jobs.

    Jobs are fire-and-forget: once enqueued, the scheduler owns them.
    """

    def __init__(self, scheduler: DeletionSchedulerPort) -> None:
        self._scheduler = scheduler

    async def enqueue(
        self,
        domain: str,
        workspace_id: str,
        delay_seconds: int | None = None,
    ) -> str:
        """Enqueue a deferred pipeline run and return the scheduler's job id.

        Raises:
            DeletionEnqueueError: If the scheduler rejects the job.
        """
        job = DeferredDeletion(domain=domain, workspace_id=workspace_id, delay_seconds=delay_seconds)
        try:
            return await self._scheduler.enqueue(job)
        except Exception as exc:
            raise DeletionEnqueueError(domain, workspace_id, reason=str(exc)) from exc

    async def try_enqueue(
        self,
        domain: str,
        workspace_id: str,
        delay_seconds: int | None = None,
    ) -> str | None:
        """Like :meth:`enqueue`, but a rejected job is logged and ``None`` returned."""
        try:
            return await self.enqueue(domain, workspace_id, delay_seconds)
        except DeletionEnqueueError as exc:
            logger.error(
                "deletion_enqueue_failed",
                domain=domain,
                workspace_id=workspace_id,
                delay_seconds=delay_seconds,
                reason=exc.context.get("reason", ""),
            )
            return None
