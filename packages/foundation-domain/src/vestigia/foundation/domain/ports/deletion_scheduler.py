"""Port interface for the queue that defers pipeline re-invocations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from vestigia.foundation.domain.link_value_objects import DeferredDeletion


@runtime_checkable
class DeletionSchedulerPort(Protocol):
    """Fire-and-forget publication of deferred deletion jobs.

    The caller never polls the job after it is enqueued.
    """

    async def enqueue(self, job: DeferredDeletion) -> str:
        """Publish ``job`` and return the scheduler's job handle.

        Raises:
            Exception: Any adapter failure; callers treat it as an enqueue error.
        """
        ...
