"""TaskIQ adapter publishing deferred deletion pipeline runs.

Jobs without a delay are kicked straight onto the broker. Delayed jobs
are stored in the Redis schedule source and handed to the broker by the
scheduler process once due; the delay is therefore a lower bound.

The task is kicked by name so this module does not import the task
module (which itself imports the wiring that builds this adapter).
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

from taskiq.kicker import AsyncKicker

from vestigia.infra.taskiq.errors import TaskIQBrokerError, TaskIQScheduleError

if TYPE_CHECKING:
    from taskiq import AsyncBroker, ScheduleSource

    from vestigia.foundation.domain.link_value_objects import DeferredDeletion

logger = logging.getLogger(__name__)

DELETE_DOMAIN_TASK_NAME = "links.delete_domain"


class TaskiqDeletionScheduler:
    """DeletionSchedulerPort implementation over a taskiq broker.

    Args:
        broker: Broker the worker consumes from.
        schedule_source: Source holding delayed jobs for the scheduler process.
        task_name: Name the deletion task is registered under.
    """

    def __init__(
        self,
        broker: AsyncBroker,
        schedule_source: ScheduleSource,
        task_name: str = DELETE_DOMAIN_TASK_NAME,
    ) -> None:
        self._broker = broker
        self._schedule_source = schedule_source
        self._task_name = task_name

    def _kicker(self) -> AsyncKicker[Any, Any]:
        return AsyncKicker(task_name=self._task_name, broker=self._broker, labels={})

    async def enqueue(self, job: DeferredDeletion) -> str:
        """Publish ``job`` and return the task id (or schedule id when delayed).

        Raises:
            TaskIQBrokerError: If the broker rejects an immediate job.
            TaskIQScheduleError: If the schedule source rejects a delayed job.
        """
        kwargs = job.to_payload()

        if not job.delay_seconds:
            try:
                task = await self._kicker().kiq(**kwargs)
            except Exception as exc:
                msg = f"Failed to kick {self._task_name}: {exc}"
                raise TaskIQBrokerError(msg) from exc
            logger.info(
                "deletion_job_enqueued",
                extra={"task_id": task.task_id, **kwargs},
            )
            return task.task_id

        run_at = datetime.now(UTC) + timedelta(seconds=job.delay_seconds)
        try:
            schedule = await self._kicker().schedule_by_time(
                self._schedule_source, run_at, **kwargs
            )
        except Exception as exc:
            msg = f"Failed to schedule {self._task_name}: {exc}"
            raise TaskIQScheduleError(msg) from exc
        logger.info(
            "deletion_job_scheduled",
            extra={
                "schedule_id": schedule.schedule_id,
                "run_at": run_at.isoformat(),
                **kwargs,
            },
        )
        return schedule.schedule_id
