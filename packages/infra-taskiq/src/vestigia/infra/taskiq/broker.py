"""TaskIQ broker, schedule source and scheduler configured with Redis.

The broker delivers immediate deletion jobs over a Redis Stream; the
list-based schedule source stores delayed jobs until the scheduler
process hands them to the broker.

Usage:
    from vestigia.infra.taskiq import broker

    @broker.task(task_name="links.delete_domain")
    async def delete_domain_task(domain: str, workspace_id: str) -> None: ...

    # Start worker
    # taskiq worker vestigia.domain.links.tasks:broker

    # Start scheduler (single instance only, fires delayed jobs)
    # taskiq scheduler vestigia.domain.links.tasks:scheduler
"""

from __future__ import annotations

from functools import lru_cache

from taskiq import TaskiqScheduler
from taskiq.schedule_sources import LabelScheduleSource
from taskiq_redis import ListRedisScheduleSource, RedisStreamBroker

from vestigia.infra.taskiq.settings import get_taskiq_settings


@lru_cache(maxsize=1)
def get_broker() -> RedisStreamBroker:
    """Get or create the TaskIQ broker.

    Jobs are fire-and-forget, so no result backend is attached.
    """
    settings = get_taskiq_settings()
    return RedisStreamBroker(url=settings.redis_url, queue_name=settings.queue_name)


@lru_cache(maxsize=1)
def get_schedule_source() -> ListRedisScheduleSource:
    """Get or create the Redis schedule source holding delayed jobs."""
    settings = get_taskiq_settings()
    return ListRedisScheduleSource(settings.redis_url, prefix=settings.schedule_prefix)


@lru_cache(maxsize=1)
def get_scheduler() -> TaskiqScheduler:
    """Get or create the TaskIQ scheduler.

    Uses dual schedule sources:
    - LabelScheduleSource: discovers @broker.task(schedule=[...]) decorators
    - ListRedisScheduleSource: delayed deletion jobs added at runtime

    WARNING: Only run ONE scheduler instance per deployment to avoid
    duplicate execution.
    """
    _broker = get_broker()
    return TaskiqScheduler(
        broker=_broker,
        sources=[LabelScheduleSource(_broker), get_schedule_source()],
    )


# Module-level references for the taskiq CLI, which expects real
# `AsyncBroker` / `TaskiqScheduler` instances behind
# `taskiq worker module:broker` and `taskiq scheduler module:scheduler`.
# Building them opens no connections; Redis is only contacted on startup.
broker: RedisStreamBroker = get_broker()
scheduler: TaskiqScheduler = get_scheduler()
