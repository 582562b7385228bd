"""Vestigia Infra TaskIQ: broker and delayed-job scheduling for deferred deletions."""

from vestigia.infra.taskiq.broker import (
    broker,
    get_broker,
    get_schedule_source,
    get_scheduler,
    scheduler,
)
from vestigia.infra.taskiq.errors import (
    TaskIQBrokerError,
    TaskIQError,
    TaskIQScheduleError,
)
from vestigia.infra.taskiq.lifespan import lifespan_contribution
from vestigia.infra.taskiq.settings import TaskIQSettings, get_taskiq_settings

__all__ = [
    "TaskIQBrokerError",
    "TaskIQError",
    "TaskIQScheduleError",
    "TaskIQSettings",
    "broker",
    "get_broker",
    "get_schedule_source",
    "get_scheduler",
    "get_taskiq_settings",
    "lifespan_contribution",
    "scheduler",
]
