"""TaskIQ configuration using Pydantic settings.

Provides type-safe configuration for the TaskIQ broker and the Redis
schedule source that holds delayed deletion jobs. Settings are loaded
from environment variables with ``TASKIQ_`` prefix.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TaskIQSettings(BaseSettings):
    """Configuration for TaskIQ broker and scheduler.

    Environment Variables:
        TASKIQ_REDIS_URL: Redis URL for broker/scheduler
            (default: redis://localhost:6379/1, database 1 to separate
            from the link cache on database 0)
        TASKIQ_QUEUE_NAME: Redis stream carrying task messages (default: taskiq)
        TASKIQ_SCHEDULE_PREFIX: Key prefix for delayed schedules (default: schedule)

    Example:
        >>> settings = TaskIQSettings()
        >>> settings.redis_url
        'redis://localhost:6379/1'
    """

    model_config = SettingsConfigDict(
        env_prefix="TASKIQ_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    redis_url: str = Field(
        default="redis://localhost:6379/1",
        description="Redis URL for TaskIQ broker (database 1 by default)",
    )
    queue_name: str = Field(
        default="taskiq",
        min_length=1,
        description="Redis stream name for task messages",
    )
    schedule_prefix: str = Field(
        default="schedule",
        min_length=1,
        description="Redis key prefix for time-based schedules",
    )


@lru_cache(maxsize=1)
def get_taskiq_settings() -> TaskIQSettings:
    """Get cached TaskIQ settings singleton."""
    return TaskIQSettings()
