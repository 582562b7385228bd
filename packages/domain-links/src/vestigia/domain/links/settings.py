"""Deletion pipeline configuration using Pydantic settings.

Settings are loaded from environment variables with ``LINK_DELETION_`` prefix.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LinkDeletionSettings(BaseSettings):
    """Tuning for the immediate deletion pipeline.

    Environment Variables:
        LINK_DELETION_BATCH_SIZE: Links removed per pipeline pass (default: 1)
        LINK_DELETION_RETRY_DELAY_SECONDS: Minimum delay before the next pass
            while links remain (default: 2). The schedule source fires delayed
            jobs on minute boundaries, so the real wait is up to about 60s.

    Example:
        >>> LinkDeletionSettings(batch_size=100).batch_size
        100
    """

    model_config = SettingsConfigDict(
        env_prefix="LINK_DELETION_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    batch_size: int = Field(
        default=1,
        ge=1,
        le=1000,
        description="Maximum number of links removed per pipeline pass",
    )
    retry_delay_seconds: int = Field(
        default=2,
        ge=1,
        le=3600,
        description=(
            "Minimum delay before re-running the pipeline while links remain; "
            "delayed jobs fire at minute granularity"
        ),
    )


@lru_cache(maxsize=1)
def get_link_deletion_settings() -> LinkDeletionSettings:
    """Get cached LinkDeletionSettings singleton."""
    return LinkDeletionSettings()
