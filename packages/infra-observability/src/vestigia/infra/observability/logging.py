"""Structured logging configuration using structlog.

This module is the reporting side-channel for deletion pipelines: partial
failures never surface as exceptions, so they must be visible here.

It provides:
- JSON output for production environments
- Console output with colors for development
- Deletion context (domain, workspace_id, task_id) bound per task run
- Standard-library logging routed at the same level, for infrastructure adapters
- Sensitive data redaction (provider tokens, storage secrets)

Usage:
    # During worker startup
    from vestigia.infra.observability.logging import configure_logging
    configure_logging()

    # In application code
    from vestigia.infra.observability import get_logger
    logger = get_logger(__name__)
    logger.error("domain_link_deletion_failed", domain="go.example", operation="delete_links")
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from functools import lru_cache
from typing import TYPE_CHECKING, Any

import structlog
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

if TYPE_CHECKING:
    from collections.abc import Iterator, MutableMapping

# Type alias for structlog processor
Processor = structlog.types.Processor

# Sensitive field names for redaction
SENSITIVE_FIELDS: frozenset[str] = frozenset(
    {
        "password",
        "token",
        "authorization",
        "api_key",
        "apikey",
        "secret",
        "secret_access_key",
        "access_key_id",
        "bearer",
        "credential",
    }
)

REDACTED_VALUE: str = "***REDACTED***"


class LoggingSettings(BaseSettings):
    """Logging configuration settings from environment variables.

    Loads configuration from environment variables:
    - LOG_LEVEL: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - ENVIRONMENT: Environment name (development, staging, production, test)

    Attributes:
        log_level: Minimum log level to output. Default: INFO
        environment: Environment name for format selection. Default: development

    Example:
        >>> settings = LoggingSettings(log_level="DEBUG", environment="production")
        >>> settings.use_json_logs
        True
    """

    model_config = SettingsConfigDict(
        env_prefix="",
        extra="ignore",
        populate_by_name=True,
    )

    log_level: str = Field(
        default="INFO",
        alias="LOG_LEVEL",
        description="Minimum log level to output",
    )
    environment: str = Field(
        default="development",
        alias="ENVIRONMENT",
        description="Environment name for format selection",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> str:
        """Normalize log level to uppercase."""
        if isinstance(v, str):
            return v.upper()
        return str(v)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a known level.

        Raises:
            ValueError: If log level is not a valid Python logging level.
        """
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v not in valid_levels:
            msg = f"log_level must be one of {valid_levels}"
            raise ValueError(msg)
        return v

    @property
    def use_json_logs(self) -> bool:
        """JSON logs in production, console rendering everywhere else."""
        return self.environment == "production"

    @property
    def log_level_int(self) -> int:
        """Convert log level string to logging module constant."""
        return getattr(logging, self.log_level, logging.INFO)


class SensitiveDataProcessor:
    """Structlog processor to redact sensitive fields from log context.

    Redacts values for fields matching:
    1. Exact field names in SENSITIVE_FIELDS (case-insensitive)
    2. Field names containing "password", "token" or "secret" as substrings

    Example:
        >>> processor = SensitiveDataProcessor()
        >>> result = processor(None, "info", {"event": "release", "provider_token": "t"})
        >>> result["provider_token"]
        '***REDACTED***'
    """

    def __call__(
        self,
        logger: Any,
        method_name: str,
        event_dict: MutableMapping[str, Any],
    ) -> MutableMapping[str, Any]:
        for key in list(event_dict.keys()):
            if self._is_sensitive(key):
                event_dict[key] = REDACTED_VALUE
        return event_dict

    def _is_sensitive(self, key: str) -> bool:
        key_lower = key.lower()
        if key_lower in SENSITIVE_FIELDS:
            return True
        return any(marker in key_lower for marker in ("password", "token", "secret"))


@lru_cache(maxsize=1)
def get_logging_settings() -> LoggingSettings:
    """Get cached LoggingSettings instance.

    Clear cache with ``get_logging_settings.cache_clear()`` for testing.
    """
    return LoggingSettings()


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """Configure structlog and the standard-library root logger.

    Configures structlog with:
    - Context variable merging (deletion context bound per task)
    - Log level filtering
    - ISO 8601 timestamps (UTC)
    - Sensitive data redaction
    - Environment-aware rendering (JSON for production, console for development)

    Standard-library loggers (used by the persistence, storage and HTTP
    adapters) are sent to stderr at the same minimum level.

    Should be called once during worker startup (observability lifespan hook).

    Args:
        settings: Optional LoggingSettings instance. If not provided,
            settings are loaded from environment variables.
    """
    if settings is None:
        settings = get_logging_settings()

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        SensitiveDataProcessor(),
        structlog.processors.format_exc_info,
    ]

    if settings.use_json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(settings.log_level_int),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        level=settings.log_level_int,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        force=True,
    )


@contextmanager
def bind_deletion_context(**context: Any) -> Iterator[None]:
    """Bind deletion context (domain, workspace_id, ...) for the enclosed block.

    Every structlog entry emitted inside the block carries the bound keys.

    Example:
        >>> with bind_deletion_context(domain="go.example", workspace_id="ws_1"):
        ...     logger.info("domain_deletion_started")
    """
    structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*context)


def get_logger(name: str | None = None) -> structlog.typing.WrappedLogger:
    """Get a structlog logger bound to the given name.

    The returned logger is a lazy proxy: it is assembled on first use, so
    module-level loggers created at import time still pick up the
    processors installed later by ``configure_logging()``.

    Args:
        name: Logger name (typically __name__ from calling module).
            If None, returns unbound logger.

    Returns:
        Structured logger carrying ``logger_name=<name>`` in every entry.
    """
    if name is None:
        return structlog.get_logger()
    return structlog.get_logger(logger_name=name)
