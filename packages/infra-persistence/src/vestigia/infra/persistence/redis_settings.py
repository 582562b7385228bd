"""Redis configuration for the link cache, using Pydantic settings.

The link cache holds one entry per short link under a lower-case
``domain:key`` key; deletion only ever removes entries from it.
"""

from __future__ import annotations

from urllib.parse import urlparse

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RedisSettings(BaseSettings):
    """Configuration for the link cache Redis connection.

    Environment Variables:
        REDIS_URL: Full connection URL, takes precedence when set.
        REDIS_HOST / REDIS_PORT / REDIS_DB / REDIS_PASSWORD: Individual parts.
        REDIS_POOL_SIZE: Maximum connections in pool (default: 10)
        REDIS_SOCKET_TIMEOUT: Socket timeout in seconds (default: 5.0)
        REDIS_SOCKET_CONNECT_TIMEOUT: Connection timeout in seconds (default: 5.0)

    Example:
        >>> RedisSettings(redis_host="cache", redis_port=6380).get_url()
        'redis://cache:6380/0'
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    redis_url: str | None = Field(default=None, description="Full Redis URL")
    redis_host: str = Field(default="localhost", description="Redis host")
    redis_port: int = Field(default=6379, description="Redis port")
    redis_db: int = Field(default=0, ge=0, le=15, description="Redis database number")
    redis_password: str | None = Field(
        default=None, repr=False, description="Redis password (hidden in logs)"
    )
    redis_pool_size: int = Field(
        default=10, ge=1, le=100, description="Maximum connections in pool"
    )
    redis_socket_timeout: float = Field(
        default=5.0, ge=0.1, description="Socket timeout in seconds"
    )
    redis_socket_connect_timeout: float = Field(
        default=5.0, ge=0.1, description="Connection timeout in seconds"
    )

    @field_validator("redis_port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        """Validate Redis port is in valid range."""
        if not 1 <= v <= 65535:
            msg = "redis_port must be between 1 and 65535"
            raise ValueError(msg)
        return v

    @classmethod
    def from_url(cls, url: str) -> RedisSettings:
        """Create settings from a ``redis://`` or ``rediss://`` URL.

        Raises:
            ValueError: If the scheme or database number is invalid.
        """
        parsed = urlparse(url)
        if parsed.scheme not in ("redis", "rediss"):
            msg = f"Invalid Redis URL scheme: {parsed.scheme}"
            raise ValueError(msg)

        db = 0
        if parsed.path and parsed.path != "/":
            try:
                db = int(parsed.path.lstrip("/"))
            except ValueError:
                msg = f"Invalid database number in URL path: {parsed.path}"
                raise ValueError(msg) from None

        return cls(
            redis_url=url,
            redis_host=parsed.hostname or "localhost",
            redis_port=parsed.port or 6379,
            redis_db=db,
            redis_password=parsed.password,
        )

    def get_url(self) -> str:
        """Return ``redis_url`` if set, otherwise build one from the parts."""
        if self.redis_url:
            return self.redis_url
        auth = f":{self.redis_password}@" if self.redis_password else ""
        return f"redis://{auth}{self.redis_host}:{self.redis_port}/{self.redis_db}"
