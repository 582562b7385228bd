"""Redis async client factory for the link cache.

Example:
    >>> from vestigia.infra.persistence.redis_client import get_redis_factory
    >>> client = await get_redis_factory().get_client()
    >>> await client.ping()
    True
"""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Any

import redis.asyncio as aioredis

from vestigia.infra.persistence.redis_settings import RedisSettings


class RedisFactory:
    """Lazily creates and owns one pooled ``redis.asyncio`` client.

    Usage:
        factory = RedisFactory.from_env()
        client = await factory.get_client()
        await factory.close()

    Attributes:
        _settings: The RedisSettings instance.
        _client: Lazily created Redis client instance.
    """

    def __init__(self, settings: RedisSettings) -> None:
        self._settings = settings
        self._client: Any = None

    @classmethod
    def from_env(cls) -> RedisFactory:
        """Create factory from ``REDIS_URL`` or the individual ``REDIS_*`` variables."""
        redis_url = os.getenv("REDIS_URL")
        if redis_url:
            return cls.from_url(redis_url)
        return cls(RedisSettings())

    @classmethod
    def from_url(cls, url: str) -> RedisFactory:
        """Create factory from a Redis URL."""
        return cls(RedisSettings.from_url(url))

    @property
    def settings(self) -> RedisSettings:
        """Get the Redis settings."""
        return self._settings

    async def get_client(self) -> Any:
        """Get the Redis async client, creating it on first access.

        Responses are decoded to ``str``; cache keys and values are text.
        """
        if self._client is None:
            self._client = aioredis.from_url(  # type: ignore[no-untyped-call]
                self._settings.get_url(),
                max_connections=self._settings.redis_pool_size,
                socket_timeout=self._settings.redis_socket_timeout,
                socket_connect_timeout=self._settings.redis_socket_connect_timeout,
                decode_responses=True,
            )
        return self._client

    async def close(self) -> None:
        """Close the Redis client and release pooled connections."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None


@lru_cache(maxsize=1)
def get_redis_factory() -> RedisFactory:
    """Get cached Redis factory singleton."""
    return RedisFactory.from_env()
