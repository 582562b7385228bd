"""Redis adapter for link redirect cache invalidation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Sequence

    from vestigia.infra.persistence.redis_client import RedisFactory


class RedisLinkCache:
    """LinkCachePort implementation over ``redis.asyncio``.

    Deletes are sent as a single non-transactional pipeline: one round
    trip, no MULTI/EXEC. Missing keys count as zero.

    Args:
        redis: Redis factory owning the pooled client.
    """

    def __init__(self, redis: RedisFactory) -> None:
        self._redis = redis

    async def delete_many(self, keys: Sequence[str]) -> int:
        if not keys:
            return 0
        client: Any = await self._redis.get_client()
        pipe = client.pipeline(transaction=False)
        for key in keys:
            pipe.delete(key)
        results = await pipe.execute()
        return sum(int(r) for r in results)
