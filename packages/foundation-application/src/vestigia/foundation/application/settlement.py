"""Settle-all fan-out for independent remote operations.

Launches every awaitable together and waits for all of them to finish,
collecting a result or an error per operation. One operation failing
never cancels or blocks its siblings.

Usage:
    settled = await settle_all({
        "invalidate_cache": cache.delete_many(keys),
        "delete_links": store.delete_links(ids),
    })
    for op in settled:
        if op.failed:
            logger.error("operation_failed", operation=op.name, reason=str(op.error))
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Awaitable, Mapping


@dataclass(frozen=True, slots=True)
class SettledOperation:
    """Outcome of one awaited operation.

    Attributes:
        name: Key the operation was registered under.
        result: Returned value when the operation succeeded.
        error: Raised exception when the operation failed.
    """

    name: str
    result: Any = None
    error: BaseException | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None


async def settle_all(operations: Mapping[str, Awaitable[Any]]) -> list[SettledOperation]:
    """Run ``operations`` concurrently and wait until every one has settled.

    Results come back in the mapping's insertion order. Exceptions raised
    by an operation are captured on its :class:`SettledOperation`;
    process-level exceptions (``KeyboardInterrupt``, ``SystemExit``) are
    re-raised once everything has settled.

    Args:
        operations: Operation name to awaitable.

    Returns:
        One SettledOperation per entry, in order.
    """
    names = list(operations)
    results = await asyncio.gather(*operations.values(), return_exceptions=True)

    settled: list[SettledOperation] = []
    for name, result in zip(names, results, strict=True):
        if isinstance(result, BaseException):
            if not isinstance(result, Exception | asyncio.CancelledError):
                raise result
            settled.append(SettledOperation(name=name, error=result))
        else:
            settled.append(SettledOperation(name=name, result=result))
    return settled
