"""Port interface for the key-value cache serving link redirects."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence


@runtime_checkable
class LinkCachePort(Protocol):
    """Port for batched cache invalidation.

    Keys are lower-case ``domain:key`` strings. Deleting a missing key
    is a no-op.
    """

    async def delete_many(self, keys: Sequence[str]) -> int:
        """Delete ``keys`` in one round trip. Returns how many existed."""
        ...
