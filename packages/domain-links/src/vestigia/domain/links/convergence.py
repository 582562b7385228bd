"""Convergence Checker: decides whether a domain has any links left."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from vestigia.foundation.domain.ports import LinkStorePort


@dataclass(frozen=True, slots=True)
class Convergence:
    """Fresh live link count of a domain."""

    remaining: int

    @property
    def complete(self) -> bool:
        return self.remaining == 0


class ConvergenceChecker:
    """Re-queries the store after a fan-out.

    The count is always read fresh, never derived from the batch just
    deleted, since fan-out operations may have partially failed.
    """

    def __init__(self, store: LinkStorePort) -> None:
        self._store = store

    async def check(self, domain: str) -> Convergence:
        return Convergence(remaining=await self._store.count_links(domain))
