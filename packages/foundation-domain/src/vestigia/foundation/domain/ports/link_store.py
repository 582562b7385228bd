"""Port interface for the relational store holding domains and links.

Every write is expected to be idempotent: deleting rows that are already
gone, or clearing ownership that is already cleared, is not an error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from vestigia.foundation.domain.link_value_objects import LinkRecord


@runtime_checkable
class LinkStorePort(Protocol):
    """Port for domain, link and usage-counter persistence."""

    async def find_links(self, domain: str, *, limit: int) -> list[LinkRecord]:
        """Return up to ``limit`` live links of ``domain`` with tag ids loaded."""
        ...

    async def count_links(self, domain: str) -> int:
        """Return the live link count of ``domain``."""
        ...

    async def delete_links(self, link_ids: Sequence[str]) -> int:
        """Bulk-delete links by id. Returns the number of rows removed."""
        ...

    async def decrement_links_usage(self, workspace_id: str, amount: int) -> None:
        """Atomically subtract ``amount`` from the workspace usage counter."""
        ...

    async def delete_domain(self, domain: str) -> bool:
        """Delete the domain row. Returns ``False`` if it was already absent."""
        ...

    async def detach_domain(self, domain: str) -> None:
        """Clear the owning-workspace reference of the domain row."""
        ...

    async def detach_links(self, domain: str) -> int:
        """Clear the owning-workspace reference on every link of the domain."""
        ...
