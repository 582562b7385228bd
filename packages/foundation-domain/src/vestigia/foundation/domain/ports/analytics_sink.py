"""Port interface for the analytics sink receiving tombstone events."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from vestigia.foundation.domain.link_value_objects import TombstoneEvent


@runtime_checkable
class AnalyticsSinkPort(Protocol):
    """Append-only, fire-and-forget event ingestion."""

    async def record_tombstones(self, events: Sequence[TombstoneEvent]) -> None:
        """Batch-insert tombstone events."""
        ...
