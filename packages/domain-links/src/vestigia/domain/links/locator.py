"""Record Locator: picks the next batch of live links owned by a domain."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from vestigia.foundation.domain.link_value_objects import LinkRecord
    from vestigia.foundation.domain.ports import LinkStorePort


class RecordLocator:
    """Reads up to ``batch_size`` links of a domain, tag ids included.

    An empty batch is the normal "nothing left" signal, not an error.
    Locating has no side effects.
    """

    def __init__(self, store: LinkStorePort, batch_size: int = 1) -> None:
        if batch_size < 1:
            msg = f"batch_size must be at least 1, got {batch_size}"
            raise ValueError(msg)
        self._store = store
        self._batch_size = batch_size

    @property
    def batch_size(self) -> int:
        return self._batch_size

    async def locate(self, domain: str) -> list[LinkRecord]:
        """Return the next batch of live links for ``domain``.

        Store errors propagate: without a batch there is nothing to fan out.
        """
        return await self._store.find_links(domain, limit=self._batch_size)
