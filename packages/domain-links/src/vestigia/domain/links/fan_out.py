"""Fan-out Deleter: removes one batch of links from every backing store.

Five independent operations are launched together and all of them are
awaited to completion:

==================== ==============================================
``record_tombstones`` one deletion event per link to analytics
``purge_assets``      delete preview images we host for the links
``invalidate_cache``  drop the ``domain:key`` redirect entries
``delete_links``      bulk-delete the link rows by id
``decrement_usage``   subtract the batch size from workspace usage
==================== ==============================================

A failing operation never cancels the others. Nothing is retried here
and nothing is logged; the caller receives one outcome per operation
and decides how to report it.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from vestigia.foundation.application.settlement import settle_all
from vestigia.foundation.domain.link_value_objects import OperationOutcome, TombstoneEvent

if TYPE_CHECKING:
    from collections.abc import Sequence

    from vestigia.foundation.domain.link_value_objects import LinkRecord
    from vestigia.foundation.domain.ports import (
        AnalyticsSinkPort,
        LinkCachePort,
        LinkStorePort,
        ObjectStoragePort,
    )

FAN_OUT_OPERATIONS: tuple[str, ...] = (
    "record_tombstones",
    "purge_assets",
    "invalidate_cache",
    "delete_links",
    "decrement_usage",
)


class FanOutDeleter:
    """Concurrent multi-store deletion of a batch of links."""

    def __init__(
        self,
        store: LinkStorePort,
        cache: LinkCachePort,
        storage: ObjectStoragePort,
        sink: AnalyticsSinkPort,
        asset_base_url: str | None = None,
    ) -> None:
        self._store = store
        self._cache = cache
        self._storage = storage
        self._sink = sink
        self._asset_base_url = (asset_base_url or storage.public_url).rstrip("/")

    def owned_asset_path(self, link: LinkRecord) -> str | None:
        """Object key of the link's image if we host it, else ``None``.

        Only images under ``{base}/images/{link.id}`` belong to the link;
        externally hosted images are left alone.
        """
        if not link.image:
            return None
        if not link.image.startswith(f"{self._asset_base_url}/images/{link.id}"):
            return None
        return link.image.removeprefix(f"{self._asset_base_url}/")

    async def delete(
        self,
        domain: str,
        workspace_id: str,
        links: Sequence[LinkRecord],
    ) -> list[OperationOutcome]:
        """Delete ``links`` everywhere and return one outcome per operation.

        Outcomes come back in :data:`FAN_OUT_OPERATIONS` order.
        """
        settled = await settle_all(
            {
                "record_tombstones": self._record_tombstones(workspace_id, links),
                "purge_assets": self._purge_assets(links),
                "invalidate_cache": self._cache.delete_many([link.cache_key for link in links]),
                "delete_links": self._store.delete_links([link.id for link in links]),
                "decrement_usage": self._store.decrement_links_usage(workspace_id, len(links)),
            }
        )
        return [
            OperationOutcome(
                operation=op.name,
                domain=domain,
                workspace_id=workspace_id,
                error=op.error,
            )
            for op in settled
        ]

    async def _record_tombstones(self, workspace_id: str, links: Sequence[LinkRecord]) -> None:
        events = [TombstoneEvent.for_link(link, workspace_id) for link in links]
        await self._sink.record_tombstones(events)

    async def _purge_assets(self, links: Sequence[LinkRecord]) -> None:
        paths = [p for p in (self.owned_asset_path(link) for link in links) if p is not None]
        if not paths:
            return
        results = await asyncio.gather(
            *(self._storage.delete(path) for path in paths),
            return_exceptions=True,
        )
        for result in results:
            if isinstance(result, Exception):
                raise result
