"""SQL adapter for domains, links and the workspace usage counter.

Plain SQL over an async SQLAlchemy session factory. Domain names are
stored normalized (lower-case), so every lookup is an equality match.

Tables touched:
- ``links``     (id, domain, key, url, image, project_id, created_at)
- ``link_tags`` (link_id, tag_id)
- ``domains``   (slug, project_id)
- ``projects``  (id, links_usage)
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import TYPE_CHECKING

from sqlalchemy import bindparam, text

from vestigia.foundation.domain.link_value_objects import LinkRecord

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

logger = logging.getLogger(__name__)

_FIND_LINKS_SQL = text(
    "SELECT id, domain, key, url, image, project_id, created_at "
    "FROM links WHERE domain = :domain "
    "ORDER BY created_at, id LIMIT :limit"
)

_FIND_TAGS_SQL = text(
    "SELECT link_id, tag_id FROM link_tags WHERE link_id IN :ids ORDER BY tag_id"
).bindparams(bindparam("ids", expanding=True))

_COUNT_LINKS_SQL = text("SELECT COUNT(*) FROM links WHERE domain = :domain")

_DELETE_LINKS_SQL = text("DELETE FROM links WHERE id IN :ids").bindparams(
    bindparam("ids", expanding=True)
)

_DECREMENT_USAGE_SQL = text(
    "UPDATE projects SET links_usage = links_usage - :amount WHERE id = :workspace_id"
)

_DELETE_DOMAIN_SQL = text("DELETE FROM domains WHERE slug = :domain")

_DETACH_DOMAIN_SQL = text("UPDATE domains SET project_id = NULL WHERE slug = :domain")

_DETACH_LINKS_SQL = text("UPDATE links SET project_id = NULL WHERE domain = :domain")


class SqlLinkStore:
    """LinkStorePort implementation backed by PostgreSQL.

    Every method opens its own short-lived session, so concurrent fan-out
    operations never share a connection.

    Args:
        session_factory: Async session factory (see ``get_session_factory``).
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def find_links(self, domain: str, *, limit: int) -> list[LinkRecord]:
        async with self._session_factory() as session:
            rows = (
                await session.execute(_FIND_LINKS_SQL, {"domain": domain, "limit": limit})
            ).all()
            if not rows:
                return []

            tag_ids: defaultdict[str, list[str]] = defaultdict(list)
            tag_rows = await session.execute(_FIND_TAGS_SQL, {"ids": [row.id for row in rows]})
            for tag_row in tag_rows.all():
                tag_ids[tag_row.link_id].append(tag_row.tag_id)

        return [
            LinkRecord(
                id=row.id,
                domain=row.domain,
                key=row.key,
                url=row.url,
                image=row.image,
                workspace_id=row.project_id,
                created_at=row.created_at,
                tag_ids=tuple(tag_ids.get(row.id, ())),
            )
            for row in rows
        ]

    async def count_links(self, domain: str) -> int:
        async with self._session_factory() as session:
            result = await session.execute(_COUNT_LINKS_SQL, {"domain": domain})
            return int(result.scalar_one())

    async def delete_links(self, link_ids: Sequence[str]) -> int:
        if not link_ids:
            return 0
        async with self._session_factory() as session:
            result = await session.execute(_DELETE_LINKS_SQL, {"ids": list(link_ids)})
            await session.commit()
        logger.debug("links_deleted", extra={"requested": len(link_ids), "deleted": result.rowcount})
        return result.rowcount

    async def decrement_links_usage(self, workspace_id: str, amount: int) -> None:
        async with self._session_factory() as session:
            await session.execute(
                _DECREMENT_USAGE_SQL, {"workspace_id": workspace_id, "amount": amount}
            )
            await session.commit()

    async def delete_domain(self, domain: str) -> bool:
        async with self._session_factory() as session:
            result = await session.execute(_DELETE_DOMAIN_SQL, {"domain": domain})
            await session.commit()
        return result.rowcount > 0

    async def detach_domain(self, domain: str) -> None:
        async with self._session_factory() as session:
            await session.execute(_DETACH_DOMAIN_SQL, {"domain": domain})
            await session.commit()

    async def detach_links(self, domain: str) -> int:
        async with self._session_factory() as session:
            result = await session.execute(_DETACH_LINKS_SQL, {"domain": domain})
            await session.commit()
        return result.rowcount
