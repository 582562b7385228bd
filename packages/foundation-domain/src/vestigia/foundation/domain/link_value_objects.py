"""Value objects for domain and link deletion.

Immutable records passed between the deletion components and the
backing-store ports. All normalization happens at construction time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from vestigia.foundation.domain.exceptions import ValidationError

if TYPE_CHECKING:
    from datetime import datetime


class DomainState(StrEnum):
    """Domain deletion lifecycle states.

        ACTIVE -> DETACHED -> PENDING_CHILD_CLEANUP -> DELETED

    ACTIVE may go straight to DELETED when no links are found on the
    first pipeline pass.
    """

    ACTIVE = "active"
    DETACHED = "detached"
    PENDING_CHILD_CLEANUP = "pending-child-cleanup"
    DELETED = "deleted"


def normalize_domain_name(name: str) -> str:
    """Return the case-insensitive lookup key for a domain name.

    Raises:
        ValidationError: If the name is empty or whitespace-only.
    """
    normalized = name.strip().lower()
    if not normalized:
        raise ValidationError("domain", "Domain name must not be empty")
    return normalized


def link_cache_key(domain: str, key: str) -> str:
    """Cache key for a link, lower-cased the same way the write path does."""
    return f"{domain}:{key}".lower()


@dataclass(frozen=True, slots=True)
class LinkRecord:
    """A live link owned by a domain, with its tag ids eagerly loaded.

    Attributes:
        id: Link identifier.
        domain: Owning domain name.
        key: Short key under the domain.
        url: Destination URL.
        created_at: Original creation time.
        image: Optional preview image URL (may live in our object store).
        workspace_id: Owning workspace, ``None`` once detached.
        tag_ids: Identifiers of associated tags.
    """

    id: str
    domain: str
    key: str
    url: str
    created_at: datetime
    image: str | None = None
    workspace_id: str | None = None
    tag_ids: tuple[str, ...] = ()

    @property
    def cache_key(self) -> str:
        return link_cache_key(self.domain, self.key)


@dataclass(frozen=True, slots=True)
class TombstoneEvent:
    """Append-only deletion fact sent to the analytics sink, one per link."""

    link_id: str
    domain: str
    key: str
    url: str
    workspace_id: str
    created_at: datetime
    tag_ids: tuple[str, ...] = ()
    deleted: bool = True

    @classmethod
    def for_link(cls, link: LinkRecord, workspace_id: str) -> TombstoneEvent:
        return cls(
            link_id=link.id,
            domain=link.domain,
            key=link.key,
            url=link.url,
            workspace_id=workspace_id,
            created_at=link.created_at,
            tag_ids=link.tag_ids,
        )

    def to_payload(self) -> dict[str, Any]:
        return {
            "link_id": self.link_id,
            "domain": self.domain,
            "key": self.key,
            "url": self.url,
            "tag_ids": list(self.tag_ids),
            "workspace_id": self.workspace_id,
            "created_at": self.created_at.isoformat(),
            "deleted": self.deleted,
        }


@dataclass(frozen=True, slots=True)
class DeferredDeletion:
    """Request to re-run the full deletion pipeline later.

    Owned by the external scheduler once enqueued; never polled.

    Attributes:
        domain: Domain to delete.
        workspace_id: Workspace whose usage counter is decremented.
        delay_seconds: Optional delay before redelivery.
    """

    domain: str
    workspace_id: str
    delay_seconds: int | None = None

    def __post_init__(self) -> None:
        if self.delay_seconds is not None and self.delay_seconds < 0:
            msg = f"delay_seconds must be non-negative, got {self.delay_seconds}"
            raise ValueError(msg)

    def to_payload(self) -> dict[str, Any]:
        """Keyword arguments the deletion task is invoked with."""
        return {"domain": self.domain, "workspace_id": self.workspace_id}


@dataclass(frozen=True, slots=True)
class OperationOutcome:
    """Settled result of one fan-out operation.

    Attributes:
        operation: Operation (or origin) name, e.g. ``"invalidate_cache"``.
        domain: Domain being deleted.
        workspace_id: Owning workspace.
        error: The underlying cause when the operation failed.
    """

    operation: str
    domain: str
    workspace_id: str
    error: BaseException | None = field(default=None, compare=False)

    @property
    def succeeded(self) -> bool:
        return self.error is None
