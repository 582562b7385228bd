"""Shared fixtures for domain-links tests: in-memory fakes of every port."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime

import pytest

from vestigia.domain.links.convergence import ConvergenceChecker
from vestigia.domain.links.detach import DetachCoordinator
from vestigia.domain.links.fan_out import FanOutDeleter
from vestigia.domain.links.locator import RecordLocator
from vestigia.domain.links.pipeline import DomainDeletionPipeline
from vestigia.domain.links.scheduler_bridge import DeletionSchedulerBridge
from vestigia.foundation.domain.link_value_objects import (
    DeferredDeletion,
    LinkRecord,
    TombstoneEvent,
)

ASSET_BASE_URL = "https://assets.example.test"
CREATED_AT = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)


@dataclass
class FakeLinkStore:
    """Relational store: domains, links and per-workspace usage counters."""

    links: dict[str, LinkRecord] = field(default_factory=dict)
    domains: dict[str, str | None] = field(default_factory=dict)
    usage: dict[str, int] = field(default_factory=dict)
    failures: dict[str, Exception] = field(default_factory=dict)
    calls: list[str] = field(default_factory=list)

    def _enter(self, name: str) -> None:
        self.calls.append(name)
        if name in self.failures:
            raise self.failures[name]

    def add_domain(self, domain: str, workspace_id: str) -> None:
        self.domains[domain] = workspace_id

    def add_link(self, link: LinkRecord) -> None:
        self.links[link.id] = link
        if link.workspace_id is not None:
            self.usage[link.workspace_id] = self.usage.get(link.workspace_id, 0) + 1

    async def find_links(self, domain: str, *, limit: int) -> list[LinkRecord]:
        self._enter("find_links")
        return [link for link in self.links.values() if link.domain == domain][:limit]

    async def count_links(self, domain: str) -> int:
        self._enter("count_links")
        return sum(1 for link in self.links.values() if link.domain == domain)

    async def delete_links(self, link_ids: Sequence[str]) -> int:
        self._enter("delete_links")
        return sum(1 for link_id in link_ids if self.links.pop(link_id, None) is not None)

    async def decrement_links_usage(self, workspace_id: str, amount: int) -> None:
        self._enter("decrement_links_usage")
        self.usage[workspace_id] = self.usage.get(workspace_id, 0) - amount

    async def delete_domain(self, domain: str) -> bool:
        self._enter("delete_domain")
        if domain not in self.domains:
            return False
        del self.domains[domain]
        return True

    async def detach_domain(self, domain: str) -> None:
        self._enter("detach_domain")
        if domain in self.domains:
            self.domains[domain] = None

    async def detach_links(self, domain: str) -> int:
        self._enter("detach_links")
        detached = 0
        for link_id, link in list(self.links.items()):
            if link.domain == domain:
                self.links[link_id] = replace(link, workspace_id=None)
                detached += 1
        return detached


@dataclass
class FakeLinkCache:
    entries: dict[str, str] = field(default_factory=dict)
    error: Exception | None = None

    async def delete_many(self, keys: Sequence[str]) -> int:
        if self.error is not None:
            raise self.error
        return sum(1 for key in keys if self.entries.pop(key, None) is not None)


@dataclass
class FakeObjectStorage:
    public_url: str = ASSET_BASE_URL
    objects: set[str] = field(default_factory=set)
    deleted_paths: list[str] = field(default_factory=list)
    error: Exception | None = None

    async def delete(self, path: str) -> None:
        if self.error is not None:
            raise self.error
        self.deleted_paths.append(path)
        self.objects.discard(path)


@dataclass
class FakeAnalyticsSink:
    events: list[TombstoneEvent] = field(default_factory=list)
    error: Exception | None = None

    async def record_tombstones(self, events: Sequence[TombstoneEvent]) -> None:
        if self.error is not None:
            raise self.error
        self.events.extend(events)


@dataclass
class FakeDomainProvider:
    released: list[str] = field(default_factory=list)
    error: Exception | None = None

    async def release_domain(self, domain: str) -> None:
        if self.error is not None:
            raise self.error
        self.released.append(domain)


@dataclass
class FakeDeletionScheduler:
    jobs: list[DeferredDeletion] = field(default_factory=list)
    error: Exception | None = None

    async def enqueue(self, job: DeferredDeletion) -> str:
        if self.error is not None:
            raise self.error
        self.jobs.append(job)
        return f"job-{len(self.jobs)}"


def make_link(
    link_id: str,
    *,
    domain: str = "go.example",
    key: str | None = None,
    image: str | None = None,
    workspace_id: str | None = "ws_1",
    tag_ids: tuple[str, ...] = (),
) -> LinkRecord:
    return LinkRecord(
        id=link_id,
        domain=domain,
        key=key or link_id,
        url=f"https://dest.example.test/{link_id}",
        created_at=CREATED_AT,
        image=image,
        workspace_id=workspace_id,
        tag_ids=tag_ids,
    )


@pytest.fixture()
def link_factory():  # type: ignore[no-untyped-def]
    """Factory building LinkRecords under ``go.example`` owned by ``ws_1``."""
    return make_link


@pytest.fixture()
def store() -> FakeLinkStore:
    return FakeLinkStore()


@pytest.fixture()
def cache() -> FakeLinkCache:
    return FakeLinkCache()


@pytest.fixture()
def storage() -> FakeObjectStorage:
    return FakeObjectStorage()


@pytest.fixture()
def sink() -> FakeAnalyticsSink:
    return FakeAnalyticsSink()


@pytest.fixture()
def provider() -> FakeDomainProvider:
    return FakeDomainProvider()


@pytest.fixture()
def scheduler() -> FakeDeletionScheduler:
    return FakeDeletionScheduler()


@pytest.fixture()
def bridge(scheduler: FakeDeletionScheduler) -> DeletionSchedulerBridge:
    return DeletionSchedulerBridge(scheduler)


@pytest.fixture()
def fan_out(
    store: FakeLinkStore,
    cache: FakeLinkCache,
    storage: FakeObjectStorage,
    sink: FakeAnalyticsSink,
) -> FanOutDeleter:
    return FanOutDeleter(store, cache, storage, sink, asset_base_url=ASSET_BASE_URL)


@pytest.fixture()
def pipeline(
    store: FakeLinkStore,
    fan_out: FanOutDeleter,
    bridge: DeletionSchedulerBridge,
) -> DomainDeletionPipeline:
    return DomainDeletionPipeline(
        locator=RecordLocator(store, batch_size=1),
        fan_out=fan_out,
        convergence=ConvergenceChecker(store),
        store=store,
        bridge=bridge,
        retry_delay_seconds=2,
    )


@pytest.fixture()
def detach_coordinator(
    provider: FakeDomainProvider,
    store: FakeLinkStore,
    bridge: DeletionSchedulerBridge,
) -> DetachCoordinator:
    return DetachCoordinator(provider, store, bridge)
