"""Tests for port protocol conformance."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from vestigia.foundation.domain.ports import (
    AnalyticsSinkPort,
    DeletionSchedulerPort,
    DomainProviderPort,
    LinkCachePort,
    ObjectStoragePort,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from vestigia.foundation.domain.link_value_objects import DeferredDeletion, TombstoneEvent


class _FakeCache:
    async def delete_many(self, keys: Sequence[str]) -> int:
        return len(keys)


class _FakeStorage:
    public_url = "https://assets.example.com"

    async def delete(self, path: str) -> None:
        return None


class _FakeSink:
    async def record_tombstones(self, events: Sequence[TombstoneEvent]) -> None:
        return None


class _FakeProvider:
    async def release_domain(self, domain: str) -> None:
        return None


class _FakeScheduler:
    async def enqueue(self, job: DeferredDeletion) -> str:
        return "job-1"


class _NotAPort:
    """Class that does NOT conform to any port protocol."""

    def unrelated_method(self) -> None:
        pass


@pytest.mark.unit
class TestPortConformance:
    def test_fakes_satisfy_ports(self) -> None:
        assert isinstance(_FakeCache(), LinkCachePort)
        assert isinstance(_FakeStorage(), ObjectStoragePort)
        assert isinstance(_FakeSink(), AnalyticsSinkPort)
        assert isinstance(_FakeProvider(), DomainProviderPort)
        assert isinstance(_FakeScheduler(), DeletionSchedulerPort)

    def test_unrelated_class_is_rejected(self) -> None:
        assert not isinstance(_NotAPort(), LinkCachePort)
        assert not isinstance(_NotAPort(), DeletionSchedulerPort)
