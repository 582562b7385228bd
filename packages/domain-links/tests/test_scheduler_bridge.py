"""Unit tests for DeletionSchedulerBridge."""

from __future__ import annotations

from typing import Any
from unittest.mock import patch

import pytest

from vestigia.domain.links.scheduler_bridge import DeletionSchedulerBridge
from vestigia.foundation.domain.exceptions import DeletionEnqueueError
from vestigia.foundation.domain.link_value_objects import DeferredDeletion


@pytest.mark.unit
class TestEnqueue:
    @pytest.mark.asyncio(loop_scope="function")
    async def test_returns_job_id(self, bridge: DeletionSchedulerBridge, scheduler: Any) -> None:
        job_id = await bridge.enqueue("go.example", "ws_1")

        assert job_id == "job-1"
        assert scheduler.jobs == [DeferredDeletion("go.example", "ws_1")]

    @pytest.mark.asyncio(loop_scope="function")
    async def test_carries_delay(self, bridge: DeletionSchedulerBridge, scheduler: Any) -> None:
        await bridge.enqueue("go.example", "ws_1", delay_seconds=2)

        [job] = scheduler.jobs
        assert job.delay_seconds == 2

    @pytest.mark.asyncio(loop_scope="function")
    async def test_rejection_raises_enqueue_error(
        self, bridge: DeletionSchedulerBridge, scheduler: Any
    ) -> None:
        scheduler.error = ConnectionError("queue unavailable")

        with pytest.raises(DeletionEnqueueError) as exc_info:
            await bridge.enqueue("go.example", "ws_1")

        assert exc_info.value.context == {
            "domain": "go.example",
            "workspace_id": "ws_1",
            "reason": "queue unavailable",
        }
        assert isinstance(exc_info.value.__cause__, ConnectionError)


@pytest.mark.unit
class TestTryEnqueue:
    @pytest.mark.asyncio(loop_scope="function")
    async def test_returns_job_id_on_success(self, bridge: DeletionSchedulerBridge) -> None:
        assert await bridge.try_enqueue("go.example", "ws_1", delay_seconds=2) == "job-1"

    @pytest.mark.asyncio(loop_scope="function")
    async def test_logs_and_returns_none_on_rejection(
        self, bridge: DeletionSchedulerBridge, scheduler: Any
    ) -> None:
        scheduler.error = RuntimeError("quota exceeded")

        with patch("vestigia.domain.links.scheduler_bridge.logger") as mock_logger:
            result = await bridge.try_enqueue("go.example", "ws_1", delay_seconds=2)

        assert result is None
        mock_logger.error.assert_called_once_with(
            "deletion_enqueue_failed",
            domain="go.example",
            workspace_id="ws_1",
            delay_seconds=2,
            reason="quota exceeded",
        )
