"""Unit tests for TaskiqDeletionScheduler."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from vestigia.domain.links.infrastructure.deletion_scheduler import (
    DELETE_DOMAIN_TASK_NAME,
    TaskiqDeletionScheduler,
)
from vestigia.foundation.domain.link_value_objects import DeferredDeletion
from vestigia.infra.taskiq.errors import TaskIQBrokerError, TaskIQScheduleError

_KICKER = "vestigia.domain.links.infrastructure.deletion_scheduler.AsyncKicker"


@pytest.mark.unit
class TestImmediateJobs:
    @pytest.mark.asyncio(loop_scope="function")
    @patch(_KICKER)
    async def test_kicks_task_by_name(self, mock_kicker_cls: MagicMock) -> None:
        broker = MagicMock()
        mock_kicker_cls.return_value.kiq = AsyncMock(return_value=MagicMock(task_id="task-1"))
        scheduler = TaskiqDeletionScheduler(broker, MagicMock())

        job_id = await scheduler.enqueue(DeferredDeletion("go.example", "ws_1"))

        assert job_id == "task-1"
        mock_kicker_cls.assert_called_once_with(
            task_name=DELETE_DOMAIN_TASK_NAME, broker=broker, labels={}
        )
        mock_kicker_cls.return_value.kiq.assert_awaited_once_with(
            domain="go.example", workspace_id="ws_1"
        )

    @pytest.mark.asyncio(loop_scope="function")
    @patch(_KICKER)
    async def test_broker_failure_wrapped(self, mock_kicker_cls: MagicMock) -> None:
        mock_kicker_cls.return_value.kiq = AsyncMock(side_effect=ConnectionError("redis down"))
        scheduler = TaskiqDeletionScheduler(MagicMock(), MagicMock())

        with pytest.raises(TaskIQBrokerError):
            await scheduler.enqueue(DeferredDeletion("go.example", "ws_1"))


@pytest.mark.unit
class TestDelayedJobs:
    @pytest.mark.asyncio(loop_scope="function")
    @patch(_KICKER)
    async def test_schedules_on_source(self, mock_kicker_cls: MagicMock) -> None:
        source = MagicMock()
        kicker = mock_kicker_cls.return_value
        kicker.schedule_by_time = AsyncMock(return_value=MagicMock(schedule_id="sched-1"))
        kicker.kiq = AsyncMock()
        scheduler = TaskiqDeletionScheduler(MagicMock(), source)

        before = datetime.now(UTC)
        job_id = await scheduler.enqueue(DeferredDeletion("go.example", "ws_1", delay_seconds=2))

        assert job_id == "sched-1"
        kicker.kiq.assert_not_awaited()
        args = kicker.schedule_by_time.call_args.args
        assert args[0] is source
        assert args[1] >= before + timedelta(seconds=2)
        assert kicker.schedule_by_time.call_args.kwargs == {
            "domain": "go.example",
            "workspace_id": "ws_1",
        }

    @pytest.mark.asyncio(loop_scope="function")
    @patch(_KICKER)
    async def test_schedule_failure_wrapped(self, mock_kicker_cls: MagicMock) -> None:
        mock_kicker_cls.return_value.schedule_by_time = AsyncMock(side_effect=OSError("nope"))
        scheduler = TaskiqDeletionScheduler(MagicMock(), MagicMock())

        with pytest.raises(TaskIQScheduleError):
            await scheduler.enqueue(DeferredDeletion("go.example", "ws_1", delay_seconds=5))
