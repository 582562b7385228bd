"""Unit tests for vestigia.domain.links.tasks."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from taskiq import AsyncBroker, TaskiqScheduler, TaskiqState
from taskiq.cli.utils import import_object

from vestigia.domain.links.pipeline import DeletionResult
from vestigia.domain.links.tasks import _on_worker_shutdown, _on_worker_startup, delete_domain_task
from vestigia.foundation.domain.link_value_objects import DomainState

if TYPE_CHECKING:
    from collections.abc import AsyncIterator


@pytest.mark.unit
class TestDeleteDomainTask:
    def test_registered_under_fixed_name(self) -> None:
        assert delete_domain_task.task_name == "links.delete_domain"

    @pytest.mark.asyncio(loop_scope="function")
    @patch("vestigia.domain.links.tasks.get_deletion_pipeline")
    async def test_runs_pipeline(self, mock_get_pipeline: MagicMock) -> None:
        pipeline = MagicMock()
        pipeline.run = AsyncMock(
            return_value=DeletionResult(domain="go.example", state=DomainState.DELETED)
        )
        mock_get_pipeline.return_value = pipeline

        state = await delete_domain_task("go.example", "ws_1")

        assert state == "deleted"
        pipeline.run.assert_awaited_once_with("go.example", "ws_1")


@pytest.mark.unit
class TestWorkerLifecycle:
    @pytest.mark.asyncio(loop_scope="function")
    async def test_startup_enters_and_shutdown_exits_lifespan(self) -> None:
        events: list[str] = []

        @asynccontextmanager
        async def fake_lifespan(host: object) -> AsyncIterator[None]:
            events.append("start")
            yield
            events.append("stop")

        state = TaskiqState()
        with patch(
            "vestigia.domain.links.tasks.worker_lifespan", return_value=fake_lifespan
        ):
            await _on_worker_startup(state)
            assert events == ["start"]
            await _on_worker_shutdown(state)

        assert events == ["start", "stop"]

    @pytest.mark.asyncio(loop_scope="function")
    async def test_shutdown_without_startup_is_noop(self) -> None:
        await _on_worker_shutdown(TaskiqState())


@pytest.mark.unit
class TestCommandLineTargets:
    def test_worker_target_is_broker_with_deletion_task(self) -> None:
        loaded = import_object("vestigia.domain.links.tasks:broker")

        assert isinstance(loaded, AsyncBroker)
        task = loaded.find_task("links.delete_domain")
        assert task is not None
        assert task.task_name == delete_domain_task.task_name

    def test_scheduler_target_is_taskiq_scheduler(self) -> None:
        loaded = import_object("vestigia.domain.links.tasks:scheduler")

        assert isinstance(loaded, TaskiqScheduler)
        assert loaded.broker is import_object("vestigia.domain.links.tasks:broker")
