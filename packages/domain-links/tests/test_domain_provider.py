"""Tests for HostingProviderClient with httpx.MockTransport."""

from __future__ import annotations

import httpx
import pytest

from vestigia.domain.links.infrastructure.domain_provider import (
    HostingProviderClient,
    HostingProviderSettings,
)
from vestigia.foundation.domain.exceptions import ExternalServiceError


def _settings(team_id: str | None = None) -> HostingProviderSettings:
    return HostingProviderSettings(
        base_url="https://hosting.example.test",
        token="hp_token",
        project_id="prj_1",
        team_id=team_id,
        _env_file=None,  # type: ignore[call-arg]
    )


def _client(status: int, seen: list[httpx.Request]) -> httpx.AsyncClient:
    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(status)

    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.mark.unit
class TestHostingProviderClient:
    @pytest.mark.asyncio(loop_scope="function")
    async def test_release_sends_delete(self) -> None:
        seen: list[httpx.Request] = []
        async with _client(200, seen) as client:
            await HostingProviderClient(_settings(), client=client).release_domain("go.example")

        [request] = seen
        assert request.method == "DELETE"
        assert request.url.path == "/v9/projects/prj_1/domains/go.example"
        assert request.headers["authorization"] == "Bearer hp_token"
        assert "teamId" not in request.url.params

    @pytest.mark.asyncio(loop_scope="function")
    async def test_team_scope_added_when_configured(self) -> None:
        seen: list[httpx.Request] = []
        async with _client(200, seen) as client:
            provider = HostingProviderClient(_settings(team_id="team_9"), client=client)
            await provider.release_domain("go.example")

        assert seen[0].url.params["teamId"] == "team_9"

    @pytest.mark.asyncio(loop_scope="function")
    async def test_not_found_is_already_released(self) -> None:
        seen: list[httpx.Request] = []
        async with _client(404, seen) as client:
            await HostingProviderClient(_settings(), client=client).release_domain("go.example")

        assert len(seen) == 1

    @pytest.mark.asyncio(loop_scope="function")
    async def test_server_error_raises(self) -> None:
        seen: list[httpx.Request] = []
        async with _client(500, seen) as client:
            provider = HostingProviderClient(_settings(), client=client)
            with pytest.raises(ExternalServiceError) as exc_info:
                await provider.release_domain("go.example")

        assert exc_info.value.service == "hosting_provider"
        assert exc_info.value.context["domain"] == "go.example"

    @pytest.mark.asyncio(loop_scope="function")
    async def test_timeout_raises(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            provider = HostingProviderClient(_settings(), client=client)
            with pytest.raises(ExternalServiceError):
                await provider.release_domain("go.example")

    @pytest.mark.asyncio(loop_scope="function")
    async def test_aclose_closes_owned_client(self) -> None:
        provider = HostingProviderClient(_settings())
        client = provider._get_client()

        await provider.aclose()

        assert client.is_closed
