"""Hosting provider adapter releasing custom domains.

Calls ``DELETE {base_url}/v9/projects/{project_id}/domains/{domain}``.
A 404 means the provider no longer knows the domain, which is the state
we want, so it is treated as success.
"""

from __future__ import annotations

import logging
from functools import lru_cache

import httpx
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from vestigia.foundation.domain.exceptions import ExternalServiceError

logger = logging.getLogger(__name__)


class HostingProviderSettings(BaseSettings):
    """Hosting provider configuration from ``HOSTING_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="HOSTING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_url: str = Field(default="https://api.vercel.com", description="Provider API base URL")
    token: str = Field(default="", repr=False, description="Provider API token (hidden in logs)")
    project_id: str = Field(default="", description="Provider project the domains are bound to")
    team_id: str | None = Field(default=None, description="Optional provider team scope")
    timeout: float = Field(default=10.0, gt=0, description="Request timeout in seconds")


@lru_cache(maxsize=1)
def get_hosting_provider_settings() -> HostingProviderSettings:
    """Get cached HostingProviderSettings singleton."""
    return HostingProviderSettings()


class HostingProviderClient:
    """DomainProviderPort implementation over httpx.

    Args:
        settings: Endpoint, credentials and project configuration.
        client: Optional shared httpx.AsyncClient instance.
    """

    def __init__(
        self,
        settings: HostingProviderSettings,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = settings.base_url.rstrip("/")
        self._token = settings.token
        self._project_id = settings.project_id
        self._team_id = settings.team_id
        self._timeout = settings.timeout
        self._external_client = client is not None
        self._client: httpx.AsyncClient | None = client

    async def release_domain(self, domain: str) -> None:
        """Remove ``domain`` from the provider project.

        Raises:
            ExternalServiceError: On a non-2xx, non-404 response or transport failure.
        """
        params = {"teamId": self._team_id} if self._team_id else None
        client = self._get_client()
        try:
            response = await client.delete(
                f"{self._base_url}/v9/projects/{self._project_id}/domains/{domain}",
                params=params,
                headers={"Authorization": f"Bearer {self._token}"},
                timeout=self._timeout,
            )
        except httpx.HTTPError as exc:
            raise ExternalServiceError(
                "hosting_provider", str(exc) or type(exc).__name__, domain=domain
            ) from exc

        if response.status_code == httpx.codes.NOT_FOUND:
            logger.info("provider_domain_already_released", extra={"domain": domain})
            return
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise ExternalServiceError(
                "hosting_provider",
                f"HTTP {exc.response.status_code}",
                domain=domain,
            ) from exc
        logger.info("provider_domain_released", extra={"domain": domain})

    def _get_client(self) -> httpx.AsyncClient:
        """Return the shared or lazily-created httpx.AsyncClient."""
        if self._client is None:
            self._client = httpx.AsyncClient()
        return self._client

    async def aclose(self) -> None:
        """Close the internal httpx.AsyncClient if we own it."""
        if self._client is not None and not self._external_client:
            await self._client.aclose()
            self._client = None
