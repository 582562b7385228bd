"""Analytics events API adapter receiving link tombstones.

Events are posted as newline-delimited JSON to
``{base_url}/v0/events?name={datasource}``; the sink is append-only, so
a deleted link is recorded as a new row with ``deleted: true``.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from typing import TYPE_CHECKING

import httpx
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from vestigia.foundation.domain.exceptions import ExternalServiceError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from vestigia.foundation.domain.link_value_objects import TombstoneEvent

logger = logging.getLogger(__name__)

_NDJSON_CONTENT_TYPE = "application/x-ndjson"


class AnalyticsSettings(BaseSettings):
    """Analytics sink configuration from ``ANALYTICS_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ANALYTICS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_url: str = Field(default="https://api.tinybird.co", description="Events API base URL")
    token: str = Field(default="", repr=False, description="Events API token (hidden in logs)")
    datasource: str = Field(default="links_metadata", min_length=1)
    timeout: float = Field(default=10.0, gt=0, description="Request timeout in seconds")


@lru_cache(maxsize=1)
def get_analytics_settings() -> AnalyticsSettings:
    """Get cached AnalyticsSettings singleton."""
    return AnalyticsSettings()


class EventsApiSink:
    """AnalyticsSinkPort implementation over httpx.

    Supports both shared and owned httpx.AsyncClient modes:
    - If ``client`` is provided, the caller manages its lifecycle.
    - Otherwise an internal client is created lazily; call :meth:`aclose`.

    Args:
        settings: Endpoint, token and datasource configuration.
        client: Optional shared httpx.AsyncClient instance.
    """

    def __init__(
        self,
        settings: AnalyticsSettings,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = settings.base_url.rstrip("/")
        self._token = settings.token
        self._datasource = settings.datasource
        self._timeout = settings.timeout
        self._external_client = client is not None
        self._client: httpx.AsyncClient | None = client

    async def record_tombstones(self, events: Sequence[TombstoneEvent]) -> None:
        """Ingest ``events`` in one request.

        Raises:
            ExternalServiceError: On a non-2xx response or transport failure.
        """
        if not events:
            return
        body = "\n".join(json.dumps(event.to_payload()) for event in events)
        client = self._get_client()
        try:
            response = await client.post(
                f"{self._base_url}/v0/events",
                params={"name": self._datasource},
                content=body.encode("utf-8"),
                headers={
                    "Authorization": f"Bearer {self._token}",
                    "Content-Type": _NDJSON_CONTENT_TYPE,
                },
                timeout=self._timeout,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise ExternalServiceError(
                "analytics",
                f"HTTP {exc.response.status_code}",
                datasource=self._datasource,
            ) from exc
        except httpx.HTTPError as exc:
            raise ExternalServiceError(
                "analytics", str(exc) or type(exc).__name__, datasource=self._datasource
            ) from exc
        logger.debug(
            "tombstones_recorded",
            extra={"datasource": self._datasource, "count": len(events)},
        )

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
