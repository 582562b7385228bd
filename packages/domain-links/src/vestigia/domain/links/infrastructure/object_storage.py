"""S3-compatible object storage adapter for link assets.

Works with AWS S3, Cloudflare R2, MinIO and other S3-compatible services.
"""

from __future__ import annotations

import asyncio
import logging
from functools import lru_cache
from typing import Any

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from vestigia.foundation.domain.exceptions import ExternalServiceError

logger = logging.getLogger(__name__)


class ObjectStorageSettings(BaseSettings):
    """Object store configuration from ``STORAGE_*`` environment variables.

    ``public_url`` is the base URL under which stored assets are served;
    link image URLs starting with it belong to us.
    """

    model_config = SettingsConfigDict(
        env_prefix="STORAGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    bucket: str = Field(default="vestigia", description="Bucket holding link assets")
    endpoint_url: str | None = Field(default=None, description="S3-compatible endpoint URL")
    region: str = Field(default="auto", description="Bucket region")
    access_key_id: str | None = Field(default=None, repr=False)
    secret_access_key: str | None = Field(default=None, repr=False)
    public_url: str = Field(
        default="https://assets.localhost",
        description="Public base URL of stored assets",
    )
    connect_timeout: float = Field(default=5.0, gt=0)
    read_timeout: float = Field(default=10.0, gt=0)


@lru_cache(maxsize=1)
def get_object_storage_settings() -> ObjectStorageSettings:
    """Get cached ObjectStorageSettings singleton."""
    return ObjectStorageSettings()


class S3ObjectStorage:
    """ObjectStoragePort implementation using boto3.

    boto3 is blocking, so each call runs in a worker thread.

    Args:
        settings: Bucket, endpoint and credential configuration.
        client: Optional pre-built S3 client (tests, shared sessions).
    """

    def __init__(self, settings: ObjectStorageSettings, client: Any = None) -> None:
        self.bucket = settings.bucket
        self.public_url = settings.public_url.rstrip("/")

        if client is None:
            client_kwargs: dict[str, Any] = {
                "service_name": "s3",
                "region_name": settings.region,
                "config": Config(
                    signature_version="s3v4",
                    connect_timeout=settings.connect_timeout,
                    read_timeout=settings.read_timeout,
                    retries={"max_attempts": 2},
                ),
            }
            if settings.endpoint_url:
                client_kwargs["endpoint_url"] = settings.endpoint_url
            if settings.access_key_id and settings.secret_access_key:
                client_kwargs["aws_access_key_id"] = settings.access_key_id
                client_kwargs["aws_secret_access_key"] = settings.secret_access_key
            client = boto3.client(**client_kwargs)

        self.client = client

    async def delete(self, path: str) -> None:
        """Delete one object. S3 reports success for missing keys.

        Raises:
            ExternalServiceError: If the object store rejects the request.
        """
        key = path.lstrip("/")
        try:
            await asyncio.to_thread(self.client.delete_object, Bucket=self.bucket, Key=key)
        except ClientError as exc:
            code = exc.response.get("Error", {}).get("Code", "Unknown")
            raise ExternalServiceError(
                "object_storage", f"delete_object failed with {code}", key=key
            ) from exc
        except BotoCoreError as exc:
            raise ExternalServiceError("object_storage", str(exc), key=key) from exc
        logger.debug("asset_deleted", extra={"bucket": self.bucket, "key": key})
