"""S3-compatible object storage (AWS S3, MinIO, etc.) with retries disabled."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from pastebox.infrastructure.exceptions import (
    StorageBackendError,
    StorageInsufficientSpaceError,
    StorageNotFoundError,
)

logger = logging.getLogger(__name__)

_NOT_FOUND_CODES = frozenset({"NoSuchKey", "404", "NotFound"})
# MinIO capacity errors.
_NO_SPACE_CODES = frozenset({"XMinioStorageFull", "XMinioAdminBucketQuotaExceeded"})


def _error_code(e: ClientError) -> str:
    return str(e.response.get("Error", {}).get("Code", ""))


class S3StorageService:
    """S3-compatible storage.

    Uses boto3 (sync) via asyncio.to_thread for the async API. Compatible with
    AWS S3, MinIO, DigitalOcean Spaces. The client makes exactly one attempt
    per call: failures surface immediately and retry policy is left to the
    operator.
    """

    def __init__(
        self,
        bucket: str,
        region: str = "us-east-1",
        endpoint_url: str | None = None,
        access_key: str | None = None,
        secret_key: str | None = None,
        client: Any = None,
    ) -> None:
        """Initialize S3 client.

        Args:
            bucket: Bucket name.
            region: AWS region.
            endpoint_url: Custom endpoint (MinIO/Spaces).
            access_key: Optional; uses env/IAM if not set.
            secret_key: Optional.
            client: Pre-built boto3 S3 client (tests).
        """
        self.bucket = bucket
        self.region = region
        self.endpoint_url = endpoint_url
        if client is None:
            extra = {} if endpoint_url is None else {"endpoint_url": endpoint_url}
            client = boto3.client(
                "s3",
                region_name=region,
                aws_access_key_id=access_key,
                aws_secret_access_key=secret_key,
                config=Config(retries={"total_max_attempts": 1, "mode": "standard"}),
                **extra,
            )
        self._client = client
        logger.debug(
            "s3 storage: bucket=%s region=%s endpoint=%s", bucket, region, endpoint_url
        )

    async def get(self, key: str) -> bytes:
        """Download the whole object."""

        def _get() -> bytes:
            try:
                resp = self._client.get_object(Bucket=self.bucket, Key=key)
                return resp["Body"].read()
            except ClientError as e:
                if _error_code(e) in _NOT_FOUND_CODES:
                    raise StorageNotFoundError(key) from e
                raise StorageBackendError(key, "get", str(e)) from e
            except BotoCoreError as e:
                raise StorageBackendError(key, "get", str(e)) from e

        return await asyncio.to_thread(_get)

    async def put(self, key: str, data: bytes) -> int:
        """Upload data as a single PUT. Returns bytes written."""

        def _put() -> int:
            try:
                self._client.put_object(Bucket=self.bucket, Key=key, Body=data)
            except ClientError as e:
                if _error_code(e) in _NO_SPACE_CODES:
                    raise StorageInsufficientSpaceError(key, str(e)) from e
                raise StorageBackendError(key, "put", str(e)) from e
            except BotoCoreError as e:
                raise StorageBackendError(key, "put", str(e)) from e
            return len(data)

        return await asyncio.to_thread(_put)

    async def delete(self, key: str) -> None:
        """Delete object. S3 deletes are silent for absent keys, so HEAD first."""

        def _delete() -> None:
            try:
                self._client.head_object(Bucket=self.bucket, Key=key)
            except ClientError as e:
                if _error_code(e) in _NOT_FOUND_CODES:
                    raise StorageNotFoundError(key) from e
                raise StorageBackendError(key, "delete", str(e)) from e
            except BotoCoreError as e:
                raise StorageBackendError(key, "delete", str(e)) from e
            try:
                self._client.delete_object(Bucket=self.bucket, Key=key)
            except (ClientError, BotoCoreError) as e:
                raise StorageBackendError(key, "delete", str(e)) from e

        await asyncio.to_thread(_delete)
