"""Unit tests for S3StorageService with a mocked boto3 client."""

import io
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError

from pastebox.domain.enums import ErrorKind
from pastebox.infrastructure.exceptions import (
    StorageBackendError,
    StorageInsufficientSpaceError,
    StorageNotFoundError,
)
from pastebox.infrastructure.external.storage.s3_storage import S3StorageService


def _client_error(code: str, operation: str = "GetObject") -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, operation)


@pytest.fixture
def client() -> MagicMock:
    return MagicMock()


@pytest.fixture
def storage(client: MagicMock) -> S3StorageService:
    return S3StorageService(bucket="pastes", client=client)


async def test_get_returns_body(storage: S3StorageService, client: MagicMock) -> None:
    client.get_object.return_value = {"Body": io.BytesIO(b"hello")}
    assert await storage.get("brave-quiet-otter") == b"hello"
    client.get_object.assert_called_once_with(Bucket="pastes", Key="brave-quiet-otter")


async def test_get_no_such_key_is_not_found(storage: S3StorageService, client: MagicMock) -> None:
    client.get_object.side_effect = _client_error("NoSuchKey")
    with pytest.raises(StorageNotFoundError):
        await storage.get("brave-quiet-otter")


async def test_get_access_denied_is_backend_error(
    storage: S3StorageService, client: MagicMock
) -> None:
    client.get_object.side_effect = _client_error("AccessDenied")
    with pytest.raises(StorageBackendError) as exc_info:
        await storage.get("brave-quiet-otter")
    assert exc_info.value.kind is ErrorKind.BACKEND_ERROR


async def test_connection_failure_is_backend_error(
    storage: S3StorageService, client: MagicMock
) -> None:
    client.get_object.side_effect = EndpointConnectionError(endpoint_url="http://minio:9000")
    with pytest.raises(StorageBackendError):
        await storage.get("brave-quiet-otter")


async def test_put_uploads_bytes(storage: S3StorageService, client: MagicMock) -> None:
    assert await storage.put("brave-quiet-otter", b"hello") == 5
    client.put_object.assert_called_once_with(
        Bucket="pastes", Key="brave-quiet-otter", Body=b"hello"
    )


async def test_put_failure_is_backend_error(storage: S3StorageService, client: MagicMock) -> None:
    client.put_object.side_effect = _client_error("SlowDown", "PutObject")
    with pytest.raises(StorageBackendError) as exc_info:
        await storage.put("brave-quiet-otter", b"hello")
    assert exc_info.value.details["operation"] == "put"


async def test_put_storage_full_is_insufficient_storage(
    storage: S3StorageService, client: MagicMock
) -> None:
    client.put_object.side_effect = _client_error("XMinioStorageFull", "PutObject")
    with pytest.raises(StorageInsufficientSpaceError) as exc_info:
        await storage.put("brave-quiet-otter", b"hello")
    assert exc_info.value.kind is ErrorKind.INSUFFICIENT_STORAGE


async def test_delete_checks_existence_first(storage: S3StorageService, client: MagicMock) -> None:
    await storage.delete("brave-quiet-otter")
    client.head_object.assert_called_once_with(Bucket="pastes", Key="brave-quiet-otter")
    client.delete_object.assert_called_once_with(Bucket="pastes", Key="brave-quiet-otter")


async def test_delete_missing_is_not_found(storage: S3StorageService, client: MagicMock) -> None:
    client.head_object.side_effect = _client_error("404", "HeadObject")
    with pytest.raises(StorageNotFoundError):
        await storage.delete("brave-quiet-otter")
    client.delete_object.assert_not_called()


async def test_delete_failure_is_backend_error(storage: S3StorageService, client: MagicMock) -> None:
    client.delete_object.side_effect = _client_error("InternalError", "DeleteObject")
    with pytest.raises(StorageBackendError):
        await storage.delete("brave-quiet-otter")
