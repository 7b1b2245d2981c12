"""Unit tests for LocalStorageService (real filesystem under tmp_path)."""

import errno
from pathlib import Path
from unittest.mock import patch

import pytest

from pastebox.domain.enums import ErrorKind
from pastebox.infrastructure.exceptions import (
    StorageBackendError,
    StorageInsufficientSpaceError,
    StorageNotFoundError,
)
from pastebox.infrastructure.external.storage.local_storage import LocalStorageService


@pytest.fixture
def storage(tmp_path: Path) -> LocalStorageService:
    return LocalStorageService(str(tmp_path / "pastes"))


async def test_put_then_get(storage: LocalStorageService) -> None:
    written = await storage.put("brave-quiet-otter", b"hello")
    assert written == 5
    assert await storage.get("brave-quiet-otter") == b"hello"


async def test_put_overwrites_and_leaves_no_temp_files(storage: LocalStorageService) -> None:
    await storage.put("brave-quiet-otter", b"first")
    await storage.put("brave-quiet-otter", b"second")
    assert await storage.get("brave-quiet-otter") == b"second"
    assert sorted(p.name for p in storage.storage_root.iterdir()) == ["brave-quiet-otter"]


async def test_empty_object(storage: LocalStorageService) -> None:
    assert await storage.put("brave-quiet-otter", b"") == 0
    assert await storage.get("brave-quiet-otter") == b""


async def test_get_missing_raises_not_found(storage: LocalStorageService) -> None:
    with pytest.raises(StorageNotFoundError) as exc_info:
        await storage.get("no-such-key")
    assert exc_info.value.kind is ErrorKind.NOT_FOUND


async def test_delete_removes_object(storage: LocalStorageService) -> None:
    await storage.put("brave-quiet-otter", b"hello")
    await storage.delete("brave-quiet-otter")
    with pytest.raises(StorageNotFoundError):
        await storage.get("brave-quiet-otter")


async def test_delete_missing_raises_not_found(storage: LocalStorageService) -> None:
    with pytest.raises(StorageNotFoundError):
        await storage.delete("no-such-key")


@pytest.mark.parametrize("key", ["", ".", "..", "a/b", "..\\x", "a\x00b", ".tmp_abc"])
async def test_invalid_keys_rejected(storage: LocalStorageService, key: str) -> None:
    with pytest.raises(ValueError, match="Invalid storage key"):
        await storage.get(key)


async def test_no_space_maps_to_insufficient_storage(storage: LocalStorageService) -> None:
    with patch(
        "pastebox.infrastructure.external.storage.local_storage.aiofiles.open",
        side_effect=OSError(errno.ENOSPC, "No space left on device"),
    ):
        with pytest.raises(StorageInsufficientSpaceError) as exc_info:
            await storage.put("brave-quiet-otter", b"hello")
    assert exc_info.value.kind is ErrorKind.INSUFFICIENT_STORAGE
    assert list(storage.storage_root.iterdir()) == []


async def test_other_os_error_maps_to_backend_error(storage: LocalStorageService) -> None:
    with patch(
        "pastebox.infrastructure.external.storage.local_storage.aiofiles.open",
        side_effect=OSError(errno.EIO, "I/O error"),
    ):
        with pytest.raises(StorageBackendError) as exc_info:
            await storage.get("brave-quiet-otter")
    assert exc_info.value.details["operation"] == "get"


async def test_temp_file_creation_failure_is_mapped(storage: LocalStorageService) -> None:
    with patch(
        "pastebox.infrastructure.external.storage.local_storage.tempfile.mkstemp",
        side_effect=OSError(errno.ENOSPC, "No space left on device"),
    ):
        with pytest.raises(StorageInsufficientSpaceError):
            await storage.put("brave-quiet-otter", b"hello")

    with patch(
        "pastebox.infrastructure.external.storage.local_storage.tempfile.mkstemp",
        side_effect=PermissionError(errno.EACCES, "Permission denied"),
    ):
        with pytest.raises(StorageBackendError) as exc_info:
            await storage.put("brave-quiet-otter", b"hello")
    assert exc_info.value.details["operation"] == "put"
    assert list(storage.storage_root.iterdir()) == []
