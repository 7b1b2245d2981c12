"""Local filesystem storage: one flat file per key, atomic writes."""

from __future__ import annotations

import errno
import logging
import os
import tempfile
from pathlib import Path

import aiofiles
import aiofiles.os

from pastebox.infrastructure.exceptions import (
    StorageBackendError,
    StorageInsufficientSpaceError,
    StorageNotFoundError,
)

logger = logging.getLogger(__name__)

_NO_SPACE_ERRNOS = frozenset({errno.ENOSPC, getattr(errno, "EDQUOT", errno.ENOSPC)})


class LocalStorageService:
    """Local filesystem storage with atomic writes.

    Every key is a single file directly under storage_root. Keys come from
    the key generator and never contain separators; a key that does is a
    caller bug and raises ValueError instead of being sanitized.
    Writes go to a temp file in the same directory and are renamed over
    the target, so readers never see a partially written object.
    """

    def __init__(self, storage_root: str) -> None:
        """Initialize local storage, creating storage_root if needed.

        Args:
            storage_root: Base directory for all objects.
        """
        self.storage_root = Path(storage_root).resolve()
        self.storage_root.mkdir(parents=True, exist_ok=True, mode=0o750)
        logger.debug("local storage root: %s", self.storage_root)

    def _path_for(self, key: str) -> Path:
        """Map key to its file. Raises ValueError if key is not a flat name."""
        if (
            not key
            or key in (".", "..")
            or "/" in key
            or "\\" in key
            or "\x00" in key
            or key.startswith(".tmp_")
        ):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.storage_root / key

    async def get(self, key: str) -> bytes:
        """Read the whole object into memory."""
        path = self._path_for(key)
        try:
            async with aiofiles.open(path, "rb") as f:
                return await f.read()
        except FileNotFoundError as e:
            raise StorageNotFoundError(key) from e
        except OSError as e:
            raise StorageBackendError(key, "get", str(e)) from e

    async def put(self, key: str, data: bytes) -> int:
        """Write data atomically (temp file + rename). Returns bytes written."""
        target_path = self._path_for(key)
        temp_path: str | None = None
        try:
            temp_fd, temp_path = tempfile.mkstemp(dir=self.storage_root, prefix=".tmp_")
            os.close(temp_fd)
            async with aiofiles.open(temp_path, "wb") as f:
                await f.write(data)
                await f.flush()
            os.chmod(temp_path, 0o640)
            await aiofiles.os.replace(temp_path, target_path)
        except OSError as e:
            if e.errno in _NO_SPACE_ERRNOS:
                raise StorageInsufficientSpaceError(key, str(e)) from e
            raise StorageBackendError(key, "put", str(e)) from e
        finally:
            if temp_path is not None and os.path.exists(temp_path):
                os.unlink(temp_path)
        return len(data)

    async def delete(self, key: str) -> None:
        """Remove the object file."""
        path = self._path_for(key)
        try:
            await aiofiles.os.remove(path)
        except FileNotFoundError as e:
            raise StorageNotFoundError(key) from e
        except OSError as e:
            raise StorageBackendError(key, "delete", str(e)) from e
