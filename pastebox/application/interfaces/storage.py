"""Object storage interface (port). Implementations: LocalStorageService, S3StorageService."""

from typing import Protocol


class IObjectStore(Protocol):
    """Protocol for byte storage backends (local filesystem, S3-compatible).

    Every backend raises the same exceptions: StorageNotFoundError when
    the key is absent, StorageInsufficientSpaceError when a write runs out
    of capacity, StorageBackendError for anything else.
    """

    async def get(self, key: str) -> bytes:
        """Return the full object content."""
        ...

    async def put(self, key: str, data: bytes) -> int:
        """Store data under key, overwriting silently. Returns bytes written."""
        ...

    async def delete(self, key: str) -> None:
        """Remove the object stored under key."""
        ...
