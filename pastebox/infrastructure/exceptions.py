"""Infrastructure exceptions for object storage.

Storage errors extend PasteException so presentation can map them
to HTTP responses consistently, and so the core can tell a missing
object apart from a failing backend.
"""

from pastebox.domain.enums import ErrorKind
from pastebox.domain.exceptions import PasteException


class StorageException(PasteException):
    """Base exception for storage operations."""


class StorageNotFoundError(StorageException):
    """Object not found in storage."""

    def __init__(self, key: str) -> None:
        super().__init__(
            f"Object not found: {key}",
            ErrorKind.NOT_FOUND,
            {"key": key},
        )


class StorageInsufficientSpaceError(StorageException):
    """Backend has no capacity left for the write."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(
            f"Insufficient storage writing object: {key}",
            ErrorKind.INSUFFICIENT_STORAGE,
            {"key": key, "reason": reason},
        )


class StorageBackendError(StorageException):
    """Any other storage failure. The underlying error is chained as __cause__."""

    def __init__(self, key: str, operation: str, reason: str) -> None:
        super().__init__(
            f"Storage {operation} failed for object: {key}",
            ErrorKind.BACKEND_ERROR,
            {"key": key, "operation": operation, "reason": reason},
        )
