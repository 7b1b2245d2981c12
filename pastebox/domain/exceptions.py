"""Domain exceptions for pastebox.

Every failure the core reports is a PasteException carrying an ErrorKind.
Presentation maps kinds to HTTP responses in exception handlers; the core
never deals in status codes.
"""

from typing import Any

from pastebox.domain.enums import ErrorKind


class PasteException(Exception):
    """Base exception for all pastebox errors.

    Attributes:
        message: Human-readable error description.
        kind: Stable error kind.
        error_code: Machine-readable code (the kind's value).
        details: Additional error context (e.g. key, backend).
    """

    def __init__(
        self,
        message: str,
        kind: ErrorKind = ErrorKind.BACKEND_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            kind: Error kind; defaults to BACKEND_ERROR for unclassified failures.
            details: Optional dict of extra context.
        """
        self.message = message
        self.kind = kind
        self.error_code = kind.value
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for API error bodies."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class PasteNotFoundException(PasteException):
    """Raised when a paste is unknown, expired, or its content is missing."""

    def __init__(self, key: str) -> None:
        super().__init__(
            f"Paste not found: {key}",
            ErrorKind.NOT_FOUND,
            {"key": key},
        )


class MissingFileException(PasteException):
    """Raised when an upload carries no file part."""

    def __init__(self) -> None:
        super().__init__("Missing multipart file", ErrorKind.MISSING_FILE)


class MissingFileNameException(PasteException):
    """Raised when the uploaded file part has no file name."""

    def __init__(self) -> None:
        super().__init__("Missing multipart file name", ErrorKind.MISSING_FILE_NAME)


class MissingFileContentTypeException(PasteException):
    """Raised when the uploaded file part has no content type."""

    def __init__(self) -> None:
        super().__init__(
            "Missing content type for multipart file",
            ErrorKind.MISSING_FILE_CONTENT_TYPE,
        )


class MissingDeleteKeyException(PasteException):
    """Raised when a delete is attempted without a delete key."""

    def __init__(self, key: str) -> None:
        super().__init__(
            "Missing delete key",
            ErrorKind.MISSING_DELETE_KEY,
            {"key": key},
        )


class WrongDeleteKeyException(PasteException):
    """Raised when the delete key does not match, or the paste has none."""

    def __init__(self, key: str) -> None:
        super().__init__(
            "Wrong delete key",
            ErrorKind.WRONG_DELETE_KEY,
            {"key": key},
        )


class BackendException(PasteException):
    """Raised when the metadata store fails (wraps the driver error)."""

    def __init__(self, backend: str, reason: str) -> None:
        super().__init__(
            f"{backend} backend error",
            ErrorKind.BACKEND_ERROR,
            {"backend": backend, "reason": reason},
        )


class ExpirationClockException(PasteException):
    """Raised when a paste's timestamp lies in the future (clock skew)."""

    def __init__(self, key: str, elapsed_seconds: float) -> None:
        super().__init__(
            f"Paste {key} was created {-elapsed_seconds:.0f}s in the future; check the clock",
            ErrorKind.CLOCK_SKEW,
            {"key": key, "elapsed_seconds": elapsed_seconds},
        )


class WordListError(PasteException):
    """Raised when a word list cannot be loaded or contains unusable words."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(
            f"Failed to load word list {path}: {reason}",
            ErrorKind.BACKEND_ERROR,
            {"path": path, "reason": reason},
        )
