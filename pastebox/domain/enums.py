"""Domain enumerations for pastebox.

Closed sets of values shared by the application, infrastructure and
presentation layers.
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class StorageBackend(_ValuesMixin, str, Enum):
    """Object storage backend selected once at startup."""

    LOCAL = "local"
    S3 = "s3"


class ErrorKind(_ValuesMixin, str, Enum):
    """Stable error kinds surfaced by the core.

    The HTTP layer translates these to status codes; nothing below it
    knows about transport.
    """

    NOT_FOUND = "NOT_FOUND"
    MISSING_FILE = "MISSING_FILE"
    MISSING_FILE_NAME = "MISSING_FILE_NAME"
    MISSING_FILE_CONTENT_TYPE = "MISSING_FILE_CONTENT_TYPE"
    MISSING_DELETE_KEY = "MISSING_DELETE_KEY"
    WRONG_DELETE_KEY = "WRONG_DELETE_KEY"
    INSUFFICIENT_STORAGE = "INSUFFICIENT_STORAGE"
    BACKEND_ERROR = "BACKEND_ERROR"
    CLOCK_SKEW = "CLOCK_SKEW"
