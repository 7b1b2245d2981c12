"""DTOs for paste use cases (no dependency on ORM)."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class PasteRecord:
    """Paste metadata read-model (result of create, get and list).

    delete_key is None when deletion is disabled for the paste.
    """

    key: str
    delete_key: str | None
    file_name: str
    timestamp: datetime


@dataclass(frozen=True)
class PurgeResult:
    """Result of one expiration sweep."""

    examined: int
    """Records listed from the metadata store."""

    expired: int
    """Records past the expiration threshold."""

    deleted: int
    """Expired records removed (object and metadata)."""

    failed: tuple[str, ...] = field(default_factory=tuple)
    """Keys whose removal raised; the sweep carried on past them."""

    @property
    def total_failed(self) -> int:
        """Number of expired records that could not be removed."""
        return len(self.failed)
