"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pastebox.application.dtos.paste import PasteRecord


class IPasteRepository(Protocol):
    """Protocol for paste metadata persistence.

    Implementations raise BackendException when the underlying store fails.
    """

    async def get_by_key(self, key: str) -> PasteRecord | None:
        """Return the paste record for key, or None."""

    async def list_all(self) -> list[PasteRecord]:
        """Return every paste record (oldest first)."""

    async def create_paste(
        self, key: str, delete_key: str | None, file_name: str
    ) -> PasteRecord:
        """Insert a paste record stamped with the current UTC time."""

    async def delete_by_key(self, key: str) -> bool:
        """Delete the record for key. Returns False if there was none."""
