"""Application DTOs (read/write models independent of the ORM)."""

from pastebox.application.dtos.paste import PasteRecord, PurgeResult

__all__ = ["PasteRecord", "PurgeResult"]
