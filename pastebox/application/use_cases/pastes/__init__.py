"""Paste use cases: lifecycle operations and the expiration sweep."""

from pastebox.application.use_cases.pastes.paste_operations import PasteService
from pastebox.application.use_cases.pastes.run_expiration import ExpirationSweeper

__all__ = [
    "ExpirationSweeper",
    "PasteService",
]
