"""Persistence repositories. Re-exports for dependency injection."""

from pastebox.infrastructure.persistence.repositories.paste_repo import PasteRepository

__all__ = ["PasteRepository"]
