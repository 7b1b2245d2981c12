"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the paste service. Word lists, the key
generator and the storage backend are process-wide singletons built on
first use; the lifespan builds them eagerly so misconfiguration fails at
startup rather than on the first request.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from pastebox.application.interfaces.storage import IObjectStore
from pastebox.application.services.key_generator import (
    KeyGenerator,
    WordLists,
    load_word_lists,
)
from pastebox.application.use_cases.pastes import PasteService
from pastebox.core.config import get_settings
from pastebox.infrastructure.external.storage.factory import StorageFactory
from pastebox.infrastructure.persistence.database import get_db, get_db_transactional
from pastebox.infrastructure.persistence.repositories import PasteRepository


@lru_cache
def get_word_lists() -> WordLists:
    """Adjective and noun lists from settings (loaded once)."""
    settings = get_settings()
    return load_word_lists(settings.adjectives_file, settings.nouns_file)


@lru_cache
def get_key_generator() -> KeyGenerator:
    return KeyGenerator(get_word_lists())


@lru_cache
def get_object_store() -> IObjectStore:
    """Configured storage backend, shared by all requests."""
    return StorageFactory.create_storage_service()


def clear_dependency_caches() -> None:
    """Forget cached singletons so the next request rebuilds them from settings."""
    get_word_lists.cache_clear()
    get_key_generator.cache_clear()
    get_object_store.cache_clear()


def _build_paste_service(db: AsyncSession) -> PasteService:
    settings = get_settings()
    return PasteService(
        PasteRepository(db),
        get_object_store(),
        get_key_generator(),
        expiration_secs=settings.expiration_secs,
        issue_delete_keys=settings.enable_delete_keys,
    )


async def get_paste_service(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> PasteService:
    """PasteService for create/delete (request-scoped transaction)."""
    return _build_paste_service(db)


async def get_paste_query_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> PasteService:
    """PasteService for fetch and redirect (no commit)."""
    return _build_paste_service(db)
