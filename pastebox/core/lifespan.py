"""Application lifespan: startup and shutdown.

Startup loads the word lists and builds the storage backend so a bad
configuration stops the server before it accepts requests. Shutdown
disposes the database engine.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from pastebox.core.config import get_settings
from pastebox.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown."""
    setup_logging()
    settings = get_settings()

    # ---- Startup ----
    from pastebox.api.dependencies import get_key_generator, get_object_store
    from pastebox.infrastructure.persistence import database

    key_generator = get_key_generator()
    logger.info("Key generator ready (%d possible keys)", key_generator.keyspace_size)
    get_object_store()
    logger.info("Storage backend: %s", settings.storage_backend.value)

    if settings.database_auto_create:
        await database.init_models()
        logger.info("Database tables created")

    if settings.expiration_secs is None:
        logger.info("Expiry disabled")
    else:
        logger.info("Pastes expire after %d seconds", settings.expiration_secs)

    yield

    # ---- Shutdown ----
    await database.dispose_engine()
