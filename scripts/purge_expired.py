"""Purge expired pastes: delete every paste older than EXPIRATION_SECS.

Usage:
    python -m scripts.purge_expired
Each paste is removed and committed on its own, so an interrupted run
leaves no record whose object is already gone. Exits 1 when any paste
could not be removed; without EXPIRATION_SECS it warns and exits 0.
Meant for cron; safe to run repeatedly.
"""

import asyncio
import sys

import pastebox.infrastructure.persistence.database as database
from pastebox.api.dependencies import get_key_generator
from pastebox.application.dtos import PurgeResult
from pastebox.application.use_cases.pastes import ExpirationSweeper, PasteService
from pastebox.core.config import get_settings
from pastebox.infrastructure.external.storage.factory import StorageFactory
from pastebox.infrastructure.persistence.repositories import PasteRepository
from pastebox.shared.telemetry import setup_logging


async def purge() -> PurgeResult | None:
    """Run one sweep, committing per paste; returns None when expiry is off."""
    settings = get_settings()
    storage = StorageFactory.create_storage_service(settings)
    key_generator = get_key_generator()
    try:
        async with database.session_unmanaged() as session:
            service = PasteService(
                PasteRepository(session),
                storage,
                key_generator,
                expiration_secs=settings.expiration_secs,
                issue_delete_keys=settings.enable_delete_keys,
            )
            sweeper = ExpirationSweeper(
                service, settings.expiration_secs, commit=session.commit
            )
            return await sweeper.run()
    finally:
        await database.dispose_engine()


def main() -> int:
    setup_logging()
    result = asyncio.run(purge())
    if result is None:
        print("EXPIRATION_SECS is not set; expiry is disabled, nothing to do", file=sys.stderr)
        return 0
    print(
        f"Done. Examined {result.examined}, expired {result.expired}, "
        f"deleted {result.deleted}, failed {result.total_failed}"
    )
    for key in result.failed:
        print(f"  failed: {key}", file=sys.stderr)
    return 1 if result.total_failed else 0


if __name__ == "__main__":
    sys.exit(main())
