"""Paste repository. Returns application DTOs; wraps driver errors in BackendException."""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from pastebox.application.dtos.paste import PasteRecord
from pastebox.domain.exceptions import BackendException
from pastebox.infrastructure.persistence.models.paste import Paste
from pastebox.shared.utils.datetime import ensure_utc, utc_now


def _paste_to_record(p: Paste) -> PasteRecord:
    """Map ORM Paste to application PasteRecord."""
    return PasteRecord(
        key=p.key,
        delete_key=p.delete_key,
        file_name=p.file_name,
        timestamp=ensure_utc(p.timestamp),
    )


class PasteRepository:
    """Paste metadata store over an AsyncSession.

    The session's transaction belongs to the caller (request dependency or
    script). delete_by_key runs inside a SAVEPOINT so one failed delete
    does not poison the rest of a sweep.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_by_key(self, key: str) -> PasteRecord | None:
        try:
            result = await self.db.execute(select(Paste).where(Paste.key == key))
        except SQLAlchemyError as e:
            raise BackendException("database", str(e)) from e
        row = result.scalar_one_or_none()
        return _paste_to_record(row) if row else None

    async def list_all(self) -> list[PasteRecord]:
        """Return every paste, oldest first."""
        try:
            result = await self.db.execute(select(Paste).order_by(Paste.timestamp))
        except SQLAlchemyError as e:
            raise BackendException("database", str(e)) from e
        return [_paste_to_record(p) for p in result.scalars().all()]

    async def create_paste(
        self, key: str, delete_key: str | None, file_name: str
    ) -> PasteRecord:
        """Insert a paste stamped with the current UTC time and flush it."""
        orm = Paste(
            key=key,
            delete_key=delete_key,
            file_name=file_name,
            timestamp=utc_now(),
        )
        try:
            self.db.add(orm)
            await self.db.flush()
        except SQLAlchemyError as e:
            raise BackendException("database", str(e)) from e
        return _paste_to_record(orm)

    async def delete_by_key(self, key: str) -> bool:
        """Delete the paste row. Returns False if no row matched."""
        try:
            async with self.db.begin_nested():
                result = await self.db.execute(delete(Paste).where(Paste.key == key))
        except SQLAlchemyError as e:
            raise BackendException("database", str(e)) from e
        return bool(result.rowcount)
