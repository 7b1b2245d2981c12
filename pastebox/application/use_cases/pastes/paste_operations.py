"""Paste operations: create, fetch, delete and expiry purge over metadata + object storage."""

from __future__ import annotations

import asyncio
import hmac
import logging
import secrets
from collections.abc import Awaitable, Callable
from datetime import datetime
from typing import BinaryIO

from pastebox.application.dtos.paste import PasteRecord, PurgeResult
from pastebox.application.interfaces.repositories import IPasteRepository
from pastebox.application.interfaces.storage import IObjectStore
from pastebox.application.services.key_generator import KeyGenerator
from pastebox.domain.enums import ErrorKind
from pastebox.domain.exceptions import (
    ExpirationClockException,
    MissingDeleteKeyException,
    PasteException,
    PasteNotFoundException,
    WrongDeleteKeyException,
)
from pastebox.shared.utils.datetime import ensure_utc, utc_now

logger = logging.getLogger(__name__)


def _generate_delete_key() -> str:
    return secrets.token_urlsafe(32)


async def _read_all(data: bytes | BinaryIO) -> bytes:
    """Return data as bytes; file objects are read in a worker thread."""
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    return await asyncio.to_thread(data.read)


class PasteService:
    """Paste lifecycle over a metadata repository and an object store.

    Create writes the record first, then the bytes; if the byte write fails
    the record is deleted again before the error propagates. Delete and
    purge remove the object first, then the record, so a half-finished
    removal leaves a record without content. Fetch reports that state as
    not found and logs it as an anomaly.

    Expiry is derived, never stored: a paste whose age exceeds
    expiration_secs answers exactly like a missing one, whether or not the
    sweep has removed it yet.
    """

    def __init__(
        self,
        pastes: IPasteRepository,
        storage: IObjectStore,
        key_generator: KeyGenerator,
        *,
        expiration_secs: int | None = None,
        issue_delete_keys: bool = True,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.pastes = pastes
        self.storage = storage
        self.key_generator = key_generator
        self.expiration_secs = expiration_secs
        self.issue_delete_keys = issue_delete_keys
        self._clock = clock

    async def create(self, file_name: str, data: bytes | BinaryIO) -> PasteRecord:
        """Store a new paste. The returned record is the only place the delete key is surfaced."""
        body = await _read_all(data)
        key = self.key_generator.generate()
        delete_key = _generate_delete_key() if self.issue_delete_keys else None

        logger.info("new paste: key=%r file=%r", key, file_name)
        record = await self.pastes.create_paste(key, delete_key, file_name)
        try:
            size = await self.storage.put(key, body)
        except Exception:
            logger.error("object write failed for %r; removing its metadata", key)
            try:
                await self.pastes.delete_by_key(key)
            except PasteException:
                logger.exception("could not remove metadata for %r after failed write", key)
            raise
        logger.info("size of %r: %d bytes", key, size)
        return record

    async def get_record(self, key: str) -> PasteRecord:
        """Return the live record for key; expired pastes are not found."""
        record = await self.pastes.get_by_key(key)
        if record is None or self.is_expired(record):
            raise PasteNotFoundException(key)
        return record

    async def fetch(self, key: str) -> bytes:
        """Return paste content."""
        _, data = await self.open(key)
        return data

    async def open(self, key: str) -> tuple[PasteRecord, bytes]:
        """Return the live record together with its content."""
        record = await self.get_record(key)
        try:
            data = await self.storage.get(record.key)
        except PasteException as e:
            if e.kind is not ErrorKind.NOT_FOUND:
                raise
            logger.warning(
                "consistency anomaly: metadata for %r exists but its object is missing", key
            )
            raise PasteNotFoundException(key) from e
        return record, data

    async def delete(self, key: str, supplied_delete_key: str | None) -> None:
        """Delete a paste after checking the caller's delete key.

        A paste created without a delete key can never be deleted this way.
        """
        record = await self.get_record(key)
        if record.delete_key is None:
            raise WrongDeleteKeyException(key)
        if supplied_delete_key is None:
            raise MissingDeleteKeyException(key)
        if not hmac.compare_digest(
            supplied_delete_key.encode(), record.delete_key.encode()
        ):
            raise WrongDeleteKeyException(key)
        await self._remove(record.key)
        logger.info("deleted paste %r", key)

    def is_expired(self, record: PasteRecord) -> bool:
        """Return True if the paste is past the expiration threshold.

        Raises ExpirationClockException when the timestamp is in the future.
        """
        if self.expiration_secs is None:
            return False
        return self._is_expired(record, self._clock(), self.expiration_secs)

    async def purge_expired(
        self,
        threshold_secs: int | None,
        *,
        commit: Callable[[], Awaitable[None]] | None = None,
    ) -> PurgeResult:
        """Remove every paste older than threshold_secs.

        Each record is removed independently; a failure is logged and
        recorded in the result and the sweep moves on. None disables the
        purge without touching the store.

        When commit is given it is awaited after the listing and after each
        expired record, so every removal is durable on its own and the
        database is not held for the whole sweep.
        """
        if threshold_secs is None:
            logger.warning("tried to purge expired, but no expiration limit was set")
            return PurgeResult(examined=0, expired=0, deleted=0)

        records = await self.pastes.list_all()
        if commit is not None:
            await commit()
        now = self._clock()
        expired = 0
        deleted = 0
        failed: list[str] = []
        for record in records:
            try:
                if not self._is_expired(record, now, threshold_secs):
                    continue
                expired += 1
                logger.info("deleting expired paste: %s", record.key)
                await self._remove(record.key)
                deleted += 1
            except PasteException as e:
                logger.error("failed to purge paste %r: %s", record.key, e.message)
                failed.append(record.key)
            if commit is not None:
                await commit()

        if deleted > 0:
            logger.info("deleted %d pastes", deleted)
        return PurgeResult(
            examined=len(records),
            expired=expired,
            deleted=deleted,
            failed=tuple(failed),
        )

    async def _remove(self, key: str) -> None:
        """Delete object then metadata. An already-missing object is a soft success."""
        try:
            await self.storage.delete(key)
        except PasteException as e:
            if e.kind is not ErrorKind.NOT_FOUND:
                raise
            logger.warning(
                "consistency anomaly: object for %r was already gone; removing metadata", key
            )
        await self.pastes.delete_by_key(key)

    @staticmethod
    def _is_expired(record: PasteRecord, now: datetime, threshold_secs: int) -> bool:
        timestamp = ensure_utc(record.timestamp)
        elapsed = (now - timestamp).total_seconds()
        if elapsed < 0:
            raise ExpirationClockException(record.key, elapsed)
        return int(elapsed) > threshold_secs
