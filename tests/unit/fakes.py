"""In-memory repository and object store for service tests."""

from datetime import datetime, timedelta, timezone

from pastebox.application.dtos.paste import PasteRecord
from pastebox.domain.exceptions import BackendException
from pastebox.infrastructure.exceptions import StorageBackendError, StorageNotFoundError

T0 = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


class FakeClock:
    """Settable clock; advance() moves it forward."""

    def __init__(self, now: datetime = T0) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


class InMemoryPasteRepository:
    def __init__(self, clock: FakeClock) -> None:
        self.clock = clock
        self.rows: dict[str, PasteRecord] = {}
        self.fail_delete_for: set[str] = set()

    async def get_by_key(self, key: str) -> PasteRecord | None:
        return self.rows.get(key)

    async def list_all(self) -> list[PasteRecord]:
        return sorted(self.rows.values(), key=lambda r: r.timestamp)

    async def create_paste(
        self, key: str, delete_key: str | None, file_name: str
    ) -> PasteRecord:
        if key in self.rows:
            raise BackendException("database", f"UNIQUE constraint failed: paste.key ({key})")
        record = PasteRecord(
            key=key, delete_key=delete_key, file_name=file_name, timestamp=self.clock()
        )
        self.rows[key] = record
        return record

    async def delete_by_key(self, key: str) -> bool:
        if key in self.fail_delete_for:
            raise BackendException("database", "database is locked")
        return self.rows.pop(key, None) is not None


class InMemoryObjectStore:
    def __init__(self) -> None:
        self.objects: dict[str, bytes] = {}
        self.fail_put = False
        self.fail_delete_for: set[str] = set()

    async def get(self, key: str) -> bytes:
        if key not in self.objects:
            raise StorageNotFoundError(key)
        return self.objects[key]

    async def put(self, key: str, data: bytes) -> int:
        if self.fail_put:
            raise StorageBackendError(key, "put", "connection reset")
        self.objects[key] = data
        return len(data)

    async def delete(self, key: str) -> None:
        if key in self.fail_delete_for:
            raise StorageBackendError(key, "delete", "connection reset")
        if key not in self.objects:
            raise StorageNotFoundError(key)
        del self.objects[key]
