"""Pytest configuration and fixtures for pastebox.

Every test that touches the app or the database gets its own SQLite file
and storage root under tmp_path. Environment is set before pastebox is
imported so module-level create_app() sees test settings.
"""

import os
import tempfile
from pathlib import Path

_ROOT = Path(__file__).resolve().parents[1]
_BOOT_DIR = Path(tempfile.mkdtemp(prefix="pastebox-tests-"))

os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_BOOT_DIR / 'boot.db'}"
os.environ["STORAGE_BACKEND"] = "local"
os.environ["STORAGE_ROOT"] = str(_BOOT_DIR / "pastes")
os.environ["ADJECTIVES_FILE"] = str(_ROOT / "words" / "adjectives.txt")
os.environ["NOUNS_FILE"] = str(_ROOT / "words" / "nouns.txt")
os.environ["BASE_URL"] = "http://test"
os.environ.pop("EXPIRATION_SECS", None)
os.environ.pop("DEBUG", None)

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

import pastebox.infrastructure.persistence.database as database  # noqa: E402
from pastebox.api.dependencies import clear_dependency_caches  # noqa: E402
from pastebox.core.config import get_settings  # noqa: E402
from pastebox.main import create_app  # noqa: E402

WORDS_DIR = _ROOT / "words"


@pytest.fixture
async def app_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Point settings at a fresh database and storage root; create tables.

    Returns the storage root. Tests may monkeypatch more env vars and call
    get_settings.cache_clear(); settings are read per request.
    """
    storage_root = tmp_path / "pastes"
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    monkeypatch.setenv("STORAGE_ROOT", str(storage_root))
    get_settings.cache_clear()
    clear_dependency_caches()
    await database.dispose_engine()
    await database.init_models()
    yield storage_root
    await database.dispose_engine()
    get_settings.cache_clear()
    clear_dependency_caches()


@pytest.fixture
async def client(app_env: Path) -> AsyncClient:
    """Async HTTP client against a freshly built FastAPI app (ASGI)."""
    transport = ASGITransport(app=create_app())
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def db_session(app_env: Path) -> AsyncSession:
    """Database session for repository tests. Rolls back after test."""
    assert database.AsyncSessionLocal is not None
    async with database.AsyncSessionLocal() as session:
        yield session
        await session.rollback()
