"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Cross-field rules (storage backend parameters,
expiration threshold) are validated at load time.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pastebox.domain.enums import StorageBackend


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    Everything has a development default; a local SQLite database and a
    filesystem storage root under the working directory.
    """

    # App
    app_name: str = "pastebox"
    app_version: str = "0.1.0"
    debug: bool = False
    base_url: str = "http://localhost:8000"

    # Database
    database_url: str = "sqlite+aiosqlite:///./pastebox.db"
    database_echo: bool = False
    # Run Base.metadata.create_all at startup instead of relying on Alembic.
    database_auto_create: bool = False
    db_pool_size: int | None = None
    db_max_overflow: int | None = None

    # Storage
    storage_backend: StorageBackend = StorageBackend.LOCAL
    storage_root: str = "./data/pastes"
    s3_bucket: str | None = None
    s3_region: str = "us-east-1"
    s3_endpoint_url: str | None = None
    s3_access_key: str | None = None
    s3_secret_key: SecretStr | None = None

    # Limits
    max_upload_size: int = 10 * 1024 * 1024  # 10MB
    # Unset disables expiry entirely (no lazy check, sweep is a no-op).
    expiration_secs: int | None = None
    enable_delete_keys: bool = True

    # Word lists for key generation (line-delimited)
    adjectives_file: str = "words/adjectives.txt"
    nouns_file: str = "words/nouns.txt"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_storage_and_limits(self) -> "Settings":
        """Validate storage backend parameters and limits."""
        if self.storage_backend is StorageBackend.S3 and not self.s3_bucket:
            raise ValueError(
                "s3_bucket is required when storage_backend is 's3'. "
                "Set S3_BUCKET environment variable or update .env file."
            )
        if self.storage_backend is StorageBackend.LOCAL and not self.storage_root:
            raise ValueError("STORAGE_ROOT required for local backend")
        if self.expiration_secs is not None and self.expiration_secs < 1:
            raise ValueError(
                f"EXPIRATION_SECS must be a positive number of seconds, got {self.expiration_secs}. "
                "Leave it unset to disable expiry."
            )
        if self.max_upload_size < 1:
            raise ValueError("MAX_UPLOAD_SIZE must be positive")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.
    """
    return Settings()
