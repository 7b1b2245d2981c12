"""Object storage factory: creates the local or S3 backend from settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pastebox.application.interfaces.storage import IObjectStore
from pastebox.domain.enums import StorageBackend

if TYPE_CHECKING:
    from pastebox.core.config import Settings


class StorageFactory:
    """Factory for object storage instances based on configuration."""

    @staticmethod
    def create_storage_service(settings: "Settings | None" = None) -> IObjectStore:
        """Create the configured storage backend.

        Args:
            settings: Application settings; if None, uses get_settings().

        Returns:
            LocalStorageService or S3StorageService.

        Raises:
            ValueError: Missing required config.
        """
        from pastebox.core.config import get_settings

        s = settings or get_settings()

        if s.storage_backend is StorageBackend.LOCAL:
            from pastebox.infrastructure.external.storage.local_storage import (
                LocalStorageService,
            )

            return LocalStorageService(storage_root=s.storage_root)

        if s.storage_backend is StorageBackend.S3:
            from pastebox.infrastructure.external.storage.s3_storage import (
                S3StorageService,
            )

            if not s.s3_bucket:
                raise ValueError("S3_BUCKET required for s3 backend")
            return S3StorageService(
                bucket=s.s3_bucket,
                region=s.s3_region,
                endpoint_url=s.s3_endpoint_url,
                access_key=s.s3_access_key,
                secret_key=(
                    s.s3_secret_key.get_secret_value() if s.s3_secret_key else None
                ),
            )

        raise ValueError(
            f"Unknown storage backend: {s.storage_backend}. "
            f"Supported: {', '.join(StorageBackend.values())}"
        )
