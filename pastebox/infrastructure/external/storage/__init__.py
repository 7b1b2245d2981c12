"""Object storage: local filesystem and S3-compatible backends.

StorageFactory creates the backend named by settings.storage_backend.
Implementations are imported lazily inside the factory so that the local
backend does not pull in boto3.

Implementations satisfy IObjectStore (get, put, delete).
"""

from pastebox.application.interfaces.storage import IObjectStore
from pastebox.infrastructure.external.storage.factory import StorageFactory

__all__ = [
    "IObjectStore",
    "StorageFactory",
]
