"""ORM models. Importing this package registers every table on Base.metadata."""

from pastebox.infrastructure.persistence.models.paste import Paste

__all__ = ["Paste"]
