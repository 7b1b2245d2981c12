"""Paste ORM model. One row per paste; the key doubles as the storage object name."""

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from pastebox.infrastructure.persistence.database import Base
from pastebox.shared.utils.datetime import utc_now


class Paste(Base):
    """Paste entity. Table: paste. Rows are inserted and deleted, never updated."""

    __tablename__ = "paste"

    key: Mapped[str] = mapped_column(String, primary_key=True)
    delete_key: Mapped[str | None] = mapped_column(String, nullable=True)
    file_name: Mapped[str] = mapped_column(String, nullable=False)
    # Stamped by the application clock so expiry math and inserts agree.
    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now, index=True
    )
