"""SQLAlchemy ORM models for KeepTime."""

from datetime import datetime
from sqlalchemy import Column, String, LargeBinary, DateTime
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


class KeyValue(Base):
    """One opaque payload per storage key (stopwatch checkpoints live here)."""

    __tablename__ = "kv_entries"

    key = Column(String(255), primary_key=True)
    value = Column(LargeBinary, nullable=False)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    def __repr__(self) -> str:
        return f"<KeyValue key={self.key} bytes={len(self.value or b'')}>"
