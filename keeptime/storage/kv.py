"""Key-value store on top of the SQLite database.

Plain get/set-by-key semantics with opaque ``bytes`` payloads.  Errors
from the database propagate; callers that need best-effort behaviour
(the checkpoint adapter) catch them at their own boundary.
"""

from __future__ import annotations

from datetime import datetime

from .db import get_session
from .models import KeyValue


class SqlKeyValueStore:
    """Durable ``key -> bytes`` mapping backed by the ``kv_entries`` table."""

    def get(self, key: str) -> bytes | None:
        with get_session() as db:
            record = db.get(KeyValue, key)
            if record is None:
                return None
            return bytes(record.value)

    def set(self, key: str, value: bytes) -> None:
        with get_session() as db:
            record = db.get(KeyValue, key)
            if record is None:
                db.add(KeyValue(key=key, value=value, updated_at=datetime.utcnow()))
            else:
                record.value = value
                record.updated_at = datetime.utcnow()
