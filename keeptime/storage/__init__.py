"""Storage package."""

from .db import get_session, init_db, configure_engine
from .models import KeyValue
from .kv import SqlKeyValueStore
from .checkpoints import (
    CheckpointState,
    CheckpointStore,
    STOPWATCH_STORAGE_PREFIX,
    DEFAULT_STOPWATCH_ID,
)

__all__ = [
    "get_session",
    "init_db",
    "configure_engine",
    "KeyValue",
    "SqlKeyValueStore",
    "CheckpointState",
    "CheckpointStore",
    "STOPWATCH_STORAGE_PREFIX",
    "DEFAULT_STOPWATCH_ID",
]
