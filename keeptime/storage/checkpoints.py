"""Stopwatch checkpoints: the persisted ``(elapsed, running, time)`` triple.

Storage keys
------------
Every stopwatch identifier maps to exactly one key::

    keeptime.stopwatch.id.<identifier>     explicit identifier
    keeptime.stopwatch.default             identifier is ``None``

Explicit keys always carry the ``id.`` segment, so no identifier can
land on the default slot.  All stopwatches created without an
identifier share that slot and overwrite one another; pass an
identifier whenever more than one persisted stopwatch is alive.

Wire format
-----------
Compact JSON with sorted keys::

    {"checkpoint_time":1718000000000,"elapsed_seconds":42,"is_running":true}

A payload that fails to decode, or whose fields have the wrong types, is
reported as absent.  Write failures are logged and dropped.
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass, asdict
from typing import Protocol

logger = logging.getLogger(__name__)

STOPWATCH_STORAGE_PREFIX = "keeptime.stopwatch."
DEFAULT_STOPWATCH_ID = "default"


class KeyValueStore(Protocol):
    def get(self, key: str) -> bytes | None: ...

    def set(self, key: str, value: bytes) -> None: ...


@dataclass(frozen=True)
class CheckpointState:
    """Snapshot of a stopwatch at ``checkpoint_time`` (ms since epoch)."""

    elapsed_seconds: int
    is_running: bool
    checkpoint_time: int

    def to_bytes(self) -> bytes:
        return json.dumps(
            asdict(self), separators=(",", ":"), sort_keys=True
        ).encode("utf-8")

    @classmethod
    def from_bytes(cls, data: bytes) -> CheckpointState | None:
        """Decode *data*, or return ``None`` if it is not a valid checkpoint."""
        try:
            raw = json.loads(data.decode("utf-8"))
        except (UnicodeDecodeError, ValueError, RecursionError):
            return None
        if not isinstance(raw, dict):
            return None

        elapsed = _as_whole_number(raw.get("elapsed_seconds"))
        running = raw.get("is_running")
        when = raw.get("checkpoint_time")

        if elapsed is None or elapsed < 0:
            return None
        if not isinstance(running, bool):
            return None
        if not _is_finite_number(when):
            return None
        return cls(
            elapsed_seconds=elapsed,
            is_running=running,
            checkpoint_time=int(when),
        )


def _is_finite_number(value: object) -> bool:
    # bool is an int subclass; true/false is not a timestamp
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def _as_whole_number(value: object) -> int | None:
    if not _is_finite_number(value):
        return None
    if isinstance(value, float):
        if not value.is_integer():
            return None
        return int(value)
    return value  # type: ignore[return-value]


class CheckpointStore:
    """Best-effort adapter between stopwatch identifiers and a key-value store.

    ``read`` and ``write`` never raise: a broken store behaves like an
    empty one that forgets everything written to it.
    """

    def __init__(
        self,
        kv: KeyValueStore | None = None,
        *,
        prefix: str = STOPWATCH_STORAGE_PREFIX,
    ) -> None:
        if kv is None:
            from .kv import SqlKeyValueStore
            kv = SqlKeyValueStore()
        self._kv = kv
        self._prefix = prefix

    @property
    def prefix(self) -> str:
        return self._prefix

    def storage_key(self, identifier: str | None) -> str:
        if identifier is None:
            return f"{self._prefix}{DEFAULT_STOPWATCH_ID}"
        return f"{self._prefix}id.{identifier}"

    def read(self, identifier: str | None) -> CheckpointState | None:
        key = self.storage_key(identifier)
        try:
            raw = self._kv.get(key)
        except Exception:
            logger.warning("Could not read checkpoint %r", key, exc_info=True)
            return None
        if raw is None:
            return None

        state = CheckpointState.from_bytes(raw)
        if state is None:
            logger.info("Ignoring malformed checkpoint under %r", key)
        return state

    def write(self, identifier: str | None, state: CheckpointState) -> None:
        key = self.storage_key(identifier)
        try:
            self._kv.set(key, state.to_bytes())
        except Exception:
            logger.warning("Could not write checkpoint %r", key, exc_info=True)
