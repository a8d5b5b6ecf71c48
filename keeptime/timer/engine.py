"""Stopwatch state machine for KeepTime.

States
------
PAUSED    Not accumulating time (initial state unless recovered running).
RUNNING   Accumulating one second per tick.

Transitions
-----------
PAUSED → RUNNING     (start)
RUNNING → PAUSED     (pause)
Any → PAUSED         (reset, elapsed back to the initial value)

Checkpoints
-----------
With ``persist=True`` every change of ``(elapsed_seconds, is_running)``
writes one checkpoint stamped with the current wall-clock time: each
tick, each transition, and once at construction.  On construction the
last checkpoint for the identifier is read back:

- paused checkpoint  → elapsed is restored exactly;
- running checkpoint → elapsed is restored plus the whole seconds that
  passed since the checkpoint was written, and the stopwatch keeps
  running.

The tick is only there to move the display along between checkpoints.
Missed ticks (sleep, a closed window) are made up for by the recovery
arithmetic, not by the tick source.
"""

from __future__ import annotations

import logging
from enum import Enum

from PyQt6.QtCore import QObject, pyqtSignal

from ..storage.checkpoints import CheckpointState, CheckpointStore
from .clock import Clock, ONE_SECOND_MS, compute_elapsed_seconds, now_ms
from .ticker import IntervalTicker

logger = logging.getLogger(__name__)


# ── enums ─────────────────────────────────────────────────────────────────


class StopwatchState(Enum):
    PAUSED = "paused"
    RUNNING = "running"


# ── constants ─────────────────────────────────────────────────────────────

DEFAULT_INITIAL_VALUE = 0
DEFAULT_PERSIST = False
TICK_INTERVAL_MS = ONE_SECOND_MS


# ── engine ────────────────────────────────────────────────────────────────


class StopwatchEngine(QObject):
    """Qt-based stopwatch with checkpoint persistence and recovery.

    Signals
    -------
    tick(elapsed_seconds: int)
        Emitted after every tick while running.
    state_changed(new_state: StopwatchState)
        Emitted on start, pause and reset.
    elapsed_changed(elapsed_seconds: int)
        Emitted whenever the elapsed value changes (tick or reset).
    """

    tick = pyqtSignal(int)
    state_changed = pyqtSignal(object)
    elapsed_changed = pyqtSignal(int)

    def __init__(
        self,
        identifier: str | None = None,
        *,
        initial_value: int = DEFAULT_INITIAL_VALUE,
        persist: bool = DEFAULT_PERSIST,
        store: CheckpointStore | None = None,
        clock: Clock = now_ms,
        tick_interval_ms: int = TICK_INTERVAL_MS,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        if initial_value < 0:
            raise ValueError(f"initial_value must be >= 0, got {initial_value}")
        if tick_interval_ms <= 0:
            raise ValueError(
                f"tick_interval_ms must be positive, got {tick_interval_ms}"
            )

        # ── configuration ─────────────────────────────────────────────
        self._identifier: str | None = identifier
        self._initial_value: int = initial_value
        self._persist: bool = persist
        self._clock: Clock = clock
        self._tick_interval_ms: int = tick_interval_ms
        self._store: CheckpointStore | None = None
        if persist:
            self._store = store if store is not None else CheckpointStore()

        # ── live state (seeded by recovery) ───────────────────────────
        self._elapsed: int = initial_value
        self._state: StopwatchState = StopwatchState.PAUSED
        self._recover()

        # ── tick source ───────────────────────────────────────────────
        self._ticker = IntervalTicker(self)
        self._sync_ticker()
        self._checkpoint()

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def identifier(self) -> str | None:
        return self._identifier

    @property
    def initial_value(self) -> int:
        return self._initial_value

    @property
    def persist(self) -> bool:
        return self._persist

    @property
    def state(self) -> StopwatchState:
        return self._state

    @property
    def elapsed_seconds(self) -> int:
        """Seconds accumulated so far (in-memory, never touches the store)."""
        return self._elapsed

    @property
    def is_running(self) -> bool:
        return self._state == StopwatchState.RUNNING

    @property
    def tick_interval_ms(self) -> int:
        return self._tick_interval_ms

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def start(self) -> None:
        """Begin or resume counting.  No-op when already running."""
        if self.is_running:
            return
        self._set_state(StopwatchState.RUNNING)

    def pause(self) -> None:
        """Stop counting, keeping the elapsed value.  No-op when paused."""
        if not self.is_running:
            return
        self._set_state(StopwatchState.PAUSED)

    def reset(self) -> None:
        """Return to the initial value and pause.  Always checkpoints."""
        changed = self._elapsed != self._initial_value
        self._elapsed = self._initial_value
        self._state = StopwatchState.PAUSED
        self._sync_ticker()
        self._checkpoint()
        if changed:
            self.elapsed_changed.emit(self._elapsed)
        self.state_changed.emit(self._state)

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL — timer mechanics
    # ══════════════════════════════════════════════════════════════════

    def _on_tick(self) -> None:
        if not self.is_running:
            return
        self._elapsed += 1
        self._checkpoint()
        self.tick.emit(self._elapsed)
        self.elapsed_changed.emit(self._elapsed)

    def _set_state(self, new_state: StopwatchState) -> None:
        self._state = new_state
        self._sync_ticker()
        self._checkpoint()
        self.state_changed.emit(new_state)

    def _sync_ticker(self) -> None:
        if self.is_running:
            self._ticker.subscribe(self._on_tick, self._tick_interval_ms)
        else:
            self._ticker.subscribe(self._on_tick, None)

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL — checkpoint persistence
    # ══════════════════════════════════════════════════════════════════

    def _recover(self) -> None:
        if self._store is None:
            return
        stored = self._store.read(self._identifier)
        if stored is None:
            return

        if stored.is_running:
            gap = compute_elapsed_seconds(stored.checkpoint_time, self._clock())
            self._elapsed = stored.elapsed_seconds + gap
            self._state = StopwatchState.RUNNING
        else:
            gap = 0
            self._elapsed = stored.elapsed_seconds
            self._state = StopwatchState.PAUSED
        logger.debug(
            "Recovered stopwatch %r: elapsed=%d running=%s (+%ds)",
            self._identifier, self._elapsed, self.is_running, gap,
        )

    def _checkpoint(self) -> None:
        if self._store is None:
            return
        self._store.write(
            self._identifier,
            CheckpointState(
                elapsed_seconds=self._elapsed,
                is_running=self.is_running,
                checkpoint_time=self._clock(),
            ),
        )
