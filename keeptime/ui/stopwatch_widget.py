"""Stopwatch card, one per stopwatch identifier.

Layout (top → bottom):
    - Stopwatch name (small caps label)
    - Elapsed time, H:MM:SS
    - Reset / Start-Pause button row
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QFrame,
)

from ..timer.engine import StopwatchEngine, StopwatchState
from .styles import state_color


def format_elapsed(seconds: int) -> str:
    """``3725`` → ``"1:02:05"``.  Hours are not capped."""
    h, rem = divmod(max(0, seconds), 3600)
    m, s = divmod(rem, 60)
    return f"{h}:{m:02d}:{s:02d}"


class StopwatchWidget(QWidget):
    """Displays one :class:`StopwatchEngine` and its controls."""

    def __init__(
        self,
        engine: StopwatchEngine,
        title: str | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._engine = engine
        self._title = title or engine.identifier or "Stopwatch"
        self._build_ui()
        self._connect_signals()
        self._on_state_changed(engine.state)

    @property
    def engine(self) -> StopwatchEngine:
        return self._engine

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)

        card = QFrame(self)
        card.setObjectName("card")
        root.addWidget(card)

        layout = QVBoxLayout(card)
        layout.setContentsMargins(24, 16, 24, 18)
        layout.setSpacing(8)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._name_label = QLabel(self._title.upper(), card)
        self._name_label.setObjectName("timerName")
        self._name_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._name_label)

        self._time_label = QLabel(card)
        self._time_label.setObjectName("timeLabel")
        self._time_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._time_label)

        btn_row = QHBoxLayout()
        btn_row.setSpacing(12)
        btn_row.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._reset_btn = QPushButton("Reset", card)
        self._reset_btn.setObjectName("resetButton")

        self._start_pause_btn = QPushButton("Start", card)
        self._start_pause_btn.setObjectName("toggleButton")

        btn_row.addWidget(self._reset_btn)
        btn_row.addWidget(self._start_pause_btn)
        layout.addLayout(btn_row)

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._start_pause_btn.clicked.connect(self.toggle)
        self._reset_btn.clicked.connect(self._engine.reset)

        self._engine.elapsed_changed.connect(self._refresh_display)
        self._engine.state_changed.connect(self._on_state_changed)

    # ── slots ─────────────────────────────────────────────────────────────

    def toggle(self) -> None:
        """Start when paused, pause when running."""
        if self._engine.is_running:
            self._engine.pause()
        else:
            self._engine.start()

    def _on_state_changed(self, state: StopwatchState) -> None:
        if state == StopwatchState.RUNNING:
            self._start_pause_btn.setText("Pause")
        elif self._engine.elapsed_seconds != self._engine.initial_value:
            self._start_pause_btn.setText("Resume")
        else:
            self._start_pause_btn.setText("Start")
        self._time_label.setStyleSheet(f"color: {state_color(state)};")
        self._refresh_display(self._engine.elapsed_seconds)

    def _refresh_display(self, seconds: int) -> None:
        self._time_label.setText(format_elapsed(seconds))

    # ── test / accessibility helpers ──────────────────────────────────────

    @property
    def time_text(self) -> str:
        return self._time_label.text()

    @property
    def button_text(self) -> str:
        return self._start_pause_btn.text()
