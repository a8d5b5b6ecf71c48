"""Main application window for KeepTime."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QStatusBar,
)

from .timer.engine import StopwatchEngine, StopwatchState
from .timer.ticker import SingleShot
from .storage.checkpoints import CheckpointStore
from .ui.stopwatch_widget import StopwatchWidget, format_elapsed
from .ui.styles import build_stylesheet
from .settings import Settings, load_settings, save_settings

logger = logging.getLogger(__name__)

GEOMETRY_SAVE_DELAY_MS = 500


class KeepTimeApp(QMainWindow):
    """Main window: one stopwatch card per configured identifier."""

    def __init__(
        self,
        settings: Settings | None = None,
        store: CheckpointStore | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("KeepTime")
        self.setMinimumSize(320, 200)

        # ── settings ──────────────────────────────────────────────────
        self._settings: Settings = settings if settings is not None else load_settings()

        # ── debounced geometry save ───────────────────────────────────
        self._geometry_saver = SingleShot(self)

        # ── engines ───────────────────────────────────────────────────
        if self._settings.persist and store is None:
            store = CheckpointStore()
        self._engines: list[StopwatchEngine] = [
            StopwatchEngine(
                timer_id,
                initial_value=self._settings.initial_value,
                persist=self._settings.persist,
                store=store,
                tick_interval_ms=self._settings.tick_interval_ms,
                parent=self,
            )
            for timer_id in self._settings.timer_ids
        ]

        # ── central widget ────────────────────────────────────────────
        self.setStyleSheet(build_stylesheet())
        central = QWidget()
        self.setCentralWidget(central)
        root_layout = QVBoxLayout(central)
        root_layout.setContentsMargins(16, 12, 16, 12)
        root_layout.setSpacing(12)

        self._widgets: list[StopwatchWidget] = []
        for engine in self._engines:
            widget = StopwatchWidget(engine, parent=central)
            root_layout.addWidget(widget)
            self._widgets.append(widget)
            engine.state_changed.connect(self._refresh_status)
        root_layout.addStretch()

        # Status bar
        self._status_bar = QStatusBar(self)
        self.setStatusBar(self._status_bar)

        # ── menu bar ──────────────────────────────────────────────────
        self._build_menu_bar()

        # ── restore window state ──────────────────────────────────────
        self._restore_geometry()
        if self._settings.always_on_top:
            self._apply_always_on_top(True)

        self._refresh_status()
        for engine in self._engines:
            if engine.is_running:
                logger.info(
                    "Stopwatch %r resumed at %s",
                    engine.identifier, format_elapsed(engine.elapsed_seconds),
                )

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC
    # ══════════════════════════════════════════════════════════════════

    @property
    def engines(self) -> list[StopwatchEngine]:
        return list(self._engines)

    @property
    def widgets(self) -> list[StopwatchWidget]:
        return list(self._widgets)

    # ══════════════════════════════════════════════════════════════════
    #  MENU BAR
    # ══════════════════════════════════════════════════════════════════

    def _build_menu_bar(self) -> None:
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("File")
        quit_action = QAction("Quit", self)
        quit_action.setShortcut(QKeySequence("Ctrl+Q"))
        quit_action.triggered.connect(self.close)
        file_menu.addAction(quit_action)

        view_menu = menu_bar.addMenu("View")
        self._aot_action = QAction("Always on Top", self)
        self._aot_action.setCheckable(True)
        self._aot_action.setChecked(self._settings.always_on_top)
        self._aot_action.triggered.connect(self._toggle_always_on_top)
        view_menu.addAction(self._aot_action)

        timers_menu = menu_bar.addMenu("Stopwatches")
        reset_all = QAction("Reset All", self)
        reset_all.triggered.connect(self._reset_all)
        timers_menu.addAction(reset_all)

    def _reset_all(self) -> None:
        for engine in self._engines:
            engine.reset()

    # ══════════════════════════════════════════════════════════════════
    #  STATUS
    # ══════════════════════════════════════════════════════════════════

    def _refresh_status(self, *_args) -> None:
        running = sum(1 for e in self._engines if e.state == StopwatchState.RUNNING)
        if running:
            self._status_bar.showMessage(f"{running} running")
        else:
            self._status_bar.showMessage("All paused")

    # ══════════════════════════════════════════════════════════════════
    #  WINDOW STATE
    # ══════════════════════════════════════════════════════════════════

    def _restore_geometry(self) -> None:
        """Restore window position and size from settings."""
        s = self._settings
        if s.window_x is not None and s.window_y is not None:
            self.move(s.window_x, s.window_y)
        if s.window_width and s.window_height:
            self.resize(s.window_width, s.window_height)

    def _save_geometry(self) -> None:
        """Persist current window geometry to settings."""
        if not self.isVisible():
            return
        pos = self.pos()
        size = self.size()
        self._settings.window_x = pos.x()
        self._settings.window_y = pos.y()
        self._settings.window_width = size.width()
        self._settings.window_height = size.height()
        save_settings(self._settings)

    def _schedule_geometry_save(self) -> None:
        """Debounce geometry saves; each move/resize restarts the delay."""
        if hasattr(self, "_geometry_saver"):
            self._geometry_saver.schedule(
                self._save_geometry, GEOMETRY_SAVE_DELAY_MS,
            )

    def _toggle_always_on_top(self) -> None:
        new_val = not self._settings.always_on_top
        self._settings.always_on_top = new_val
        save_settings(self._settings)
        self._aot_action.setChecked(new_val)
        self._apply_always_on_top(new_val)

    def _apply_always_on_top(self, on_top: bool) -> None:
        flags = self.windowFlags()
        if on_top:
            flags |= Qt.WindowType.WindowStaysOnTopHint
        else:
            flags &= ~Qt.WindowType.WindowStaysOnTopHint
        self.setWindowFlags(flags)
        self.show()  # Required: setWindowFlags hides the window

    # ══════════════════════════════════════════════════════════════════
    #  KEYBOARD SHORTCUTS
    # ══════════════════════════════════════════════════════════════════

    def _on_space(self) -> None:
        """Start or pause the first stopwatch."""
        if self._widgets:
            self._widgets[0].toggle()

    def _on_escape(self) -> None:
        """Reset the first stopwatch."""
        if self._engines:
            self._engines[0].reset()

    # ══════════════════════════════════════════════════════════════════
    #  WINDOW EVENTS
    # ══════════════════════════════════════════════════════════════════

    def closeEvent(self, event) -> None:  # type: ignore[override]
        # Running stopwatches keep their checkpoint and catch up on the
        # next launch; nothing to stop here.
        self._geometry_saver.cancel()
        self._save_geometry()
        event.accept()

    def resizeEvent(self, event) -> None:  # type: ignore[override]
        super().resizeEvent(event)
        self._schedule_geometry_save()

    def moveEvent(self, event) -> None:  # type: ignore[override]
        super().moveEvent(event)
        self._schedule_geometry_save()

    def keyPressEvent(self, event) -> None:  # type: ignore[override]
        """Handle Space (start/pause) and Escape (reset) globally."""
        key = event.key()
        if key == Qt.Key.Key_Space and not event.modifiers():
            self._on_space()
            event.accept()
            return
        if key == Qt.Key.Key_Escape:
            self._on_escape()
            event.accept()
            return
        super().keyPressEvent(event)
