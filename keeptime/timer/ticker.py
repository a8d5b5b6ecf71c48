"""Tick sources built on ``QTimer``.

Both classes keep the callback in a single cell that is read when the
timer fires, so replacing the callback while a timer is pending never
leaves the old one wired up.  Passing ``None`` as the interval/delay
stops the timer.
"""

from __future__ import annotations

from typing import Callable

from PyQt6.QtCore import QObject, QTimer


def _noop() -> None:
    return None


class IntervalTicker(QObject):
    """Periodic tick source.

    ``subscribe(cb, 1000)`` starts ticking every second; calling it again
    with the same interval only swaps the callback (the running period is
    not restarted); ``subscribe(cb, None)`` stops.
    """

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._callback: Callable[[], None] = _noop
        self._interval_ms: int | None = None
        self._qt_timer = QTimer(self)
        self._qt_timer.timeout.connect(self._fire)

    @property
    def interval_ms(self) -> int | None:
        return self._interval_ms

    @property
    def is_active(self) -> bool:
        return self._qt_timer.isActive()

    def subscribe(
        self, callback: Callable[[], None], interval_ms: int | None
    ) -> None:
        self._callback = callback
        if interval_ms is None:
            self.stop()
            return
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")
        if self._qt_timer.isActive() and interval_ms == self._interval_ms:
            return
        self._interval_ms = interval_ms
        self._qt_timer.setInterval(interval_ms)
        self._qt_timer.start()

    def stop(self) -> None:
        self._qt_timer.stop()
        self._interval_ms = None

    def _fire(self) -> None:
        self._callback()


class SingleShot(QObject):
    """Deferred one-off callback.

    ``schedule(cb, 500)`` runs the latest callback once, 500 ms from now;
    scheduling again restarts the countdown; ``schedule(cb, None)`` or
    ``cancel()`` drops the pending call.
    """

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._callback: Callable[[], None] = _noop
        self._qt_timer = QTimer(self)
        self._qt_timer.setSingleShot(True)
        self._qt_timer.timeout.connect(self._fire)

    @property
    def is_pending(self) -> bool:
        return self._qt_timer.isActive()

    def schedule(
        self, callback: Callable[[], None], delay_ms: int | None
    ) -> None:
        self._callback = callback
        if delay_ms is None:
            self.cancel()
            return
        self._qt_timer.start(max(0, delay_ms))

    def cancel(self) -> None:
        self._qt_timer.stop()

    def _fire(self) -> None:
        self._callback()
