"""Tests for the QTimer-backed tick sources.

Timers are never left to fire on their own; ``_fire`` is invoked
directly to stand in for a QTimer timeout, so no event loop is needed.
"""

from __future__ import annotations

import pytest

from keeptime.timer.ticker import IntervalTicker, SingleShot


@pytest.fixture
def ticker(qapp):
    return IntervalTicker()


@pytest.fixture
def single_shot(qapp):
    return SingleShot()


# ═══════════════════════════════════════════════════════════════════════
#  INTERVAL TICKER
# ═══════════════════════════════════════════════════════════════════════


class TestIntervalTicker:
    def test_inactive_by_default(self, ticker):
        assert ticker.is_active is False
        assert ticker.interval_ms is None

    def test_subscribe_starts(self, ticker):
        ticker.subscribe(lambda: None, 1000)
        assert ticker.is_active is True
        assert ticker.interval_ms == 1000

    def test_subscribe_none_stops(self, ticker):
        ticker.subscribe(lambda: None, 1000)
        ticker.subscribe(lambda: None, None)
        assert ticker.is_active is False
        assert ticker.interval_ms is None

    def test_fire_calls_callback(self, ticker):
        calls = []
        ticker.subscribe(lambda: calls.append(1), 1000)
        ticker._fire()
        ticker._fire()
        assert calls == [1, 1]

    def test_latest_callback_wins(self, ticker):
        calls = []
        ticker.subscribe(lambda: calls.append("old"), 1000)
        ticker.subscribe(lambda: calls.append("new"), 1000)
        ticker._fire()
        assert calls == ["new"]

    def test_same_interval_swaps_callback_only(self, ticker):
        calls = []
        ticker.subscribe(lambda: calls.append("old"), 500)
        ticker.subscribe(lambda: calls.append("new"), 500)
        assert ticker.is_active is True
        ticker._fire()
        assert calls == ["new"]

    def test_changing_interval_restarts(self, ticker):
        ticker.subscribe(lambda: None, 1000)
        ticker.subscribe(lambda: None, 250)
        assert ticker.interval_ms == 250
        assert ticker._qt_timer.interval() == 250

    def test_stop(self, ticker):
        ticker.subscribe(lambda: None, 1000)
        ticker.stop()
        assert ticker.is_active is False

    def test_non_positive_interval_rejected(self, ticker):
        with pytest.raises(ValueError):
            ticker.subscribe(lambda: None, 0)

    def test_fire_without_subscription_is_harmless(self, ticker):
        ticker._fire()


# ═══════════════════════════════════════════════════════════════════════
#  SINGLE SHOT
# ═══════════════════════════════════════════════════════════════════════


class TestSingleShot:
    def test_schedule_sets_pending(self, single_shot):
        single_shot.schedule(lambda: None, 500)
        assert single_shot.is_pending is True

    def test_none_delay_cancels(self, single_shot):
        single_shot.schedule(lambda: None, 500)
        single_shot.schedule(lambda: None, None)
        assert single_shot.is_pending is False

    def test_cancel(self, single_shot):
        single_shot.schedule(lambda: None, 500)
        single_shot.cancel()
        assert single_shot.is_pending is False

    def test_latest_callback_runs(self, single_shot):
        calls = []
        single_shot.schedule(lambda: calls.append("first"), 500)
        single_shot.schedule(lambda: calls.append("second"), 500)
        single_shot._fire()
        assert calls == ["second"]

    def test_single_shot_flag(self, single_shot):
        assert single_shot._qt_timer.isSingleShot() is True

    def test_negative_delay_clamped(self, single_shot):
        single_shot.schedule(lambda: None, -50)
        assert single_shot._qt_timer.interval() == 0
