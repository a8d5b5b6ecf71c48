"""Timer package."""

from .engine import (
    StopwatchEngine,
    StopwatchState,
    DEFAULT_INITIAL_VALUE,
    DEFAULT_PERSIST,
    TICK_INTERVAL_MS,
)
from .clock import now_ms, compute_elapsed_seconds
from .ticker import IntervalTicker, SingleShot

__all__ = [
    "StopwatchEngine",
    "StopwatchState",
    "DEFAULT_INITIAL_VALUE",
    "DEFAULT_PERSIST",
    "TICK_INTERVAL_MS",
    "now_ms",
    "compute_elapsed_seconds",
    "IntervalTicker",
    "SingleShot",
]
