"""Wall-clock helpers.

Recovery spans process restarts, so everything here uses the system
clock (``time.time``), never ``time.monotonic``.
"""

from __future__ import annotations

import time
from typing import Callable

Clock = Callable[[], int]

ONE_SECOND_MS = 1000


def now_ms() -> int:
    """Current wall-clock time in whole milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000


def compute_elapsed_seconds(last_time_ms: int, current_ms: int) -> int:
    """Whole seconds from *last_time_ms* to *current_ms*, never negative.

    A clock that moved backwards (or a checkpoint stamped in the future)
    contributes zero.
    """
    return max(0, (current_ms - last_time_ms) // ONE_SECOND_MS)
