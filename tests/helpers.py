"""Shared test helpers for KeepTime."""

from keeptime.timer.engine import StopwatchEngine

T0 = 1_700_000_000_000  # ms since epoch


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


class FakeClock:
    """Callable wall clock returning milliseconds; only moves when told."""

    def __init__(self, start_ms: int = T0):
        self.now = start_ms

    def __call__(self) -> int:
        return self.now

    def advance(self, seconds: float = 0, ms: int = 0) -> None:
        self.now += int(seconds * 1000) + ms


class RecordingKeyValueStore:
    """In-memory key-value store that keeps a log of every write."""

    def __init__(self):
        self.data: dict[str, bytes] = {}
        self.writes: list[tuple[str, bytes]] = []

    def get(self, key):
        return self.data.get(key)

    def set(self, key, value):
        self.data[key] = value
        self.writes.append((key, value))


class BrokenKeyValueStore:
    """Every operation fails, like a full disk or a locked database."""

    def __init__(self, exc: Exception | None = None):
        self.exc = exc or OSError("storage unavailable")
        self.calls = 0

    def get(self, key):
        self.calls += 1
        raise self.exc

    def set(self, key, value):
        self.calls += 1
        raise self.exc


def run_ticks(engine: StopwatchEngine, n: int, clock: FakeClock | None = None) -> None:
    """Deliver *n* ticks directly, advancing *clock* one second per tick."""
    for _ in range(n):
        if clock is not None:
            clock.advance(1)
        engine._on_tick()
