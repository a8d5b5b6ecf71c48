"""KeepTime: stopwatches that survive restarts, sleep and closed windows."""

__version__ = "0.1.0"
