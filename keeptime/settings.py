"""Application settings with JSON persistence.

Settings are stored at:
    ~/.keeptime/settings.json   (or $KEEPTIME_HOME/settings.json)

Usage::

    settings = load_settings()
    settings.timer_ids = ["work", "reading"]
    save_settings(settings)
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, asdict, field, fields

# Reuse the app-support directory from db.py
from .storage.db import APP_SUPPORT_DIR

SETTINGS_PATH = APP_SUPPORT_DIR / "settings.json"

MIN_TICK_INTERVAL_MS = 100

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── stopwatches ───────────────────────────────────────────────────
    timer_ids: list[str] = field(default_factory=lambda: ["default"])
    initial_value: int = 0                 # seconds
    persist: bool = True
    tick_interval_ms: int = 1000

    # ── logging ───────────────────────────────────────────────────────
    log_level: str = "WARNING"

    # ── window ────────────────────────────────────────────────────────
    window_x: int | None = None
    window_y: int | None = None
    window_width: int = 420
    window_height: int = 360
    always_on_top: bool = False

    def __post_init__(self) -> None:
        self.initial_value = max(0, int(self.initial_value))
        self.tick_interval_ms = max(MIN_TICK_INTERVAL_MS, int(self.tick_interval_ms))
        if isinstance(self.timer_ids, str):
            self.timer_ids = [self.timer_ids]
        # Drop blanks and duplicates, keep order
        seen: list[str] = []
        for timer_id in self.timer_ids:
            timer_id = str(timer_id).strip()
            if timer_id and timer_id not in seen:
                seen.append(timer_id)
        self.timer_ids = seen or ["default"]


def load_settings() -> Settings:
    """Load settings from disk, falling back to defaults."""
    try:
        if SETTINGS_PATH.exists():
            data = json.loads(SETTINGS_PATH.read_text(encoding="utf-8"))
            # Only use keys that exist in the dataclass
            valid_keys = {f.name for f in fields(Settings)}
            filtered = {k: v for k, v in data.items() if k in valid_keys}
            return Settings(**filtered)
    except Exception:
        logger.warning("Ignoring unreadable settings at %s", SETTINGS_PATH)
    return Settings()


def save_settings(settings: Settings) -> None:
    """Write settings to disk as JSON."""
    SETTINGS_PATH.parent.mkdir(parents=True, exist_ok=True)
    SETTINGS_PATH.write_text(
        json.dumps(asdict(settings), indent=2) + "\n",
        encoding="utf-8",
    )
