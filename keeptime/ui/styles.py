"""QSS stylesheet and state colors for the stopwatch cards."""

from __future__ import annotations

from ..timer.engine import StopwatchState

# ── time-display color per state ─────────────────────────────────────────

STATE_COLORS: dict[StopwatchState, str] = {
    StopwatchState.RUNNING: "#7FD1AE",   # mint while counting
    StopwatchState.PAUSED:  "#8C93A8",   # slate while frozen
}

# ── palette ──────────────────────────────────────────────────────────────

PALETTE: dict[str, str] = {
    "window":     "#14161F",
    "card":       "#1E2230",
    "card_edge":  "#2C3245",
    "text":       "#E6E8EF",
    "label":      "#8C93A8",
    "toggle":     "#5B8DEF",
    "toggle_hot": "#7AA5F5",
    "reset":      "#E57A7A",
}

# Digits must not jitter as the seconds change, so prefer fonts with
# fixed-width figures for the clock face.
CLOCK_FONT_CANDIDATES = ("JetBrains Mono", "SF Mono", "Menlo", "Consolas", "DejaVu Sans Mono")

_clock_font: str | None = None


def clock_font_family() -> str:
    """First installed clock-face font, falling back to ``monospace``.
    Needs a running QApplication (the font database is per-app)."""
    global _clock_font
    if _clock_font is None:
        from PyQt6.QtGui import QFontDatabase
        installed = set(QFontDatabase.families())
        _clock_font = next(
            (f for f in CLOCK_FONT_CANDIDATES if f in installed), "monospace",
        )
    return _clock_font


def state_color(state: StopwatchState) -> str:
    return STATE_COLORS.get(state, PALETTE["text"])


# ── QSS builder ───────────────────────────────────────────────────────


def build_stylesheet(palette: dict[str, str] | None = None) -> str:
    p = palette or PALETTE
    return f"""
    QMainWindow, QWidget {{
        background-color: {p['window']};
        color: {p['text']};
        font-size: 13px;
    }}

    QFrame#card {{
        background-color: {p['card']};
        border: 1px solid {p['card_edge']};
        border-radius: 14px;
    }}

    QLabel#timerName {{
        background-color: transparent;
        color: {p['label']};
        font-size: 11px;
        font-weight: 700;
        letter-spacing: 2px;
    }}

    QLabel#timeLabel {{
        background-color: transparent;
        font-family: "{clock_font_family()}", monospace;
        font-size: 40px;
    }}

    QPushButton#toggleButton {{
        background-color: {p['toggle']};
        color: {p['window']};
        border: none;
        border-radius: 8px;
        min-width: 84px;
        padding: 7px 18px;
        font-weight: 700;
    }}

    QPushButton#toggleButton:hover {{
        background-color: {p['toggle_hot']};
    }}

    QPushButton#resetButton {{
        background-color: transparent;
        color: {p['reset']};
        border: 1px solid {p['card_edge']};
        border-radius: 8px;
        padding: 7px 14px;
    }}

    QPushButton#resetButton:hover {{
        border-color: {p['reset']};
    }}

    QStatusBar {{
        color: {p['label']};
        font-size: 11px;
        border-top: 1px solid {p['card_edge']};
    }}
    """
