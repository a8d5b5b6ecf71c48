"""UI package."""

from .stopwatch_widget import StopwatchWidget, format_elapsed
from .styles import build_stylesheet, state_color

__all__ = [
    "StopwatchWidget",
    "format_elapsed",
    "build_stylesheet",
    "state_color",
]
