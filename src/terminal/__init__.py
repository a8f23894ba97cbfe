"""Curses-based key input, rendering and setup screen."""

from .digits import format_duration, render_big_time
from .keys import CursesKeySource, decode_key
from .renderer import CursesRenderer
from .screens import ScreenLine, session_screen
from .setup import SetupForm, run_setup

__all__ = [
    "CursesKeySource",
    "CursesRenderer",
    "ScreenLine",
    "SetupForm",
    "decode_key",
    "format_duration",
    "render_big_time",
    "run_setup",
    "session_screen",
]
