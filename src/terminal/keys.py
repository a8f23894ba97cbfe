"""Curses key decoding into the abstract key alphabet."""

from __future__ import annotations

import curses
from typing import Any, Optional

from pomodoro.constants import (
    KEY_BACKSPACE,
    KEY_DOWN,
    KEY_ENTER,
    KEY_QUIT,
    KEY_SKIP,
    KEY_SPACE,
    KEY_TAB,
    KEY_UP,
)

_SPECIAL_KEYS: dict[int, str] = {
    curses.KEY_UP: KEY_UP,
    curses.KEY_DOWN: KEY_DOWN,
    curses.KEY_ENTER: KEY_ENTER,
    curses.KEY_BACKSPACE: KEY_BACKSPACE,
    10: KEY_ENTER,
    13: KEY_ENTER,
    9: KEY_TAB,
    8: KEY_BACKSPACE,
    127: KEY_BACKSPACE,
    ord(" "): KEY_SPACE,
    ord("s"): KEY_SKIP,
    ord("S"): KEY_SKIP,
    ord("q"): KEY_QUIT,
    ord("Q"): KEY_QUIT,
}


def decode_key(code: int) -> Optional[str]:
    """Map a curses key code to `up`, `down`, `space`, `enter`, `s`, `q`,
    `backspace`, `tab` or a digit character; anything else is `None`."""
    name = _SPECIAL_KEYS.get(code)
    if name is not None:
        return name
    if ord("0") <= code <= ord("9"):
        return chr(code)
    return None


def is_digit_key(key: Optional[str]) -> bool:
    return key is not None and len(key) == 1 and key.isdigit()


class CursesKeySource:
    """Bounded-wait key polling on a curses window."""
    def __init__(self, window: Any):
        self._window = window
        self._window.keypad(True)

    def poll(self, timeout_seconds: float) -> Optional[str]:
        self._window.timeout(max(0, int(timeout_seconds * 1000)))
        code = self._window.getch()
        if code == -1:
            return None
        return decode_key(code)
