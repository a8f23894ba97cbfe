"""Curses drawing of screen layouts."""

from __future__ import annotations

import curses
import logging
from typing import Any, Iterable, Optional

from pomodoro import SessionSnapshot

from .screens import (
    STYLE_ERROR,
    STYLE_LONG_BREAK,
    STYLE_MUTED,
    STYLE_SHORT_BREAK,
    STYLE_TEXT,
    STYLE_TITLE,
    STYLE_WORK,
    ScreenLine,
    session_screen,
)

_STYLE_COLORS: dict[str, int] = {
    STYLE_WORK: curses.COLOR_CYAN,
    STYLE_TITLE: curses.COLOR_CYAN,
    STYLE_SHORT_BREAK: curses.COLOR_YELLOW,
    STYLE_LONG_BREAK: curses.COLOR_GREEN,
    STYLE_ERROR: curses.COLOR_RED,
    STYLE_TEXT: curses.COLOR_WHITE,
}


class CursesRenderer:
    """Draws centred screen lines on a curses window.

    Lines that do not fit a small terminal are skipped instead of failing.
    """
    def __init__(self, window: Any, logger: Optional[logging.Logger] = None):
        self._window = window
        self._logger = logger or logging.getLogger("terminal")
        self._attrs = self._init_styles()

    def render(self, snapshot: SessionSnapshot) -> None:
        self.draw(session_screen(snapshot))

    def draw(self, lines: Iterable[ScreenLine]) -> None:
        lines = list(lines)
        self._window.erase()
        height, width = self._window.getmaxyx()
        block_height = max((line.row for line in lines), default=0) + 1
        top = max(0, (height - block_height) // 2)

        for line in lines:
            col = max(0, (width - len(line.text)) // 2)
            attr = self._attrs.get(line.style, curses.A_NORMAL)
            if line.bold:
                attr |= curses.A_BOLD
            try:
                self._window.addstr(top + line.row, col, line.text, attr)
            except curses.error:
                continue
        self._window.refresh()

    def _init_styles(self) -> dict[str, int]:
        attrs = {style: curses.A_NORMAL for style in _STYLE_COLORS}
        attrs[STYLE_MUTED] = curses.A_DIM
        if not curses.has_colors():
            return attrs

        curses.start_color()
        background = curses.COLOR_BLACK
        try:
            curses.use_default_colors()
            background = -1
        except curses.error:
            self._logger.debug("Terminal has no default colors; using black background")

        for index, (style, color) in enumerate(_STYLE_COLORS.items(), start=1):
            curses.init_pair(index, color, background)
            attrs[style] = curses.color_pair(index)
        return attrs
