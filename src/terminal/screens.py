"""Layouts for the timer and break-prompt screens as styled text lines."""

from __future__ import annotations

from dataclasses import dataclass

from pomodoro import SessionSnapshot
from pomodoro.constants import PHASE_LONG_BREAK, PHASE_SHORT_BREAK, PHASE_WORK

from .digits import render_big_time

STYLE_TEXT = "text"
STYLE_MUTED = "muted"
STYLE_TITLE = "title"
STYLE_ERROR = "error"
STYLE_WORK = "work"
STYLE_SHORT_BREAK = "short_break"
STYLE_LONG_BREAK = "long_break"

PHASE_STYLES: dict[str, str] = {
    PHASE_WORK: STYLE_WORK,
    PHASE_SHORT_BREAK: STYLE_SHORT_BREAK,
    PHASE_LONG_BREAK: STYLE_LONG_BREAK,
}

TIMER_HELP = "[SPACE] Pause  •  [s] Skip  •  [↑/↓] +/- 1m  •  [q] Quit"
PROMPT_HELP = "[ENTER] Start Break  •  [s] Skip  •  [q] Quit"


@dataclass(frozen=True)
class ScreenLine:
    """One centred line of a screen; `row` is relative to the top of the block."""
    row: int
    text: str
    style: str = STYLE_TEXT
    bold: bool = False


def phase_title(snapshot: SessionSnapshot) -> str:
    if snapshot.phase_kind == PHASE_SHORT_BREAK:
        return "SHORT BREAK"
    if snapshot.phase_kind == PHASE_LONG_BREAK:
        return "LONG BREAK"
    return f"WORK SESSION {snapshot.current_session}/{snapshot.total_sessions}"


def timer_screen(snapshot: SessionSnapshot) -> list[ScreenLine]:
    style = PHASE_STYLES.get(snapshot.phase_kind, STYLE_TEXT)
    lines = [ScreenLine(0, phase_title(snapshot), style, bold=True)]
    for offset, text in enumerate(render_big_time(snapshot.remaining_seconds)):
        lines.append(ScreenLine(2 + offset, text, style))
    lines.append(ScreenLine(8, "PAUSED" if snapshot.is_paused else "RUNNING", STYLE_MUTED))
    lines.append(ScreenLine(10, TIMER_HELP, STYLE_MUTED))
    return lines


def break_prompt_screen(snapshot: SessionSnapshot) -> list[ScreenLine]:
    if snapshot.phase_kind == PHASE_LONG_BREAK:
        message = "Time for a Long Break!"
    else:
        message = "Time for a Short Break!"
    style = PHASE_STYLES.get(snapshot.phase_kind, STYLE_TEXT)
    return [
        ScreenLine(0, "WORK SESSION COMPLETE!", STYLE_TITLE, bold=True),
        ScreenLine(2, message, style, bold=True),
        ScreenLine(4, "Ready to start your break?"),
        ScreenLine(6, PROMPT_HELP, STYLE_MUTED),
    ]


def session_screen(snapshot: SessionSnapshot) -> list[ScreenLine]:
    if snapshot.is_awaiting_break:
        return break_prompt_screen(snapshot)
    return timer_screen(snapshot)
