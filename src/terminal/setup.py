"""Setup form that collects the four timer values before a run starts."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from pomodoro import SessionConfig
from pomodoro.constants import (
    KEY_BACKSPACE,
    KEY_DOWN,
    KEY_ENTER,
    KEY_QUIT,
    KEY_TAB,
    KEY_UP,
)

from .keys import is_digit_key
from .screens import STYLE_ERROR, STYLE_MUTED, STYLE_TEXT, STYLE_TITLE, ScreenLine

MAX_FIELD_DIGITS = 3
SETUP_POLL_SECONDS = 0.25
FIELD_BOX_WIDTH = 42
SETUP_HELP = "[TAB] Switch  •  [ENTER] Start  •  [q] Quit"


@dataclass
class SetupField:
    """Editable numeric field; an empty value falls back to the placeholder."""
    label: str
    placeholder: int
    value: str = ""

    def resolved(self) -> int:
        text = self.value.strip()
        if not text:
            return self.placeholder
        return int(text)


class SetupForm:
    """Focus, editing and validation state of the setup screen."""

    def __init__(self, defaults: SessionConfig):
        self.fields = [
            SetupField("Work Duration (minutes):", defaults.work_minutes),
            SetupField("Short Break (minutes):", defaults.short_break_minutes),
            SetupField("Long Break (minutes):", defaults.long_break_minutes),
            SetupField("Total Sessions:", defaults.total_sessions),
        ]
        self.focus_index = 0
        self.error = ""
        self.result: Optional[SessionConfig] = None
        self.cancelled = False

    @property
    def done(self) -> bool:
        return self.cancelled or self.result is not None

    @property
    def focused(self) -> SetupField:
        return self.fields[self.focus_index]

    def handle_key(self, key: Optional[str]) -> None:
        if self.done or key is None:
            return

        if key in (KEY_TAB, KEY_DOWN):
            self.focus_index = (self.focus_index + 1) % len(self.fields)
        elif key == KEY_UP:
            self.focus_index = (self.focus_index - 1) % len(self.fields)
        elif is_digit_key(key):
            if len(self.focused.value) < MAX_FIELD_DIGITS:
                self.focused.value += key
                self.error = ""
        elif key == KEY_BACKSPACE:
            self.focused.value = self.focused.value[:-1]
            self.error = ""
        elif key == KEY_ENTER:
            self.submit()
        elif key == KEY_QUIT:
            self.cancelled = True

    def submit(self) -> Optional[SessionConfig]:
        for index, field in enumerate(self.fields):
            if field.resolved() <= 0:
                self.focus_index = index
                self.error = f"{field.label.rstrip(':')} must be greater than zero"
                return None

        work, short_break, long_break, sessions = (field.resolved() for field in self.fields)
        self.result = SessionConfig(
            work_minutes=work,
            short_break_minutes=short_break,
            long_break_minutes=long_break,
            total_sessions=sessions,
        )
        return self.result


def setup_screen(form: SetupForm) -> list[ScreenLine]:
    lines = [ScreenLine(0, "POMODORO SETUP", STYLE_TITLE, bold=True)]
    row = 2
    for index, field in enumerate(form.fields):
        focused = index == form.focus_index
        border = STYLE_TITLE if focused else STYLE_MUTED
        text = field.value or str(field.placeholder)
        inner = FIELD_BOX_WIDTH - 6

        lines.append(ScreenLine(row, field.label.ljust(FIELD_BOX_WIDTH), STYLE_MUTED))
        lines.append(ScreenLine(row + 1, "╭" + "─" * FIELD_BOX_WIDTH + "╮", border))
        lines.append(
            ScreenLine(
                row + 2,
                f"│   {text:<{inner}}   │",
                STYLE_TEXT if field.value else border,
                bold=focused,
            )
        )
        lines.append(ScreenLine(row + 3, "╰" + "─" * FIELD_BOX_WIDTH + "╯", border))
        row += 5

    if form.error:
        lines.append(ScreenLine(row, form.error, STYLE_ERROR, bold=True))
    lines.append(ScreenLine(row + 1, SETUP_HELP, STYLE_MUTED))
    return lines


class _KeySource(Protocol):
    def poll(self, timeout_seconds: float) -> Optional[str]:
        ...


class _LineDrawer(Protocol):
    def draw(self, lines: list[ScreenLine]) -> None:
        ...


def run_setup(
    keys: _KeySource,
    drawer: _LineDrawer,
    defaults: SessionConfig,
    *,
    logger: Optional[logging.Logger] = None,
) -> Optional[SessionConfig]:
    """Show the setup form until it is submitted (config) or cancelled (None)."""
    logger = logger or logging.getLogger("terminal.setup")
    form = SetupForm(defaults)
    while not form.done:
        drawer.draw(setup_screen(form))
        form.handle_key(keys.poll(SETUP_POLL_SECONDS))

    if form.cancelled:
        logger.info("Setup cancelled.")
        return None

    logger.info("Setup complete: %s", form.result)
    return form.result
