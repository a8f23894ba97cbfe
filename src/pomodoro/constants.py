"""Phase, run-state, command and reason constants used by the session core."""

from __future__ import annotations

DEFAULT_WORK_MINUTES = 25
DEFAULT_SHORT_BREAK_MINUTES = 5
DEFAULT_LONG_BREAK_MINUTES = 15
DEFAULT_TOTAL_SESSIONS = 4

SECONDS_PER_MINUTE = 60

PHASE_WORK = "work"
PHASE_SHORT_BREAK = "short_break"
PHASE_LONG_BREAK = "long_break"

RUN_STATE_RUNNING = "running"
RUN_STATE_PAUSED = "paused"
RUN_STATE_AWAITING_BREAK = "awaiting_break_start"

STAGE_WORK = "work"
STAGE_AWAITING_BREAK = "awaiting_break"
STAGE_BREAK = "break"

TIMED_STAGES: frozenset[str] = frozenset({STAGE_WORK, STAGE_BREAK})

KEY_UP = "up"
KEY_DOWN = "down"
KEY_SPACE = "space"
KEY_ENTER = "enter"
KEY_SKIP = "s"
KEY_QUIT = "q"
KEY_BACKSPACE = "backspace"
KEY_TAB = "tab"

COMMAND_TICK = "tick"
COMMAND_PAUSE = "pause"
COMMAND_RESUME = "resume"
COMMAND_SKIP = "skip"
COMMAND_CONFIRM = "confirm"
COMMAND_ADJUST = "adjust"
COMMAND_QUIT = "quit"
COMMAND_IGNORED = "ignored"

EFFECT_NOTIFY = "notify"
EFFECT_SOUND = "sound"

REASON_TICK = "tick"
REASON_WORK_COMPLETED = "work_completed"
REASON_BREAK_COMPLETED = "break_completed"
REASON_WORK_SKIPPED = "work_skipped"
REASON_BREAK_SKIPPED = "break_skipped"
REASON_BREAK_STARTED = "break_started"
REASON_PAUSED = "paused"
REASON_RESUMED = "resumed"
REASON_ADJUSTED = "adjusted"
REASON_QUIT = "quit"
REASON_NOT_RUNNING = "not_running"
REASON_NOT_PAUSED = "not_paused"
REASON_NOT_TIMED = "not_timed"
REASON_NOT_AWAITING_BREAK = "not_awaiting_break"
REASON_FINISHED = "finished"
REASON_UNSUPPORTED_KEY = "unsupported_key"

NOTIFICATION_TITLE = "Pomodoro"
