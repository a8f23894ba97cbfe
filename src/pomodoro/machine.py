"""Single-threaded pomodoro session state machine."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Literal, Optional

from .clock import PhaseClock
from .config import SessionConfig
from .constants import (
    COMMAND_ADJUST,
    COMMAND_CONFIRM,
    COMMAND_IGNORED,
    COMMAND_PAUSE,
    COMMAND_QUIT,
    COMMAND_RESUME,
    COMMAND_SKIP,
    COMMAND_TICK,
    EFFECT_NOTIFY,
    EFFECT_SOUND,
    KEY_DOWN,
    KEY_ENTER,
    KEY_QUIT,
    KEY_SKIP,
    KEY_SPACE,
    KEY_UP,
    NOTIFICATION_TITLE,
    PHASE_WORK,
    REASON_ADJUSTED,
    REASON_BREAK_COMPLETED,
    REASON_BREAK_SKIPPED,
    REASON_BREAK_STARTED,
    REASON_FINISHED,
    REASON_NOT_AWAITING_BREAK,
    REASON_NOT_PAUSED,
    REASON_NOT_RUNNING,
    REASON_NOT_TIMED,
    REASON_PAUSED,
    REASON_QUIT,
    REASON_RESUMED,
    REASON_TICK,
    REASON_UNSUPPORTED_KEY,
    REASON_WORK_COMPLETED,
    REASON_WORK_SKIPPED,
    RUN_STATE_AWAITING_BREAK,
    RUN_STATE_PAUSED,
    STAGE_AWAITING_BREAK,
    STAGE_BREAK,
    STAGE_WORK,
    TIMED_STAGES,
)
from .counter import SessionCounter
from .messages import break_completed_message, work_completed_message

PhaseKind = Literal["work", "short_break", "long_break"]
RunState = Literal["running", "paused", "awaiting_break_start"]
Stage = Literal["work", "awaiting_break", "break"]
EffectKind = Literal["notify", "sound"]
SessionCommand = Literal[
    "tick", "pause", "resume", "skip", "confirm", "adjust", "quit", "ignored"
]


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only view of the machine handed to the renderer after each event."""
    phase_kind: PhaseKind
    run_state: RunState
    remaining_seconds: int
    duration_seconds: int
    current_session: int
    total_sessions: int
    is_quit: bool = False

    @property
    def is_awaiting_break(self) -> bool:
        return self.run_state == RUN_STATE_AWAITING_BREAK

    @property
    def is_paused(self) -> bool:
        return self.run_state == RUN_STATE_PAUSED


@dataclass(frozen=True)
class Effect:
    """Side effect requested by a transition, executed by the caller."""
    kind: EffectKind
    title: str = NOTIFICATION_TITLE
    message: str = ""


@dataclass(frozen=True)
class TransitionResult:
    """Result envelope returned after feeding one event to the machine."""
    command: SessionCommand
    accepted: bool
    reason: str
    snapshot: SessionSnapshot
    effects: tuple[Effect, ...] = ()


class SessionStateMachine:
    """Work → break prompt → break → work cycle driven by ticks and keys.

    The machine never performs side effects itself. Completions return
    notify/sound effects in the transition result and the caller decides how
    to deliver them.
    """

    def __init__(
        self,
        config: SessionConfig,
        *,
        logger: Optional[logging.Logger] = None,
    ):
        self._config = config
        self._logger = logger or logging.getLogger("pomodoro")
        self._counter = SessionCounter(config.total_sessions)
        self._clock = PhaseClock()

        self._stage: Stage = STAGE_WORK
        self._phase_kind: PhaseKind = PHASE_WORK
        self._quit = False
        self._key_handlers: dict[str, Callable[[], TransitionResult]] = {
            KEY_SPACE: self.toggle_pause,
            KEY_SKIP: self.skip,
            KEY_ENTER: self.confirm,
            KEY_QUIT: self.quit,
            KEY_UP: lambda: self.adjust(1),
            KEY_DOWN: lambda: self.adjust(-1),
        }

        self._start_work()

    @property
    def stage(self) -> Stage:
        return self._stage

    @property
    def is_quit(self) -> bool:
        return self._quit

    def snapshot(self) -> SessionSnapshot:
        if self._stage == STAGE_AWAITING_BREAK:
            duration = self._config.duration_seconds(self._phase_kind)
            return SessionSnapshot(
                phase_kind=self._phase_kind,
                run_state=RUN_STATE_AWAITING_BREAK,
                remaining_seconds=duration,
                duration_seconds=duration,
                current_session=self._counter.current_session,
                total_sessions=self._counter.total_sessions,
                is_quit=self._quit,
            )

        return SessionSnapshot(
            phase_kind=self._phase_kind,
            run_state=self._clock.run_state,
            remaining_seconds=self._clock.remaining_seconds,
            duration_seconds=self._clock.duration_seconds,
            current_session=self._counter.current_session,
            total_sessions=self._counter.total_sessions,
            is_quit=self._quit,
        )

    def handle_key(self, key: Optional[str]) -> TransitionResult:
        """Dispatch an abstract key; keys outside the timer alphabet are no-ops."""
        if self._quit:
            return self._result(COMMAND_IGNORED, False, REASON_FINISHED)

        handler = self._key_handlers.get(key or "")
        if handler is None:
            return self._result(COMMAND_IGNORED, False, REASON_UNSUPPORTED_KEY)
        return handler()

    def tick(self, elapsed_seconds: float) -> TransitionResult:
        if self._quit:
            return self._result(COMMAND_TICK, False, REASON_FINISHED)
        if self._stage not in TIMED_STAGES:
            return self._result(COMMAND_TICK, False, REASON_NOT_TIMED)
        if not self._clock.is_running:
            return self._result(COMMAND_TICK, False, REASON_NOT_RUNNING)

        if self._clock.tick(elapsed_seconds):
            return self._complete_phase(COMMAND_TICK)
        return self._result(COMMAND_TICK, True, REASON_TICK)

    def pause(self) -> TransitionResult:
        if self._quit:
            return self._result(COMMAND_PAUSE, False, REASON_FINISHED)
        if self._stage not in TIMED_STAGES:
            return self._result(COMMAND_PAUSE, False, REASON_NOT_TIMED)
        if not self._clock.pause():
            return self._result(COMMAND_PAUSE, False, REASON_NOT_RUNNING)

        self._logger.info(
            "Paused: phase=%s remaining=%ss",
            self._phase_kind,
            self._clock.remaining_seconds,
        )
        return self._result(COMMAND_PAUSE, True, REASON_PAUSED)

    def resume(self) -> TransitionResult:
        if self._quit:
            return self._result(COMMAND_RESUME, False, REASON_FINISHED)
        if self._stage not in TIMED_STAGES:
            return self._result(COMMAND_RESUME, False, REASON_NOT_TIMED)
        if not self._clock.resume():
            return self._result(COMMAND_RESUME, False, REASON_NOT_PAUSED)

        self._logger.info(
            "Resumed: phase=%s remaining=%ss",
            self._phase_kind,
            self._clock.remaining_seconds,
        )
        return self._result(COMMAND_RESUME, True, REASON_RESUMED)

    def toggle_pause(self) -> TransitionResult:
        if self._stage in TIMED_STAGES and self._clock.run_state == RUN_STATE_PAUSED:
            return self.resume()
        return self.pause()

    def skip(self) -> TransitionResult:
        if self._quit:
            return self._result(COMMAND_SKIP, False, REASON_FINISHED)

        if self._stage == STAGE_WORK:
            self._logger.info("Work session skipped: session=%d", self._counter.current_session)
            return self._complete_work(COMMAND_SKIP, REASON_WORK_SKIPPED)

        skipped = self._phase_kind
        self._start_work()
        self._logger.info("Break skipped: kind=%s", skipped)
        return self._result(COMMAND_SKIP, True, REASON_BREAK_SKIPPED)

    def confirm(self) -> TransitionResult:
        if self._quit:
            return self._result(COMMAND_CONFIRM, False, REASON_FINISHED)
        if self._stage != STAGE_AWAITING_BREAK:
            return self._result(COMMAND_CONFIRM, False, REASON_NOT_AWAITING_BREAK)

        duration = self._config.duration_seconds(self._phase_kind)
        self._stage = STAGE_BREAK
        self._clock.start(duration)
        self._logger.info("Break started: kind=%s duration=%ss", self._phase_kind, duration)
        return self._result(COMMAND_CONFIRM, True, REASON_BREAK_STARTED)

    def adjust(self, delta_minutes: int) -> TransitionResult:
        """Add or remove whole minutes on a running clock."""
        if self._quit:
            return self._result(COMMAND_ADJUST, False, REASON_FINISHED)
        if self._stage not in TIMED_STAGES:
            return self._result(COMMAND_ADJUST, False, REASON_NOT_TIMED)
        if not self._clock.is_running:
            return self._result(COMMAND_ADJUST, False, REASON_NOT_RUNNING)

        if self._clock.adjust(delta_minutes):
            return self._complete_phase(COMMAND_ADJUST)

        self._logger.debug(
            "Adjusted: phase=%s delta=%+dm remaining=%ss",
            self._phase_kind,
            delta_minutes,
            self._clock.remaining_seconds,
        )
        return self._result(COMMAND_ADJUST, True, REASON_ADJUSTED)

    def quit(self) -> TransitionResult:
        if self._quit:
            return self._result(COMMAND_QUIT, False, REASON_FINISHED)

        self._quit = True
        self._logger.info(
            "Quit requested: stage=%s session=%d/%d",
            self._stage,
            self._counter.current_session,
            self._counter.total_sessions,
        )
        return self._result(COMMAND_QUIT, True, REASON_QUIT)

    def _complete_phase(self, command: SessionCommand) -> TransitionResult:
        if self._stage == STAGE_WORK:
            return self._complete_work(command, REASON_WORK_COMPLETED)

        finished = self._phase_kind
        self._logger.info("Break completed: kind=%s", finished)
        self._start_work()
        return self._result(
            command,
            True,
            REASON_BREAK_COMPLETED,
            effects=_completion_effects(break_completed_message(finished)),
        )

    def _complete_work(self, command: SessionCommand, reason: str) -> TransitionResult:
        completed_session = self._counter.current_session
        next_kind = self._counter.next_break_kind()
        self._counter.advance_after_work()

        self._stage = STAGE_AWAITING_BREAK
        self._phase_kind = next_kind  # type: ignore[assignment]
        self._logger.info(
            "Work session completed: session=%d/%d next_break=%s",
            completed_session,
            self._counter.total_sessions,
            next_kind,
        )
        return self._result(
            command,
            True,
            reason,
            effects=_completion_effects(work_completed_message(next_kind)),
        )

    def _start_work(self) -> None:
        duration = self._config.duration_seconds(PHASE_WORK)
        self._stage = STAGE_WORK
        self._phase_kind = PHASE_WORK
        self._clock.start(duration)
        self._logger.info(
            "Work session started: session=%d/%d duration=%ss",
            self._counter.current_session,
            self._counter.total_sessions,
            duration,
        )

    def _result(
        self,
        command: SessionCommand,
        accepted: bool,
        reason: str,
        *,
        effects: tuple[Effect, ...] = (),
    ) -> TransitionResult:
        return TransitionResult(
            command=command,
            accepted=accepted,
            reason=reason,
            snapshot=self.snapshot(),
            effects=effects,
        )


def _completion_effects(message: str) -> tuple[Effect, ...]:
    return (
        Effect(kind=EFFECT_NOTIFY, message=message),
        Effect(kind=EFFECT_SOUND, message=message),
    )
