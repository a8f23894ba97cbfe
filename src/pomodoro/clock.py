"""Countdown primitive for a single pomodoro phase."""

from __future__ import annotations

import math
from typing import Literal

from .constants import RUN_STATE_PAUSED, RUN_STATE_RUNNING, SECONDS_PER_MINUTE

ClockRunState = Literal["running", "paused"]


class PhaseClock:
    """Remaining time of the active phase, advanced by elapsed-time ticks.

    Remaining time is kept as float seconds so sub-second tick residue is
    never dropped. It never goes below zero, and the expiry signal is raised
    once per started phase.
    """

    def __init__(self) -> None:
        self._duration_seconds: float = 0.0
        self._remaining: float = 0.0
        self._run_state: ClockRunState = RUN_STATE_PAUSED
        self._expired = False

    @property
    def run_state(self) -> ClockRunState:
        return self._run_state

    @property
    def is_running(self) -> bool:
        return self._run_state == RUN_STATE_RUNNING

    @property
    def expired(self) -> bool:
        return self._expired

    @property
    def duration_seconds(self) -> int:
        return int(self._duration_seconds)

    @property
    def remaining(self) -> float:
        return self._remaining

    @property
    def remaining_seconds(self) -> int:
        # 00:00 is only shown once the phase has really expired.
        return int(math.ceil(self._remaining))

    def start(self, duration_seconds: float) -> None:
        if duration_seconds <= 0:
            raise ValueError("duration_seconds must be greater than zero")

        self._duration_seconds = float(duration_seconds)
        self._remaining = float(duration_seconds)
        self._run_state = RUN_STATE_RUNNING
        self._expired = False

    def tick(self, elapsed_seconds: float) -> bool:
        """Advance the countdown; return True when this tick expired the phase."""
        if self._run_state != RUN_STATE_RUNNING or self._expired:
            return False
        if elapsed_seconds <= 0:
            return False

        self._remaining = max(0.0, self._remaining - elapsed_seconds)
        return self._latch_expiry()

    def pause(self) -> bool:
        if self._run_state != RUN_STATE_RUNNING or self._expired:
            return False
        self._run_state = RUN_STATE_PAUSED
        return True

    def resume(self) -> bool:
        if self._run_state != RUN_STATE_PAUSED or self._expired:
            return False
        self._run_state = RUN_STATE_RUNNING
        return True

    def adjust(self, delta_minutes: int) -> bool:
        """Add or remove whole minutes; return True if the phase expired."""
        if self._expired:
            return False

        self._remaining = max(0.0, self._remaining + delta_minutes * SECONDS_PER_MINUTE)
        return self._latch_expiry()

    def _latch_expiry(self) -> bool:
        if self._remaining > 0:
            return False
        self._expired = True
        return True
