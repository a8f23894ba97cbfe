"""Work-session counter that selects short versus long breaks."""

from __future__ import annotations

from .constants import PHASE_LONG_BREAK, PHASE_SHORT_BREAK


class SessionCounter:
    """Cyclic 1..N session counter.

    After the last configured session the counter wraps back to 1, which
    restarts the long-break cadence.
    """

    def __init__(self, total_sessions: int):
        if total_sessions <= 0:
            raise ValueError("total_sessions must be greater than zero")

        self._total_sessions = int(total_sessions)
        self._current_session = 1
        self._completed_since_long_break = 0

    @property
    def total_sessions(self) -> int:
        return self._total_sessions

    @property
    def current_session(self) -> int:
        return self._current_session

    @property
    def completed_sessions_since_long_break(self) -> int:
        return self._completed_since_long_break

    def next_break_kind(self) -> str:
        if self._current_session % self._total_sessions == 0:
            return PHASE_LONG_BREAK
        return PHASE_SHORT_BREAK

    def advance_after_work(self) -> None:
        if self.next_break_kind() == PHASE_LONG_BREAK:
            self._completed_since_long_break = 0
        else:
            self._completed_since_long_break += 1

        self._current_session += 1
        if self._current_session > self._total_sessions:
            self._current_session = 1
