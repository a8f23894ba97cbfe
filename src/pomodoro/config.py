"""Immutable session configuration consumed by the state machine."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import (
    DEFAULT_LONG_BREAK_MINUTES,
    DEFAULT_SHORT_BREAK_MINUTES,
    DEFAULT_TOTAL_SESSIONS,
    DEFAULT_WORK_MINUTES,
    PHASE_LONG_BREAK,
    PHASE_SHORT_BREAK,
    PHASE_WORK,
    SECONDS_PER_MINUTE,
)


@dataclass(frozen=True)
class SessionConfig:
    """Durations and session count for one timer run; all values positive."""
    work_minutes: int = DEFAULT_WORK_MINUTES
    short_break_minutes: int = DEFAULT_SHORT_BREAK_MINUTES
    long_break_minutes: int = DEFAULT_LONG_BREAK_MINUTES
    total_sessions: int = DEFAULT_TOTAL_SESSIONS

    def __post_init__(self) -> None:
        for name in (
            "work_minutes",
            "short_break_minutes",
            "long_break_minutes",
            "total_sessions",
        ):
            if int(getattr(self, name)) <= 0:
                raise ValueError(f"{name} must be greater than zero")

    @classmethod
    def from_settings(cls, settings) -> "SessionConfig":
        return cls(
            work_minutes=settings.work_minutes,
            short_break_minutes=settings.short_break_minutes,
            long_break_minutes=settings.long_break_minutes,
            total_sessions=settings.total_sessions,
        )

    def duration_seconds(self, phase_kind: str) -> int:
        if phase_kind == PHASE_WORK:
            return self.work_minutes * SECONDS_PER_MINUTE
        if phase_kind == PHASE_SHORT_BREAK:
            return self.short_break_minutes * SECONDS_PER_MINUTE
        if phase_kind == PHASE_LONG_BREAK:
            return self.long_break_minutes * SECONDS_PER_MINUTE
        raise ValueError(f"Unknown phase kind: {phase_kind}")
