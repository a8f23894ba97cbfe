from .clock import PhaseClock
from .config import SessionConfig
from .counter import SessionCounter
from .machine import (
    Effect,
    PhaseKind,
    RunState,
    SessionSnapshot,
    SessionStateMachine,
    TransitionResult,
)

__all__ = [
    "Effect",
    "PhaseClock",
    "PhaseKind",
    "RunState",
    "SessionConfig",
    "SessionCounter",
    "SessionSnapshot",
    "SessionStateMachine",
    "TransitionResult",
]
