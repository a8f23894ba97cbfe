"""Runtime loop exports."""

from .effects import EffectDependencies, EffectDispatcher
from .loop import LoopDependencies, SessionLoop

__all__ = ["EffectDependencies", "EffectDispatcher", "LoopDependencies", "SessionLoop"]
