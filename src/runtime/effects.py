"""Delivers transition effects to notification and sound collaborators."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Protocol

from pomodoro import Effect
from pomodoro.constants import EFFECT_NOTIFY, EFFECT_SOUND


class NotifierLike(Protocol):
    def notify(self, title: str, message: str) -> None:
        ...


class SoundPlayerLike(Protocol):
    def play(self) -> None:
        ...


@dataclass(frozen=True)
class EffectDependencies:
    """Collaborators used for completion effects; `None` disables one."""
    notifier: Optional[NotifierLike]
    sound_player: Optional[SoundPlayerLike]
    logger: logging.Logger


class EffectDispatcher:
    """Fire-and-forget delivery; collaborator failures are logged, never raised."""
    def __init__(self, dependencies: EffectDependencies):
        self._dependencies = dependencies

    @property
    def dependencies(self) -> EffectDependencies:
        return self._dependencies

    def dispatch(self, effects: Iterable[Effect]) -> None:
        for effect in effects:
            if effect.kind == EFFECT_NOTIFY:
                self._notify(effect)
            elif effect.kind == EFFECT_SOUND:
                self._play_sound()
            else:
                self._dependencies.logger.warning("Ignoring unknown effect: %s", effect.kind)

    def _notify(self, effect: Effect) -> None:
        deps = self._dependencies
        if deps.notifier is None:
            return
        try:
            deps.notifier.notify(effect.title, effect.message)
        except Exception as error:
            deps.logger.warning("Desktop notification failed: %s", error)

    def _play_sound(self) -> None:
        deps = self._dependencies
        if deps.sound_player is None:
            return
        try:
            deps.sound_player.play()
        except Exception as error:
            deps.logger.warning("Completion sound failed: %s", error)
