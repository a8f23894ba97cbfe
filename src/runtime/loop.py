"""Single-threaded input/render loop that drives the session state machine."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from pomodoro import SessionSnapshot, SessionStateMachine, TransitionResult
from pomodoro.constants import COMMAND_TICK

from .effects import EffectDispatcher

DEFAULT_POLL_INTERVAL_SECONDS = 0.1


class KeySource(Protocol):
    def poll(self, timeout_seconds: float) -> Optional[str]:
        """Return an abstract key name, or `None` when the timeout elapsed."""
        ...


class Renderer(Protocol):
    def render(self, snapshot: SessionSnapshot) -> None:
        ...


@dataclass(frozen=True)
class LoopDependencies:
    """Dependency bundle required to run the session loop."""
    machine: SessionStateMachine
    keys: KeySource
    renderer: Renderer
    effects: EffectDispatcher
    logger: logging.Logger
    poll_interval_seconds: float = DEFAULT_POLL_INTERVAL_SECONDS
    monotonic: Callable[[], float] = time.monotonic


class SessionLoop:
    """Polls keys with a bounded wait and feeds ticks and keys to the machine.

    Every poll return first delivers a tick with the wall time elapsed since
    the previous tick, then the key if one arrived, so pausing or adjusting
    always acts on an up-to-date clock.
    """
    def __init__(self, dependencies: LoopDependencies):
        self._deps = dependencies
        self._logger = dependencies.logger
        self._last_tick: Optional[float] = None

    def run(self) -> int:
        machine = self._deps.machine
        try:
            self._last_tick = self._deps.monotonic()
            self._deps.renderer.render(machine.snapshot())

            while not machine.is_quit:
                key = self._deps.keys.poll(self._deps.poll_interval_seconds)
                self.step(key)

            self._logger.info("Session loop finished.")
            return 0
        except KeyboardInterrupt:
            self._logger.info("Shutdown requested by keyboard interrupt.")
            machine.quit()
            return 0
        except Exception as error:
            self._logger.error("Unexpected error: %s", error, exc_info=True)
            return 1

    def step(self, key: Optional[str]) -> list[TransitionResult]:
        """Process one poll result: a tick, then the key if present."""
        machine = self._deps.machine
        results = [machine.tick(self._elapsed_since_last_tick())]
        if key is not None:
            results.append(machine.handle_key(key))

        for result in results:
            self._apply(result)
        return results

    def _elapsed_since_last_tick(self) -> float:
        now = self._deps.monotonic()
        last = self._last_tick
        self._last_tick = now
        if last is None:
            return 0.0
        return max(0.0, now - last)

    def _apply(self, result: TransitionResult) -> None:
        if result.effects:
            self._deps.effects.dispatch(result.effects)
        if result.accepted and result.command != COMMAND_TICK:
            self._logger.debug("Event %s accepted: %s", result.command, result.reason)
        self._deps.renderer.render(result.snapshot)
