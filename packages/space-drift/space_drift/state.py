"""Run state machine: START -> PLAYING -> GAMEOVER -> PLAYING ..."""
from __future__ import annotations

import logging
from enum import Enum
from typing import Callable

logger = logging.getLogger(__name__)


class Phase(Enum):
    START = "start"
    PLAYING = "playing"
    GAMEOVER = "gameover"


class InvalidTransitionError(RuntimeError):
    """Raised when a trigger is not allowed from the current phase."""

    def __init__(self, phase: Phase, trigger: str) -> None:
        self.phase = phase
        self.trigger = trigger
        super().__init__(f"Trigger {trigger!r} is not allowed in phase {phase.name}")


# Transition table: phase -> {trigger: target}.
TRANSITIONS: dict[Phase, dict[str, Phase]] = {
    Phase.START: {"start": Phase.PLAYING},
    Phase.PLAYING: {"die": Phase.GAMEOVER},
    Phase.GAMEOVER: {"restart": Phase.PLAYING},
}

_Listener = Callable[[Phase, Phase], None]


class GameState:
    """Holds the current phase and applies triggers through ``TRANSITIONS``.

    Listeners registered with ``on_transition`` are called synchronously with
    ``(old, new)`` after every successful transition.
    """

    def __init__(self) -> None:
        self._phase = Phase.START
        self._listeners: list[_Listener] = []

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def playing(self) -> bool:
        return self._phase is Phase.PLAYING

    def can(self, trigger: str) -> bool:
        return trigger in TRANSITIONS[self._phase]

    def fire(self, trigger: str) -> Phase:
        target = TRANSITIONS[self._phase].get(trigger)
        if target is None:
            raise InvalidTransitionError(self._phase, trigger)
        old = self._phase
        self._phase = target
        logger.debug("Phase %s -> %s (%s)", old.name, target.name, trigger)
        for listener in self._listeners:
            listener(old, target)
        return target

    def on_transition(self, listener: _Listener) -> None:
        self._listeners.append(listener)
