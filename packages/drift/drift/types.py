"""Shared type aliases and errors for the drift engine."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from typing import Any, Callable


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt: float
    elapsed: float
    request_stop: Callable[[], None]
    random: _random.Random


class MissingCollaboratorError(RuntimeError):
    """Raised at startup when a required collaborator (e.g. a renderer) is absent."""

    def __init__(self, role: str) -> None:
        self.role = role
        super().__init__(f"Cannot start simulation without a {role}")


System = Callable[[Any, TickContext], None]
FrameHook = Callable[[Any, TickContext], None]
