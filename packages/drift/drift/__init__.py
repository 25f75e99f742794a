"""drift - A small frame-driven tick engine for arcade simulations."""

from drift.clock import MAX_DT, Clock
from drift.engine import Engine
from drift.types import MissingCollaboratorError, System, TickContext

__all__ = [
    "Engine",
    "Clock",
    "MAX_DT",
    "TickContext",
    "System",
    "MissingCollaboratorError",
]
