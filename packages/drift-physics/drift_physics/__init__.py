"""drift-physics - 2D vector math and overlap tests for the drift engine."""
from __future__ import annotations

from drift_physics import vec
from drift_physics.collision import beyond_rect, circle_breaches_rect, circles_overlap
from drift_physics.vec import Vec2

__all__ = [
    "Vec2",
    "beyond_rect",
    "circle_breaches_rect",
    "circles_overlap",
    "vec",
]
