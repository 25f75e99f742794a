"""2D vector math helpers operating on immutable ``(x, y)`` tuples."""
from __future__ import annotations

import math

Vec2 = tuple[float, float]

ZERO: Vec2 = (0.0, 0.0)


def add(a: Vec2, b: Vec2) -> Vec2:
    return (a[0] + b[0], a[1] + b[1])


def sub(a: Vec2, b: Vec2) -> Vec2:
    return (a[0] - b[0], a[1] - b[1])


def scale(v: Vec2, s: float) -> Vec2:
    return (v[0] * s, v[1] * s)


def divide(v: Vec2, d: float) -> Vec2:
    """Divide by ``d``; dividing by exactly zero returns ``v`` unchanged."""
    if d == 0.0:
        return v
    return (v[0] / d, v[1] / d)


def magnitude_sq(v: Vec2) -> float:
    return v[0] * v[0] + v[1] * v[1]


def magnitude(v: Vec2) -> float:
    return math.sqrt(magnitude_sq(v))


def normalize(v: Vec2) -> Vec2:
    """Unit vector along ``v``. The zero vector is returned as-is."""
    return divide(v, magnitude(v))


def clamp_magnitude(v: Vec2, max_mag: float) -> Vec2:
    if magnitude(v) <= max_mag:
        return v
    return scale(normalize(v), max_mag)


def distance_sq(a: Vec2, b: Vec2) -> float:
    return magnitude_sq(sub(a, b))


def distance(a: Vec2, b: Vec2) -> float:
    return math.sqrt(distance_sq(a, b))


def angle(v: Vec2) -> float:
    return math.atan2(v[1], v[0])


def is_zero(v: Vec2) -> bool:
    return v[0] == 0.0 and v[1] == 0.0


def zero() -> Vec2:
    return ZERO
