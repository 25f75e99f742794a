"""Pure overlap predicates for circles against circles and arena rectangles."""
from __future__ import annotations

from drift_physics import vec
from drift_physics.vec import Vec2


def circles_overlap(
    pos_a: Vec2,
    radius_a: float,
    pos_b: Vec2,
    radius_b: float,
) -> bool:
    """True when the centers are strictly closer than the sum of the radii.

    Circles that exactly touch do not overlap.
    """
    return vec.distance(pos_a, pos_b) < radius_a + radius_b


def circle_breaches_rect(
    pos: Vec2,
    radius: float,
    width: float,
    height: float,
) -> bool:
    """True when a circle pokes outside the ``[0, width] x [0, height]`` rectangle.

    Equivalent to the center leaving the rectangle inset by ``radius``.
    A center exactly on the inset edge is still inside.
    """
    x, y = pos
    return (
        x < radius
        or x > width - radius
        or y < radius
        or y > height - radius
    )


def beyond_rect(
    pos: Vec2,
    margin: float,
    width: float,
    height: float,
) -> bool:
    """True when ``pos`` lies more than ``margin`` outside the rectangle on any side."""
    x, y = pos
    return (
        x < -margin
        or x > width + margin
        or y < -margin
        or y > height + margin
    )
