"""Arena bodies: the drifter, obstacles, and cosmetic particles."""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum

from drift_physics import Vec2

from space_drift.config import PLAYER_RADIUS, TRAIL_CAPACITY


class ObstacleKind(Enum):
    """Hostile obstacles chase the drifter and kill on contact; friendly ones score."""

    HOSTILE = "hostile"
    FRIENDLY = "friendly"


def _trail() -> deque[Vec2]:
    return deque(maxlen=TRAIL_CAPACITY)


@dataclass
class Player:
    """The drifter. Velocity and position are integrated once per tick."""

    position: Vec2
    velocity: Vec2 = (0.0, 0.0)
    acceleration: Vec2 = (0.0, 0.0)
    radius: float = PLAYER_RADIUS
    angle: float = 0.0
    alive: bool = True
    trail: deque[Vec2] = field(default_factory=_trail)


@dataclass
class Obstacle:
    position: Vec2
    velocity: Vec2
    radius: float
    kind: ObstacleKind
    color: tuple[int, int, int]
    age: float = 0.0

    @property
    def mass(self) -> float:
        return self.radius * 2.0

    @property
    def hostile(self) -> bool:
        return self.kind is ObstacleKind.HOSTILE


@dataclass
class Particle:
    """Short-lived visual spark. Has no effect on play."""

    position: Vec2
    velocity: Vec2
    color: tuple[int, int, int]
    life: float
    max_life: float
    size: float

    @property
    def expired(self) -> bool:
        return self.life <= 0.0
