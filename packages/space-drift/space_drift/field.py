"""Obstacle spawning, difficulty progression, and off-screen culling."""
from __future__ import annotations

import logging
import math
import random
from typing import TYPE_CHECKING, Callable

from drift_physics import Vec2, beyond_rect, vec

from space_drift.config import (
    AIM_JITTER,
    BASE_HOSTILE_CHANCE,
    BASE_OBSTACLE_SPEED,
    BASE_SPAWN_INTERVAL,
    CULL_MARGIN,
    FRIENDLY_PALETTE,
    HOSTILE_CHANCE_RAMP,
    HOSTILE_COLOR,
    MIN_OBSTACLE_RADIUS,
    MIN_SPAWN_INTERVAL,
    OBSTACLE_RADIUS_SPREAD,
    OBSTACLE_SPEED_RAMP,
    SPAWN_INTERVAL_RAMP,
    SPAWN_RING_PADDING,
)
from space_drift.entities import Obstacle, ObstacleKind
from space_drift.motion import move_obstacle

if TYPE_CHECKING:
    from space_drift.world import World

logger = logging.getLogger(__name__)


# --- Difficulty curve (t = seconds into the run) ---


def spawn_interval(t: float) -> float:
    return max(MIN_SPAWN_INTERVAL, BASE_SPAWN_INTERVAL - t / SPAWN_INTERVAL_RAMP)


def hostile_chance(t: float) -> float:
    """Probability a new obstacle is hostile; saturates at 1 after 96 s."""
    return min(1.0, BASE_HOSTILE_CHANCE + t / HOSTILE_CHANCE_RAMP)


def obstacle_speed(t: float) -> float:
    """Initial obstacle speed. Grows without bound."""
    return BASE_OBSTACLE_SPEED + t / OBSTACLE_SPEED_RAMP


def spawn_ring_radius(width: float, height: float) -> float:
    return math.hypot(width, height) / 2.0 + SPAWN_RING_PADDING


PALETTES: dict[ObstacleKind, Callable[[random.Random], tuple[int, int, int]]] = {
    ObstacleKind.HOSTILE: lambda rng: HOSTILE_COLOR,
    ObstacleKind.FRIENDLY: lambda rng: rng.choice(FRIENDLY_PALETTE),
}


class ObstacleField:
    """Spawns obstacles on a ring outside the arena and retires strays.

    Obstacles are culled once they are more than ``radius + 100`` outside the
    arena on any side. The spawn ring can lie beyond that range (near the
    middle of each side), so such spawns are retired on their first tick.
    """

    def __init__(self, cull_margin: float = CULL_MARGIN) -> None:
        self.cull_margin = cull_margin
        self.spawned = 0
        self.culled = 0

    def spawn(self, world: World, rng: random.Random) -> Obstacle:
        t = world.difficulty_timer
        cx, cy = world.center

        theta = rng.random() * 2.0 * math.pi
        ring = spawn_ring_radius(world.width, world.height)
        position: Vec2 = (cx + math.cos(theta) * ring, cy + math.sin(theta) * ring)

        radius = MIN_OBSTACLE_RADIUS + rng.random() * OBSTACLE_RADIUS_SPREAD
        kind = ObstacleKind.HOSTILE if rng.random() < hostile_chance(t) else ObstacleKind.FRIENDLY

        aim = (
            cx + (rng.random() - 0.5) * 2.0 * AIM_JITTER,
            cy + (rng.random() - 0.5) * 2.0 * AIM_JITTER,
        )
        velocity = vec.scale(vec.normalize(vec.sub(aim, position)), obstacle_speed(t))

        obstacle = Obstacle(
            position=position,
            velocity=velocity,
            radius=radius,
            kind=kind,
            color=PALETTES[kind](rng),
        )
        world.obstacles.append(obstacle)
        self.spawned += 1
        logger.debug(
            "Spawned %s obstacle r=%.1f at (%.0f, %.0f), t=%.1fs",
            kind.value, radius, position[0], position[1], t,
        )
        return obstacle

    def _out_of_play(self, obstacle: Obstacle, world: World) -> bool:
        return beyond_rect(
            obstacle.position,
            obstacle.radius + self.cull_margin,
            world.width,
            world.height,
        )

    def update(self, world: World, dt: float, rng: random.Random) -> Obstacle | None:
        """Advance the difficulty clock, maybe spawn, move, then cull.

        Returns the obstacle spawned this tick, if any.
        """
        world.difficulty_timer += dt
        world.spawn_timer += dt

        spawned = None
        if world.spawn_timer > spawn_interval(world.difficulty_timer):
            spawned = self.spawn(world, rng)
            world.spawn_timer = 0.0

        target = world.player.position if world.player is not None else None
        for obstacle in world.obstacles:
            move_obstacle(obstacle, target, dt)

        kept = [o for o in world.obstacles if not self._out_of_play(o, world)]
        self.culled += len(world.obstacles) - len(kept)
        world.obstacles = kept
        return spawned
