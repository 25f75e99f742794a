"""Per-tick integration rules for the drifter, obstacles, and particles."""
from __future__ import annotations

import random
from typing import Callable

from drift_physics import Vec2, vec

from space_drift.config import (
    CHASER_MAX_SPEED,
    CHASER_STEER_FORCE,
    COAST_FACING_MIN_SPEED,
    FRICTION,
    MAX_SPEED,
    OBSTACLE_FRAME_RATE,
    PARTICLE_SHRINK,
    THRUST_FORCE,
    TRAIL_MIN_SPEED,
)
from space_drift.entities import Obstacle, ObstacleKind, Particle, Player


def move_player(player: Player, axis: Vec2) -> None:
    """Apply one tick of thrust, friction, speed cap, and trail bookkeeping.

    Thrust overwrites the previous acceleration, so toggling input quickly
    never builds up an impulse. Integration is per tick, not per second.
    """
    if not player.alive:
        return

    thrusting = not vec.is_zero(axis)
    if thrusting:
        player.acceleration = vec.scale(axis, THRUST_FORCE)
        player.angle = vec.angle(axis)
    else:
        player.acceleration = vec.zero()

    velocity = vec.add(player.velocity, player.acceleration)
    velocity = vec.scale(velocity, FRICTION)
    player.velocity = vec.clamp_magnitude(velocity, MAX_SPEED)
    player.position = vec.add(player.position, player.velocity)

    speed = vec.magnitude(player.velocity)
    if not thrusting and speed > COAST_FACING_MIN_SPEED:
        player.angle = vec.angle(player.velocity)
    if speed > TRAIL_MIN_SPEED:
        player.trail.append(player.position)


def _steer_toward(obstacle: Obstacle, target: Vec2 | None) -> None:
    if target is None:
        return
    heading = vec.normalize(vec.sub(target, obstacle.position))
    velocity = vec.add(obstacle.velocity, vec.scale(heading, CHASER_STEER_FORCE))
    obstacle.velocity = vec.clamp_magnitude(velocity, CHASER_MAX_SPEED)


def _coast(obstacle: Obstacle, target: Vec2 | None) -> None:
    pass


STEERING: dict[ObstacleKind, Callable[[Obstacle, Vec2 | None], None]] = {
    ObstacleKind.HOSTILE: _steer_toward,
    ObstacleKind.FRIENDLY: _coast,
}


def move_obstacle(obstacle: Obstacle, target: Vec2 | None, dt: float) -> None:
    """Steer by kind, then drift. Velocity is in units per 1/60 s frame."""
    obstacle.age += dt
    STEERING[obstacle.kind](obstacle, target)
    obstacle.position = vec.add(
        obstacle.position, vec.scale(obstacle.velocity, dt * OBSTACLE_FRAME_RATE)
    )


def burst(
    rng: random.Random,
    position: Vec2,
    color: tuple[int, int, int],
    count: int,
    speed: float,
    life: float,
) -> list[Particle]:
    particles = []
    for _ in range(count):
        velocity = ((rng.random() - 0.5) * speed, (rng.random() - 0.5) * speed)
        particles.append(Particle(
            position=position,
            velocity=velocity,
            color=color,
            life=life,
            max_life=life,
            size=rng.random() * 3.0 + 1.0,
        ))
    return particles


def advance_particles(particles: list[Particle], dt: float) -> list[Particle]:
    """Integrate particles and return the survivors."""
    for p in particles:
        p.position = vec.add(p.position, p.velocity)
        p.life -= dt
        p.size *= PARTICLE_SHRINK
    return [p for p in particles if not p.expired]
