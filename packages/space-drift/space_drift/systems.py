"""System factories for the drift arena.

Every gameplay system is a no-op outside the PLAYING phase, which is what
freezes the arena on GAMEOVER until a restart.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from drift_physics import vec

from space_drift.collaborators import THRUST
from space_drift.config import (
    THRUST_COLOR,
    THRUST_CUE_CHANCE,
    THRUST_PARTICLE_LIFE,
    THRUST_PARTICLE_SPEED,
)
from space_drift.field import ObstacleField
from space_drift.motion import advance_particles, burst, move_player
from space_drift.resolver import CollisionResolver

if TYPE_CHECKING:
    from drift import TickContext

    from space_drift.world import World


def make_player_system(
    cue_chance: float = THRUST_CUE_CHANCE,
) -> Callable[["World", "TickContext"], None]:
    """Sample input once, move the drifter, and occasionally cue thrust feedback."""

    def player_system(world: World, ctx: TickContext) -> None:
        player = world.player
        if player is None or not world.state.playing:
            return
        x, y = world.input.axis()
        axis = (float(x), float(y))
        move_player(player, axis)

        if not vec.is_zero(axis) and ctx.random.random() < cue_chance:
            world.bus.publish(THRUST)
            world.particles.extend(burst(
                ctx.random, player.position, THRUST_COLOR, 1,
                THRUST_PARTICLE_SPEED, THRUST_PARTICLE_LIFE,
            ))

    return player_system


def make_field_system(field: ObstacleField) -> Callable[["World", "TickContext"], None]:

    def field_system(world: World, ctx: TickContext) -> None:
        if world.state.playing:
            field.update(world, ctx.dt, ctx.random)

    return field_system


def make_particle_system() -> Callable[["World", "TickContext"], None]:

    def particle_system(world: World, ctx: TickContext) -> None:
        if world.state.playing:
            world.particles = advance_particles(world.particles, ctx.dt)

    return particle_system


def make_collision_system(
    resolver: CollisionResolver,
) -> Callable[["World", "TickContext"], None]:

    def collision_system(world: World, ctx: TickContext) -> None:
        resolver.resolve(world, ctx.random)

    return collision_system
