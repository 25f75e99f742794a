"""Player contact resolution: collect, hostile death, and wall death."""
from __future__ import annotations

import random
from enum import Enum
from typing import TYPE_CHECKING

from drift_physics import circle_breaches_rect, circles_overlap

from space_drift.collaborators import COLLECT, CRASH
from space_drift.config import (
    COLLECT_BURST_LIFE,
    COLLECT_BURST_SIZE,
    COLLECT_BURST_SPEED,
    COLLECT_POINTS,
)
from space_drift.entities import Player
from space_drift.motion import burst

if TYPE_CHECKING:
    from space_drift.world import World


class Outcome(Enum):
    NONE = "none"
    COLLECT = "collect"
    DEATH = "death"
    WALL_DEATH = "wall_death"


class CollisionResolver:
    """Checks the drifter against every obstacle, then against the walls.

    The obstacle pass runs first. A hostile contact ends the run immediately:
    no further obstacles are examined and the wall check is skipped, so a
    tick produces at most one game-over.
    """

    def __init__(
        self,
        points: int = COLLECT_POINTS,
        burst_size: int = COLLECT_BURST_SIZE,
    ) -> None:
        self.points = points
        self.burst_size = burst_size

    def resolve(self, world: World, rng: random.Random) -> Outcome:
        player = world.player
        if player is None or not world.state.playing:
            return Outcome.NONE
        outcome = self.resolve_obstacles(world, player, rng)
        if outcome is Outcome.DEATH:
            return outcome
        if self.resolve_walls(world, player):
            return Outcome.WALL_DEATH
        return outcome

    def resolve_obstacles(
        self, world: World, player: Player, rng: random.Random
    ) -> Outcome:
        outcome = Outcome.NONE
        # Reverse index walk so deletions never shift unvisited entries.
        for i in range(len(world.obstacles) - 1, -1, -1):
            obstacle = world.obstacles[i]
            if not circles_overlap(
                player.position, player.radius, obstacle.position, obstacle.radius
            ):
                continue
            if obstacle.hostile:
                world.bus.publish(CRASH, cause="hostile", position=obstacle.position)
                world.end_run("hostile")
                return Outcome.DEATH
            del world.obstacles[i]
            world.add_score(self.points)
            world.particles.extend(burst(
                rng,
                obstacle.position,
                obstacle.color,
                self.burst_size,
                COLLECT_BURST_SPEED,
                COLLECT_BURST_LIFE,
            ))
            world.bus.publish(COLLECT, points=self.points, position=obstacle.position)
            outcome = Outcome.COLLECT
        return outcome

    def resolve_walls(self, world: World, player: Player) -> bool:
        if not circle_breaches_rect(player.position, player.radius, world.width, world.height):
            return False
        world.bus.publish(CRASH, cause="wall", position=player.position)
        world.end_run("wall")
        return True
