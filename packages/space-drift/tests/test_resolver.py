"""Tests for contact resolution: collecting, hostile death, wall death."""
from __future__ import annotations

import random

from space_drift.collaborators import COLLECT, CRASH, SCORE_CHANGED, StaticInput
from space_drift.config import HOSTILE_COLOR
from space_drift.entities import Obstacle, ObstacleKind
from space_drift.resolver import CollisionResolver, Outcome
from space_drift.state import Phase
from space_drift.world import World


def _playing_world() -> World:
    world = World(800.0, 600.0, StaticInput())
    world.begin_run()
    world.bus.clear()
    return world


def _friendly(x: float, y: float, radius: float = 5.0) -> Obstacle:
    return Obstacle((x, y), (0.0, 0.0), radius, ObstacleKind.FRIENDLY, (0, 255, 153))


def _hostile(x: float, y: float, radius: float = 5.0) -> Obstacle:
    return Obstacle((x, y), (0.0, 0.0), radius, ObstacleKind.HOSTILE, HOSTILE_COLOR)


def _signal_names(world: World) -> list[str]:
    return [s.name for s in world.bus.pending]


class TestCollect:
    def test_friendly_contact_scores_and_removes(self) -> None:
        world = _playing_world()
        assert world.player is not None
        assert world.player.position == (400.0, 300.0)
        world.obstacles.append(_friendly(405.0, 300.0))

        outcome = CollisionResolver().resolve(world, random.Random(0))

        assert outcome is Outcome.COLLECT
        assert world.score == 100
        assert world.obstacles == []
        assert world.phase is Phase.PLAYING

    def test_collect_spawns_burst_at_obstacle(self) -> None:
        world = _playing_world()
        world.obstacles.append(_friendly(410.0, 300.0))
        CollisionResolver().resolve(world, random.Random(0))
        assert len(world.particles) == 10
        assert all(p.position == (410.0, 300.0) for p in world.particles)
        assert all(p.color == (0, 255, 153) for p in world.particles)

    def test_collect_publishes_signals(self) -> None:
        world = _playing_world()
        world.obstacles.append(_friendly(405.0, 300.0))
        CollisionResolver().resolve(world, random.Random(0))
        assert _signal_names(world) == [SCORE_CHANGED, COLLECT]

    def test_multiple_collects_in_one_tick(self) -> None:
        world = _playing_world()
        far = _friendly(100.0, 100.0)
        world.obstacles.extend([_friendly(405.0, 300.0), far, _friendly(395.0, 300.0)])
        CollisionResolver().resolve(world, random.Random(0))
        assert world.score == 200
        assert world.obstacles == [far]

    def test_exactly_touching_does_not_collect(self) -> None:
        world = _playing_world()
        world.obstacles.append(_friendly(423.0, 300.0))
        assert CollisionResolver().resolve(world, random.Random(0)) is Outcome.NONE
        assert world.score == 0
        assert len(world.obstacles) == 1

    def test_just_inside_threshold_collects(self) -> None:
        world = _playing_world()
        world.obstacles.append(_friendly(423.0 - 1e-9, 300.0))
        assert CollisionResolver().resolve(world, random.Random(0)) is Outcome.COLLECT

    def test_custom_points(self) -> None:
        world = _playing_world()
        world.obstacles.append(_friendly(405.0, 300.0))
        CollisionResolver(points=250, burst_size=0).resolve(world, random.Random(0))
        assert world.score == 250
        assert world.particles == []


class TestHostile:
    def test_hostile_contact_ends_run(self) -> None:
        world = _playing_world()
        player = world.player
        world.obstacles.append(_hostile(405.0, 300.0))

        outcome = CollisionResolver().resolve(world, random.Random(0))

        assert outcome is Outcome.DEATH
        assert world.phase is Phase.GAMEOVER
        assert world.player is None
        assert player is not None and not player.alive

    def test_processing_stops_at_death(self) -> None:
        world = _playing_world()
        friendly = _friendly(395.0, 300.0)
        # Reverse iteration visits the hostile (last) first.
        world.obstacles.extend([friendly, _hostile(405.0, 300.0)])
        CollisionResolver().resolve(world, random.Random(0))
        assert world.score == 0
        assert friendly in world.obstacles

    def test_collects_before_death_are_kept(self) -> None:
        world = _playing_world()
        world.obstacles.extend([_hostile(395.0, 300.0), _friendly(405.0, 300.0)])
        assert CollisionResolver().resolve(world, random.Random(0)) is Outcome.DEATH
        assert world.score == 100

    def test_crash_signal_carries_cause(self) -> None:
        world = _playing_world()
        world.obstacles.append(_hostile(405.0, 300.0))
        CollisionResolver().resolve(world, random.Random(0))
        crashes = [s for s in world.bus.pending if s.name == CRASH]
        assert len(crashes) == 1
        assert crashes[0].data["cause"] == "hostile"


class TestWalls:
    def test_breach_ends_run(self) -> None:
        world = _playing_world()
        assert world.player is not None
        world.player.position = (800.0 - 18.0 + 1.0, 300.0)
        assert CollisionResolver().resolve(world, random.Random(0)) is Outcome.WALL_DEATH
        assert world.phase is Phase.GAMEOVER

    def test_on_inset_edge_is_safe(self) -> None:
        world = _playing_world()
        assert world.player is not None
        world.player.position = (18.0, 582.0)
        assert CollisionResolver().resolve(world, random.Random(0)) is Outcome.NONE
        assert world.phase is Phase.PLAYING

    def test_hostile_and_wall_same_tick_single_game_over(self) -> None:
        world = _playing_world()
        assert world.player is not None
        world.player.position = (10.0, 300.0)
        world.obstacles.append(_hostile(15.0, 300.0))

        outcome = CollisionResolver().resolve(world, random.Random(0))

        assert outcome is Outcome.DEATH
        crashes = [s for s in world.bus.pending if s.name == CRASH]
        assert [c.data["cause"] for c in crashes] == ["hostile"]

    def test_collect_then_wall(self) -> None:
        world = _playing_world()
        assert world.player is not None
        world.player.position = (10.0, 300.0)
        world.obstacles.append(_friendly(15.0, 300.0))
        assert CollisionResolver().resolve(world, random.Random(0)) is Outcome.WALL_DEATH
        assert world.score == 100


class TestInactive:
    def test_no_player_is_noop(self) -> None:
        world = World(800.0, 600.0, StaticInput())
        world.obstacles.append(_hostile(400.0, 300.0))
        assert CollisionResolver().resolve(world, random.Random(0)) is Outcome.NONE
        assert world.phase is Phase.START


class TestPasses:
    def test_wall_pass_takes_player(self) -> None:
        world = _playing_world()
        player = world.player
        assert player is not None
        player.position = (5.0, 300.0)
        assert CollisionResolver().resolve_walls(world, player)
        assert world.phase is Phase.GAMEOVER
        assert not player.alive

    def test_obstacle_pass_takes_player(self) -> None:
        world = _playing_world()
        player = world.player
        assert player is not None
        world.obstacles.append(_friendly(405.0, 300.0))
        outcome = CollisionResolver().resolve_obstacles(world, player, random.Random(0))
        assert outcome is Outcome.COLLECT
        assert world.score == 100
