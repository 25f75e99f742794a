"""Tests for the run state machine and World run lifecycle."""
from __future__ import annotations

import pytest

from space_drift.collaborators import PHASE_CHANGED, RUN_STARTED, SCORE_CHANGED, StaticInput
from space_drift.entities import Obstacle, ObstacleKind, Particle
from space_drift.state import TRANSITIONS, GameState, InvalidTransitionError, Phase
from space_drift.world import World


class TestGameState:
    def test_initial_phase_is_start(self):
        state = GameState()
        assert state.phase is Phase.START
        assert not state.playing

    def test_full_cycle(self):
        state = GameState()
        assert state.fire("start") is Phase.PLAYING
        assert state.playing
        assert state.fire("die") is Phase.GAMEOVER
        assert state.fire("restart") is Phase.PLAYING

    def test_start_cannot_jump_to_gameover(self):
        state = GameState()
        assert not state.can("die")
        with pytest.raises(InvalidTransitionError) as excinfo:
            state.fire("die")
        assert excinfo.value.phase is Phase.START
        assert excinfo.value.trigger == "die"
        assert state.phase is Phase.START

    @pytest.mark.parametrize(
        "phase,trigger",
        [
            (Phase.START, "restart"),
            (Phase.PLAYING, "start"),
            (Phase.PLAYING, "restart"),
            (Phase.GAMEOVER, "die"),
            (Phase.GAMEOVER, "start"),
        ],
    )
    def test_disallowed_triggers(self, phase, trigger):
        assert trigger not in TRANSITIONS[phase]

    def test_listeners_receive_old_and_new(self):
        state = GameState()
        seen = []
        state.on_transition(lambda old, new: seen.append((old, new)))
        state.fire("start")
        state.fire("die")
        assert seen == [
            (Phase.START, Phase.PLAYING),
            (Phase.PLAYING, Phase.GAMEOVER),
        ]

    def test_failed_trigger_does_not_notify(self):
        state = GameState()
        seen = []
        state.on_transition(lambda old, new: seen.append(new))
        with pytest.raises(InvalidTransitionError):
            state.fire("restart")
        assert seen == []


class TestWorldRuns:
    def _world(self) -> World:
        return World(800, 600, StaticInput())

    def test_no_player_before_start(self):
        world = self._world()
        assert world.player is None
        assert world.phase is Phase.START

    def test_begin_run_places_player_at_center(self):
        world = self._world()
        world.begin_run()
        assert world.phase is Phase.PLAYING
        assert world.player is not None
        assert world.player.position == (400.0, 300.0)
        assert world.player.velocity == (0.0, 0.0)
        assert world.player.radius == 18.0
        assert world.runs == 1

    def test_begin_run_while_playing_rejected(self):
        world = self._world()
        world.begin_run()
        player = world.player
        world.score = 300
        with pytest.raises(InvalidTransitionError):
            world.begin_run()
        assert world.player is player
        assert world.score == 300

    def test_end_run_removes_player(self):
        world = self._world()
        world.begin_run()
        player = world.player
        world.end_run("wall")
        assert world.phase is Phase.GAMEOVER
        assert world.player is None
        assert player is not None and not player.alive

    def test_restart_resets_everything(self):
        world = self._world()
        world.begin_run()
        world.add_score(400)
        world.obstacles.append(
            Obstacle((1.0, 1.0), (0.0, 0.0), 20.0, ObstacleKind.FRIENDLY, (0, 0, 0))
        )
        world.particles.append(Particle((0.0, 0.0), (0.0, 0.0), (0, 0, 0), 1.0, 1.0, 2.0))
        world.difficulty_timer = 42.0
        world.spawn_timer = 1.2
        world.end_run("hostile")

        world.begin_run()

        assert world.phase is Phase.PLAYING
        assert world.score == 0
        assert world.obstacles == []
        assert world.particles == []
        assert world.difficulty_timer == 0.0
        assert world.spawn_timer == 0.0
        assert world.player is not None
        assert world.player.position == world.center
        assert world.runs == 2

    def test_restart_uses_current_center(self):
        world = self._world()
        world.begin_run()
        world.end_run("wall")
        world.resize(1024, 768)
        world.begin_run()
        assert world.player is not None
        assert world.player.position == (512.0, 384.0)

    def test_run_signals(self):
        world = self._world()
        world.begin_run()
        names = [s.name for s in world.bus.pending]
        assert names == [PHASE_CHANGED, RUN_STARTED, SCORE_CHANGED]
        phase_signal = world.bus.pending[0]
        assert phase_signal.data["phase"] is Phase.PLAYING
        assert phase_signal.data["score"] == 0

    def test_score_cannot_decrease(self):
        world = self._world()
        world.begin_run()
        world.add_score(100)
        with pytest.raises(ValueError):
            world.add_score(-50)
        assert world.score == 100

    def test_degenerate_resize_ignored(self, caplog):
        world = self._world()
        world.resize(0, 600)
        assert (world.width, world.height) == (800.0, 600.0)
        assert "degenerate" in caplog.text
