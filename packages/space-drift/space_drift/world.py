"""Simulation context shared by every system in a session."""
from __future__ import annotations

import logging

from drift_physics import Vec2
from drift_signal import SignalBus

from space_drift.collaborators import (
    PHASE_CHANGED,
    RUN_STARTED,
    SCORE_CHANGED,
    InputSource,
)
from space_drift.entities import Obstacle, Particle, Player
from space_drift.state import GameState, InvalidTransitionError, Phase
from space_drift.view import FrameView, ObstacleView, ParticleView, PlayerView

logger = logging.getLogger(__name__)


class World:
    """Arena size, run state, and every live body.

    A single instance is owned by the engine for the lifetime of a session;
    runs are started and ended on it rather than replacing it.
    """

    def __init__(
        self,
        width: float,
        height: float,
        input_source: InputSource,
        bus: SignalBus | None = None,
    ) -> None:
        self.width = float(width)
        self.height = float(height)
        self.input = input_source
        self.bus = bus if bus is not None else SignalBus()
        self.state = GameState()
        self.player: Player | None = None
        self.obstacles: list[Obstacle] = []
        self.particles: list[Particle] = []
        self.score = 0
        self.difficulty_timer = 0.0
        self.spawn_timer = 0.0
        self.runs = 0
        self.state.on_transition(self._publish_phase)

    @property
    def center(self) -> Vec2:
        return (self.width / 2.0, self.height / 2.0)

    @property
    def phase(self) -> Phase:
        return self.state.phase

    def _publish_phase(self, old: Phase, new: Phase) -> None:
        self.bus.publish(PHASE_CHANGED, phase=new, previous=old, score=self.score)

    def resize(self, width: float, height: float) -> None:
        """Adopt new arena dimensions; later spawn and bounds checks use them."""
        if width <= 0 or height <= 0:
            logger.warning("Ignoring degenerate arena size %sx%s", width, height)
            return
        self.width = float(width)
        self.height = float(height)

    def begin_run(self) -> None:
        """Start (from START) or restart (from GAMEOVER) with a clean arena."""
        trigger = "start" if self.state.phase is Phase.START else "restart"
        if not self.state.can(trigger):
            raise InvalidTransitionError(self.state.phase, trigger)
        self.score = 0
        self.obstacles = []
        self.particles = []
        self.difficulty_timer = 0.0
        self.spawn_timer = 0.0
        self.player = Player(position=self.center)
        self.runs += 1
        self.state.fire(trigger)
        self.bus.publish(RUN_STARTED, run=self.runs)
        self.bus.publish(SCORE_CHANGED, score=self.score)
        logger.info("Run %d started in %gx%g arena", self.runs, self.width, self.height)

    def end_run(self, cause: str) -> None:
        self.state.fire("die")
        if self.player is not None:
            self.player.alive = False
        self.player = None
        logger.info(
            "Run %d over (%s) after %.1fs, score %d",
            self.runs, cause, self.difficulty_timer, self.score,
        )

    def add_score(self, points: int) -> None:
        if points < 0:
            raise ValueError("Score can only increase")
        self.score += points
        self.bus.publish(SCORE_CHANGED, score=self.score)

    def view(self) -> FrameView:
        player = None
        if self.player is not None:
            player = PlayerView(
                position=self.player.position,
                radius=self.player.radius,
                angle=self.player.angle,
                trail=tuple(self.player.trail),
            )
        return FrameView(
            phase=self.state.phase,
            score=self.score,
            width=self.width,
            height=self.height,
            player=player,
            obstacles=tuple(
                ObstacleView(o.position, o.radius, o.color, o.kind, o.age)
                for o in self.obstacles
            ),
            particles=tuple(
                ParticleView(p.position, p.color, p.size, max(0.0, p.life / p.max_life))
                for p in self.particles
            ),
        )
