"""Build a complete drift session: world, engine, systems, and collaborators."""
from __future__ import annotations

import logging

from drift import Engine, MissingCollaboratorError
from drift_signal import SignalBus, make_signal_system

from space_drift.collaborators import (
    AudioCues,
    AudioUnavailableError,
    Display,
    InputSource,
    Renderer,
    SilentAudio,
    connect_audio,
    connect_display,
)
from space_drift.config import DriftConfig
from space_drift.field import ObstacleField
from space_drift.resolver import CollisionResolver
from space_drift.state import Phase
from space_drift.systems import (
    make_collision_system,
    make_field_system,
    make_particle_system,
    make_player_system,
)
from space_drift.view import FrameView
from space_drift.world import World

logger = logging.getLogger(__name__)


class Game:
    """Session facade handed to the frame scheduler.

    The scheduler calls ``frame(timestamp)`` once per rendered frame and
    forwards the user's start/restart trigger to ``press_start()``.
    """

    def __init__(
        self,
        engine: Engine[World],
        field: ObstacleField,
        resolver: CollisionResolver,
        audio: AudioCues,
    ) -> None:
        self.engine = engine
        self.field = field
        self.resolver = resolver
        self.audio = audio

    @property
    def world(self) -> World:
        return self.engine.world

    @property
    def phase(self) -> Phase:
        return self.world.phase

    def _activate_audio(self) -> None:
        if self.audio.active:
            return
        try:
            self.audio.activate()
        except AudioUnavailableError as exc:
            logger.warning("Audio unavailable, continuing without sound: %s", exc)

    def press_start(self) -> bool:
        """Start or restart a run. Ignored while a run is in progress."""
        if self.world.state.playing:
            return False
        self._activate_audio()
        self.world.begin_run()
        return True

    def resize(self, width: float, height: float) -> None:
        self.world.resize(width, height)

    def frame(self, timestamp: float) -> bool:
        return self.engine.frame(timestamp)

    def step(self, dt: float) -> bool:
        return self.engine.step(dt)

    def view(self) -> FrameView:
        return self.world.view()


def build_game(
    renderer: Renderer | None,
    input_source: InputSource,
    config: DriftConfig | None = None,
    audio: AudioCues | None = None,
    display: Display | None = None,
) -> Game:
    """Wire a session. A renderer is mandatory; audio and display are optional."""
    if renderer is None:
        raise MissingCollaboratorError("renderer")
    if config is None:
        config = DriftConfig()
    if audio is None:
        audio = SilentAudio()

    bus = SignalBus()
    world = World(config.width, config.height, input_source, bus)
    engine: Engine[World] = Engine(world, max_dt=config.max_dt, seed=config.seed)

    field = ObstacleField()
    resolver = CollisionResolver()

    engine.add_system(make_player_system())
    engine.add_system(make_field_system(field))
    engine.add_system(make_collision_system(resolver))
    engine.add_system(make_particle_system())
    engine.add_system(make_signal_system(bus))
    engine.on_frame(lambda w, ctx: renderer.draw(w.view()))

    connect_audio(bus, audio)
    if display is not None:
        connect_display(bus, display)

    logger.debug("Session built with seed %d", engine.seed)
    return Game(engine, field, resolver, audio)
