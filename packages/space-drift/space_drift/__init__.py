"""space-drift - Inertial arcade arena built on the drift engine."""
from __future__ import annotations

from space_drift.collaborators import (
    AudioCues,
    AudioUnavailableError,
    Display,
    InputSource,
    Renderer,
    SilentAudio,
    StaticInput,
)
from space_drift.config import DriftConfig
from space_drift.entities import Obstacle, ObstacleKind, Particle, Player
from space_drift.field import ObstacleField
from space_drift.game import Game, build_game
from space_drift.resolver import CollisionResolver, Outcome
from space_drift.state import GameState, InvalidTransitionError, Phase
from space_drift.view import FrameView
from space_drift.world import World

__all__ = [
    "AudioCues",
    "AudioUnavailableError",
    "CollisionResolver",
    "Display",
    "DriftConfig",
    "FrameView",
    "Game",
    "GameState",
    "InputSource",
    "InvalidTransitionError",
    "Obstacle",
    "ObstacleField",
    "ObstacleKind",
    "Outcome",
    "Particle",
    "Phase",
    "Player",
    "Renderer",
    "SilentAudio",
    "StaticInput",
    "World",
    "build_game",
]
