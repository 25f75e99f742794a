"""Immutable per-frame snapshots handed to renderers."""
from __future__ import annotations

from dataclasses import dataclass

from drift_physics import Vec2

from space_drift.entities import ObstacleKind
from space_drift.state import Phase


@dataclass(frozen=True)
class PlayerView:
    position: Vec2
    radius: float
    angle: float
    trail: tuple[Vec2, ...]


@dataclass(frozen=True)
class ObstacleView:
    position: Vec2
    radius: float
    color: tuple[int, int, int]
    kind: ObstacleKind
    age: float


@dataclass(frozen=True)
class ParticleView:
    position: Vec2
    color: tuple[int, int, int]
    size: float
    alpha: float


@dataclass(frozen=True)
class FrameView:
    """Everything a renderer needs for one frame; never aliases live state."""

    phase: Phase
    score: int
    width: float
    height: float
    player: PlayerView | None
    obstacles: tuple[ObstacleView, ...]
    particles: tuple[ParticleView, ...]
