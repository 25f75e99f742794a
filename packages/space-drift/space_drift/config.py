"""Tunables for the drift arena."""
from __future__ import annotations

from dataclasses import dataclass

from drift import MAX_DT

# --- Arena ---
WIDTH, HEIGHT = 800, 600
FPS = 60

# --- Player ---
PLAYER_RADIUS = 18.0
THRUST_FORCE = 0.8
FRICTION = 0.95
MAX_SPEED = 12.0
TRAIL_CAPACITY = 30
TRAIL_MIN_SPEED = 0.5
COAST_FACING_MIN_SPEED = 0.1

# --- Obstacles ---
MIN_OBSTACLE_RADIUS = 15.0
OBSTACLE_RADIUS_SPREAD = 20.0
SPAWN_RING_PADDING = 50.0
AIM_JITTER = 100.0
CULL_MARGIN = 100.0
CHASER_STEER_FORCE = 0.2
CHASER_MAX_SPEED = 3.0
# Obstacle velocities are expressed per 1/60 s frame.
OBSTACLE_FRAME_RATE = 60.0

# --- Difficulty curve ---
BASE_SPAWN_INTERVAL = 2.0
MIN_SPAWN_INTERVAL = 0.5
SPAWN_INTERVAL_RAMP = 60.0
BASE_HOSTILE_CHANCE = 0.2
HOSTILE_CHANCE_RAMP = 120.0
BASE_OBSTACLE_SPEED = 1.0
OBSTACLE_SPEED_RAMP = 45.0

# --- Scoring ---
COLLECT_POINTS = 100

# --- Particles (cosmetic) ---
COLLECT_BURST_SIZE = 10
COLLECT_BURST_SPEED = 5.0
COLLECT_BURST_LIFE = 0.8
THRUST_CUE_CHANCE = 0.05
THRUST_PARTICLE_SPEED = 2.0
THRUST_PARTICLE_LIFE = 0.5
PARTICLE_SHRINK = 0.95

# --- Colors ---
PLAYER_COLOR = (0, 255, 255)
THRUST_COLOR = (102, 252, 241)
HOSTILE_COLOR = (255, 0, 85)
FRIENDLY_PALETTE = (
    (0, 255, 153),
    (0, 204, 255),
    (204, 0, 255),
    (255, 255, 0),
)


@dataclass(frozen=True)
class DriftConfig:
    """Immutable per-session settings.

    Attributes:
        width: Initial arena width in pixels.
        height: Initial arena height in pixels.
        max_dt: Upper bound on the timestep of a single tick (seconds).
        seed: Seed for the engine RNG; ``None`` draws one from the OS.
        fps: Frame rate used by the built-in frame scheduler.
    """

    width: float = WIDTH
    height: float = HEIGHT
    max_dt: float = MAX_DT
    seed: int | None = None
    fps: int = FPS

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Arena must have positive size, got {self.width}x{self.height}"
            )
