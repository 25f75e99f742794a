"""Draws a FrameView onto the pygame window."""
from __future__ import annotations

import math
import random

import pygame

from space_drift import FrameView, ObstacleKind
from space_drift.config import PLAYER_COLOR, THRUST_COLOR

from ui.constants import (
    BG_CENTER,
    BG_EDGE,
    CHASER_CORE,
    NOSE_COLOR,
    STAR_COLOR,
    STAR_COUNT,
    STAR_MAX_RADIUS,
    STAR_MIN_RADIUS,
)
from ui.hud import Hud


def _lerp_color(a, b, t: float) -> tuple[int, int, int]:
    return (
        int(a[0] + (b[0] - a[0]) * t),
        int(a[1] + (b[1] - a[1]) * t),
        int(a[2] + (b[2] - a[2]) * t),
    )


def _backdrop(size: tuple[int, int], seed: int) -> pygame.Surface:
    """Radial fade from the arena center plus a fixed starfield."""
    w, h = size
    surface = pygame.Surface(size)
    surface.fill(BG_EDGE)
    outer = max(w, h)
    steps = 48
    for i in range(steps, 0, -1):
        t = i / steps
        color = _lerp_color(BG_CENTER, BG_EDGE, t)
        pygame.draw.circle(surface, color, (w // 2, h // 2), int(outer * t))

    rng = random.Random(seed)
    for _ in range(STAR_COUNT):
        pos = (rng.randrange(w), rng.randrange(h))
        pygame.draw.circle(
            surface, STAR_COLOR, pos, rng.randint(STAR_MIN_RADIUS, STAR_MAX_RADIUS)
        )
    return surface


class PygameRenderer:
    def __init__(self, screen: pygame.Surface, hud: Hud, seed: int = 0) -> None:
        self.screen = screen
        self.hud = hud
        self._seed = seed
        self._backdrop = _backdrop(screen.get_size(), seed)

    def resize(self, screen: pygame.Surface) -> None:
        self.screen = screen
        self._backdrop = _backdrop(screen.get_size(), self._seed)

    def draw(self, view: FrameView) -> None:
        screen = self.screen
        screen.blit(self._backdrop, (0, 0))

        for p in view.particles:
            radius = max(1, int(p.size))
            color = _lerp_color(BG_EDGE, p.color, p.alpha)
            pygame.draw.circle(screen, color, (int(p.position[0]), int(p.position[1])), radius)

        for o in view.obstacles:
            center = (int(o.position[0]), int(o.position[1]))
            radius = int(o.radius)
            if o.kind is ObstacleKind.HOSTILE:
                pulse = 0.5 + 0.5 * math.sin(o.age * 6.0)
                pygame.draw.circle(screen, o.color, center, radius)
                pygame.draw.circle(
                    screen, CHASER_CORE, center, max(2, int(radius * (0.2 + 0.15 * pulse)))
                )
            else:
                pygame.draw.circle(screen, o.color, center, radius, 2)

        if view.player is not None:
            self._draw_trail(view)
            self._draw_drifter(view)

        self.hud.draw(screen, view)

    def _draw_trail(self, view: FrameView) -> None:
        trail = view.player.trail
        count = len(trail)
        for i, point in enumerate(trail):
            t = (i + 1) / count
            pygame.draw.circle(
                self.screen,
                _lerp_color(BG_EDGE, THRUST_COLOR, t * 0.6),
                (int(point[0]), int(point[1])),
                max(1, int(view.player.radius * 0.4 * t)),
            )

    def _draw_drifter(self, view: FrameView) -> None:
        player = view.player
        x, y = player.position
        r = player.radius
        pygame.draw.circle(self.screen, PLAYER_COLOR, (int(x), int(y)), int(r))

        # Arrow pointing along the facing angle.
        cos_a = math.cos(player.angle)
        sin_a = math.sin(player.angle)
        local = ((0.6, 0.0), (-0.4, -0.4), (-0.2, 0.0), (-0.4, 0.4))
        points = [
            (x + (px * cos_a - py * sin_a) * r, y + (px * sin_a + py * cos_a) * r)
            for px, py in local
        ]
        pygame.draw.polygon(self.screen, NOSE_COLOR, points)
