"""Keyboard adapter: arrows or WASD to a two-axis direction."""
from __future__ import annotations

import pygame

LEFT_KEYS = (pygame.K_LEFT, pygame.K_a)
RIGHT_KEYS = (pygame.K_RIGHT, pygame.K_d)
UP_KEYS = (pygame.K_UP, pygame.K_w)
DOWN_KEYS = (pygame.K_DOWN, pygame.K_s)

START_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE)
RESTART_KEYS = START_KEYS + (pygame.K_r,)


class KeyboardInput:
    """Samples the held keys each time the simulation asks for the axis."""

    def axis(self) -> tuple[int, int]:
        keys = pygame.key.get_pressed()
        x = 0
        y = 0
        if any(keys[k] for k in LEFT_KEYS):
            x -= 1
        if any(keys[k] for k in RIGHT_KEYS):
            x += 1
        if any(keys[k] for k in UP_KEYS):
            y -= 1
        if any(keys[k] for k in DOWN_KEYS):
            y += 1
        return (x, y)
