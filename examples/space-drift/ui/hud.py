"""Score readout and the start / game-over overlays."""
from __future__ import annotations

import pygame

from space_drift import FrameView, Phase

from ui.constants import (
    GAMEOVER_COLOR,
    HUD_LINE_H,
    HUD_PAD,
    TEXT_COLOR,
    TEXT_DIM,
    TITLE,
    TITLE_COLOR,
)


class Hud:
    """Display adapter: remembers what the bus last reported and draws it."""

    def __init__(self, font: pygame.font.Font, title_font: pygame.font.Font) -> None:
        self.font = font
        self.title_font = title_font
        self.score = 0
        self.phase = Phase.START
        self.final_score = 0
        self.best = 0

    def show_score(self, score: int) -> None:
        self.score = score

    def show_phase(self, phase: Phase, score: int) -> None:
        self.phase = phase
        if phase is Phase.GAMEOVER:
            self.final_score = score
            self.best = max(self.best, score)

    def draw(self, surface: pygame.Surface, view: FrameView) -> None:
        if self.phase is Phase.PLAYING:
            label = self.font.render(f"SCORE {self.score}", True, TEXT_COLOR)
            surface.blit(label, (HUD_PAD, HUD_PAD))
            return

        w, h = surface.get_size()
        if self.phase is Phase.START:
            lines = [
                (self.title_font, TITLE.upper(), TITLE_COLOR),
                (self.font, "Collect the neon rings. Avoid the red chasers and the walls.", TEXT_COLOR),
                (self.font, "[Arrows/WASD] Thrust   [Enter/Space] Start   [Esc] Quit", TEXT_DIM),
            ]
        else:
            lines = [
                (self.title_font, "SIGNAL LOST", GAMEOVER_COLOR),
                (self.font, f"Score {self.final_score}   Best {self.best}", TEXT_COLOR),
                (self.font, "[Enter/Space/R] Drift again   [Esc] Quit", TEXT_DIM),
            ]

        y = h // 2 - HUD_LINE_H * 2
        for font, text, color in lines:
            surf = font.render(text, True, color)
            surface.blit(surf, (w // 2 - surf.get_width() // 2, y))
            y += surf.get_height() + HUD_LINE_H // 2
