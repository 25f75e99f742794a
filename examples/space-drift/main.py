"""Space Drift - inertial arcade arena.

Exercises drift, drift-physics, drift-signal, and space-drift.

Controls:
  Arrows/WASD   Thrust
  Enter/Space   Start / restart
  R             Restart after game over
  Esc           Quit
"""
from __future__ import annotations

import argparse
import logging
import sys
import time

import pygame

from drift import MissingCollaboratorError
from space_drift import DriftConfig, Phase, SilentAudio, build_game
from space_drift.config import FPS, HEIGHT, WIDTH

from ui.audio import MixerAudio
from ui.constants import SAMPLE_RATE, TITLE
from ui.hud import Hud
from ui.input import RESTART_KEYS, START_KEYS, KeyboardInput
from ui.renderer import PygameRenderer

logger = logging.getLogger("space_drift.demo")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Space Drift arcade demo")
    parser.add_argument("--width", type=int, default=WIDTH, help="Initial window width")
    parser.add_argument("--height", type=int, default=HEIGHT, help="Initial window height")
    parser.add_argument("--fps", type=int, default=FPS, help="Frame rate cap")
    parser.add_argument("--seed", type=int, default=None, help="Simulation RNG seed")
    parser.add_argument("--no-audio", action="store_true", help="Disable sound cues")
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = DriftConfig(width=args.width, height=args.height, seed=args.seed, fps=args.fps)
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2

    pygame.mixer.pre_init(SAMPLE_RATE, -16, 1)
    pygame.init()
    screen = pygame.display.set_mode((config.width, config.height), pygame.RESIZABLE)
    pygame.display.set_caption(TITLE)
    pg_clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 16)
    title_font = pygame.font.SysFont("monospace", 48, bold=True)

    hud = Hud(font, title_font)
    renderer = PygameRenderer(screen, hud, seed=args.seed or 0)
    audio = SilentAudio() if args.no_audio else MixerAudio()

    try:
        game = build_game(renderer, KeyboardInput(), config, audio=audio, display=hud)
    except MissingCollaboratorError as exc:
        logger.error("%s", exc)
        pygame.quit()
        return 1
    logger.info("Seed %d", game.engine.seed)

    running = True
    while running:
        pg_clock.tick(config.fps)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif game.phase is Phase.START and event.key in START_KEYS:
                    game.press_start()
                elif game.phase is Phase.GAMEOVER and event.key in RESTART_KEYS:
                    game.press_start()

            elif event.type == pygame.VIDEORESIZE:
                renderer.resize(pygame.display.get_surface())
                game.resize(event.w, event.h)

        # --- Tick + render ---
        game.frame(time.monotonic())
        pygame.display.flip()

    if game.engine.failed_ticks:
        logger.warning("%d tick(s) failed during the session", game.engine.failed_ticks)
    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
