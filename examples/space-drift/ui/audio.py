"""pygame.mixer audio cues built from short synthesized tones."""
from __future__ import annotations

import array
import logging
import math
import random

import pygame

from space_drift import AudioUnavailableError

from ui.constants import PENTATONIC, SAMPLE_RATE, VOLUME

logger = logging.getLogger(__name__)


def _tone(
    start_freq: float,
    end_freq: float,
    duration: float,
    rate: int,
    channels: int,
    wave: str = "sine",
) -> pygame.mixer.Sound:
    """Render a frequency sweep with an exponential decay envelope (signed 16-bit)."""
    count = int(rate * duration)
    attack = rate * 0.01
    samples = array.array("h")
    phase = 0.0
    for i in range(count):
        t = i / count
        freq = start_freq + (end_freq - start_freq) * t
        phase += 2.0 * math.pi * freq / rate
        if wave == "saw":
            value = (phase / math.pi) % 2.0 - 1.0
        else:
            value = math.sin(phase)
        envelope = math.exp(-5.0 * t) * min(1.0, i / attack)
        sample = int(value * envelope * VOLUME * 32767)
        for _ in range(channels):
            samples.append(sample)
    return pygame.mixer.Sound(buffer=samples.tobytes())


class MixerAudio:
    """Plays thrust, collect and collision cues once the mixer is open.

    ``activate`` opens the mixer on first use; it raises
    ``AudioUnavailableError`` when no usable output device is available.
    """

    def __init__(self) -> None:
        self._active = False
        self._thrust: pygame.mixer.Sound | None = None
        self._collision: pygame.mixer.Sound | None = None
        self._chimes: list[pygame.mixer.Sound] = []

    @property
    def active(self) -> bool:
        return self._active

    def activate(self) -> None:
        try:
            if pygame.mixer.get_init() is None:
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1)
            init = pygame.mixer.get_init()
            if init is None:
                raise AudioUnavailableError("mixer did not initialize")
            rate, size, channels = init
            if size != -16:
                raise AudioUnavailableError(f"unsupported sample format {size}")
            self._thrust = _tone(60.0, 30.0, 0.3, rate, channels, wave="saw")
            self._collision = _tone(100.0, 20.0, 0.3, rate, channels, wave="saw")
            self._chimes = [_tone(f, f, 1.0, rate, channels) for f in PENTATONIC]
        except pygame.error as exc:
            raise AudioUnavailableError(str(exc)) from exc
        self._active = True
        logger.info("Audio ready (%d Hz, %d channel(s))", rate, channels)

    def play_thrust(self) -> None:
        if self._thrust is not None:
            self._thrust.play()

    def play_collect(self) -> None:
        if self._chimes:
            random.choice(self._chimes).play()

    def play_collision(self) -> None:
        if self._collision is not None:
            self._collision.play()
