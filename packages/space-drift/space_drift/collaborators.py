"""Narrow interfaces to the I/O adapters the simulation calls into."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from drift_signal import SignalBus

    from space_drift.state import Phase
    from space_drift.view import FrameView

# Signal names published on the world bus.
THRUST = "thrust"
COLLECT = "collect"
CRASH = "crash"
SCORE_CHANGED = "score_changed"
PHASE_CHANGED = "phase_changed"
RUN_STARTED = "run_started"


class AudioUnavailableError(RuntimeError):
    """Raised by an audio adapter that cannot open its output device."""


@runtime_checkable
class InputSource(Protocol):
    def axis(self) -> tuple[int, int]:
        """Current direction, each component in {-1, 0, 1}."""
        ...


@runtime_checkable
class Renderer(Protocol):
    def draw(self, view: FrameView) -> None:
        ...


@runtime_checkable
class AudioCues(Protocol):
    """Fire-and-forget sound triggers.

    ``activate`` may raise ``AudioUnavailableError``; until it succeeds
    ``active`` is False and cues are skipped by ``connect_audio``.
    """

    @property
    def active(self) -> bool:
        ...

    def activate(self) -> None:
        ...

    def play_thrust(self) -> None:
        ...

    def play_collect(self) -> None:
        ...

    def play_collision(self) -> None:
        ...


class Display(Protocol):
    def show_score(self, score: int) -> None:
        ...

    def show_phase(self, phase: Phase, score: int) -> None:
        ...


class StaticInput:
    """Input source whose direction is set directly (headless runs, tests)."""

    def __init__(self, x: int = 0, y: int = 0) -> None:
        self.set(x, y)

    def set(self, x: int, y: int) -> None:
        if x not in (-1, 0, 1) or y not in (-1, 0, 1):
            raise ValueError(f"Axis components must be -1, 0 or 1, got ({x}, {y})")
        self._axis = (x, y)

    def axis(self) -> tuple[int, int]:
        return self._axis


class SilentAudio:
    """Audio adapter that activates instantly and plays nothing."""

    def __init__(self) -> None:
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    def activate(self) -> None:
        self._active = True

    def play_thrust(self) -> None:
        pass

    def play_collect(self) -> None:
        pass

    def play_collision(self) -> None:
        pass


def connect_audio(bus: SignalBus, audio: AudioCues) -> None:
    """Route gameplay signals to audio cues, skipping them while audio is inactive."""

    def _cue(play_name: str):
        def handler(signal_name: str, data: dict[str, Any]) -> None:
            if audio.active:
                getattr(audio, play_name)()

        return handler

    bus.subscribe(THRUST, _cue("play_thrust"))
    bus.subscribe(COLLECT, _cue("play_collect"))
    bus.subscribe(CRASH, _cue("play_collision"))


def connect_display(bus: SignalBus, display: Display) -> None:
    """Push score and phase changes out to a presentation layer."""

    def on_score(signal_name: str, data: dict[str, Any]) -> None:
        display.show_score(data["score"])

    def on_phase(signal_name: str, data: dict[str, Any]) -> None:
        display.show_phase(data["phase"], data["score"])

    bus.subscribe(SCORE_CHANGED, on_score)
    bus.subscribe(PHASE_CHANGED, on_phase)
