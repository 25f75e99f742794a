"""Engine - frame-driven loop, tick-boundary error handling, and lifecycle hooks."""

import logging
import os
import random
import time
from typing import Generic, TypeVar

from drift.clock import MAX_DT, Clock
from drift.types import FrameHook, System, TickContext

logger = logging.getLogger(__name__)

W = TypeVar("W")


class Engine(Generic[W]):
    """Drives systems over a shared simulation context, one tick per frame.

    Every system receives ``(world, ctx)``. Frame hooks run after the systems
    of each tick and are where renderers attach. Exceptions raised by a tick
    are logged and swallowed at the tick boundary so an interactive loop keeps
    going; ``failed_ticks`` counts them.
    """

    def __init__(self, world: W, max_dt: float = MAX_DT, seed: int | None = None) -> None:
        self._clock = Clock(max_dt)
        self._world = world
        self._systems: list[System] = []
        self._start_hooks: list[FrameHook] = []
        self._stop_hooks: list[FrameHook] = []
        self._frame_hooks: list[FrameHook] = []
        self._stop_requested: bool = False
        self._failed_ticks = 0

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def world(self) -> W:
        return self._world

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def random(self) -> random.Random:
        return self._rng

    @property
    def failed_ticks(self) -> int:
        return self._failed_ticks

    @property
    def stop_requested(self) -> bool:
        return self._stop_requested

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_start(self, hook: FrameHook) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: FrameHook) -> None:
        self._stop_hooks.append(hook)

    def on_frame(self, hook: FrameHook) -> None:
        self._frame_hooks.append(hook)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _context(self, dt: float) -> TickContext:
        return self._clock.context(dt, self._request_stop, self._rng)

    def _tick(self, dt: float) -> None:
        self._clock.advance(dt)
        ctx = self._context(dt)
        for system in self._systems:
            system(self._world, ctx)
            if self._stop_requested:
                break
        for hook in self._frame_hooks:
            hook(self._world, ctx)

    def step(self, dt: float) -> bool:
        """Run one tick with ``dt`` capped to the clock's maximum.

        Returns False when the tick raised; the failure is logged and the
        engine stays usable for the next frame.
        """
        self._stop_requested = False
        dt = self._clock.cap(dt)
        try:
            self._tick(dt)
        except Exception:
            self._failed_ticks += 1
            logger.exception("Tick %d failed", self._clock.tick_number)
            return False
        return True

    def frame(self, timestamp: float) -> bool:
        """Run one tick using the wall-clock delta since the previous frame."""
        return self.step(self._clock.measure(timestamp))

    def _run_hooks(self, hooks: list[FrameHook]) -> None:
        ctx = self._context(0.0)
        for hook in hooks:
            hook(self._world, ctx)

    def run(self, n: int, dt: float = 1 / 60) -> None:
        """Headless run of ``n`` fixed-size ticks."""
        self._stop_requested = False
        self._run_hooks(self._start_hooks)

        for _ in range(n):
            self.step(dt)
            if self._stop_requested:
                break

        self._run_hooks(self._stop_hooks)

    def run_forever(self, fps: int = 60) -> None:
        """Pace frames with ``time.monotonic`` until a system requests a stop."""
        if fps <= 0:
            raise ValueError("fps must be positive")
        self._stop_requested = False
        self._run_hooks(self._start_hooks)

        frame_time = 1.0 / fps
        while not self._stop_requested:
            start = time.monotonic()
            self.frame(start)
            if self._stop_requested:
                break
            sleep_time = frame_time - (time.monotonic() - start)
            if sleep_time > 0:
                time.sleep(sleep_time)

        self._run_hooks(self._stop_hooks)
