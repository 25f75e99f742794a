"""Frame clock: wall-clock deltas capped to a maximum timestep."""

import random
from typing import Callable

from drift.types import TickContext

MAX_DT = 0.1


class Clock:
    def __init__(self, max_dt: float = MAX_DT) -> None:
        if max_dt <= 0:
            raise ValueError("max_dt must be positive")
        self._max_dt = max_dt
        self._tick_number = 0
        self._elapsed = 0.0
        self._last_timestamp: float | None = None

    @property
    def max_dt(self) -> float:
        return self._max_dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def elapsed(self) -> float:
        return self._elapsed

    def cap(self, dt: float) -> float:
        """Clamp a raw delta into ``[0, max_dt]``."""
        if dt < 0.0:
            return 0.0
        return min(dt, self._max_dt)

    def measure(self, timestamp: float) -> float:
        """Return the capped delta since the previous frame timestamp (seconds).

        The first frame measures 0. A timestamp earlier than the previous one
        also measures 0 rather than integrating backwards.
        """
        last = self._last_timestamp
        self._last_timestamp = timestamp
        if last is None:
            return 0.0
        return self.cap(timestamp - last)

    def advance(self, dt: float) -> int:
        self._tick_number += 1
        self._elapsed += dt
        return self._tick_number

    def context(
        self, dt: float, stop_fn: Callable[[], None], rng: random.Random
    ) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            dt=dt,
            elapsed=self._elapsed,
            request_stop=stop_fn,
            random=rng,
        )

    def reset(self) -> None:
        self._tick_number = 0
        self._elapsed = 0.0
        self._last_timestamp = None
