"""In-memory pub/sub signal bus with per-tick flush semantics."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

_Handler = Callable[[str, dict[str, Any]], None]


@dataclass(frozen=True)
class Signal:
    name: str
    data: dict[str, Any] = field(default_factory=dict)


class SignalBus:
    """Queues signals during a tick and dispatches them on ``flush()``.

    Handlers are fire-and-forget: the publisher never sees their results.
    Signals published by a handler during a flush are delivered on the
    next flush.
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, list[_Handler]] = {}
        self._queue: list[Signal] = []

    def subscribe(self, signal_name: str, handler: _Handler) -> None:
        self._subscribers.setdefault(signal_name, []).append(handler)

    def unsubscribe(self, signal_name: str, handler: _Handler) -> None:
        handlers = self._subscribers.get(signal_name)
        if handlers and handler in handlers:
            handlers.remove(handler)

    def publish(self, signal_name: str, **data: Any) -> None:
        self._queue.append(Signal(signal_name, data))

    @property
    def pending(self) -> tuple[Signal, ...]:
        return tuple(self._queue)

    def flush(self) -> int:
        """Dispatch queued signals in publish order. Returns how many were queued."""
        batch, self._queue = self._queue, []
        for signal in batch:
            for handler in list(self._subscribers.get(signal.name, ())):
                handler(signal.name, signal.data)
        return len(batch)

    def clear(self) -> None:
        self._queue.clear()
