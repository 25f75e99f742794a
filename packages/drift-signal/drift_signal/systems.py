"""Tick-end dispatch of queued signals."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable

from drift_signal.bus import SignalBus

if TYPE_CHECKING:
    from drift import TickContext

logger = logging.getLogger(__name__)


def make_signal_system(bus: SignalBus) -> Callable[[Any, "TickContext"], None]:
    """Deliver everything published this tick. Register it last."""

    def signal_system(world: Any, ctx: "TickContext") -> None:
        delivered = bus.flush()
        if delivered:
            logger.debug("Tick %d delivered %d signal(s)", ctx.tick_number, delivered)

    return signal_system
