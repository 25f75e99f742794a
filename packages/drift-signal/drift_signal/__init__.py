"""drift-signal - In-process signal bus for the drift engine."""
from __future__ import annotations

from drift_signal.bus import Signal, SignalBus
from drift_signal.systems import make_signal_system

__all__ = ["Signal", "SignalBus", "make_signal_system"]
