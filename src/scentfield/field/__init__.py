"""Signal field state: per-type maps, the registry and per-tile snapshots."""

from scentfield.field.local import LocalSignals
from scentfield.field.registry import Signals
from scentfield.field.signal_map import SignalMap

__all__ = [
    "LocalSignals",
    "SignalMap",
    "Signals",
]
