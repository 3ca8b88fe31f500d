"""scentfield: diffusing signal fields for tile-based agent navigation.

Sources emit typed signals onto their tile; each tick the signals diffuse
to empty neighbors and decay, leaving a gradient agents climb one step at
a time instead of running a pathfinder.

Usage:
    from scentfield import (
        Emitter, EmitterStore, Goal, HexCoord, HexMapGeometry,
        SignalPipeline, Signals, SignalStrength, SignalType,
    )

    geometry = HexMapGeometry(radius=6)
    signals = Signals()
    store = EmitterStore()
    store.spawn(HexCoord(4, 0), Emitter([(SignalType.pull("wood"), SignalStrength(10.0))]))

    pipeline = SignalPipeline(signals, geometry, store)
    pipeline.run(20)

    next_tile = signals.upstream(HexCoord(0, 0), Goal.drop_off("wood"), geometry)
"""

__version__ = "0.1.0"

# Core primitives
from scentfield.core import (
    EntityId,
    Goal,
    GoalKind,
    SignalKind,
    SignalStrength,
    SignalType,
    TilePos,
)

# Configuration
from scentfield.config import FieldSettings

# Field state
from scentfield.field import LocalSignals, SignalMap, Signals

# Geometry
from scentfield.geometry import HexCoord, HexDirection, HexMapGeometry, MapGeometry

# Navigation
from scentfield.navigation import resolve_upstream

# Scheduling
from scentfield.scheduling import (
    SignalPipeline,
    degrade_signals,
    diffuse_signals,
    emit_signals,
)

# Storage
from scentfield.storage import Emitter, EmitterStore

# Tracing
from scentfield.tracing import HistoryStore, InMemoryHistoryStore, TickRecord

__all__ = [
    # Version
    "__version__",
    # Core
    "EntityId",
    "Goal",
    "GoalKind",
    "SignalKind",
    "SignalStrength",
    "SignalType",
    "TilePos",
    # Config
    "FieldSettings",
    # Field
    "LocalSignals",
    "SignalMap",
    "Signals",
    # Geometry
    "MapGeometry",
    "HexCoord",
    "HexDirection",
    "HexMapGeometry",
    # Navigation
    "resolve_upstream",
    # Scheduling
    "SignalPipeline",
    "emit_signals",
    "diffuse_signals",
    "degrade_signals",
    # Storage
    "Emitter",
    "EmitterStore",
    # Tracing
    "HistoryStore",
    "InMemoryHistoryStore",
    "TickRecord",
]
