"""Core value types: strengths, signal types, goals and identities.

Architecture Note:
    core/ holds immutable value types with no runtime state.
    For stateful services, see field/, storage/ and scheduling/.
"""

from scentfield.core.goals import Goal, GoalKind
from scentfield.core.identity import EntityId
from scentfield.core.signals import SignalKind, SignalType
from scentfield.core.strength import SignalStrength
from scentfield.core.types import TilePos

__all__ = [
    # Types
    "TilePos",
    # Identity
    "EntityId",
    # Signals
    "SignalStrength",
    "SignalKind",
    "SignalType",
    # Goals
    "Goal",
    "GoalKind",
]
