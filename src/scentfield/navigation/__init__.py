"""Navigation decisions derived from the signal field."""

from scentfield.navigation.upstream import (
    goal_signal_field,
    relevant_signal_types,
    resolve_upstream,
)

__all__ = [
    "goal_signal_field",
    "relevant_signal_types",
    "resolve_upstream",
]
