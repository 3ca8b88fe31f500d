"""Agent goals consumed by upstream navigation.

Usage:
    Goal.wander()
    Goal.pickup("wood")
    Goal.drop_off("wood")
    Goal.work("sawmill")
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from enum import Enum, auto


class GoalKind(Enum):
    """What an agent is currently trying to do."""

    WANDER = auto()
    PICKUP = auto()
    DROP_OFF = auto()
    WORK = auto()


_LABELS = {
    GoalKind.WANDER: "Wander",
    GoalKind.PICKUP: "Pickup",
    GoalKind.DROP_OFF: "DropOff",
    GoalKind.WORK: "Work",
}


@dataclass(frozen=True, slots=True)
class Goal:
    """An agent's current intent. Every kind except WANDER names a subject."""

    kind: GoalKind
    subject: Hashable | None = None

    def __post_init__(self) -> None:
        if self.kind is GoalKind.WANDER:
            if self.subject is not None:
                raise ValueError("Wander goals do not take a subject")
        elif self.subject is None:
            raise ValueError(f"{_LABELS[self.kind]} goals require a subject")

    @classmethod
    def wander(cls) -> Goal:
        return cls(GoalKind.WANDER)

    @classmethod
    def pickup(cls, item: Hashable) -> Goal:
        return cls(GoalKind.PICKUP, item)

    @classmethod
    def drop_off(cls, item: Hashable) -> Goal:
        return cls(GoalKind.DROP_OFF, item)

    @classmethod
    def work(cls, structure: Hashable) -> Goal:
        return cls(GoalKind.WORK, structure)

    def __str__(self) -> str:
        label = _LABELS[self.kind]
        if self.subject is None:
            return label
        return f"{label}({self.subject})"
