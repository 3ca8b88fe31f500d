"""Signal type identifiers.

A SignalType says *what* a signal means: an item wants to leave a tile
(push), a tile wants an item delivered (pull), a tile holds an item
(contains), or a structure needs work done (work).

Usage:
    SignalType.push("wood")
    SignalType.work("sawmill")
    sorted([SignalType.work("a"), SignalType.push("b")])  # push sorts first
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from enum import IntEnum


class SignalKind(IntEnum):
    """Variety of signal. Declaration order defines the sort order."""

    PUSH = 0  # Take this item away from here.
    PULL = 1  # Bring me an item of this type.
    CONTAINS = 2  # Has an item of this type, in case you were looking.
    WORK = 3  # Perform work at this type of structure.

    @property
    def label(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True, slots=True, order=True)
class SignalType:
    """Identifies a signal channel: a kind plus the item or structure it concerns.

    Ordering compares kind first, then subject, so subjects of the same kind
    must be mutually comparable.
    """

    kind: SignalKind
    subject: Hashable

    @classmethod
    def push(cls, item: Hashable) -> SignalType:
        return cls(SignalKind.PUSH, item)

    @classmethod
    def pull(cls, item: Hashable) -> SignalType:
        return cls(SignalKind.PULL, item)

    @classmethod
    def contains(cls, item: Hashable) -> SignalType:
        return cls(SignalKind.CONTAINS, item)

    @classmethod
    def work(cls, structure: Hashable) -> SignalType:
        return cls(SignalKind.WORK, structure)

    def is_contains(self) -> bool:
        """Contains signals are informational and never drive a goal on their own."""
        return self.kind is SignalKind.CONTAINS

    def __str__(self) -> str:
        return f"{self.kind.label}({self.subject})"
