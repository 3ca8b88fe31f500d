"""Entity identity models.

Usage:
    entity = EntityId(index=42, generation=1)
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class EntityId:
    """Lightweight identifier for an emitting game object.

    The generation distinguishes a recycled index from the entity that
    previously held it, so stale handles never reach a new object.
    """

    index: int = 0
    generation: int = 0

    def __str__(self) -> str:
        return f"{self.index}v{self.generation}"
