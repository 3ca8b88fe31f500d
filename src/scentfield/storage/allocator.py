"""Entity allocation service.

EntityAllocator is a stateful service that manages entity ID lifecycle.
"""

from __future__ import annotations

from scentfield.core import EntityId


class EntityAllocator:
    """Allocates entity IDs with generation tracking for recycling.

    Maintains a free list of deallocated entity indices with incremented
    generations so that recycled IDs never compare equal to stale handles.
    """

    def __init__(self) -> None:
        self._next_index = 0
        self._free_list: list[tuple[int, int]] = []  # (index, generation)
        self._free_set: set[int] = set()  # indices currently on the free list
        self._generations: dict[int, int] = {}

    def allocate(self) -> EntityId:
        """Allocate new entity ID, reusing recycled slots when available.

        Returns:
            Newly allocated EntityId.
        """
        if self._free_list:
            index, gen = self._free_list.pop()
            self._free_set.discard(index)
            return EntityId(index=index, generation=gen)

        index = self._next_index
        self._next_index += 1
        self._generations[index] = 0
        return EntityId(index=index, generation=0)

    def deallocate(self, entity: EntityId) -> None:
        """Return entity ID for reuse with incremented generation.

        Args:
            entity: Entity ID to deallocate.

        Raises:
            KeyError: If the entity is not currently alive.
        """
        if not self.is_alive(entity):
            raise KeyError(f"Entity {entity} is not alive")

        new_gen = entity.generation + 1
        self._generations[entity.index] = new_gen
        self._free_list.append((entity.index, new_gen))
        self._free_set.add(entity.index)

    def is_alive(self, entity: EntityId) -> bool:
        """Check if entity ID is still valid (not recycled)."""
        current_gen = self._generations.get(entity.index, -1)
        if current_gen != entity.generation:
            return False
        return entity.index not in self._free_set
