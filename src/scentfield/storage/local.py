"""Local in-memory emitter storage.

Simple dict-based storage suitable for single-process use and testing.
Tracks which tile each emitting object sits on and what it emits.

Usage:
    store = EmitterStore()
    pile = store.spawn(HexCoord(2, 0), Emitter([(SignalType.push("wood"), SignalStrength(1.0))]))
    store.move(pile, HexCoord(3, 0))
    for tile_pos, emitter in store.emitters():
        ...
"""

from __future__ import annotations

from collections.abc import Iterator

from scentfield.core import EntityId, TilePos
from scentfield.logging import get_logger
from scentfield.storage.allocator import EntityAllocator
from scentfield.storage.emitter import Emitter

logger = get_logger(__name__)


class EmitterStore:
    """In-memory table of emitting objects.

    Structure:
        _positions[entity] = tile_pos
        _emitters[entity] = Emitter

    Iteration follows spawn order, so emission is reproducible.
    """

    def __init__(self) -> None:
        self._allocator = EntityAllocator()
        self._positions: dict[EntityId, TilePos] = {}
        self._emitters: dict[EntityId, Emitter] = {}

    def spawn(self, tile_pos: TilePos, emitter: Emitter | None = None) -> EntityId:
        """Create an emitting object on ``tile_pos`` and return its ID.

        Args:
            tile_pos: Tile the object occupies.
            emitter: Signals to emit (default: an empty Emitter).

        Returns:
            Newly allocated EntityId.
        """
        entity = self._allocator.allocate()
        self._positions[entity] = tile_pos
        self._emitters[entity] = emitter if emitter is not None else Emitter()
        logger.debug("emitter_spawned", entity=str(entity), tile=str(tile_pos))
        return entity

    def despawn(self, entity: EntityId) -> None:
        """Destroy an object together with its Emitter.

        Raises:
            KeyError: If the entity does not exist.
        """
        self._require(entity)
        del self._positions[entity]
        del self._emitters[entity]
        self._allocator.deallocate(entity)
        logger.debug("emitter_despawned", entity=str(entity))

    def exists(self, entity: EntityId) -> bool:
        return entity in self._emitters and self._allocator.is_alive(entity)

    def get(self, entity: EntityId) -> Emitter | None:
        """Return the live Emitter of ``entity`` (mutations take effect next tick)."""
        if not self.exists(entity):
            return None
        return self._emitters[entity]

    def set_emitter(self, entity: EntityId, emitter: Emitter) -> None:
        """Replace the Emitter attached to ``entity``.

        Raises:
            KeyError: If the entity does not exist.
        """
        self._require(entity)
        self._emitters[entity] = emitter

    def position_of(self, entity: EntityId) -> TilePos | None:
        if not self.exists(entity):
            return None
        return self._positions[entity]

    def move(self, entity: EntityId, tile_pos: TilePos) -> None:
        """Relocate ``entity``. Its signals are emitted at the new tile from the next tick.

        Raises:
            KeyError: If the entity does not exist.
        """
        self._require(entity)
        self._positions[entity] = tile_pos

    def emitters(self) -> Iterator[tuple[TilePos, Emitter]]:
        """Yield (tile, Emitter) for every live object, in spawn order."""
        for entity, emitter in list(self._emitters.items()):
            yield self._positions[entity], emitter

    def entities(self) -> Iterator[EntityId]:
        return iter(list(self._emitters))

    def _require(self, entity: EntityId) -> None:
        if not self.exists(entity):
            raise KeyError(f"Entity {entity} does not exist")

    def __len__(self) -> int:
        return len(self._emitters)
