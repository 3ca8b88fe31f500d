"""Storage for emitting game objects."""

from scentfield.storage.allocator import EntityAllocator
from scentfield.storage.emitter import Emitter
from scentfield.storage.local import EmitterStore

__all__ = [
    "Emitter",
    "EmitterStore",
    "EntityAllocator",
]
