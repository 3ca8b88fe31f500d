"""Hexagonal map geometry using axial coordinates.

Simple set-based implementation suitable for single-process use and testing.

Usage:
    geometry = HexMapGeometry(radius=3)
    origin = HexCoord(0, 0)
    geometry.neighbors(origin)        # 6 tiles, E, NE, NW, W, SW, SE
    geometry.occupy(HexCoord(1, 0))
    geometry.empty_neighbors(origin)  # 5 tiles
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class HexDirection(IntEnum):
    """Neighbor directions, in the order neighbors are enumerated."""

    EAST = 0
    NORTH_EAST = 1
    NORTH_WEST = 2
    WEST = 3
    SOUTH_WEST = 4
    SOUTH_EAST = 5


_AXIAL_OFFSETS: tuple[tuple[int, int], ...] = (
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, 0),
    (-1, 1),
    (0, 1),
)


@dataclass(frozen=True, slots=True, order=True)
class HexCoord:
    """Axial hex coordinate (q, r)."""

    q: int
    r: int

    @property
    def s(self) -> int:
        """Third cube coordinate, derived so that q + r + s == 0."""
        return -self.q - self.r

    def neighbor(self, direction: HexDirection) -> HexCoord:
        dq, dr = _AXIAL_OFFSETS[direction]
        return HexCoord(self.q + dq, self.r + dr)

    def all_neighbors(self) -> tuple[HexCoord, ...]:
        """All six adjacent coordinates, ignoring map bounds."""
        return tuple(self.neighbor(direction) for direction in HexDirection)

    def distance(self, other: HexCoord) -> int:
        """Number of steps between two coordinates on an unbounded grid."""
        return max(abs(self.q - other.q), abs(self.r - other.r), abs(self.s - other.s))

    def to_dict(self) -> dict[str, int]:
        return {"q": self.q, "r": self.r}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> HexCoord:
        return cls(q=int(data["q"]), r=int(data["r"]))

    def __str__(self) -> str:
        return f"({self.q}, {self.r})"


class HexMapGeometry:
    """Hexagonal disk of tiles centred on the origin, with an occupancy set.

    Args:
        radius: Distance from the origin to the edge of the map (0 = one tile).
        occupied: Tiles that start out occupied.

    Raises:
        ValueError: If radius is negative or an occupied tile is off the map.
    """

    def __init__(self, radius: int, occupied: Iterable[HexCoord] = ()) -> None:
        if radius < 0:
            raise ValueError("radius must be >= 0")
        self._radius = radius
        self._origin = HexCoord(0, 0)
        self._occupied: set[HexCoord] = set()
        for tile_pos in occupied:
            self.occupy(tile_pos)

    @property
    def radius(self) -> int:
        return self._radius

    def contains(self, tile_pos: HexCoord) -> bool:
        """Check whether ``tile_pos`` lies on the map."""
        return self._origin.distance(tile_pos) <= self._radius

    def tiles(self) -> Iterator[HexCoord]:
        """Iterate every tile on the map in (q, r) order."""
        radius = self._radius
        for q in range(-radius, radius + 1):
            min_r = max(-radius, -q - radius)
            max_r = min(radius, -q + radius)
            for r in range(min_r, max_r + 1):
                yield HexCoord(q=q, r=r)

    def tile_count(self) -> int:
        return 3 * self._radius * (self._radius + 1) + 1

    def occupy(self, tile_pos: HexCoord) -> None:
        """Mark a tile as blocked. Occupied tiles never receive diffused signal."""
        if not self.contains(tile_pos):
            raise ValueError(f"Tile {tile_pos} is outside a map of radius {self._radius}")
        self._occupied.add(tile_pos)

    def vacate(self, tile_pos: HexCoord) -> None:
        self._occupied.discard(tile_pos)

    def is_occupied(self, tile_pos: HexCoord) -> bool:
        return tile_pos in self._occupied

    def neighbors(self, tile_pos: HexCoord) -> list[HexCoord]:
        """On-map neighbors of ``tile_pos``, in HexDirection order."""
        return [n for n in tile_pos.all_neighbors() if self.contains(n)]

    def empty_neighbors(self, tile_pos: HexCoord) -> list[HexCoord]:
        """On-map, unoccupied neighbors of ``tile_pos``, in HexDirection order."""
        return [n for n in self.neighbors(tile_pos) if n not in self._occupied]
