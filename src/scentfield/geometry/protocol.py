"""Map geometry protocol for swappable grid backends.

The field never computes adjacency itself. Whatever owns the tile map
implements this protocol and is passed into diffusion and navigation.

Usage:
    geometry = HexMapGeometry(radius=8)
    diffuse_signals(signals, geometry)
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from scentfield.core import TilePos


@runtime_checkable
class MapGeometry(Protocol):
    """Neighbor enumeration over a tile grid.

    Both methods must return tiles in a deterministic order that stays
    consistent for the duration of a tick. Upstream navigation breaks ties
    by this order.
    """

    def neighbors(self, tile_pos: TilePos) -> Sequence[TilePos]:
        """Valid tiles adjacent to ``tile_pos`` (up to 6 on a hex grid)."""
        ...

    def empty_neighbors(self, tile_pos: TilePos) -> Sequence[TilePos]:
        """The subset of neighbors() that is currently unoccupied."""
        ...
