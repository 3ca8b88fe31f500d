"""Sparse per-tile storage for a single signal type."""

from __future__ import annotations

from collections.abc import Iterator

from scentfield.core import SignalStrength, TilePos


class SignalMap:
    """Stores the SignalStrength of one SignalType at each tile.

    Entries are created lazily on first write. A missing entry is a valid
    zero, and entries that fall to zero are kept rather than pruned.
    """

    __slots__ = ("_map",)

    def __init__(self) -> None:
        self._map: dict[TilePos, SignalStrength] = {}

    def get(self, tile_pos: TilePos) -> SignalStrength:
        """Return the strength at ``tile_pos``, or ZERO if nothing was written there."""
        return self._map.get(tile_pos, SignalStrength.ZERO)

    def add_signal(self, tile_pos: TilePos, signal_strength: SignalStrength) -> None:
        """Add ``signal_strength`` to the signal at ``tile_pos``."""
        self._map[tile_pos] = self.get(tile_pos) + signal_strength

    def subtract_signal(self, tile_pos: TilePos, signal_strength: SignalStrength) -> None:
        """Subtract ``signal_strength`` from the signal at ``tile_pos``, floored at ZERO."""
        self._map[tile_pos] = self.get(tile_pos) - signal_strength

    def scale(self, factor: float) -> None:
        """Multiply every stored strength by ``factor`` in place."""
        for tile_pos, signal_strength in self._map.items():
            self._map[tile_pos] = signal_strength * factor

    def items(self) -> Iterator[tuple[TilePos, SignalStrength]]:
        return iter(list(self._map.items()))

    def positions(self) -> Iterator[TilePos]:
        return iter(list(self._map))

    def total(self) -> SignalStrength:
        """Sum of all strengths in the map."""
        return SignalStrength(sum(s.value for s in self._map.values()))

    def __contains__(self, tile_pos: object) -> bool:
        return tile_pos in self._map

    def __len__(self) -> int:
        return len(self._map)

    def __repr__(self) -> str:
        return f"SignalMap({len(self._map)} tiles, total={self.total().value:.4f})"
