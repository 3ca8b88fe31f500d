"""The central registry that tracks all signals.

Signals owns one SignalMap per SignalType that has ever been written.
It is an explicitly owned context object: create one per simulation and
pass it into the pipeline phases and into navigation queries.

Usage:
    signals = Signals()
    signals.add_signal(SignalType.pull("wood"), HexCoord(2, 0), SignalStrength(5.0))
    signals.get(SignalType.pull("wood"), HexCoord(2, 0))       # SignalStrength(5.0)
    signals.upstream(HexCoord(0, 0), Goal.drop_off("wood"), geometry)
"""

from __future__ import annotations

from collections.abc import ItemsView, Iterator
from typing import TYPE_CHECKING, Any

from scentfield.core import Goal, SignalStrength, SignalType, TilePos
from scentfield.field.local import LocalSignals
from scentfield.field.signal_map import SignalMap
from scentfield.navigation.upstream import resolve_upstream

if TYPE_CHECKING:
    from scentfield.geometry import MapGeometry


class Signals:
    """The spatialized map for each signal type.

    Reads never create state: querying a type or tile that was never written
    returns SignalStrength.ZERO.
    """

    def __init__(self) -> None:
        self._maps: dict[SignalType, SignalMap] = {}

    def get(self, signal_type: SignalType, tile_pos: TilePos) -> SignalStrength:
        """Return the strength of ``signal_type`` at ``tile_pos``, ZERO if missing."""
        signal_map = self._maps.get(signal_type)
        if signal_map is None:
            return SignalStrength.ZERO
        return signal_map.get(tile_pos)

    def add_signal(
        self,
        signal_type: SignalType,
        tile_pos: TilePos,
        signal_strength: SignalStrength,
    ) -> None:
        """Add ``signal_strength`` of ``signal_type`` at ``tile_pos``."""
        self._map_for_write(signal_type).add_signal(tile_pos, signal_strength)

    def subtract_signal(
        self,
        signal_type: SignalType,
        tile_pos: TilePos,
        signal_strength: SignalStrength,
    ) -> None:
        """Subtract ``signal_strength`` of ``signal_type`` at ``tile_pos``, floored at ZERO."""
        self._map_for_write(signal_type).subtract_signal(tile_pos, signal_strength)

    def _map_for_write(self, signal_type: SignalType) -> SignalMap:
        signal_map = self._maps.get(signal_type)
        if signal_map is None:
            signal_map = SignalMap()
            self._maps[signal_type] = signal_map
        return signal_map

    def all_signals_at_position(self, tile_pos: TilePos) -> LocalSignals:
        """Return the complete set of signals at ``tile_pos``.

        Every known signal type gets an entry, including those that are zero
        at this tile.
        """
        return LocalSignals(
            {
                signal_type: signal_map.get(tile_pos)
                for signal_type, signal_map in self._maps.items()
            }
        )

    def neighboring_signals(
        self,
        signal_type: SignalType,
        tile_pos: TilePos,
        map_geometry: MapGeometry,
    ) -> dict[TilePos, SignalStrength]:
        """Return the strength of ``signal_type`` at ``tile_pos`` and each of its neighbors.

        Seven entries on a full hex neighborhood, fewer at the map edge.
        """
        signal_strength_map = {tile_pos: self.get(signal_type, tile_pos)}
        for neighbor in map_geometry.neighbors(tile_pos):
            signal_strength_map[neighbor] = self.get(signal_type, neighbor)
        return signal_strength_map

    def upstream(
        self,
        tile_pos: TilePos,
        goal: Goal,
        map_geometry: MapGeometry,
    ) -> TilePos | None:
        """Return the adjacent empty tile with the highest signal usable for ``goal``.

        See scentfield.navigation.upstream.resolve_upstream for the scoring rules.
        """
        return resolve_upstream(self, tile_pos, goal, map_geometry)

    # Read-only views for pipeline phases and presentation layers

    def signal_types(self) -> list[SignalType]:
        """Known signal types in their total order."""
        return sorted(self._maps)

    def map_for(self, signal_type: SignalType) -> SignalMap | None:
        return self._maps.get(signal_type)

    def items(self) -> Iterator[tuple[SignalType, SignalMap]]:
        """Iterate (type, map) pairs in SignalType order."""
        for signal_type in self.signal_types():
            yield signal_type, self._maps[signal_type]

    def maps(self) -> ItemsView[SignalType, SignalMap]:
        """(type, map) pairs in insertion order.

        Unlike items(), this never compares SignalTypes, so subjects need not
        be mutually orderable. The pipeline phases iterate this view.
        """
        return self._maps.items()

    def __contains__(self, signal_type: object) -> bool:
        return signal_type in self._maps

    def __len__(self) -> int:
        return len(self._maps)

    def snapshot(self) -> dict[str, Any]:
        """JSON-serializable view of the whole field, in deterministic order.

        Returns:
            {"signals": {str(type): {str(tile): strength}}}
        """
        field: dict[str, dict[str, float]] = {}
        for signal_type, signal_map in self._maps.items():
            tiles = {str(tile_pos): strength.value for tile_pos, strength in signal_map.items()}
            field[str(signal_type)] = dict(sorted(tiles.items()))
        return {"signals": dict(sorted(field.items()))}

    def reset(self) -> None:
        """Drop every map, as when a new game or session starts."""
        self._maps.clear()

    def __repr__(self) -> str:
        return f"Signals({len(self._maps)} types)"
