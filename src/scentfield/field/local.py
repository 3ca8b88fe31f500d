"""Per-tile signal snapshots for decision making and display.

Usage:
    local = signals.all_signals_at_position(tile)
    for signal_type, strength in local.goal_relevant_signals():
        ...
    print(local)  # "Pull(wood): 1.00\\n..."
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from scentfield.core import SignalStrength, SignalType


class LocalSignals:
    """All of the signals on a single tile.

    Holds a private, read-only copy of the strengths, so later pipeline ticks
    never change a snapshot that has already been handed out.
    """

    __slots__ = ("_map",)

    def __init__(self, signals: Mapping[SignalType, SignalStrength] | None = None) -> None:
        self._map: Mapping[SignalType, SignalStrength] = MappingProxyType(dict(signals or {}))

    def get(self, signal_type: SignalType) -> SignalStrength:
        return self._map.get(signal_type, SignalStrength.ZERO)

    def __getitem__(self, signal_type: SignalType) -> SignalStrength:
        return self._map[signal_type]

    def __contains__(self, signal_type: object) -> bool:
        return signal_type in self._map

    def __iter__(self) -> Iterator[SignalType]:
        return iter(sorted(self._map))

    def __len__(self) -> int:
        return len(self._map)

    def items(self) -> Iterator[tuple[SignalType, SignalStrength]]:
        """Iterate (type, strength) pairs in SignalType order."""
        for signal_type in sorted(self._map):
            yield signal_type, self._map[signal_type]

    def goal_relevant_signals(self) -> Iterator[tuple[SignalType, SignalStrength]]:
        """Return the signals that might be used to pick a goal.

        Contains signals only say that an item is present. They feed pickup
        scoring in upstream navigation but never count as a demand here.
        """
        return (
            (signal_type, strength)
            for signal_type, strength in self.items()
            if not signal_type.is_contains()
        )

    def __str__(self) -> str:
        return "".join(f"{signal_type}: {strength:.2f}\n" for signal_type, strength in self.items())

    def __repr__(self) -> str:
        inner = ", ".join(f"{t}: {s.value!r}" for t, s in self.items())
        return f"LocalSignals({{{inner}}})"
