"""The three per-tick field phases: emit, diffuse, degrade.

Each phase is a plain function over an explicitly passed Signals registry.
They must run in that order, once per tick, with no readers in between;
SignalPipeline enforces the order.

Usage:
    emit_signals(signals, store.emitters())
    diffuse_signals(signals, geometry, diffusion_fraction=0.1)
    degrade_signals(signals, degradation_fraction=0.1)
"""

from __future__ import annotations

from collections.abc import Iterable

from scentfield.config import (
    DEFAULT_DEGRADATION_FRACTION,
    DEFAULT_DIFFUSION_FRACTION,
    MAX_DIFFUSION_FRACTION,
)
from scentfield.core import SignalType, TilePos
from scentfield.field import SignalMap, Signals
from scentfield.geometry import MapGeometry
from scentfield.storage import Emitter


def emit_signals(signals: Signals, emitters: Iterable[tuple[TilePos, Emitter]]) -> int:
    """Add every emitter's signals to its tile.

    Emission is purely additive, so the order of emitters does not matter.

    Args:
        signals: Field to write into.
        emitters: (tile, Emitter) pairs, e.g. EmitterStore.emitters().

    Returns:
        Number of (type, strength) entries emitted.
    """
    emitted = 0
    for tile_pos, emitter in emitters:
        for signal_type, signal_strength in emitter.signals:
            signals.add_signal(signal_type, tile_pos, signal_strength)
            emitted += 1
    return emitted


def diffuse_signals(
    signals: Signals,
    map_geometry: MapGeometry,
    diffusion_fraction: float = DEFAULT_DIFFUSION_FRACTION,
) -> None:
    """Spread a fraction of each tile's signal to each of its empty neighbors.

    All transfers are staged from the pre-diffusion field first and committed
    afterwards, so the result does not depend on map iteration order and no
    tile acts as a source after it has already received signal this pass.
    Occupied neighbors receive nothing; a tile with fewer empty neighbors
    sends away correspondingly less.

    Args:
        signals: Field to update in place.
        map_geometry: Source of empty_neighbors().
        diffusion_fraction: Share sent to each empty neighbor, in [0, 1/6).

    Raises:
        ValueError: If diffusion_fraction is outside [0, 1/6).
    """
    if not 0.0 <= diffusion_fraction < MAX_DIFFUSION_FRACTION:
        raise ValueError(
            f"diffusion_fraction must be in [0, 1/6), got {diffusion_fraction}"
        )

    pending_removals: dict[SignalType, SignalMap] = {}
    pending_additions: dict[SignalType, SignalMap] = {}

    for signal_type, original_map in signals.maps():
        removal_map = SignalMap()
        addition_map = SignalMap()

        for occupied_tile, original_strength in original_map.items():
            amount_to_send_to_each_neighbor = original_strength * diffusion_fraction
            if not amount_to_send_to_each_neighbor:
                continue

            for neighboring_tile in map_geometry.empty_neighbors(occupied_tile):
                removal_map.add_signal(occupied_tile, amount_to_send_to_each_neighbor)
                addition_map.add_signal(neighboring_tile, amount_to_send_to_each_neighbor)

        pending_removals[signal_type] = removal_map
        pending_additions[signal_type] = addition_map

    for signal_type, removal_map in pending_removals.items():
        for removal_pos, removal_strength in removal_map.items():
            signals.subtract_signal(signal_type, removal_pos, removal_strength)

    for signal_type, addition_map in pending_additions.items():
        for addition_pos, addition_strength in addition_map.items():
            signals.add_signal(signal_type, addition_pos, addition_strength)


def degrade_signals(
    signals: Signals,
    degradation_fraction: float = DEFAULT_DEGRADATION_FRACTION,
) -> None:
    """Attenuate every signal multiplicatively toward zero.

    Values approach zero asymptotically and are never pruned.

    Raises:
        ValueError: If degradation_fraction is outside [0, 1].
    """
    if not 0.0 <= degradation_fraction <= 1.0:
        raise ValueError(
            f"degradation_fraction must be in [0, 1], got {degradation_fraction}"
        )

    retained = 1.0 - degradation_fraction
    for _, signal_map in signals.maps():
        signal_map.scale(retained)
