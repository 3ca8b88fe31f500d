"""Goal-driven gradient ascent over the signal field.

Usage:
    next_tile = resolve_upstream(signals, agent_tile, Goal.drop_off("wood"), geometry)
    if next_tile is not None:
        move_agent(next_tile)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from scentfield.core import Goal, GoalKind, SignalStrength, SignalType, TilePos

if TYPE_CHECKING:
    from scentfield.field.registry import Signals
    from scentfield.geometry import MapGeometry


def relevant_signal_types(goal: Goal) -> tuple[SignalType, ...]:
    """Signal types whose strengths are summed when scoring tiles for ``goal``.

    Pickup is drawn both to tiles pushing the item away and to tiles that
    merely contain it. Wander has no relevant signal.
    """
    match goal.kind:
        case GoalKind.WANDER:
            return ()
        case GoalKind.PICKUP:
            return (SignalType.push(goal.subject), SignalType.contains(goal.subject))
        case GoalKind.DROP_OFF:
            return (SignalType.pull(goal.subject),)
        case GoalKind.WORK:
            return (SignalType.work(goal.subject),)
    raise ValueError(f"Unknown goal kind: {goal.kind}")


def goal_signal_field(
    signals: Signals,
    goal: Goal,
    tile_pos: TilePos,
    map_geometry: MapGeometry,
) -> dict[TilePos, SignalStrength]:
    """Aggregate goal-relevant strengths over ``tile_pos`` and its neighbors.

    Returns:
        Tile -> summed strength of every relevant signal type. Empty for Wander.
    """
    total_signals: dict[TilePos, SignalStrength] = {}
    for signal_type in relevant_signal_types(goal):
        neighboring = signals.neighboring_signals(signal_type, tile_pos, map_geometry)
        for neighbor, strength in neighboring.items():
            total_signals[neighbor] = total_signals.get(neighbor, SignalStrength.ZERO) + strength
    return total_signals


def resolve_upstream(
    signals: Signals,
    tile_pos: TilePos,
    goal: Goal,
    map_geometry: MapGeometry,
) -> TilePos | None:
    """Return the adjacent empty tile with the highest goal-relevant signal.

    Candidates are scanned in the geometry's empty_neighbors() order and only
    a strictly higher score replaces the current best, so ties keep the first
    tile and a neighborhood with no signal yields None.

    Args:
        signals: Field to read.
        tile_pos: The agent's current tile.
        goal: What the agent is trying to do.
        map_geometry: Source of neighbor enumeration and occupancy.

    Returns:
        The tile to step onto, or None if no neighbor carries a relevant signal.
    """
    if goal.kind is GoalKind.WANDER:
        return None

    possible_tiles = map_geometry.empty_neighbors(tile_pos)
    neighboring_signals = goal_signal_field(signals, goal, tile_pos, map_geometry)

    best_choice: TilePos | None = None
    best_score = SignalStrength.ZERO
    for possible_tile in possible_tiles:
        current_score = neighboring_signals.get(possible_tile)
        if current_score is not None and current_score > best_score:
            best_score = current_score
            best_choice = possible_tile

    return best_choice
