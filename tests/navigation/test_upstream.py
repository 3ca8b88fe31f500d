"""Tests for upstream navigation.

Critical Invariants:
- Wander never moves, whatever the field holds
- Only empty neighbors are candidates
- Strictly greater score wins; ties keep the first tile in neighbor order
- All-zero neighborhoods return None
- Pickup sums Push and Contains; DropOff uses Pull; Work uses Work
"""

import pytest

from scentfield import (
    Goal,
    HexCoord,
    HexMapGeometry,
    Signals,
    SignalStrength,
    SignalType,
    resolve_upstream,
)
from scentfield.navigation import goal_signal_field, relevant_signal_types

ORIGIN = HexCoord(0, 0)
EAST = HexCoord(1, 0)
NORTH_EAST = HexCoord(1, -1)
NORTH_WEST = HexCoord(0, -1)
WEST = HexCoord(-1, 0)


def put(signals: Signals, signal_type: SignalType, tile: HexCoord, value: float) -> None:
    signals.add_signal(signal_type, tile, SignalStrength(value))


def test_drop_off_picks_strongest_pull(signals: Signals, geometry) -> None:
    """Pull strengths {A: 1.0, B: 3.0, C: 0.0} with DropOff -> B."""
    put(signals, SignalType.pull("x"), EAST, 1.0)
    put(signals, SignalType.pull("x"), NORTH_EAST, 3.0)
    put(signals, SignalType.pull("x"), NORTH_WEST, 0.0)

    assert signals.upstream(ORIGIN, Goal.drop_off("x"), geometry) == NORTH_EAST


def test_all_zero_neighborhood_returns_none(signals: Signals, geometry) -> None:
    put(signals, SignalType.pull("x"), EAST, 0.0)
    assert signals.upstream(ORIGIN, Goal.drop_off("x"), geometry) is None


def test_unrelated_signal_ignored(signals: Signals, geometry) -> None:
    put(signals, SignalType.pull("y"), EAST, 5.0)
    put(signals, SignalType.push("x"), EAST, 5.0)
    assert signals.upstream(ORIGIN, Goal.drop_off("x"), geometry) is None


def test_wander_always_none(signals: Signals, geometry) -> None:
    for tile in (EAST, NORTH_EAST, WEST):
        for signal_type in (SignalType.pull("x"), SignalType.push("x"), SignalType.work("m")):
            put(signals, signal_type, tile, 10.0)
    assert signals.upstream(ORIGIN, Goal.wander(), geometry) is None


def test_pickup_sums_push_and_contains(signals: Signals, geometry) -> None:
    """Push 2.0 + Contains 1.0 = 3.0 outranks Push 2.5 alone."""
    put(signals, SignalType.push("x"), EAST, 2.5)
    put(signals, SignalType.push("x"), WEST, 2.0)
    put(signals, SignalType.contains("x"), WEST, 1.0)

    assert signals.upstream(ORIGIN, Goal.pickup("x"), geometry) == WEST

    field = goal_signal_field(signals, Goal.pickup("x"), ORIGIN, geometry)
    assert field[WEST].value == pytest.approx(3.0)
    assert field[EAST].value == pytest.approx(2.5)


def test_pickup_follows_contains_alone(signals: Signals, geometry) -> None:
    put(signals, SignalType.contains("x"), WEST, 0.4)
    assert signals.upstream(ORIGIN, Goal.pickup("x"), geometry) == WEST


def test_work_uses_work_signal(signals: Signals, geometry) -> None:
    put(signals, SignalType.work("mill"), NORTH_WEST, 0.2)
    put(signals, SignalType.pull("mill"), EAST, 9.0)
    assert signals.upstream(ORIGIN, Goal.work("mill"), geometry) == NORTH_WEST


def test_occupied_neighbors_are_not_candidates(signals: Signals) -> None:
    geometry = HexMapGeometry(radius=3, occupied=[EAST])
    put(signals, SignalType.pull("x"), EAST, 10.0)
    put(signals, SignalType.pull("x"), WEST, 1.0)
    assert signals.upstream(ORIGIN, Goal.drop_off("x"), geometry) == WEST


def test_current_tile_is_never_returned(signals: Signals, geometry) -> None:
    put(signals, SignalType.pull("x"), ORIGIN, 10.0)
    assert signals.upstream(ORIGIN, Goal.drop_off("x"), geometry) is None


def test_tie_keeps_first_in_neighbor_order(signals: Signals, geometry) -> None:
    put(signals, SignalType.pull("x"), WEST, 2.0)
    put(signals, SignalType.pull("x"), NORTH_EAST, 2.0)
    # NORTH_EAST precedes WEST in E, NE, NW, W, SW, SE order
    assert signals.upstream(ORIGIN, Goal.drop_off("x"), geometry) == NORTH_EAST


def test_no_empty_neighbors_returns_none(signals: Signals) -> None:
    geometry = HexMapGeometry(radius=1)
    for tile in geometry.neighbors(ORIGIN):
        geometry.occupy(tile)
        put(signals, SignalType.pull("x"), tile, 1.0)
    assert resolve_upstream(signals, ORIGIN, Goal.drop_off("x"), geometry) is None


@pytest.mark.parametrize(
    ("goal", "expected"),
    [
        (Goal.wander(), ()),
        (Goal.pickup("x"), (SignalType.push("x"), SignalType.contains("x"))),
        (Goal.drop_off("x"), (SignalType.pull("x"),)),
        (Goal.work("m"), (SignalType.work("m"),)),
    ],
)
def test_relevant_signal_types(goal, expected) -> None:
    assert relevant_signal_types(goal) == expected
