"""Tests for SignalPipeline.

Critical Invariants:
- Phases run emit -> diffuse -> degrade, once per tick
- Settings drive the fractions used by each phase
- Each tick yields a TickRecord; attached history stores receive it
- Subjects only need to be hashable for ticks to run
"""

import json
from enum import Enum

import pytest
from structlog.testing import capture_logs

from scentfield import (
    Emitter,
    EmitterStore,
    FieldSettings,
    HexCoord,
    HexMapGeometry,
    InMemoryHistoryStore,
    SignalPipeline,
    Signals,
    SignalStrength,
    SignalType,
)

PULL = SignalType.pull("wood")
ORIGIN = HexCoord(0, 0)


@pytest.fixture
def settings() -> FieldSettings:
    return FieldSettings(diffusion_fraction=0.1, degradation_fraction=0.1)


@pytest.fixture
def pipeline(signals, geometry, store, settings) -> SignalPipeline:
    store.spawn(ORIGIN, Emitter([(PULL, SignalStrength(10.0))]))
    return SignalPipeline(signals, geometry, store, settings=settings)


def test_single_tick_applies_phases_in_order(pipeline: SignalPipeline, geometry) -> None:
    """Emit 10, diffuse to 6 neighbors (keeps 4), then decay by 10%."""
    pipeline.tick()

    signals = pipeline.signals
    assert signals.get(PULL, ORIGIN).value == pytest.approx(4.0 * 0.9)
    for neighbor in geometry.neighbors(ORIGIN):
        assert signals.get(PULL, neighbor).value == pytest.approx(1.0 * 0.9)
    assert pipeline.tick_count == 1


def test_tick_record_contents(pipeline: SignalPipeline) -> None:
    record = pipeline.tick()

    assert record.tick == 1
    assert record.events[0] == {"type": "emitted", "count": 1}
    assert record.events[1] == {"type": "signal_types_added", "signal_types": ["Pull(wood)"]}
    assert set(record.phase_timings or {}) == {"emit", "diffuse", "degrade"}

    second = pipeline.tick()
    assert second.tick == 2
    assert second.events == [{"type": "emitted", "count": 1}]


def test_run_multiple_ticks(pipeline: SignalPipeline) -> None:
    records = pipeline.run(5)
    assert [r.tick for r in records] == [1, 2, 3, 4, 5]
    assert pipeline.tick_count == 5


def test_run_rejects_negative(pipeline: SignalPipeline) -> None:
    with pytest.raises(ValueError, match="ticks"):
        pipeline.run(-1)


def test_gradient_forms_around_source(pipeline: SignalPipeline) -> None:
    pipeline.run(15)
    signals = pipeline.signals
    near = signals.get(PULL, HexCoord(1, 0)).value
    far = signals.get(PULL, HexCoord(3, 0)).value
    assert signals.get(PULL, ORIGIN).value > near > far > 0.0


def test_history_records_post_decay_snapshots(signals, geometry, store, settings) -> None:
    store.spawn(ORIGIN, Emitter([(PULL, SignalStrength(10.0))]))
    history = InMemoryHistoryStore(max_ticks=3)
    pipeline = SignalPipeline(signals, geometry, store, settings=settings, history=history)

    pipeline.run(5)

    assert history.tick_count == 3
    assert history.get_tick_range() == (3, 5)
    snapshot = history.get_snapshot(5)
    assert snapshot == signals.snapshot()
    json.dumps(history.get_tick(5).to_dict())  # type: ignore[union-attr]


def test_emitter_changes_take_effect_next_tick(signals, geometry, store, settings) -> None:
    entity = store.spawn(ORIGIN, Emitter([(PULL, SignalStrength(1.0))]))
    pipeline = SignalPipeline(signals, geometry, store, settings=settings)
    pipeline.tick()
    store.get(entity).set_signal(PULL, SignalStrength(0.0))  # type: ignore[union-attr]
    before = signals.map_for(PULL).total().value  # type: ignore[union-attr]

    pipeline.tick()

    after = signals.map_for(PULL).total().value  # type: ignore[union-attr]
    assert after < before


def test_zero_fractions_only_accumulate(signals, store) -> None:
    geometry = HexMapGeometry(radius=2)
    store.spawn(ORIGIN, Emitter([(PULL, SignalStrength(1.0))]))
    pipeline = SignalPipeline(
        signals,
        geometry,
        store,
        settings=FieldSettings(diffusion_fraction=0.0, degradation_fraction=0.0),
    )
    pipeline.run(3)
    assert signals.get(PULL, ORIGIN).value == pytest.approx(3.0)
    assert signals.get(PULL, HexCoord(1, 0)) == SignalStrength.ZERO


def test_phase_names(pipeline: SignalPipeline) -> None:
    assert pipeline.phase_names() == ["emit", "diffuse", "degrade"]


def test_keep_history_sizes_store_from_settings(signals, geometry, store) -> None:
    store.spawn(ORIGIN, Emitter([(PULL, SignalStrength(10.0))]))
    settings = FieldSettings(_env_file=None, history_max_ticks=2)
    pipeline = SignalPipeline(signals, geometry, store, settings=settings, keep_history=True)

    pipeline.run(3)

    history = pipeline.history
    assert isinstance(history, InMemoryHistoryStore)
    assert history.tick_count == 2
    assert history.get_tick_range() == (2, 3)


def test_explicit_history_wins_over_keep_history(signals, geometry, store, settings) -> None:
    history = InMemoryHistoryStore(max_ticks=5)
    pipeline = SignalPipeline(
        signals, geometry, store, settings=settings, history=history, keep_history=True
    )
    assert pipeline.history is history


def test_no_history_by_default(pipeline: SignalPipeline) -> None:
    pipeline.tick()
    assert pipeline.history is None


def test_tick_logs_completion(pipeline: SignalPipeline) -> None:
    with capture_logs() as logs:
        pipeline.tick()

    completed = [entry for entry in logs if entry["event"] == "tick_completed"]
    assert len(completed) == 1
    entry = completed[0]
    assert entry["log_level"] == "debug"
    assert entry["tick"] == 1
    assert entry["emitted"] == 1
    assert entry["signal_types"] == 1
    assert set(entry["timings_ms"]) == {"emit", "diffuse", "degrade"}


class Item(Enum):
    WOOD = "wood"
    STONE = "stone"


def test_unorderable_subjects_tick(signals, geometry, store, settings) -> None:
    """Plain Enum members hash but do not order; ticks must not compare them."""
    wood, stone = SignalType.pull(Item.WOOD), SignalType.pull(Item.STONE)
    store.spawn(ORIGIN, Emitter([(wood, SignalStrength(10.0)), (stone, SignalStrength(5.0))]))
    history = InMemoryHistoryStore(max_ticks=3)
    pipeline = SignalPipeline(signals, geometry, store, settings=settings, history=history)

    record = pipeline.tick()

    assert signals.get(wood, ORIGIN).value == pytest.approx(4.0 * 0.9)
    assert signals.get(stone, HexCoord(1, 0)).value == pytest.approx(0.5 * 0.9)
    assert sorted(record.events[1]["signal_types"]) == ["Pull(Item.STONE)", "Pull(Item.WOOD)"]
    snapshot = history.get_snapshot(1) or {}
    assert list(snapshot["signals"]) == ["Pull(Item.STONE)", "Pull(Item.WOOD)"]
