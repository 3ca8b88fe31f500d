"""Ordered per-tick execution of the field phases.

Usage:
    pipeline = SignalPipeline(signals, geometry, store)
    record = pipeline.tick()      # emit -> diffuse -> degrade
    pipeline.run(100)

    # Keep a bounded history for replay and debugging
    pipeline = SignalPipeline(signals, geometry, store, history=InMemoryHistoryStore())

    # Or let settings.history_max_ticks size an in-memory store
    pipeline = SignalPipeline(signals, geometry, store, keep_history=True)
"""

from __future__ import annotations

import time

from scentfield.config import FieldSettings
from scentfield.field import Signals
from scentfield.geometry import MapGeometry
from scentfield.logging import get_logger
from scentfield.scheduling.phases import degrade_signals, diffuse_signals, emit_signals
from scentfield.storage import EmitterStore
from scentfield.tracing import HistoryStore, InMemoryHistoryStore, TickRecord

logger = get_logger(__name__)


class SignalPipeline:
    """Runs emit, diffuse and degrade in strict sequence, once per tick.

    The pipeline is the single writer of the Signals registry. Callers must
    not query the field while tick() is running; between ticks every read
    observes the post-decay field.

    Args:
        signals: Field owned by the simulation.
        map_geometry: Neighbor enumeration for diffusion.
        emitters: Store of emitting objects, read during emission.
        settings: Field parameters. Defaults to FieldSettings() (env-aware).
        history: Optional store that receives a TickRecord after every tick.
        keep_history: When no history store is given, create an
            InMemoryHistoryStore holding settings.history_max_ticks records.
    """

    PHASES: tuple[str, ...] = ("emit", "diffuse", "degrade")

    def __init__(
        self,
        signals: Signals,
        map_geometry: MapGeometry,
        emitters: EmitterStore,
        settings: FieldSettings | None = None,
        history: HistoryStore | None = None,
        keep_history: bool = False,
    ) -> None:
        self._signals = signals
        self._map_geometry = map_geometry
        self._emitters = emitters
        self._settings = settings or FieldSettings()
        if history is None and keep_history:
            history = InMemoryHistoryStore(max_ticks=self._settings.history_max_ticks)
        self._history = history
        self._tick_count = 0

    @property
    def signals(self) -> Signals:
        return self._signals

    @property
    def settings(self) -> FieldSettings:
        return self._settings

    @property
    def history(self) -> HistoryStore | None:
        return self._history

    @property
    def tick_count(self) -> int:
        """Number of completed ticks."""
        return self._tick_count

    def phase_names(self) -> list[str]:
        return list(self.PHASES)

    def tick(self) -> TickRecord:
        """Run one full tick and return its record."""
        known_before = {signal_type for signal_type, _ in self._signals.maps()}
        timings: dict[str, float] = {}

        start = time.perf_counter()
        emitted = emit_signals(self._signals, self._emitters.emitters())
        timings["emit"] = _elapsed_ms(start)

        start = time.perf_counter()
        diffuse_signals(self._signals, self._map_geometry, self._settings.diffusion_fraction)
        timings["diffuse"] = _elapsed_ms(start)

        start = time.perf_counter()
        degrade_signals(self._signals, self._settings.degradation_fraction)
        timings["degrade"] = _elapsed_ms(start)

        self._tick_count += 1

        events: list[dict[str, object]] = [{"type": "emitted", "count": emitted}]
        new_types = [t for t, _ in self._signals.maps() if t not in known_before]
        if new_types:
            events.append(
                {"type": "signal_types_added", "signal_types": [str(t) for t in new_types]}
            )

        record = TickRecord(
            tick=self._tick_count,
            timestamp=time.time(),
            snapshot=self._signals.snapshot() if self._history is not None else {},
            events=events,
            phase_timings=timings,
        )
        if self._history is not None:
            self._history.record_tick(record)

        logger.debug(
            "tick_completed",
            tick=self._tick_count,
            emitted=emitted,
            signal_types=len(self._signals),
            timings_ms=timings,
        )
        return record

    def run(self, ticks: int) -> list[TickRecord]:
        """Run ``ticks`` consecutive ticks.

        Raises:
            ValueError: If ticks is negative.
        """
        if ticks < 0:
            raise ValueError("ticks must be >= 0")
        return [self.tick() for _ in range(ticks)]


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000.0
