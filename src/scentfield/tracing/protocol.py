"""Protocols for tracing infrastructure.

These protocols define the interface for history storage backends,
allowing different implementations (in-memory, file, database).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from scentfield.tracing.models import TickRecord


@runtime_checkable
class HistoryStore(Protocol):
    """Protocol for storing and retrieving tick history.

    Implementations store TickRecords and provide random access to past
    field states, for replay, debugging and visualisation.

    Usage:
        store = InMemoryHistoryStore(max_ticks=1000)
        pipeline = SignalPipeline(signals, geometry, emitters, history=store)
        pipeline.run(50)
        snapshot = store.get_snapshot(tick=42)
    """

    def record_tick(self, record: TickRecord) -> None:
        """Record a tick's field state and events.

        Note:
            Implementations may have bounded storage (e.g., last N ticks).
            Older records may be evicted when the limit is reached.
        """
        ...

    def get_tick(self, tick: int) -> TickRecord | None:
        """Get complete tick record, None if not in storage."""
        ...

    def get_snapshot(self, tick: int) -> dict[str, Any] | None:
        """Get the field snapshot at a specific tick, None if not stored."""
        ...

    def get_events(self, start_tick: int, end_tick: int) -> list[dict[str, Any]]:
        """Get events in tick range (inclusive), flattened in tick order."""
        ...

    def get_tick_range(self) -> tuple[int, int] | None:
        """Get (min_tick, max_tick) if history exists, None if empty."""
        ...

    def clear(self) -> None:
        """Clear all stored history."""
        ...

    @property
    def tick_count(self) -> int:
        """Number of ticks currently stored."""
        ...
