"""Data models for tick tracing.

Records are JSON-serializable so any history backend can persist them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class TickRecord:
    """Complete record of a single pipeline tick.

    Attributes:
        tick: The tick number (first tick is 1).
        timestamp: Unix timestamp when the tick completed.
        snapshot: Post-decay field, as returned by Signals.snapshot().
        events: Notable occurrences during the tick.
        phase_timings: Optional dict of phase_name -> execution_time_ms.
        metadata: Optional arbitrary metadata for annotations.

    Example:
        record = TickRecord(
            tick=42,
            timestamp=1704067200.0,
            snapshot={"signals": {"Pull(wood)": {"(0, 0)": 1.5}}},
            phase_timings={"emit": 0.1, "diffuse": 2.4, "degrade": 0.3},
        )
    """

    tick: int
    timestamp: float
    snapshot: dict[str, Any]
    events: list[dict[str, Any]] = field(default_factory=list)
    phase_timings: dict[str, float] | None = None
    metadata: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        result: dict[str, Any] = {
            "tick": self.tick,
            "timestamp": self.timestamp,
            "snapshot": self.snapshot,
            "events": self.events,
        }
        if self.phase_timings is not None:
            result["phase_timings"] = self.phase_timings
        if self.metadata is not None:
            result["metadata"] = self.metadata
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TickRecord:
        """Create from dictionary (for deserialization)."""
        return cls(
            tick=data["tick"],
            timestamp=data["timestamp"],
            snapshot=data["snapshot"],
            events=data.get("events", []),
            phase_timings=data.get("phase_timings"),
            metadata=data.get("metadata"),
        )
