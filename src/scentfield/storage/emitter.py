"""Emitter component: the signals a game object currently produces.

Usage:
    pile = Emitter()
    pile.set_signal(SignalType.contains("wood"), SignalStrength(3.0))
    pile.set_signal(SignalType.contains("wood"), SignalStrength(2.0))  # quantity dropped
"""

from __future__ import annotations

from dataclasses import dataclass, field

from scentfield.core import SignalStrength, SignalType


@dataclass(slots=True)
class Emitter:
    """The component that causes a game object to emit signals.

    This can change over time, and multiple signals may be emitted at once.
    Emission only reads it.
    """

    signals: list[tuple[SignalType, SignalStrength]] = field(default_factory=list)

    def set_signal(self, signal_type: SignalType, signal_strength: SignalStrength) -> None:
        """Replace the strength emitted for ``signal_type``, appending if absent."""
        for i, (existing_type, _) in enumerate(self.signals):
            if existing_type == signal_type:
                self.signals[i] = (signal_type, signal_strength)
                return
        self.signals.append((signal_type, signal_strength))

    def remove_signal(self, signal_type: SignalType) -> bool:
        """Stop emitting ``signal_type``. Returns True if it was being emitted."""
        before = len(self.signals)
        self.signals = [(t, s) for t, s in self.signals if t != signal_type]
        return len(self.signals) != before

    def clear(self) -> None:
        self.signals.clear()

    def __len__(self) -> int:
        return len(self.signals)
