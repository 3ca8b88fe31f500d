"""Signal strength value type.

Usage:
    a = SignalStrength(2.0)
    b = SignalStrength(3.5)
    a + b        # SignalStrength(5.5)
    a - b        # SignalStrength(0.0), never negative
    b * 0.1      # SignalStrength(0.35)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True, slots=True, order=True)
class SignalStrength:
    """How strong a signal is. Has a minimum value of 0.

    Construction clamps negative inputs to zero, so every instance observed
    anywhere in the field satisfies ``value >= 0``.
    """

    value: float = 0.0

    ZERO: ClassVar[SignalStrength]

    def __post_init__(self) -> None:
        # NaN compares false against everything, treat it as no signal
        value = float(self.value)
        if not value > 0.0:
            value = 0.0
        object.__setattr__(self, "value", value)

    @classmethod
    def new(cls, value: float) -> SignalStrength:
        """Create a strength, clamping negative values to zero."""
        return cls(value)

    def __add__(self, other: SignalStrength) -> SignalStrength:
        if not isinstance(other, SignalStrength):
            return NotImplemented
        return SignalStrength(self.value + other.value)

    def __sub__(self, other: SignalStrength) -> SignalStrength:
        """Saturating subtraction: the result is never below zero."""
        if not isinstance(other, SignalStrength):
            return NotImplemented
        return SignalStrength(self.value - other.value)

    def __mul__(self, factor: float) -> SignalStrength:
        if isinstance(factor, SignalStrength):
            return NotImplemented
        return SignalStrength(self.value * float(factor))

    __rmul__ = __mul__

    def __bool__(self) -> bool:
        return self.value > 0.0

    def __float__(self) -> float:
        return self.value

    def __format__(self, format_spec: str) -> str:
        return format(self.value, format_spec)

    def __repr__(self) -> str:
        return f"SignalStrength({self.value!r})"


SignalStrength.ZERO = SignalStrength(0.0)
