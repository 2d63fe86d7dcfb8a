"""RGB colors with floating-point components."""

from __future__ import annotations

import sys
from dataclasses import dataclass

EPSILON = sys.float_info.epsilon


def _float_equal(a: float, b: float) -> bool:
    return abs(a - b) < EPSILON


@dataclass(frozen=True, eq=False)
class Color:
    """A color whose components are nominally in the range 0 to 1."""

    r: float
    g: float
    b: float

    @classmethod
    def white(cls) -> Color:
        return cls(1.0, 1.0, 1.0)

    @classmethod
    def black(cls) -> Color:
        return cls(0.0, 0.0, 0.0)

    def __add__(self, other: object) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __sub__(self, other: object) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r - other.r, self.g - other.g, self.b - other.b)

    def __mul__(self, other: object) -> Color:
        """Multiply by a scalar, or component-wise (Hadamard) by a color."""
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b)
        if isinstance(other, bool) or not isinstance(other, (int, float)):
            return NotImplemented
        return Color(self.r * other, self.g * other, self.b * other)

    def __rmul__(self, other: object) -> Color:
        if isinstance(other, bool) or not isinstance(other, (int, float)):
            return NotImplemented
        return self * other

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (
            _float_equal(self.r, other.r)
            and _float_equal(self.g, other.g)
            and _float_equal(self.b, other.b)
        )

    __hash__ = None  # type: ignore[assignment]