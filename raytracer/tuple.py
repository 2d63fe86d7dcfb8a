"""Homogeneous four-component tuples used as points and vectors."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass

EPSILON = sys.float_info.epsilon


def _float_equal(a: float, b: float) -> bool:
    return abs(a - b) < EPSILON


@dataclass(frozen=True, eq=False)
class Tuple:
    """A point (``w == 1``) or a vector (``w == 0``) in 3D space."""

    x: float
    y: float
    z: float
    w: float

    @classmethod
    def point(cls, x: float, y: float, z: float) -> Tuple:
        """Create a point at the given coordinates."""
        return cls(x, y, z, 1.0)

    @classmethod
    def vector(cls, x: float, y: float, z: float) -> Tuple:
        """Create a vector with the given components."""
        return cls(x, y, z, 0.0)

    def is_point(self) -> bool:
        return self.w == 1.0

    def is_vector(self) -> bool:
        return not self.is_point()

    def magnitude(self) -> float:
        """Length of the tuple, ignoring ``w``."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> Tuple:
        """Return a unit vector in the same direction.

        Raises ZeroDivisionError for a zero-length tuple.
        """
        length = self.magnitude()
        return Tuple(self.x / length, self.y / length, self.z / length, 0.0)

    def dot(self, other: Tuple) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Tuple) -> Tuple:
        return Tuple.vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def __add__(self, other: object) -> Tuple:
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple(
            self.x + other.x,
            self.y + other.y,
            self.z + other.z,
            self.w + other.w,
        )

    def __sub__(self, other: object) -> Tuple:
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple(
            self.x - other.x,
            self.y - other.y,
            self.z - other.z,
            self.w - other.w,
        )

    def __neg__(self) -> Tuple:
        return Tuple(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, scalar: object) -> Tuple:
        if isinstance(scalar, bool) or not isinstance(scalar, (int, float)):
            return NotImplemented
        return Tuple(
            self.x * scalar,
            self.y * scalar,
            self.z * scalar,
            self.w * scalar,
        )

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return (
            _float_equal(self.x, other.x)
            and _float_equal(self.y, other.y)
            and _float_equal(self.z, other.z)
            and self.w == other.w
        )

    __hash__ = None  # type: ignore[assignment]