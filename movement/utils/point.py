"""Integer 2D point with vector arithmetic. No engine imports.

Square roots are taken in single precision and truncated toward zero, so two
pairs with the same squared separation always report the same integer
distance. Downstream branches compare independently computed distances for
exact equality and rely on this.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from movement.errors import DegenerateLine


def _sqrt32(value: int) -> float:
    """Single-precision square root of a non-negative integer."""
    return float(np.sqrt(np.float32(value)))


def trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero (not toward -inf like ``//``)."""
    if denominator == 0:
        raise ZeroDivisionError("division of a point by zero")
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


@dataclass(frozen=True)
class Point:
    """Immutable pixel coordinate."""

    x: int
    y: int

    @classmethod
    def from_pair(cls, pair: tuple[int, int] | list[int]) -> Point:
        x, y = pair
        return cls(int(x), int(y))

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)

    # --- component-wise arithmetic ---

    def add(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def sub(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def scale(self, k: int) -> Point:
        return Point(self.x * k, self.y * k)

    def divide(self, k: int) -> Point:
        return Point(trunc_div(self.x, k), trunc_div(self.y, k))

    def __add__(self, other: Point) -> Point:
        return self.add(other)

    def __sub__(self, other: Point) -> Point:
        return self.sub(other)

    def __mul__(self, k: int) -> Point:
        return self.scale(k)

    def __truediv__(self, k: int) -> Point:
        return self.divide(k)

    # --- metrics ---

    def magnitude(self) -> float:
        """Euclidean norm sqrt(x² + y²)."""
        return _sqrt32(self.x * self.x + self.y * self.y)

    def distance(self, other: Point) -> int:
        """Euclidean distance truncated to an integer."""
        dx = self.x - other.x
        dy = self.y - other.y
        return int(_sqrt32(dx * dx + dy * dy))

    def dot(self, other: Point) -> int:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Point) -> int:
        """Scalar 2D cross product (z of the 3D cross)."""
        return self.x * other.y - self.y * other.x

    def distance_to_line(self, b: Point, c: Point) -> float:
        """Perpendicular distance to the infinite line through ``b`` and ``c``.

        Raises DegenerateLine when ``b == c``; the line is undefined then.
        """
        if b == c:
            raise DegenerateLine(b)
        area = np.float32(abs((self - b).cross(self - c)))
        return float(area / np.float32((b - c).magnitude()))
