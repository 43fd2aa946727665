"""Classification outcome types."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class ShapeName(str, enum.Enum):
    CIRCLE = "circle"
    ELLIPSE = "ellipse"
    LINE = "line"
    UNKNOWN = "unknown"
    # Placeholder for a recorded trace that has not been classified yet
    UNDEFINED = "undefined"


@dataclass(frozen=True)
class ClassificationResult:
    """Shape label plus an integer 0-100 confidence.

    ``basis`` is the shape whose test produced the confidence. It equals
    ``shape`` except for UNKNOWN results, where it names the test that
    came closest (e.g. an UNKNOWN scored against the line test).
    """

    shape: ShapeName
    confidence: int
    basis: ShapeName | None = None

    def __post_init__(self) -> None:
        if self.shape is ShapeName.UNDEFINED:
            raise ValueError("UNDEFINED is not a classification result")
        if not 0 <= self.confidence <= 100:
            raise ValueError(f"confidence must be within [0, 100], got {self.confidence}")
        if self.basis is None:
            object.__setattr__(self, "basis", self.shape)

    def describe(self) -> str:
        """Human-readable label, e.g. ``CIRCLE (92%)`` or ``UNKNOWN (40% Line)``."""
        label = self.shape.name
        if self.shape is ShapeName.UNKNOWN and self.basis is not ShapeName.UNKNOWN:
            return f"{label} ({self.confidence}% {self.basis.name.capitalize()})"
        return f"{label} ({self.confidence}%)"
