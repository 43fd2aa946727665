"""Classification error taxonomy. Leaf module, no package imports."""

from __future__ import annotations


class ClassificationError(Exception):
    """Base class for conditions raised while classifying a trace."""


class InsufficientSamples(ClassificationError):
    """The trace has too few points to be classified."""

    def __init__(self, count: int, required: int = 2) -> None:
        self.count = count
        self.required = required
        super().__init__(f"Trace has {count} point(s); at least {required} are required")


class DegenerateLine(ClassificationError):
    """The two points defining a line coincide."""

    def __init__(self, point: object) -> None:
        self.point = point
        super().__init__(f"Line endpoints coincide at {point}")


class DegenerateEllipse(ClassificationError):
    """The ellipse symmetry probe produced no samples to score."""
