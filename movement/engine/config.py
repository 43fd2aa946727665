"""Classifier configuration — tolerances for every shape test."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ClassifierConfig:
    """Tolerances used by the shape tests. Passed explicitly, never global."""

    # Share of points allowed to fail a test; 0.25 -> 75% pass threshold
    general_tolerance: float = 0.25

    # Circle: relative band around the average centroid distance
    circle_tolerance: float = 0.25

    # Line: max perpendicular distance from the first-last line, in px
    line_tolerance_px: float = 10.0

    # Ellipse: max gap between centroid and major-axis midpoint, in px
    ellipse_centrum_tolerance_px: int = 100
    # Ellipse: relative band for mirrored probe distances
    ellipse_tolerance: float = 0.5

    # Below this many samples classification is refused
    min_samples: int = 2

    def __post_init__(self) -> None:
        for name in ("general_tolerance", "circle_tolerance", "ellipse_tolerance"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be within [0, 1], got {value}")
        if self.line_tolerance_px < 0:
            raise ValueError("line_tolerance_px must be non-negative")
        if self.ellipse_centrum_tolerance_px < 0:
            raise ValueError("ellipse_centrum_tolerance_px must be non-negative")
        if self.min_samples < 2:
            raise ValueError("min_samples must be at least 2")

    @property
    def circle_pass_percent(self) -> int:
        """Minimum passes_percent for a circle (inclusive)."""
        return 100 - round(100 * self.general_tolerance)

    @property
    def line_pass_percent(self) -> float:
        """Minimum share of on-line points, in percent (inclusive)."""
        return 100.0 - 100.0 * self.general_tolerance
