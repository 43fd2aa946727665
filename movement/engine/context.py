"""TraceContext — per-call state shared by the shape tests.

Measurements several tests need (centroid, circle statistics, all-pairs
extremes) are computed on first access and reused. A context lives for one
``classify`` call only.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from functools import cached_property
from typing import Any

from movement.engine.config import ClassifierConfig
from movement.utils.distances import (
    DistanceSet,
    ReferenceDistanceStats,
    all_pairs_extremes,
    centroid,
    reference_stats,
)
from movement.utils.point import Point


@dataclass
class TraceContext:
    """Read-only trace plus lazily computed statistics."""

    trace: tuple[Point, ...]
    config: ClassifierConfig = field(default_factory=ClassifierConfig)
    # Diagnostic values recorded by the shape tests, keyed by name
    features: dict[str, Any] = field(default_factory=dict)
    # Shape test IDs that ran, in order
    completed_tests: list[str] = field(default_factory=list)

    @classmethod
    def from_points(
        cls,
        points: Sequence[Point],
        config: ClassifierConfig | None = None,
    ) -> TraceContext:
        return cls(trace=tuple(points), config=config or ClassifierConfig())

    @property
    def first(self) -> Point:
        return self.trace[0]

    @property
    def last(self) -> Point:
        return self.trace[-1]

    @cached_property
    def centroid(self) -> Point:
        return centroid(self.trace)

    @cached_property
    def circle_stats(self) -> ReferenceDistanceStats:
        return reference_stats(self.trace, self.centroid, self.config.circle_tolerance)

    @cached_property
    def distances(self) -> DistanceSet:
        return all_pairs_extremes(self.trace)

    @cached_property
    def start_end_distance(self) -> int:
        return self.first.distance(self.last)
