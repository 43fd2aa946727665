"""Distance statistics over a trace. Leaf-node helpers, no engine imports.

Two analyses share the truncated integer distance from ``Point.distance``:

* ``all_pairs_extremes`` — closest and farthest pair of trace points.
* ``reference_stats`` — spread of distances from one reference point
  (usually the centroid) with a pass/fail tally against a tolerance band.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from movement.errors import InsufficientSamples
from movement.utils.point import Point, trunc_div

PointPair = tuple[Point, Point]


@dataclass(frozen=True)
class DistanceSet:
    """All-pairs extremes. ``max_pair`` are the diameter witnesses."""

    min: int
    max: int
    min_pair: PointPair | None = None
    max_pair: PointPair | None = None


@dataclass(frozen=True)
class ReferenceDistanceStats:
    """Distances from a single reference point to every trace point."""

    min: int
    max: int
    avg: int
    above: int
    below: int
    values: int
    passes_percent: int
    min_pair: PointPair | None = None
    max_pair: PointPair | None = None

    @property
    def passed(self) -> int:
        return self.values - self.above - self.below


def centroid(trace: Sequence[Point]) -> Point:
    """Mean position of the trace, truncated toward zero per axis."""
    if len(trace) == 0:
        raise InsufficientSamples(0, required=1)
    sum_x = sum(p.x for p in trace)
    sum_y = sum(p.y for p in trace)
    return Point(trunc_div(sum_x, len(trace)), trunc_div(sum_y, len(trace)))


def distinct_count(trace: Sequence[Point]) -> int:
    return len(set(trace))


def all_pairs_extremes(trace: Sequence[Point]) -> DistanceSet:
    """Min and max distance over every unordered pair of non-identical points.

    O(n²). Ties keep the first pair met in (i, j>i) order. With fewer than
    two distinct points both distances are 0 and no witnesses exist.
    """
    max_distance = 0
    min_distance: int | None = None
    max_pair: PointPair | None = None
    min_pair: PointPair | None = None

    n = len(trace)
    for i in range(n):
        point = trace[i]
        for j in range(i + 1, n):
            other = trace[j]
            if point == other:
                continue
            d = point.distance(other)
            if d > max_distance:
                max_distance = d
                max_pair = (point, other)
            if min_distance is None or d < min_distance:
                min_distance = d
                min_pair = (point, other)

    return DistanceSet(
        min=min_distance if min_distance is not None else 0,
        max=max_distance,
        min_pair=min_pair,
        max_pair=max_pair,
    )


def reference_stats(
    trace: Sequence[Point],
    reference: Point,
    relative_tolerance: float,
) -> ReferenceDistanceStats:
    """Distance spread from ``reference`` to the trace.

    A point coincident with ``reference`` contributes no distance, but the
    average is still divided by the full trace length. A distance is
    "above" when ``d - band > avg`` and "below" when ``d + band < avg``,
    with ``band = int(avg * relative_tolerance)``.
    """
    if len(trace) == 0:
        raise InsufficientSamples(0, required=1)

    total = 0
    max_distance = 0
    min_distance: int | None = None
    max_pair: PointPair | None = None
    min_pair: PointPair | None = None
    distances: list[int] = []

    for other in trace:
        if other == reference:
            continue
        d = reference.distance(other)
        total += d
        distances.append(d)
        if d > max_distance:
            max_distance = d
            max_pair = (reference, other)
        if min_distance is None or d < min_distance:
            min_distance = d
            min_pair = (reference, other)

    values = len(trace)
    avg = total // values
    band = int(avg * relative_tolerance)
    above = sum(1 for d in distances if d - band > avg)
    below = sum(1 for d in distances if d + band < avg)
    passes_percent = 100 * (values - above - below) // values

    return ReferenceDistanceStats(
        min=min_distance if min_distance is not None else 0,
        max=max_distance,
        avg=avg,
        above=above,
        below=below,
        values=values,
        passes_percent=passes_percent,
        min_pair=min_pair,
        max_pair=max_pair,
    )


def closest_point(trace: Sequence[Point], target: Point) -> tuple[Point, int] | None:
    """Nearest trace point to ``target`` by linear scan.

    Points coincident with ``target`` are skipped; the first of several
    equally near points wins. Returns None when every point coincides.
    """
    best: Point | None = None
    best_distance = 0
    for other in trace:
        if other == target:
            continue
        d = target.distance(other)
        if best is None or d < best_distance:
            best = other
            best_distance = d
    if best is None:
        return None
    return best, best_distance
