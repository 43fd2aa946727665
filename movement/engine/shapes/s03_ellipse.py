"""S03 — Ellipse test.

The diameter witnesses (p0, p1) are taken as the major axis. If the
centroid sits close to the axis midpoint, probes are stepped from the
midpoint and each probe's nearest sample is compared with the sample
nearest to its mirror image:

  probe_i   = mid + step * i,        step = (centroid - p1) / N
  mirror_i  = probe_i + (probe_i - nearest_i) * 2
  d_i, d_i' = distances of the two nearest samples to the major axis

A probe is a symmetry error when d_i' leaves d_i * (1 ± ellipse_tolerance).
Probe distances should also shrink monotonically; each growth counts
against the shape.

  imperfection = (grow / probes + errors / probes) / 2
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass

from movement.engine.context import TraceContext
from movement.engine.registry import shape_test
from movement.engine.result import ClassificationResult, ShapeName
from movement.errors import DegenerateEllipse, DegenerateLine
from movement.utils.distances import closest_point
from movement.utils.point import Point

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SymmetryProbe:
    """Tallies from one pass of the symmetry probe."""

    grow: int
    shrink: int
    errors: int
    passes: int

    @property
    def grow_factor(self) -> float:
        if self.grow + self.shrink == 0:
            raise DegenerateEllipse("No probe distances to compare")
        return self.grow / (self.grow + self.shrink)

    @property
    def error_factor(self) -> float:
        if self.errors + self.passes == 0:
            raise DegenerateEllipse("No mirrored probes to compare")
        return self.errors / (self.errors + self.passes)

    @property
    def imperfection(self) -> float:
        return (self.grow_factor + self.error_factor) / 2


def _nearest(trace: Sequence[Point], target: Point) -> Point:
    found = closest_point(trace, target)
    if found is None:
        raise DegenerateEllipse(f"No trace point apart from probe {target}")
    return found[0]


def symmetry_probe(
    trace: Sequence[Point],
    center: Point,
    axis: tuple[Point, Point],
    tolerance: float,
) -> SymmetryProbe:
    """Walk probes from the axis midpoint and tally growth and mirror errors."""
    p0, p1 = axis
    midpoint = (p0 + p1) / 2
    count = len(trace) // 2
    if count == 0:
        raise DegenerateEllipse("Trace too short for symmetry probes")
    step = (center - p1) / count

    grow = shrink = errors = passes = 0
    last_distance = math.inf
    for i in range(1, count):
        probe = midpoint + step * i
        nearest = _nearest(trace, probe)
        distance = nearest.distance_to_line(p0, p1)

        mirrored = probe + (probe - nearest) * 2
        mirrored_distance = _nearest(trace, mirrored).distance_to_line(p0, p1)

        band = tolerance * distance
        if mirrored_distance - band > distance or mirrored_distance + band < distance:
            errors += 1
        else:
            passes += 1

        if distance > last_distance:
            grow += 1
        else:
            shrink += 1
        last_distance = distance

    return SymmetryProbe(grow=grow, shrink=shrink, errors=errors, passes=passes)


@shape_test(
    id="S03",
    shape=ShapeName.ELLIPSE,
    description="Mirror symmetry about the major axis with shrinking probe distances",
)
def ellipse_test(ctx: TraceContext) -> ClassificationResult | None:
    axis = ctx.distances.max_pair
    if axis is None:
        logger.warning("Ellipse test skipped: trace has no distinct point pair")
        return ClassificationResult(ShapeName.UNKNOWN, 0, basis=ShapeName.ELLIPSE)

    p0, p1 = axis
    midpoint = (p0 + p1) / 2
    centrum_gap = ctx.centroid.distance(midpoint)
    ctx.features["ellipse_axis"] = (p0.as_tuple(), p1.as_tuple())
    ctx.features["ellipse_centrum_gap"] = centrum_gap

    if centrum_gap > ctx.config.ellipse_centrum_tolerance_px:
        return ClassificationResult(
            ShapeName.UNKNOWN, ctx.circle_stats.passes_percent, basis=ShapeName.CIRCLE
        )

    try:
        probe = symmetry_probe(ctx.trace, ctx.centroid, axis, ctx.config.ellipse_tolerance)
        imperfection = probe.imperfection
    except (DegenerateEllipse, DegenerateLine) as e:
        logger.warning("Ellipse test skipped: %s", e)
        return ClassificationResult(ShapeName.UNKNOWN, 0, basis=ShapeName.ELLIPSE)

    ctx.features["ellipse_probe"] = probe
    ctx.features["ellipse_imperfection"] = imperfection

    confidence = int((1.0 - imperfection) * 100)
    if imperfection <= ctx.config.general_tolerance:
        return ClassificationResult(ShapeName.ELLIPSE, confidence)
    return ClassificationResult(ShapeName.UNKNOWN, confidence, basis=ShapeName.ELLIPSE)
