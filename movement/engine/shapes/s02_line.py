"""S02 — Line test.

Only runs when the stroke's endpoints are also its two most separated
samples (exact integer equality of the truncated distances). Each sample
then passes if it lies within ``line_tolerance_px`` of the first-last line.
"""

from __future__ import annotations

import logging

from movement.engine.context import TraceContext
from movement.engine.registry import shape_test
from movement.engine.result import ClassificationResult, ShapeName
from movement.errors import DegenerateLine

logger = logging.getLogger(__name__)


@shape_test(
    id="S02",
    shape=ShapeName.LINE,
    description="Samples within a pixel band of the first-last line",
)
def line_test(ctx: TraceContext) -> ClassificationResult | None:
    max_distance = ctx.distances.max
    ctx.features["max_distance"] = max_distance
    ctx.features["start_end_distance"] = ctx.start_end_distance

    if max_distance != ctx.start_end_distance:
        return None

    tolerance = ctx.config.line_tolerance_px
    # Only reachable when called without Classifier.run's distinct-point filter
    try:
        passed = sum(
            1 for p in ctx.trace if p.distance_to_line(ctx.first, ctx.last) <= tolerance
        )
    except DegenerateLine as e:
        logger.warning("Line test skipped: %s", e)
        return ClassificationResult(ShapeName.UNKNOWN, 0, basis=ShapeName.LINE)

    passed_percent = 100 * passed / len(ctx.trace)
    ctx.features["line_passed_percent"] = passed_percent

    confidence = int(passed_percent)
    if passed_percent >= ctx.config.line_pass_percent:
        return ClassificationResult(ShapeName.LINE, confidence)
    return ClassificationResult(ShapeName.UNKNOWN, confidence, basis=ShapeName.LINE)
