"""S01 — Circle test.

Distances from the centroid to every sample are compared with their average.
A trace is a circle when enough samples fall inside the tolerance band.
"""

from __future__ import annotations

from movement.engine.context import TraceContext
from movement.engine.registry import shape_test
from movement.engine.result import ClassificationResult, ShapeName


@shape_test(
    id="S01",
    shape=ShapeName.CIRCLE,
    description="Centroid distance spread within the circle tolerance band",
)
def circle_test(ctx: TraceContext) -> ClassificationResult | None:
    stats = ctx.circle_stats
    ctx.features["centroid"] = ctx.centroid.as_tuple()
    ctx.features["circle_avg_distance"] = stats.avg
    ctx.features["circle_passes_percent"] = stats.passes_percent

    if stats.passes_percent >= ctx.config.circle_pass_percent:
        return ClassificationResult(ShapeName.CIRCLE, stats.passes_percent)
    return None
