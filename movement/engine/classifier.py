"""Classifier — runs the registered shape tests in order; first decision wins."""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence

from movement.engine.config import ClassifierConfig
from movement.engine.context import TraceContext
from movement.engine.registry import ShapeTestRegistry, register_shape_tests
from movement.engine.result import ClassificationResult, ShapeName
from movement.errors import InsufficientSamples
from movement.utils.distances import distinct_count
from movement.utils.point import Point

logger = logging.getLogger(__name__)


class Classifier:
    """Stateless shape classifier. Safe to share between threads."""

    def __init__(
        self,
        registry: ShapeTestRegistry | None = None,
        config: ClassifierConfig | None = None,
    ) -> None:
        self.registry = registry or register_shape_tests()
        self.config = config or ClassifierConfig()

    def classify(self, trace: Sequence[Point]) -> ClassificationResult:
        """Classify a finished trace.

        Raises InsufficientSamples for traces shorter than ``min_samples``.
        """
        return self.run(trace).features["result"]

    def run(self, trace: Sequence[Point]) -> TraceContext:
        """Classify and return the full context, including diagnostics."""
        if len(trace) < self.config.min_samples:
            raise InsufficientSamples(len(trace), self.config.min_samples)

        start = time.perf_counter()
        ctx = TraceContext.from_points(trace, self.config)

        if distinct_count(ctx.trace) < 2:
            logger.warning("Trace of %d samples has a single distinct point", len(ctx.trace))
            result = ClassificationResult(ShapeName.UNKNOWN, 0)
        else:
            result = self._decide(ctx)

        ctx.features["result"] = result
        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            "Classified %d samples as %s in %.1fms",
            len(ctx.trace),
            result.describe(),
            elapsed,
        )
        return ctx

    def _decide(self, ctx: TraceContext) -> ClassificationResult:
        for spec in self.registry.all():
            t0 = time.perf_counter()
            result = spec.fn(ctx)
            ctx.completed_tests.append(spec.id)
            elapsed = (time.perf_counter() - t0) * 1000
            logger.debug(
                "  %s (%s) %s in %.1fms",
                spec.id,
                spec.shape.name,
                "decided" if result is not None else "passed on",
                elapsed,
            )
            if result is not None:
                return result

        return ClassificationResult(
            ShapeName.UNKNOWN, ctx.circle_stats.passes_percent, basis=ShapeName.CIRCLE
        )


def create_classifier(config: ClassifierConfig | None = None) -> Classifier:
    """Factory function for creating a classifier instance."""
    return Classifier(config=config)


def classify(trace: Sequence[Point], config: ClassifierConfig | None = None) -> ClassificationResult:
    """Classify ``trace`` with a fresh classifier."""
    return create_classifier(config).classify(trace)
