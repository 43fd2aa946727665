"""Movement shape classification engine."""

from movement.engine.classifier import Classifier, classify, create_classifier
from movement.engine.config import ClassifierConfig
from movement.engine.context import TraceContext
from movement.engine.registry import get_registry, shape_test
from movement.engine.result import ClassificationResult, ShapeName

__all__ = [
    "Classifier",
    "classify",
    "create_classifier",
    "ClassifierConfig",
    "TraceContext",
    "get_registry",
    "shape_test",
    "ClassificationResult",
    "ShapeName",
]
