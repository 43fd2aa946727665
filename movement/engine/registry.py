"""Shape test registry — every shape test is a standalone function registered via decorator.

Usage:
    @shape_test(id="S02", name=ShapeName.LINE, description="...")
    def line_test(ctx: TraceContext) -> ClassificationResult | None:
        ...

A test returns a result when its precondition matched (the decision is
final) or None to hand the trace to the next test. Tests run in ID order.
"""

from __future__ import annotations

import importlib
import logging
import pkgutil
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from movement.engine.result import ClassificationResult, ShapeName

if TYPE_CHECKING:
    from movement.engine.context import TraceContext

logger = logging.getLogger(__name__)

ShapeTestFn = Callable[["TraceContext"], "ClassificationResult | None"]


@dataclass
class ShapeTestSpec:
    id: str
    shape: ShapeName
    fn: ShapeTestFn
    description: str = ""


class ShapeTestRegistry:
    """Registry of shape tests, ordered by ID."""

    def __init__(self) -> None:
        self._tests: dict[str, ShapeTestSpec] = {}

    def register(self, spec: ShapeTestSpec) -> None:
        if spec.id in self._tests:
            raise ValueError(f"Duplicate shape test ID: {spec.id}")
        self._tests[spec.id] = spec
        logger.debug("Registered shape test %s (%s)", spec.id, spec.shape.name)

    def get(self, test_id: str) -> ShapeTestSpec:
        return self._tests[test_id]

    def all(self) -> list[ShapeTestSpec]:
        return sorted(self._tests.values(), key=lambda s: s.id)

    @property
    def count(self) -> int:
        return len(self._tests)


# Module-level singleton
_registry = ShapeTestRegistry()


def get_registry() -> ShapeTestRegistry:
    return _registry


def shape_test(*, id: str, shape: ShapeName, description: str = ""):
    """Decorator to register a shape test function."""

    def decorator(fn: ShapeTestFn):
        _registry.register(ShapeTestSpec(id=id, shape=shape, fn=fn, description=description))
        return fn

    return decorator


def register_shape_tests() -> ShapeTestRegistry:
    """Import every module in ``movement.engine.shapes`` so @shape_test decorators fire."""
    package = importlib.import_module("movement.engine.shapes")
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"movement.engine.shapes.{module_name}")
    return _registry
