"""API response models."""

from __future__ import annotations

from pydantic import BaseModel

from movement.engine.result import ClassificationResult


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    shape_tests_registered: int = 0


class ClassifyResponse(BaseModel):
    shape: str
    confidence: int
    basis: str
    label: str
    processing_time_ms: float = 0.0

    @classmethod
    def from_result(cls, result: ClassificationResult, processing_time_ms: float) -> ClassifyResponse:
        return cls(
            shape=result.shape.value,
            confidence=result.confidence,
            basis=result.basis.value,
            label=result.describe(),
            processing_time_ms=processing_time_ms,
        )
