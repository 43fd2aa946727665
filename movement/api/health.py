"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from movement.dependencies import get_classifier
from movement.engine.classifier import Classifier
from movement.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(classifier: Classifier = Depends(get_classifier)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        shape_tests_registered=classifier.registry.count,
    )
