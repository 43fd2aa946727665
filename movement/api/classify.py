"""POST /api/classify — classify one finished trace."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException

from movement.dependencies import get_classifier
from movement.engine.classifier import Classifier
from movement.errors import InsufficientSamples
from movement.models.requests import ClassifyRequest
from movement.models.responses import ClassifyResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/classify", response_model=ClassifyResponse)
def classify(
    request: ClassifyRequest,
    classifier: Classifier = Depends(get_classifier),
) -> ClassifyResponse:
    start = time.perf_counter()
    try:
        result = classifier.classify(request.to_trace())
    except InsufficientSamples as e:
        logger.info("Rejected trace: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e
    elapsed = (time.perf_counter() - start) * 1000
    return ClassifyResponse.from_result(result, processing_time_ms=round(elapsed, 3))
