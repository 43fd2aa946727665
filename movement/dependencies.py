"""FastAPI dependency injection."""

from __future__ import annotations

from functools import lru_cache

from movement.config import settings
from movement.engine.classifier import Classifier, create_classifier


def get_settings():
    return settings


@lru_cache(maxsize=1)
def get_classifier() -> Classifier:
    return create_classifier(settings.classifier_config())
