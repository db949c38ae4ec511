"""Models package — the classification core and its schemas."""

from app.models.classifier import classify
from app.models.schemas import (
    ApiInfoResponse,
    ClassificationResult,
    ErrorResponse,
    HealthResponse,
    ProcessResponse,
)

__all__ = [
    "ApiInfoResponse",
    "ClassificationResult",
    "ErrorResponse",
    "HealthResponse",
    "ProcessResponse",
    "classify",
]
