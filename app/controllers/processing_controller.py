"""Processing Controller (Controller Layer)."""

from __future__ import annotations

import logging
import time
from typing import Any

from app import __version__
from app.models.classifier import classify
from app.models.schemas import (
    ApiInfoResponse,
    ExampleUsage,
    HealthResponse,
    ProcessResponse,
)

logger = logging.getLogger(__name__)

EXAMPLE_DATA = ["a", "1", "23", "$", "B"]


class ProcessingController:
    """Bridges the HTTP layer and the classification core.

    The core knows nothing about identity fields or debug policy; the
    controller supplies both from settings.
    """

    def __init__(self, settings: Any = None) -> None:
        if settings is None:
            from config import get_settings

            settings = get_settings()

        self._settings = settings
        self._started_at = time.monotonic()

    @property
    def settings(self) -> Any:
        return self._settings

    @property
    def uptime(self) -> float:
        return time.monotonic() - self._started_at

    def process(self, payload: Any) -> ProcessResponse:
        """Classify a request body and attach the demo identity."""
        result = classify(payload, debug=self._settings.expose_error_details)
        if not result.is_success:
            logger.warning("Processing failed: %s", result.error)
        return ProcessResponse.from_result(
            result,
            user_id=self._settings.user_id,
            email=self._settings.email,
            roll_number=self._settings.roll_number,
        )

    def api_info(self) -> ApiInfoResponse:
        return ApiInfoResponse(
            message=self._settings.app_name,
            version=__version__,
            endpoints={
                "POST /process": "Process array data",
                "GET /health": "Health check",
                "GET /": "API information",
            },
            example_usage=ExampleUsage(
                endpoint="/process",
                method="POST",
                body={"data": list(EXAMPLE_DATA)},
            ),
        )

    def health(self) -> HealthResponse:
        return HealthResponse(status="OK", uptime=round(self.uptime, 3))
