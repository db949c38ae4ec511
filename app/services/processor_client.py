"""HTTP client for ``POST /process`` with a local fallback."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional
from urllib import error as url_error
from urllib import request as url_request

from app.domain.enums import ProcessingSource
from app.domain.errors import BackendUnavailableError, ValidationError
from app.models.classifier import classify
from app.models.schemas import ProcessResponse

logger = logging.getLogger(__name__)


def _identity_from(settings: Any) -> Dict[str, str]:
    return {
        "user_id": settings.user_id,
        "email": settings.email,
        "roll_number": settings.roll_number,
    }


@dataclass(frozen=True)
class ClientOutcome:
    """A ``/process``-shaped payload and where it was computed."""

    result: Dict[str, Any]
    source: ProcessingSource

    @property
    def used_backend(self) -> bool:
        return self.source is ProcessingSource.BACKEND


class ProcessorClient:
    """Talks to the processing API, computing locally when it is unreachable."""

    def __init__(
        self,
        base_url: str = "http://localhost:3001",
        timeout: float = 5.0,
        identity: Optional[Dict[str, str]] = None,
    ) -> None:
        if identity is None:
            from config import get_settings

            identity = _identity_from(get_settings())

        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._identity = dict(identity)

    @classmethod
    def from_settings(
        cls,
        settings: Any = None,
        *,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> "ProcessorClient":
        """Build a client from settings; explicit arguments win."""
        if settings is None:
            from config import get_settings

            settings = get_settings()
        return cls(
            base_url=base_url if base_url is not None else settings.api_base_url,
            timeout=timeout if timeout is not None else settings.client_timeout,
            identity=_identity_from(settings),
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> float:
        return self._timeout

    @staticmethod
    def validate_payload(payload: Any) -> None:
        """Reject payloads the server would refuse, before touching the network."""
        if not isinstance(payload, dict):
            raise ValidationError("Input must be a JSON object")
        if "data" not in payload:
            raise ValidationError('Input must have a "data" field')
        if not isinstance(payload["data"], list):
            raise ValidationError('The "data" field must be an array')

    def check_health(self) -> bool:
        try:
            data = self._request_json("GET", "/health")
        except BackendUnavailableError as exc:
            logger.warning("Backend health check failed: %s", exc)
            return False
        return data.get("status") == "OK"

    def process(self, payload: Dict[str, Any]) -> ClientOutcome:
        self.validate_payload(payload)
        try:
            result = self._request_json("POST", "/process", payload)
            return ClientOutcome(result=result, source=ProcessingSource.BACKEND)
        except BackendUnavailableError as exc:
            logger.warning("Backend unavailable, using client-side processing: %s", exc)

        result = ProcessResponse.from_result(classify(payload), **self._identity).to_payload()
        result["processed_with"] = ProcessingSource.CLIENT_FALLBACK.value
        return ClientOutcome(result=result, source=ProcessingSource.CLIENT_FALLBACK)

    def _request_json(
        self,
        method: str,
        path: str,
        payload: Dict[str, Any] | None = None,
    ) -> Dict[str, Any]:
        body = json.dumps(payload).encode("utf-8") if payload is not None else None
        request = url_request.Request(
            f"{self._base_url}{path}",
            data=body,
            headers={"Content-Type": "application/json"},
            method=method,
        )

        try:
            with url_request.urlopen(request, timeout=self._timeout) as response:
                data = json.loads(response.read().decode("utf-8"))
        except (url_error.URLError, TimeoutError, OSError, ValueError) as exc:
            raise BackendUnavailableError(f"{method} {path} failed: {exc}") from exc

        if not isinstance(data, dict):
            raise BackendUnavailableError(f"{method} {path} returned a non-object body")
        return data
