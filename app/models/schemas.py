"""Pydantic result/response schemas (Model Layer).

Every payload leaving the core or the HTTP layer is verified by a Pydantic model.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

# ── Base ──────────────────────────────────────────────────


class TimestampedModel(BaseModel):
    """Shared model base with auto-generated timestamp."""

    timestamp: str = Field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )


# ── Core result ───────────────────────────────────────────


class ClassificationResult(BaseModel):
    """Outcome of classifying one token sequence.

    Failure results carry an ``error`` and empty defaults everywhere else.
    """

    model_config = ConfigDict(frozen=True)

    is_success: bool = True
    odd_numbers: List[str] = Field(default_factory=list)
    even_numbers: List[str] = Field(default_factory=list)
    alphabets: List[str] = Field(default_factory=list)
    special_characters: List[str] = Field(default_factory=list)
    sum: str = "0"
    concat_string: str = ""
    error: Optional[str] = None

    @model_validator(mode="after")
    def failure_has_empty_fields(self) -> "ClassificationResult":
        if self.is_success:
            return self
        if not self.error:
            raise ValueError("Failed results must describe the error")
        populated = (
            self.odd_numbers
            or self.even_numbers
            or self.alphabets
            or self.special_characters
            or self.concat_string
            or self.sum != "0"
        )
        if populated:
            raise ValueError("Failed results must not carry classified data")
        return self

    @classmethod
    def failure(cls, error: str) -> "ClassificationResult":
        return cls(is_success=False, error=error)

    @property
    def number_count(self) -> int:
        return len(self.odd_numbers) + len(self.even_numbers)

    def to_payload(self) -> Dict[str, Any]:
        """Serialize for the wire; ``error`` appears only on failure."""
        return self.model_dump(exclude_none=True)


# ── Responses ─────────────────────────────────────────────


class ProcessResponse(ClassificationResult):
    """``POST /process`` body: the result plus demo identity fields."""

    user_id: str
    email: str
    roll_number: str

    @classmethod
    def from_result(
        cls,
        result: ClassificationResult,
        *,
        user_id: str,
        email: str,
        roll_number: str,
    ) -> "ProcessResponse":
        return cls(
            **result.model_dump(),
            user_id=user_id,
            email=email,
            roll_number=roll_number,
        )


class HealthResponse(TimestampedModel):
    """Health check response."""

    status: str = "OK"
    uptime: float = Field(default=0.0, ge=0)


class ExampleUsage(BaseModel):
    endpoint: str
    method: str
    body: Dict[str, Any]


class ApiInfoResponse(BaseModel):
    """``GET /`` self-description."""

    message: str
    version: str
    endpoints: Dict[str, str] = Field(default_factory=dict)
    example_usage: ExampleUsage


class ErrorResponse(BaseModel):
    """Boundary-level error body."""

    is_success: bool = False
    error: str
    message: Optional[str] = None
