"""Domain layer — enums and custom exceptions."""

from app.domain.enums import Environment, ProcessingSource, TokenCategory
from app.domain.errors import (
    BackendUnavailableError,
    InvalidInputKindError,
    ValidationError,
)

__all__ = [
    "BackendUnavailableError",
    "Environment",
    "InvalidInputKindError",
    "ProcessingSource",
    "TokenCategory",
    "ValidationError",
]
