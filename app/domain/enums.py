"""Domain enums used across all layers."""

from enum import Enum


class TokenCategory(str, Enum):
    """Mutually exclusive token classes."""

    NUMERIC = "numeric"
    LETTER = "letter"
    SPECIAL = "special"


class ProcessingSource(str, Enum):
    """Where a result was computed."""

    BACKEND = "backend_api"
    CLIENT_FALLBACK = "client_side_fallback"

    @property
    def label(self) -> str:
        if self is ProcessingSource.BACKEND:
            return "Backend API"
        return "Client-side Fallback"


class Environment(str, Enum):
    """Deployment environments."""

    DEVELOPMENT = "development"
    TEST = "test"
    STAGING = "staging"
    PRODUCTION = "production"

    @classmethod
    def from_string(cls, value: str) -> "Environment":
        try:
            return cls(value.lower().strip())
        except ValueError:
            raise ValueError(
                f"Invalid environment '{value}'. "
                f"Choose from: {[e.value for e in cls]}"
            )
