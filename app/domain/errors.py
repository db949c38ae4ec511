"""Domain-specific exceptions for clean error handling."""


class BackendUnavailableError(RuntimeError):
    """Raised when the processing endpoint cannot be reached or misbehaves."""


class ValidationError(ValueError):
    """Raised when domain-level validation fails."""


class InvalidInputKindError(ValidationError):
    """Raised when the ``data`` field is present but not an array."""
