"""Tests for app.domain.errors."""

from app.domain.errors import (
    BackendUnavailableError,
    InvalidInputKindError,
    ValidationError,
)


class TestDomainErrors:
    def test_backend_unavailable_is_runtime(self):
        err = BackendUnavailableError("no backend")
        assert isinstance(err, RuntimeError)
        assert str(err) == "no backend"

    def test_validation_error_is_value_error(self):
        err = ValidationError("invalid")
        assert isinstance(err, ValueError)

    def test_invalid_input_kind_is_validation_error(self):
        err = InvalidInputKindError("Input data must be an array")
        assert isinstance(err, ValidationError)
        assert str(err) == "Input data must be an array"
