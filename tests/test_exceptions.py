"""Tests for the exception hierarchy."""

import pytest

from fluent_requirements.exceptions import (
    ConfigurationError,
    InvalidArgumentError,
    InvalidStateError,
    MultipleFailuresError,
    NullValueError,
    RequirementsError,
    ValidationError,
    ValueUnavailableError,
)
from fluent_requirements.failures import FailureKind, ValidationFailure


class TestRequirementsError:
    """Test the base RequirementsError class."""

    def test_message_only(self):
        """Test an error raised with only a message."""
        error = RequirementsError("Settings could not be read")
        assert str(error) == "Settings could not be read"
        assert error.message == "Settings could not be read"
        assert error.context == {}
        assert error.details == {}

    def test_context_kept(self):
        """Test that the context mapping is kept and aliased as details."""
        error = RequirementsError("Check failed", context={"name": "port", "value": 0})
        assert error.context == {"name": "port", "value": 0}
        assert error.details == {"name": "port", "value": 0}

    def test_details_override_context(self):
        """Test that details replaces context when both are given."""
        error = RequirementsError(
            "Conflict", context={"source": "context"}, details={"source": "details"}
        )
        assert error.context == {"source": "details"}

    def test_subclasses_share_root(self):
        """Test that every library error is a RequirementsError."""
        with pytest.raises(RequirementsError):
            raise InvalidArgumentError('"port" must be positive.')


class TestValidationErrors:
    """Test the exceptions built from recorded failures."""

    def test_builtin_bases(self):
        """Test that each failure exception is also the matching builtin."""
        assert issubclass(NullValueError, TypeError)
        assert issubclass(InvalidArgumentError, ValueError)
        assert issubclass(InvalidStateError, RuntimeError)
        assert issubclass(ConfigurationError, ValueError)
        assert issubclass(ValueUnavailableError, LookupError)

    def test_failure_attribute(self):
        """Test that the originating failure is kept on the exception."""
        failure = ValidationFailure(FailureKind.ILLEGAL_ARGUMENT, "bad", (("x", 1),))
        error = failure.create_exception()
        assert isinstance(error, InvalidArgumentError)
        assert error.failure is failure
        assert error.context == {"x": 1}

    def test_failure_defaults_to_none(self):
        """Test that directly raised validation errors have no failure."""
        error = NullValueError('"name" may not be None.')
        assert error.failure is None
        assert isinstance(error, ValidationError)


class TestMultipleFailuresError:
    """Test the composite exception."""

    def test_message_lists_failures(self):
        """Test that the message numbers each failure."""
        failures = [
            ValidationFailure(FailureKind.ILLEGAL_ARGUMENT, '"x" must be positive.\nx: -1'),
            ValidationFailure(FailureKind.NULL_VALUE, '"y" may not be None'),
        ]
        error = MultipleFailuresError(failures)
        assert str(error) == (
            "2 validation failures occurred:\n\n"
            '1. "x" must be positive.\n'
            "   x: -1\n\n"
            '2. "y" may not be None'
        )
        assert error.context == {"failures": 2}

    def test_exceptions_follow_failure_order(self):
        """Test that one exception is created per failure, in order."""
        failures = [
            ValidationFailure(FailureKind.NULL_VALUE, "first"),
            ValidationFailure(FailureKind.INVALID_STATE, "second"),
        ]
        error = MultipleFailuresError(failures)
        assert [type(e) for e in error.exceptions] == [NullValueError, InvalidStateError]
        assert error.messages == ["first", "second"]
        assert error.failures == failures
