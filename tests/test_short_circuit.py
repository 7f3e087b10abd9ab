"""Tests for the active/short-circuited state machine."""

import pytest

from fluent_requirements import FailureKind, check_if, require_that
from fluent_requirements.exceptions import (
    InvalidArgumentError,
    MultipleFailuresError,
    NullValueError,
    ValueUnavailableError,
)
from fluent_requirements.validator import DynamicValidator, NumberValidator


class TestNullValue:
    """Test the single root-cause failure for None values."""

    def test_one_failure_for_null(self):
        """Test that a None value records exactly one failure."""
        failures = check_if("x", None).is_greater_than(5).is_less_than(10).else_get_failures()
        assert len(failures) == 1
        assert failures[0].kind is FailureKind.NULL_VALUE
        assert failures[0].message == '"x" may not be None'

    def test_require_that_raises_null_value_error(self):
        """Test that a fail-fast chain raises on None."""
        with pytest.raises(NullValueError, match='"x" may not be None'):
            require_that("x", None).is_greater_than(5)

    def test_null_uses_dynamic_validator(self):
        """Test that None values get a validator with every capability."""
        validator = check_if("x", None)
        assert isinstance(validator, DynamicValidator)
        validator.is_not_blank().size().is_positive()
        assert len(validator.else_get_failures()) == 1

    def test_is_none_passes(self):
        """Test that checks defined for every value keep their meaning."""
        assert check_if("x", None).is_none().else_get_failures() == []
        assert check_if("x", None).is_equal_to(None).else_get_failures() == []

    def test_unknown_method(self):
        """Test that unknown methods still raise AttributeError."""
        with pytest.raises(AttributeError):
            check_if("x", None).frobnicate()

    def test_later_checks_are_no_ops(self):
        """Test that a short-circuited validator ignores every check."""
        validator = check_if("x", None).is_not_none()
        assert not validator.is_active()
        validator.is_equal_to(5).is_none().is_instance_of(int)
        assert len(validator.else_get_failures()) == 1


class TestValueAccess:
    """Test value accessors."""

    def test_get_value(self):
        """Test reading the value of an active validator."""
        assert check_if("x", 5).get_value() == 5

    def test_get_value_after_short_circuit(self):
        """Test that a short-circuited validator has no value."""
        validator = check_if("x", None).is_not_none()
        with pytest.raises(ValueUnavailableError):
            validator.get_value()
        assert validator.get_value_or_default(7) == 7

    def test_non_root_failure_keeps_value(self):
        """Test that ordinary failures leave the validator active."""
        validator = check_if("x", 3).is_greater_than(5)
        assert validator.is_active()
        assert validator.validation_failed()
        assert validator.get_value() == 3


class TestTypeNarrowing:
    """Test is_instance_of."""

    def test_narrowing_success(self):
        """Test that a passing type check returns the capability validator."""
        validator = check_if("x", 3).is_instance_of(int)
        assert isinstance(validator, NumberValidator)
        assert validator.is_active()
        assert validator.is_positive().else_get_failures() == []

    def test_narrowing_failure_short_circuits(self):
        """Test that a failed type check is a root cause."""
        validator = check_if("x", "abc").is_instance_of(int).is_positive().is_zero()
        failures = validator.else_get_failures()
        assert len(failures) == 1
        assert failures[0].message == (
            '"x" must be an instance of int.\n'
            'x      : "abc"\n'
            "type(x): str"
        )
        assert not validator.is_active()

    def test_narrowing_union(self):
        """Test type unions and tuples."""
        assert isinstance(check_if("x", 1.5).is_instance_of(int | float), NumberValidator)
        messages = check_if("x", "a").is_instance_of((int, float)).else_get_messages()
        assert messages[0].startswith('"x" must be an instance of int or float.')

    def test_invalid_expected_type(self):
        """Test that the expected type must be a type or tuple of types."""
        with pytest.raises(InvalidArgumentError):
            check_if("x", 1).is_instance_of("int")


class TestFailureCollection:
    """Test collecting several failures."""

    def test_independent_failures(self):
        """Test that ordinary failures accumulate."""
        validator = check_if("x", 3).is_greater_than(5).is_less_than(2)
        assert len(validator.else_get_failures()) == 2

    def test_else_throw_composite(self):
        """Test that several failures raise a composite exception."""
        with pytest.raises(MultipleFailuresError) as exc_info:
            check_if("x", 3).is_greater_than(5).is_less_than(2).else_throw()
        assert len(exc_info.value.failures) == 2

    def test_else_throw_without_failures(self):
        """Test that a passing chain returns True."""
        assert check_if("x", 3).is_positive().else_throw() is True

    def test_else_get_exception(self):
        """Test inspecting the exception without raising it."""
        assert check_if("x", 3).else_get_exception() is None
        error = check_if("x", 3).is_negative().else_get_exception()
        assert isinstance(error, InvalidArgumentError)

    def test_fail_fast_stops_at_first(self):
        """Test that require_that raises the first failure."""
        with pytest.raises(InvalidArgumentError, match="greater than 5"):
            require_that("x", 3).is_greater_than(5).is_less_than(2)


class TestOperands:
    """Test checks on comparison operands."""

    def test_null_operand_recorded(self):
        """Test that a None bound is reported under its own name."""
        validator = check_if("x", 3).is_greater_than(None).is_less_than(2)
        messages = validator.else_get_messages()
        assert messages[0] == '"minimum" may not be None'
        assert messages[1].startswith('"x" must be less than 2.')
        assert validator.is_active()

    def test_null_named_operand(self):
        """Test that a named None operand uses its name."""
        messages = check_if("x", 3).is_less_than(None, "limit").else_get_messages()
        assert messages == ['"limit" may not be None']

    def test_operand_name_equal_to_value_name(self):
        """Test that operand names may not repeat the value's name."""
        with pytest.raises(InvalidArgumentError):
            check_if("x", 3).is_equal_to(3, "x")

    def test_operand_name_equal_to_context_key(self):
        """Test that operand names may not repeat a context key."""
        with pytest.raises(InvalidArgumentError):
            check_if("x", 3).with_context(1, "limit").is_less_than(5, "limit")


class TestNames:
    """Test name validation at the entry points."""

    def test_none_name(self):
        """Test that a None name is rejected."""
        with pytest.raises(NullValueError):
            check_if(None, 1)

    @pytest.mark.parametrize("name", ["", "two words", "tab\tname"])
    def test_invalid_names(self, name):
        """Test that empty names and names with whitespace are rejected."""
        with pytest.raises(InvalidArgumentError):
            check_if(name, 1)
