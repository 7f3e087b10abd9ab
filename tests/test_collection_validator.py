"""Tests for collection, mapping and size checks."""

import pytest

from fluent_requirements import FailureKind, check_if, require_that
from fluent_requirements.exceptions import InvalidArgumentError
from fluent_requirements.validator import CollectionValidator, MappingValidator, SizeValidator


def passes(validator):
    return validator.else_get_failures() == []


class TestDispatch:
    """Test that containers get container checks."""

    @pytest.mark.parametrize("value", [[1], (1,), {1}, frozenset([1])])
    def test_collections(self, value):
        """Test collection types."""
        assert isinstance(check_if("items", value), CollectionValidator)

    def test_mapping(self):
        """Test mapping types."""
        assert isinstance(check_if("settings", {"a": 1}), MappingValidator)


class TestContainment:
    """Test containment checks."""

    def test_contains(self):
        """Test contains and does_not_contain."""
        assert passes(check_if("items", [1, 2]).contains(2))
        assert passes(check_if("items", [1, None]).contains(None))
        assert check_if("items", [1, 2]).contains(3).else_get_messages() == [
            '"items" must contain 3.\nitems: [1, 2]'
        ]
        assert not passes(check_if("items", [1, 2]).does_not_contain(1))

    def test_contains_any(self):
        """Test contains_any and does_not_contain_any."""
        assert passes(check_if("items", [1, 2]).contains_any([2, 5]))
        assert not passes(check_if("items", [1, 2]).contains_any([5, 6]))
        messages = check_if("items", [1, 2, 3]).does_not_contain_any([3, 2, 9]).else_get_messages()
        assert messages == [
            '"items" may not contain any of [3, 2, 9].\n'
            "items   : [1, 2, 3]\n"
            "unwanted: [2, 3]"
        ]

    def test_contains_all(self):
        """Test contains_all and does_not_contain_all."""
        messages = check_if("roles", ["admin", "dev"]).contains_all(["admin", "ops"]).else_get_messages()
        assert messages == [
            '"roles" must contain all of ["admin", "ops"].\n'
            'roles  : ["admin", "dev"]\n'
            'missing: ["ops"]'
        ]
        assert passes(check_if("roles", ["admin"]).does_not_contain_all(["admin", "ops"]))
        assert not passes(check_if("roles", ["admin", "ops"]).does_not_contain_all(["ops"]))

    def test_contains_exactly(self):
        """Test contains_exactly and does_not_contain_exactly."""
        assert passes(check_if("items", [3, 1, 2]).contains_exactly([1, 2, 3]))
        messages = check_if("items", [1, 2]).contains_exactly([2, 3]).else_get_messages()
        assert messages == [
            '"items" must consist of [2, 3].\n'
            "items   : [1, 2]\n"
            "missing : [3]\n"
            "unwanted: [1]"
        ]
        assert not passes(check_if("items", [1, 2]).does_not_contain_exactly([2, 1]))

    def test_named_operand(self):
        """Test a named operand."""
        messages = (
            check_if("items", [1]).contains_all([1, 2], "required").else_get_messages()
        )
        assert messages[0].startswith('"items" must contain all of "required".\n')
        assert "required: [1, 2]" in messages[0]

    def test_null_operand(self):
        """Test that a None operand is reported under its default name."""
        messages = check_if("items", [1]).contains_any(None).else_get_messages()
        assert messages == ['"expected" may not be None']

    def test_unhashable_elements(self):
        """Test containment among unhashable elements."""
        assert passes(check_if("items", [[1], [2]]).contains_all([[2]]))

    def test_iterator_operand(self):
        """Test that an iterator operand is consumed once and rendered as a list."""
        messages = (
            check_if("roles", ["admin", "dev"])
            .contains_all(role for role in ["admin", "ops"])
            .else_get_messages()
        )
        assert messages == [
            '"roles" must contain all of ["admin", "ops"].\n'
            'roles  : ["admin", "dev"]\n'
            'missing: ["ops"]'
        ]
        messages = check_if("items", [1, 2, 3]).does_not_contain_any(iter([3, 2, 9])).else_get_messages()
        assert messages[0].startswith('"items" may not contain any of [3, 2, 9].\n')


class TestOrderAndDuplicates:
    """Test duplicate and ordering checks."""

    def test_duplicates(self):
        """Test does_not_contain_duplicates."""
        assert passes(check_if("items", [1, 2]).does_not_contain_duplicates())
        messages = check_if("items", [1, 2, 1]).does_not_contain_duplicates().else_get_messages()
        assert messages == [
            '"items" may not contain duplicate elements.\n'
            "items     : [1, 2, 1]\n"
            "duplicates: [1]"
        ]

    def test_sorted(self):
        """Test is_sorted."""
        assert passes(check_if("items", [1, 2, 3]).is_sorted())
        assert passes(check_if("items", [3, 2, 1]).is_sorted(reverse=True))
        assert passes(check_if("words", ["b", "A"]).is_sorted(key=str.lower, reverse=True))
        messages = check_if("items", [2, 1]).is_sorted().else_get_messages()
        assert messages == ['"items" must be sorted.\nitems   : [2, 1]\nexpected: [1, 2]']

    def test_sorted_value_named_expected(self):
        """Test that a value named like a context label keeps its own line."""
        messages = check_if("expected", [2, 1]).is_sorted().else_get_messages()
        assert messages == ['"expected" must be sorted.\nexpected  : [2, 1]\nexpected_2: [1, 2]']

    def test_unorderable_elements(self):
        """Test that elements without an ordering record a failure instead of raising."""
        validator = check_if("x", [{"a": 1}, {"b": 2}]).is_sorted()
        failures = validator.else_get_failures()
        assert len(failures) == 1
        assert failures[0].kind is FailureKind.ILLEGAL_ARGUMENT
        assert failures[0].message.startswith(
            '"x" must contain elements that can be compared to each other.\n'
        )
        assert "not supported" in failures[0].get_context()["reason"]

    def test_unorderable_elements_fail_fast(self):
        """Test that require_that reports unorderable elements as an invalid argument."""
        with pytest.raises(InvalidArgumentError):
            require_that("x", [1, "a"]).is_sorted()

    def test_empty(self):
        """Test is_empty and is_not_empty."""
        assert passes(check_if("items", []).is_empty())
        assert check_if("items", []).is_not_empty().else_get_messages() == [
            '"items" may not be empty'
        ]


class TestSize:
    """Test size checks."""

    def test_size_validator(self):
        """Test that size() returns a size validator for the container."""
        validator = check_if("items", [1, 2]).size()
        assert isinstance(validator, SizeValidator)
        assert validator.name == "len(items)"
        assert validator.get_value() == 2

    def test_at_least(self):
        """Test the message of a minimum size check."""
        messages = (
            check_if("items", [1, 2]).size().is_greater_than_or_equal_to(3).else_get_messages()
        )
        assert messages == [
            '"items" must contain at least 3 elements.\n'
            "items     : [1, 2]\n"
            "len(items): 2"
        ]

    def test_singular(self):
        """Test that a count of one uses the singular noun."""
        messages = check_if("items", [1, 2]).size().is_equal_to(1).else_get_messages()
        assert messages[0].startswith('"items" must contain exactly 1 element.')

    def test_named_count(self):
        """Test that a named count is referenced by name."""
        messages = check_if("items", [1]).size().is_greater_than(2, "minimum").else_get_messages()
        assert messages[0].startswith('"items" must contain more than "minimum" (2) elements.')
        assert "minimum   : 2" in messages[0]

    def test_between(self):
        """Test size ranges in whole counts."""
        messages = check_if("items", [1, 2]).size().is_between(3, 5).else_get_messages()
        assert messages == [
            '"items" must contain at least 3 elements.\n'
            "items     : [1, 2]\n"
            "len(items): 2\n"
            "bounds    : [3, 5)"
        ]
        messages = check_if("items", [1, 2, 3]).size().is_between(0, 3).else_get_messages()
        assert messages[0].startswith('"items" must contain at most 2 elements.')

    def test_size_number_checks(self):
        """Test that sizes support numeric checks."""
        assert passes(check_if("items", [1]).size().is_positive())

    def test_size_of_short_circuited(self):
        """Test that the size of a failed validator is short-circuited too."""
        validator = check_if("items", "abc").is_instance_of(list)
        size = validator.size()
        assert not size.is_active()
        size.is_greater_than(10)
        assert len(size.else_get_failures()) == 1

    def test_require_that_size(self):
        """Test that size failures raise in fail-fast mode."""
        with pytest.raises(InvalidArgumentError, match="at most 1 element"):
            require_that("items", [1, 2]).size().is_less_than_or_equal_to(1)


class TestMappingValidator:
    """Test mapping checks."""

    def test_keys(self):
        """Test checks on the keys."""
        messages = check_if("settings", {"host": 1}).keys().contains("port").else_get_messages()
        assert messages == ['settings.keys() must contain "port".\nsettings.keys(): ["host"]']

    def test_values_and_items(self):
        """Test checks on values and items."""
        settings = {"host": "a", "port": 1}
        assert passes(check_if("settings", settings).values().contains(1))
        assert passes(check_if("settings", settings).items().contains(("port", 1)))

    def test_size(self):
        """Test that mapping sizes count entries."""
        messages = check_if("settings", {"a": 1}).size().is_greater_than(1).else_get_messages()
        assert messages[0].startswith('"settings" must contain more than 1 entry.')

    def test_key_size(self):
        """Test that key sizes count keys."""
        messages = (
            check_if("settings", {"a": 1}).keys().size().is_equal_to(2).else_get_messages()
        )
        assert messages[0].startswith("settings.keys() must contain exactly 2 keys.")

    def test_empty(self):
        """Test is_empty on mappings."""
        assert passes(check_if("settings", {}).is_empty())
        assert not passes(check_if("settings", {"a": 1}).is_empty())
