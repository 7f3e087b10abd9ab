"""Tests for Configuration and EqualityMethod."""

import pytest

from fluent_requirements import Configuration, EqualityMethod, StringMappers
from fluent_requirements.exceptions import ConfigurationError


class TestConfigurationDefaults:
    """Test the default policy."""

    def test_defaults(self):
        """Test default field values."""
        config = Configuration()
        assert config.equality_method is EqualityMethod.STRUCTURAL
        assert config.string_mappers == StringMappers.DEFAULT
        assert config.clean_stack_trace is True
        assert config.allow_diff is True
        assert config.throw_on_failure is True
        assert config.get_context() == {}

    def test_identity_transformer(self):
        """Test that the default transformer returns its input."""
        error = ValueError("x")
        assert Configuration().exception_transformer(error) is error


class TestConfigurationMutators:
    """Test that mutators return new instances."""

    def test_returns_new_instance(self):
        """Test that a change produces a new configuration."""
        config = Configuration()
        updated = config.with_allow_diff(False)
        assert updated is not config
        assert updated.allow_diff is False
        assert config.allow_diff is True

    def test_unchanged_returns_self(self):
        """Test that a mutator without effect returns the same instance."""
        config = Configuration()
        assert config.with_allow_diff(True) is config
        assert config.with_clean_stack_trace(True) is config
        assert config.with_throw_on_failure(True) is config
        assert config.with_equality_method(EqualityMethod.STRUCTURAL) is config
        assert config.without_context("missing") is config

    def test_none_arguments_rejected(self):
        """Test that None arguments raise ConfigurationError immediately."""
        config = Configuration()
        with pytest.raises(ConfigurationError):
            config.with_exception_transformer(None)
        with pytest.raises(ConfigurationError):
            config.with_equality_method(None)
        with pytest.raises(ConfigurationError):
            config.with_string_mappers(None)
        with pytest.raises(ConfigurationError):
            config.with_allow_diff(None)
        with pytest.raises(ConfigurationError):
            config.with_string_mapper(int, None)

    def test_string_mapper(self):
        """Test registering a single string mapper."""
        config = Configuration().with_string_mapper(int, lambda value: f"#{value}")
        assert config.string_mappers.to_string(7) == "#7"

    def test_exception_transformer(self):
        """Test setting the exception transformer."""

        def transformer(error):
            return RuntimeError(str(error))

        config = Configuration().with_exception_transformer(transformer)
        assert config.exception_transformer is transformer


class TestConfigurationContext:
    """Test the ordered context."""

    def test_context_order(self):
        """Test that entries keep insertion order."""
        config = Configuration().with_context(1, "first").with_context(2, "second")
        assert list(config.get_context().items()) == [("first", 1), ("second", 2)]

    def test_replace_keeps_position(self):
        """Test that replacing an entry keeps its position."""
        config = (
            Configuration()
            .with_context(1, "first")
            .with_context(2, "second")
            .with_context(3, "first")
        )
        assert list(config.get_context().items()) == [("first", 3), ("second", 2)]

    def test_without_context(self):
        """Test removing an entry."""
        config = Configuration().with_context(1, "first").without_context("first")
        assert config.get_context() == {}

    def test_get_context_is_copy(self):
        """Test that the returned dict does not alias the configuration."""
        config = Configuration().with_context(1, "first")
        config.get_context()["second"] = 2
        assert config.get_context() == {"first": 1}

    @pytest.mark.parametrize("name", [None, "", "two words", 5])
    def test_invalid_names(self, name):
        """Test that invalid context names are rejected."""
        with pytest.raises(ConfigurationError):
            Configuration().with_context("value", name)


class TestEqualityMethod:
    """Test the equality methods."""

    def test_structural(self):
        """Test structural equality."""
        assert EqualityMethod.STRUCTURAL.equals([1, 2], [1, 2])
        assert not EqualityMethod.STRUCTURAL.equals([1, 2], [2, 1])

    def test_identity(self):
        """Test identity equality."""
        first = [1, 2]
        assert EqualityMethod.IDENTITY.equals(first, first)
        assert not EqualityMethod.IDENTITY.equals(first, [1, 2])

    def test_custom(self):
        """Test a custom comparator."""
        method = EqualityMethod.custom(lambda a, b: a.lower() == b.lower(), key=str.lower)
        assert method.equals("ABC", "abc")
        assert method.key("ABC") == "abc"
        assert method.name == "custom"

    def test_custom_requires_comparator(self):
        """Test that a custom method needs a comparator."""
        with pytest.raises(ConfigurationError):
            EqualityMethod.custom(None)

    def test_repr(self):
        """Test the repr of the built-in methods."""
        assert repr(EqualityMethod.STRUCTURAL) == "EqualityMethod.STRUCTURAL"
        assert repr(EqualityMethod.IDENTITY) == "EqualityMethod.IDENTITY"
