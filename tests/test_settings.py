"""Tests for loading configurations from settings and the environment."""

import pytest

from fluent_requirements import Configuration, EqualityMethod
from fluent_requirements.exceptions import ConfigurationError
from fluent_requirements.settings import (
    EnvironmentOverrides,
    apply_settings,
    load_configuration,
    read_settings,
)


class TestLoadFromDict:
    """Test loading settings from a dictionary."""

    def test_empty(self):
        """Test that no source gives the default configuration."""
        assert load_configuration() == Configuration()

    def test_all_keys(self):
        """Test every supported key."""
        config = load_configuration(
            {
                "clean_stack_trace": False,
                "allow_diff": False,
                "equality_method": "identity",
                "context": {"service": "billing", "attempt": 2},
            }
        )
        assert config.clean_stack_trace is False
        assert config.allow_diff is False
        assert config.equality_method is EqualityMethod.IDENTITY
        assert config.get_context() == {"service": "billing", "attempt": 2}

    def test_base_configuration(self):
        """Test that settings are applied on top of a base configuration."""
        base = Configuration().with_throw_on_failure(False)
        config = load_configuration({"allow_diff": False}, base=base)
        assert config.throw_on_failure is False
        assert config.allow_diff is False

    def test_unknown_key(self):
        """Test that unknown keys are rejected with the allowed keys."""
        with pytest.raises(ConfigurationError) as exc_info:
            load_configuration({"colour": "red"})
        assert exc_info.value.context["key"] == "colour"
        assert "allow_diff" in exc_info.value.context["allowed"]

    def test_wrong_type(self):
        """Test that a non-boolean flag is rejected."""
        with pytest.raises(ConfigurationError):
            load_configuration({"allow_diff": "sometimes"})

    def test_unknown_equality_method(self):
        """Test that an unknown equality method is rejected."""
        with pytest.raises(ConfigurationError) as exc_info:
            load_configuration({"equality_method": "fuzzy"})
        assert exc_info.value.context["allowed"] == ["structural", "identity"]

    def test_context_must_be_mapping(self):
        """Test that the context must be a mapping."""
        with pytest.raises(ConfigurationError):
            apply_settings(Configuration(), {"context": ["a", "b"]})


class TestLoadFromFile:
    """Test loading settings files."""

    def test_yaml_file(self, settings_file):
        """Test loading a YAML file."""
        path = settings_file(
            "settings.yaml", "allow_diff: false\ncontext:\n  service: billing\n"
        )
        config = load_configuration(path)
        assert config.allow_diff is False
        assert config.get_context() == {"service": "billing"}

    def test_json_file(self, settings_file):
        """Test loading a JSON file."""
        path = settings_file("settings.json", '{"equality_method": "identity"}')
        config = load_configuration(str(path))
        assert config.equality_method is EqualityMethod.IDENTITY

    def test_empty_yaml_file(self, settings_file):
        """Test that an empty file means no settings."""
        path = settings_file("empty.yml", "")
        assert read_settings(path) == {}

    def test_missing_file(self, tmp_path):
        """Test that a missing file is reported."""
        with pytest.raises(ConfigurationError, match="not found"):
            load_configuration(tmp_path / "missing.yaml")

    def test_unsupported_format(self, settings_file):
        """Test that unknown suffixes are rejected."""
        path = settings_file("settings.toml", "allow_diff = false")
        with pytest.raises(ConfigurationError, match="Unsupported file format"):
            load_configuration(path)

    def test_non_mapping_file(self, settings_file):
        """Test that the file must hold a mapping."""
        path = settings_file("settings.yaml", "- allow_diff\n")
        with pytest.raises(ConfigurationError, match="must contain a mapping"):
            load_configuration(path)


class TestEnvironmentOverrides:
    """Test environment variable overrides."""

    def test_flag_override(self, env_vars):
        """Test overriding a flag."""
        env_vars(FLUENT_REQUIREMENTS_ALLOW_DIFF="false")
        config = load_configuration({"allow_diff": True})
        assert config.allow_diff is False

    def test_context_override(self, env_vars):
        """Test adding and replacing context entries."""
        env_vars(FLUENT_REQUIREMENTS_CONTEXT__REGION="eu")
        config = load_configuration({"context": {"service": "billing", "region": "us"}})
        assert config.get_context() == {"service": "billing", "region": "eu"}

    def test_env_disabled(self, env_vars):
        """Test that overrides can be turned off."""
        env_vars(FLUENT_REQUIREMENTS_ALLOW_DIFF="false")
        config = load_configuration(use_env=False)
        assert config.allow_diff is True

    def test_unknown_env_key(self, env_vars):
        """Test that unknown environment keys are rejected."""
        env_vars(FLUENT_REQUIREMENTS_COLOUR="red")
        with pytest.raises(ConfigurationError):
            load_configuration()

    def test_parse_values(self):
        """Test converting values to appropriate types."""
        env = EnvironmentOverrides()
        assert env._parse_value("true") is True
        assert env._parse_value("yes") is True
        assert env._parse_value("0") is False
        assert env._parse_value("42") == 42
        assert env._parse_value("2.5") == 2.5
        assert env._parse_value("identity") == "identity"

    def test_custom_prefix_and_environ(self):
        """Test reading from a custom prefix and mapping."""
        env = EnvironmentOverrides(
            prefix="MYAPP_",
            environ={"MYAPP_ALLOW_DIFF": "no", "MYAPP_CONTEXT__ZONE": "3", "OTHER": "x"},
        )
        assert env.get_overrides() == {"allow_diff": False, "context": {"zone": 3}}
