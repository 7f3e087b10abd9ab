"""Pytest configuration and fixtures for fluent_requirements tests."""

import os

import pytest

from fluent_requirements import Configuration, Validators


@pytest.fixture
def collecting():
    """Validators that collect failures instead of raising them."""
    return Validators(Configuration().with_throw_on_failure(False))


@pytest.fixture
def validators():
    """Validators with the default, fail-fast configuration."""
    return Validators()


@pytest.fixture
def env_vars(monkeypatch):
    """Helper to set environment variables."""

    def _set_env(**kwargs):
        for key, value in kwargs.items():
            monkeypatch.setenv(key, str(value))

    return _set_env


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Clear all FLUENT_REQUIREMENTS_ environment variables."""
    for key in list(os.environ.keys()):
        if key.startswith("FLUENT_REQUIREMENTS_"):
            monkeypatch.delenv(key)


@pytest.fixture
def settings_file(tmp_path):
    """Write a settings file and return its path."""

    def _write(name, content):
        path = tmp_path / name
        path.write_text(content)
        return path

    return _write
