"""Building a Configuration from settings files and environment variables.

Settings are a flat mapping with these keys:

- ``clean_stack_trace``: bool
- ``allow_diff``: bool
- ``equality_method``: ``"structural"`` or ``"identity"``
- ``context``: mapping of name to value, added to every failure message

They can come from a dict or a YAML/JSON file, and are then overridden by
environment variables of the form ``FLUENT_REQUIREMENTS_<KEY>``, or
``FLUENT_REQUIREMENTS_CONTEXT__<NAME>`` for a context entry.

Example:
    ```yaml
    # requirements.yaml
    allow_diff: false
    context:
      service: billing
    ```

    ```python
    from fluent_requirements import Validators
    from fluent_requirements.settings import load_configuration

    validators = Validators(load_configuration("requirements.yaml"))
    ```
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Union

import yaml  # type: ignore[import-untyped]

from fluent_requirements.configuration import Configuration, EqualityMethod
from fluent_requirements.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

SETTINGS_KEYS = ("clean_stack_trace", "allow_diff", "equality_method", "context")

EQUALITY_METHODS = {
    "structural": EqualityMethod.STRUCTURAL,
    "identity": EqualityMethod.IDENTITY,
}

SettingsSource = Union[Mapping[str, Any], str, os.PathLike]


class EnvironmentOverrides:
    """Reads settings overrides from environment variables.

    Environment variable format:
    FLUENT_REQUIREMENTS_<KEY> or FLUENT_REQUIREMENTS_CONTEXT__<NAME>

    Examples:
        - FLUENT_REQUIREMENTS_ALLOW_DIFF=false -> {"allow_diff": False}
        - FLUENT_REQUIREMENTS_CONTEXT__REGION=eu -> {"context": {"region": "eu"}}
    """

    ENV_PREFIX = "FLUENT_REQUIREMENTS_"
    ENV_SEPARATOR = "__"

    def __init__(
        self, prefix: str | None = None, environ: Mapping[str, str] | None = None
    ) -> None:
        """Initialize the environment override reader.

        Args:
            prefix: Custom environment variable prefix (default: FLUENT_REQUIREMENTS_)
            environ: Variables to read (default: ``os.environ``)
        """
        self.prefix = prefix or self.ENV_PREFIX
        self.environ = environ if environ is not None else os.environ

    def get_overrides(self) -> Dict[str, Any]:
        """Get all settings overrides.

        Returns:
            Settings mapping, with context entries nested under ``"context"``
        """
        overrides: Dict[str, Any] = {}
        for variable, raw in self.environ.items():
            if not variable.startswith(self.prefix):
                continue
            key = variable[len(self.prefix) :].lower()
            value = self._parse_value(raw)
            if self.ENV_SEPARATOR in key:
                section, name = key.split(self.ENV_SEPARATOR, 1)
                overrides.setdefault(section, {})[name] = value
            else:
                overrides[key] = value
        if overrides:
            logger.debug("Environment overrides: %s", sorted(overrides))
        return overrides

    def _parse_value(self, value: str) -> Any:
        """Parse an environment variable value to appropriate type.

        Args:
            value: String value from environment

        Returns:
            Parsed value (bool, int, float, or the original string)
        """
        if value.lower() in ["true", "yes", "1"]:
            return True
        elif value.lower() in ["false", "no", "0"]:
            return False

        try:
            return int(value)
        except ValueError:
            pass

        try:
            return float(value)
        except ValueError:
            pass

        return value


def load_configuration(
    source: SettingsSource | None = None,
    use_env: bool = True,
    base: Configuration | None = None,
) -> Configuration:
    """Build a configuration from settings and environment overrides.

    Args:
        source: Settings mapping, or path to a ``.yaml``/``.yml``/``.json`` file
        use_env: Apply ``FLUENT_REQUIREMENTS_*`` environment overrides
        base: Configuration to start from (defaults to ``Configuration()``)

    Returns:
        The resulting configuration

    Raises:
        ConfigurationError: If the file is missing or malformed, a key is
            unknown, or a value has the wrong type
    """
    settings = read_settings(source) if source is not None else {}
    if use_env:
        overrides = EnvironmentOverrides().get_overrides()
        context = dict(settings.get("context") or {})
        context.update(overrides.pop("context", {}))
        settings.update(overrides)
        if context:
            settings["context"] = context
    return apply_settings(base if base is not None else Configuration(), settings)


def read_settings(source: SettingsSource) -> Dict[str, Any]:
    """Return the settings mapping held by ``source``."""
    if isinstance(source, Mapping):
        return dict(source)

    path = Path(source).resolve()
    if not path.exists():
        raise ConfigurationError(
            f"Settings file not found: {path}", context={"path": str(path)}
        )

    suffix = path.suffix.lower()
    with open(path) as f:
        if suffix in [".yaml", ".yml"]:
            data = yaml.safe_load(f)
        elif suffix == ".json":
            data = json.load(f)
        else:
            raise ConfigurationError(
                f"Unsupported file format: {suffix}", context={"path": str(path)}
            )
    logger.debug("Loaded settings from %s", path)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Settings file must contain a mapping: {path}",
            context={"path": str(path), "type": type(data).__name__},
        )
    return data


def apply_settings(configuration: Configuration, settings: Mapping[str, Any]) -> Configuration:
    """Return ``configuration`` updated with each entry of ``settings``."""
    for key, value in settings.items():
        if key not in SETTINGS_KEYS:
            raise ConfigurationError(
                f"Unknown setting: {key}",
                context={"key": key, "allowed": list(SETTINGS_KEYS)},
            )
        if key == "clean_stack_trace":
            configuration = configuration.with_clean_stack_trace(_as_bool(key, value))
        elif key == "allow_diff":
            configuration = configuration.with_allow_diff(_as_bool(key, value))
        elif key == "equality_method":
            configuration = configuration.with_equality_method(_as_equality_method(value))
        else:
            if not isinstance(value, Mapping):
                raise ConfigurationError(
                    "context must be a mapping.", context={"key": key, "value": value}
                )
            for name, entry in value.items():
                configuration = configuration.with_context(entry, name)
    return configuration


def _as_bool(key: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(
            f"{key} must be true or false.", context={"key": key, "value": value}
        )
    return value


def _as_equality_method(value: Any) -> EqualityMethod:
    if isinstance(value, EqualityMethod):
        return value
    method = EQUALITY_METHODS.get(str(value).lower())
    if method is None:
        raise ConfigurationError(
            f"Unknown equality method: {value}",
            context={"key": "equality_method", "allowed": list(EQUALITY_METHODS)},
        )
    return method


__all__ = [
    "EnvironmentOverrides",
    "SETTINGS_KEYS",
    "apply_settings",
    "load_configuration",
    "read_settings",
]
