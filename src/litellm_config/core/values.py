"""Configuration values that may point at the proxy's environment.

A ``ConfigValue`` is either a literal string, a ``StringValue`` or an
``EnvironmentRef``. Environment references render as ``os.environ/NAME`` so the
gateway reads the secret at startup instead of it being written into the file.

Examples:
    >>> config_value_to_string(env("AWS_ACCESS_KEY_ID"))
    'os.environ/AWS_ACCESS_KEY_ID'
    >>> to_config_value("env:GEMINI_API_KEY")
    EnvironmentRef(name='GEMINI_API_KEY')
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Union

ENV_PREFIX = "env:"
ENV_RENDER_PREFIX = "os.environ/"


@dataclass(frozen=True)
class EnvironmentRef:
    """Reference to an environment variable resolved by the gateway."""

    name: str


@dataclass(frozen=True)
class StringValue:
    """Literal string wrapped so it is never reinterpreted."""

    value: str


ConfigValue = Union[EnvironmentRef, StringValue, str]


def env(name: str) -> EnvironmentRef:
    """Helper to create an environment variable reference."""
    return EnvironmentRef(name)


def to_config_value(value: Any) -> Any:
    """Convert the ``env:NAME`` shorthand to an ``EnvironmentRef``.

    Anything else is returned unchanged.
    """
    if isinstance(value, str) and value.startswith(ENV_PREFIX):
        return EnvironmentRef(value[len(ENV_PREFIX):])
    return value


def is_config_value(value: Any) -> bool:
    return isinstance(value, (EnvironmentRef, StringValue))


def config_value_to_string(value: ConfigValue) -> str:
    """Render a ``ConfigValue`` the way it appears in the output document."""
    if isinstance(value, EnvironmentRef):
        return f"{ENV_RENDER_PREFIX}{value.name}"
    if isinstance(value, StringValue):
        return value.value
    if isinstance(value, str):
        return value
    raise TypeError(f"Unsupported config value type: {type(value).__name__}")


def resolve_config_values(obj: Any) -> Any:
    """Deep-convert ``ConfigValue`` objects inside mappings and lists to strings."""
    if is_config_value(obj):
        return config_value_to_string(obj)
    if isinstance(obj, Mapping):
        return {key: resolve_config_values(value) for key, value in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [resolve_config_values(item) for item in obj]
    return obj


__all__ = [
    "ConfigValue",
    "EnvironmentRef",
    "StringValue",
    "env",
    "to_config_value",
    "is_config_value",
    "config_value_to_string",
    "resolve_config_values",
]
