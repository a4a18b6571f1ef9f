"""Core primitives: exceptions, configuration values and settings loading."""

from litellm_config.core.exceptions import (
    ConfigBuilderError,
    ConfigurationError,
    IntentCommittedError,
    InvalidStrategyError,
    PendingIntentError,
    UnsupportedAxisError,
)
from litellm_config.core.values import (
    ConfigValue,
    EnvironmentRef,
    StringValue,
    config_value_to_string,
    env,
    resolve_config_values,
    to_config_value,
)

__all__ = [
    "ConfigBuilderError",
    "ConfigurationError",
    "IntentCommittedError",
    "InvalidStrategyError",
    "PendingIntentError",
    "UnsupportedAxisError",
    "ConfigValue",
    "EnvironmentRef",
    "StringValue",
    "config_value_to_string",
    "env",
    "resolve_config_values",
    "to_config_value",
]
