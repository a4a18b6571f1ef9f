"""Configuration loader module.

This module provides functions for loading builder configuration from a YAML
file and environment variables and transforming it into a validated
BuilderConfig object.
"""

import os
import re
from typing import Any, Dict, List, Optional

import yaml
from pydantic import ValidationError

from .exceptions import ConfigError
from .schema import BuilderConfig

DEFAULT_ENV_PREFIX = "LITELLM_CONFIG"
DEFAULT_CONFIG_FILE = "litellm-builder.yaml"

_ENV_PATTERN = re.compile(r"\$\{([^}]+)\}")

# Top-level sections whose names contain underscores.
_SECTIONS = (
    "litellm_settings",
    "general_settings",
    "router_settings",
    "environment_variables",
)


def merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge dictionaries.

    Args:
        base: Base dictionary
        override: Dictionary with values that override the base

    Returns:
        Merged dictionary where override values take precedence
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_dicts(result[key], value)
        else:
            result[key] = value

    return result


def _substitute(value: str) -> str:
    return _ENV_PATTERN.sub(lambda match: os.environ.get(match.group(1), ""), value)


def resolve_env_vars(config: Any) -> Any:
    """Replace ${VAR} patterns with environment variables.

    Args:
        config: Configuration value (dict, list or scalar)

    Returns:
        Configuration with environment variables resolved
    """
    if isinstance(config, dict):
        return {key: resolve_env_vars(value) for key, value in config.items()}
    if isinstance(config, list):
        return [resolve_env_vars(item) for item in config]
    if isinstance(config, str) and "${" in config:
        return _substitute(config)
    return config


def load_yaml_file(path: str) -> Dict[str, Any]:
    """Load configuration from YAML file.

    Args:
        path: Path to YAML file

    Returns:
        Dictionary containing configuration from YAML

    Raises:
        ConfigError: If file cannot be read or parsed
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        return {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}", path=path) from e
    except OSError as e:
        raise ConfigError(f"Error reading {path}: {e}", path=path) from e

    if not isinstance(data, dict):
        raise ConfigError(f"Top level of {path} must be a mapping", path=path)
    return data


def _normalize_env_key(env_key: str) -> List[str]:
    """Normalize environment variable key to configuration path.

    Args:
        env_key: Environment variable key without prefix (e.g., "ROUTER_SETTINGS_NUM_RETRIES")

    Returns:
        List of path segments (e.g., ["router_settings", "num_retries"])
    """
    lowered = env_key.lower()
    for section in _SECTIONS:
        if lowered == section:
            return [section]
        if lowered.startswith(f"{section}_"):
            rest = env_key[len(section) + 1:]
            # Variable names written into the document keep their case.
            if section != "environment_variables":
                rest = rest.lower()
            return [section, rest]

    head, _, rest = lowered.partition("_")
    if rest:
        return [head, rest]
    return [head]


def _coerce(value: str) -> Any:
    lowered = value.lower()
    if lowered in ("true", "yes"):
        return True
    if lowered in ("false", "no"):
        return False
    if value.isdigit():
        return int(value)
    if value.replace(".", "", 1).isdigit():
        return float(value)
    return value


def load_from_env(prefix: str = DEFAULT_ENV_PREFIX) -> Dict[str, Any]:
    """Load configuration from environment variables with given prefix.

    ``LITELLM_CONFIG_ROUTER_SETTINGS_NUM_RETRIES=3`` becomes
    ``{"router_settings": {"num_retries": 3}}``. The variable naming the config
    file itself (``<PREFIX>_FILE``) is skipped.

    Args:
        prefix: Prefix for environment variables to consider

    Returns:
        Dictionary containing configuration from environment
    """
    result: Dict[str, Any] = {}
    prefix_upper = prefix.upper()

    for key, value in os.environ.items():
        if not key.startswith(f"{prefix_upper}_"):
            continue
        env_key = key[len(prefix_upper) + 1:]
        if env_key == "FILE" or not env_key:
            continue

        path = _normalize_env_key(env_key)
        current = result
        for part in path[:-1]:
            current = current.setdefault(part, {})
        current[path[-1]] = _coerce(value)

    return result


def load_config(
    file_path: Optional[str] = None,
    env_prefix: str = DEFAULT_ENV_PREFIX,
) -> BuilderConfig:
    """Load BuilderConfig from file and environment.

    Args:
        file_path: Path to config file (defaults to ``<PREFIX>_FILE`` from env
            or "litellm-builder.yaml")
        env_prefix: Prefix for environment variables

    Returns:
        Validated BuilderConfig instance

    Raises:
        ConfigError: On loading or validation failure
    """
    path = file_path or os.environ.get(f"{env_prefix.upper()}_FILE", DEFAULT_CONFIG_FILE)

    config_data: Dict[str, Any] = {}
    if os.path.exists(path):
        config_data = merge_dicts(config_data, load_yaml_file(path))

    env_config = load_from_env(env_prefix)
    if env_config:
        config_data = merge_dicts(config_data, env_config)

    config_data = resolve_env_vars(config_data)

    try:
        return BuilderConfig.model_validate(config_data)
    except ValidationError as e:
        raise ConfigError(f"Failed to load configuration: {e}", path=path) from e


__all__ = [
    "load_config",
    "load_yaml_file",
    "load_from_env",
    "merge_dicts",
    "resolve_env_vars",
]
