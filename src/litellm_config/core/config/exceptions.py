"""Configuration exception module.

This module defines exception types specific to loading builder configuration
files.
"""

from litellm_config.core.exceptions import ConfigBuilderError


class ConfigError(ConfigBuilderError):
    """Exception raised for configuration file errors.

    This includes errors such as:
    - Invalid YAML
    - Settings that fail schema validation
    - File access errors
    """
    pass
