"""Builder configuration system.

Loads settings sections and builder options from a YAML file and
``LITELLM_CONFIG_*`` environment variables, with ``${VAR}`` substitution and
Pydantic validation.

Example usage:
```python
from litellm_config.core.config import load_config
from litellm_config import LiteLLMConfigBuilder

config = load_config("litellm-builder.yaml")
builder = LiteLLMConfigBuilder.from_config(config)
```
"""

from .exceptions import ConfigError
from .loader import load_config
from .schema import (
    BuilderConfig,
    CacheParams,
    CatalogConfig,
    GeneralSettings,
    LiteLLMSettings,
    LoggingConfig,
    RouterSettings,
)

__all__ = [
    "BuilderConfig",
    "CacheParams",
    "CatalogConfig",
    "GeneralSettings",
    "LiteLLMSettings",
    "LoggingConfig",
    "RouterSettings",
    "load_config",
    "ConfigError",
]
