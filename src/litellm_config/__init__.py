"""Build gateway routing configurations for multiple model providers.

Express which models to serve (optionally across regions, credentials and
parameter variations), and the builder expands each intent into the concrete
``model_list`` entries the gateway needs, then renders a commented YAML file.

Examples:
    >>> from litellm_config import LiteLLMConfigBuilder, env
    >>> builder = LiteLLMConfigBuilder()
    >>> gemini = builder.create_gemini_provider()
    >>> gemini.add_model("gemini-flash", "gemini-2.0-flash").with_api_keys(
    ...     [env("GEMINI_KEY_1"), env("GEMINI_KEY_2")]
    ... ).build()
    <GeminiProvider entries=2>
"""

from litellm_config.config_builder import LiteLLMConfigBuilder, ValidationResult
from litellm_config.core.config import BuilderConfig, ConfigError, load_config
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
    to_config_value,
)
from litellm_config.models import (
    BEDROCK_CATALOG,
    AnthropicProvider,
    ApiKeyCredential,
    AwsCredential,
    BedrockProvider,
    ConcreteEntry,
    EntryRegistry,
    ExpansionEngine,
    FallbackConfig,
    FallbackRelation,
    GeminiProvider,
    LoadBalanceConfig,
    LoadBalanceStrategy,
    ModelIdentityCatalog,
    ModelIntent,
    ModelIntentBuilder,
    OpenRouterProvider,
    Variation,
    is_cross_region_eligible,
    parse_identifier,
    resolve_for_region,
)
from litellm_config.rendering import YamlGenerator

__version__ = "0.1.0"

__all__ = [
    # Session
    "LiteLLMConfigBuilder",
    "ValidationResult",
    "YamlGenerator",
    # Configuration
    "BuilderConfig",
    "ConfigError",
    "load_config",
    # Values
    "ConfigValue",
    "EnvironmentRef",
    "StringValue",
    "config_value_to_string",
    "env",
    "to_config_value",
    # Catalog
    "BEDROCK_CATALOG",
    "ModelIdentityCatalog",
    "is_cross_region_eligible",
    "parse_identifier",
    "resolve_for_region",
    # Expansion
    "ExpansionEngine",
    "EntryRegistry",
    "ModelIntentBuilder",
    "ModelIntent",
    "Variation",
    "ApiKeyCredential",
    "AwsCredential",
    "ConcreteEntry",
    "FallbackConfig",
    "FallbackRelation",
    "LoadBalanceConfig",
    "LoadBalanceStrategy",
    # Providers
    "AnthropicProvider",
    "BedrockProvider",
    "GeminiProvider",
    "OpenRouterProvider",
    # Errors
    "ConfigBuilderError",
    "ConfigurationError",
    "IntentCommittedError",
    "InvalidStrategyError",
    "PendingIntentError",
    "UnsupportedAxisError",
]
