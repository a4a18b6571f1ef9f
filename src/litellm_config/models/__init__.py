"""Model identity catalog, expansion engine, registry and providers.

The symbols re-exported here are the building blocks behind
:class:`litellm_config.LiteLLMConfigBuilder`; they can also be used directly to
expand intents without a config session.
"""

from __future__ import annotations

from litellm_config.models.builder import ModelIntentBuilder
from litellm_config.models.catalog import (
    BEDROCK_CATALOG,
    SUPPORTED_REGIONS,
    ModelIdentityCatalog,
    ParsedIdentifier,
    is_cross_region_eligible,
    parse_identifier,
    resolve_for_region,
)
from litellm_config.models.expansion import ExpansionEngine
from litellm_config.models.providers import (
    AnthropicProvider,
    BaseProvider,
    BedrockProvider,
    GeminiProvider,
    OpenRouterProvider,
)
from litellm_config.models.registry import EntryRegistry
from litellm_config.models.schemas import (
    ApiKeyCredential,
    AwsCredential,
    ConcreteEntry,
    ExpansionResult,
    FallbackConfig,
    FallbackRelation,
    LoadBalanceConfig,
    LoadBalanceStrategy,
    ModelIntent,
    ParameterLayers,
    Variation,
)

__all__ = [
    # Catalog
    "BEDROCK_CATALOG",
    "SUPPORTED_REGIONS",
    "ModelIdentityCatalog",
    "ParsedIdentifier",
    "is_cross_region_eligible",
    "parse_identifier",
    "resolve_for_region",
    # Expansion
    "ExpansionEngine",
    "EntryRegistry",
    "ModelIntentBuilder",
    # Providers
    "AnthropicProvider",
    "BaseProvider",
    "BedrockProvider",
    "GeminiProvider",
    "OpenRouterProvider",
    # Schemas
    "ApiKeyCredential",
    "AwsCredential",
    "ConcreteEntry",
    "ExpansionResult",
    "FallbackConfig",
    "FallbackRelation",
    "LoadBalanceConfig",
    "LoadBalanceStrategy",
    "ModelIntent",
    "ParameterLayers",
    "Variation",
]
