"""Provider implementations and lookup by name."""

from __future__ import annotations

from typing import Dict, Type

from litellm_config.models.providers.anthropic import AnthropicProvider
from litellm_config.models.providers.base import ApiKeyProvider, BaseProvider
from litellm_config.models.providers.bedrock import BedrockProvider
from litellm_config.models.providers.gemini import GeminiProvider
from litellm_config.models.providers.openrouter import OpenRouterProvider

PROVIDERS: Dict[str, Type[BaseProvider]] = {
    "anthropic": AnthropicProvider,
    "bedrock": BedrockProvider,
    "gemini": GeminiProvider,
    "openrouter": OpenRouterProvider,
}


def get_provider_class(name: str) -> Type[BaseProvider]:
    """Return the provider class registered under ``name``.

    Raises:
        ValueError: If no provider uses that name.
    """
    provider_cls = PROVIDERS.get(name.lower())
    if provider_cls is None:
        available = ", ".join(sorted(PROVIDERS))
        raise ValueError(f"Unknown provider '{name}'. Available providers: {available}")
    return provider_cls


__all__ = [
    "PROVIDERS",
    "AnthropicProvider",
    "ApiKeyProvider",
    "BaseProvider",
    "BedrockProvider",
    "GeminiProvider",
    "OpenRouterProvider",
    "get_provider_class",
]
