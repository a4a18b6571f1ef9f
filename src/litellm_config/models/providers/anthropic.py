"""Anthropic provider (direct API, key authenticated)."""

from __future__ import annotations

from litellm_config.models.providers.base import ApiKeyProvider


class AnthropicProvider(ApiKeyProvider):
    """Emits ``anthropic/...`` entries for Claude models."""

    name = "anthropic"
    path_prefix = "anthropic"


__all__ = ["AnthropicProvider"]
