"""Google Gemini provider (AI Studio API keys)."""

from __future__ import annotations

from litellm_config.models.providers.base import ApiKeyProvider


class GeminiProvider(ApiKeyProvider):
    """Emits ``gemini/...`` entries."""

    name = "gemini"
    path_prefix = "gemini"


__all__ = ["GeminiProvider"]
