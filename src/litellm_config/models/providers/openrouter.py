"""OpenRouter provider.

OpenRouter ids are ``vendor/model`` slugs, so emitted paths read
``openrouter/vendor/model``. Unknown slugs are accepted with a warning.
"""

from __future__ import annotations

from typing import Optional

from litellm_config.models.catalog import OPENROUTER_MODEL_IDS, ModelIdentityCatalog
from litellm_config.models.providers.base import ApiKeyProvider
from litellm_config.models.registry import EntryRegistry

# OpenRouter has no region tags; the catalog is only used for membership checks.
OPENROUTER_CATALOG = ModelIdentityCatalog(OPENROUTER_MODEL_IDS)


class OpenRouterProvider(ApiKeyProvider):
    """Emits ``openrouter/...`` entries."""

    name = "openrouter"
    path_prefix = "openrouter"

    def __init__(
        self,
        *,
        registry: Optional[EntryRegistry] = None,
        catalog: Optional[ModelIdentityCatalog] = OPENROUTER_CATALOG,
    ):
        super().__init__(registry=registry, catalog=catalog)


__all__ = ["OpenRouterProvider", "OPENROUTER_CATALOG"]
