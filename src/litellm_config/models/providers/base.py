"""Contracts that model providers implement to plug into the builder.

A provider knows three things the expansion engine cannot: how its model paths
are spelled, which auth fields every entry carries, and how one credential
bundle or region maps onto call parameters. Everything else (axes, naming,
merge order) is shared and lives in :mod:`litellm_config.models.expansion`.

Examples:
    >>> from litellm_config.models.providers import AnthropicProvider
    >>> provider = AnthropicProvider()
    >>> provider.add_model("claude", "claude-3-5-sonnet-latest", api_key="env:ANTHROPIC_API_KEY").build()
    <AnthropicProvider entries=1>
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional, Sequence, Tuple

from litellm_config.core.exceptions import ConfigurationError, UnsupportedAxisError
from litellm_config.core.values import EnvironmentRef, StringValue, to_config_value
from litellm_config.models.catalog import ModelIdentityCatalog
from litellm_config.models.expansion import ExpansionEngine
from litellm_config.models.registry import EntryRegistry
from litellm_config.models.schemas import (
    ApiKeyCredential,
    ExpansionResult,
    FallbackRelation,
    LoadBalanceConfig,
    ModelIntent,
    Variation,
)

if TYPE_CHECKING:
    from litellm_config.models.builder import ModelIntentBuilder

logger = logging.getLogger(__name__)


class BaseProvider(ABC):
    """Abstract provider that expands intents into its shared registry.

    Attributes:
        name: Provider slug used in error messages.
        path_prefix: Prefix of emitted model paths (``{prefix}/{model_id}``).
        regions: Supported regions; empty when the provider has no regional concept.
        detect_cross_region: Upgrade simple intents to cross-region when eligible.
        supports_fallback: Whether the fallback strategy is available.
        accepts_api_keys: Whether the credential axis takes plain API keys.
    """

    name: str = ""
    path_prefix: str = ""
    regions: Tuple[str, ...] = ()
    detect_cross_region: bool = False
    supports_fallback: bool = False
    accepts_api_keys: bool = False

    def __init__(
        self,
        *,
        registry: Optional[EntryRegistry] = None,
        catalog: Optional[ModelIdentityCatalog] = None,
    ):
        self._registry = registry if registry is not None else EntryRegistry()
        self._catalog = catalog
        self._engine = ExpansionEngine(self)
        self._pending: List["ModelIntentBuilder"] = []
        self._fallbacks: List[FallbackRelation] = []

    def __repr__(self) -> str:
        return f"<{type(self).__name__} entries={len(self._registry)}>"

    @property
    def registry(self) -> EntryRegistry:
        return self._registry

    @property
    def catalog(self) -> Optional[ModelIdentityCatalog]:
        return self._catalog

    # Hooks used by the expansion engine

    @property
    def default_region(self) -> Optional[str]:
        return None

    def is_cross_region_eligible(self, model_id: str) -> bool:
        return False

    def model_path(self, model_id: str, region: Optional[str]) -> str:
        return f"{self.path_prefix}/{model_id}"

    def region_params(self, region: str) -> Dict[str, Any]:
        raise UnsupportedAxisError(provider=self.name, axis="region")

    @abstractmethod
    def base_params(
        self, intent: ModelIntent, region: Optional[str], *, credentialed: bool
    ) -> Dict[str, Any]:
        """Return the provider's base auth layer for one entry.

        Args:
            intent: Intent being expanded.
            region: Region of the entry, None for non-regional providers.
            credentialed: True when a credential axis supplies auth fields.
        """

    @abstractmethod
    def credential_params(self, credential: Any) -> Dict[str, Any]:
        """Map one credential bundle onto call parameters."""

    def validate_intent(self, intent: ModelIntent) -> None:
        """Reject intent fields the provider cannot use."""
        if intent.region is not None and not self.regions:
            raise UnsupportedAxisError(provider=self.name, axis="region")

    # Intent building

    def add_model(
        self,
        display_name: str,
        model_id: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        root_params: Optional[Mapping[str, Any]] = None,
        region: Optional[str] = None,
        api_key: Any = None,
    ) -> "ModelIntentBuilder":
        """Start a model intent. The returned builder must end in a terminal call.

        Args:
            display_name: Route name exposed by the gateway.
            model_id: Provider model identifier.
            params: Call parameters merged into every entry.
            root_params: Entry-level metadata (e.g. ``rpm``, ``model_info``).
            region: Declared region for regional providers.
            api_key: Single API key for key-authenticated providers.

        Returns:
            ModelIntentBuilder: Chain axes on it, then call ``build()``.
        """
        from litellm_config.models.builder import ModelIntentBuilder

        intent = ModelIntent(
            display_name=display_name,
            model_id=model_id,
            params=dict(params or {}),
            root_params=dict(root_params or {}),
            region=region,
            api_key=to_config_value(api_key),
        )
        self.validate_intent(intent)
        self._warn_unknown(model_id)
        builder = ModelIntentBuilder(self, intent)
        self._pending.append(builder)
        return builder

    def expand(
        self,
        intent: ModelIntent,
        load_balance: Optional[LoadBalanceConfig] = None,
        variations: Optional[Sequence[Variation]] = None,
        *,
        cross_region: bool = False,
    ) -> ExpansionResult:
        """Compute entries for ``intent`` without registering them."""
        self.validate_intent(intent)
        return self._engine.expand(intent, load_balance, variations, cross_region=cross_region)

    def commit(
        self,
        intent: ModelIntent,
        load_balance: Optional[LoadBalanceConfig] = None,
        variations: Optional[Sequence[Variation]] = None,
        *,
        cross_region: bool = False,
    ) -> ExpansionResult:
        """Expand ``intent`` and append the result to the registry."""
        result = self.expand(intent, load_balance, variations, cross_region=cross_region)
        self._registry.extend(result.entries)
        self._fallbacks.extend(result.fallbacks)
        return result

    def fallbacks(self) -> Tuple[FallbackRelation, ...]:
        """Fallback relations recorded by committed intents, in order."""
        return tuple(self._fallbacks)

    def pending_intents(self) -> Tuple[str, ...]:
        """Display names of intents whose builders were never committed."""
        return tuple(builder.display_name for builder in self._pending)

    def _release(self, builder: "ModelIntentBuilder") -> None:
        self._pending.remove(builder)

    def _warn_unknown(self, model_id: str) -> None:
        if self._catalog is None or model_id in self._catalog:
            return
        if self._catalog.family(model_id):
            return
        logger.warning("Model id %r is not in the %s catalog", model_id, self.name)


class ApiKeyProvider(BaseProvider):
    """Provider authenticated by a single ``api_key`` call parameter.

    These providers have no regional concept and support only the cartesian
    strategy; the credential axis is a list of API keys.
    """

    accepts_api_keys = True

    def base_params(
        self, intent: ModelIntent, region: Optional[str], *, credentialed: bool
    ) -> Dict[str, Any]:
        if intent.api_key is None:
            if not credentialed:
                raise ConfigurationError(
                    f"api_key is required for simple {self.name} models",
                    provider=self.name,
                    display_name=intent.display_name,
                )
            return {}
        return {"api_key": intent.api_key}

    def credential_params(self, credential: Any) -> Dict[str, Any]:
        if isinstance(credential, ApiKeyCredential):
            return {"api_key": to_config_value(credential.api_key)}
        if isinstance(credential, (str, EnvironmentRef, StringValue)):
            return {"api_key": to_config_value(credential)}
        if isinstance(credential, Mapping) and "api_key" in credential:
            return {"api_key": to_config_value(credential["api_key"])}
        raise ConfigurationError(
            f"Unsupported {self.name} credential: {type(credential).__name__}",
            provider=self.name,
        )


__all__ = ["BaseProvider", "ApiKeyProvider"]
