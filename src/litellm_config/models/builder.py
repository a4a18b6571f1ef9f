"""Fluent builder collecting the axes of one model intent.

Chain axis methods on the builder returned by ``provider.add_model(...)`` and
finish with a terminal call: ``build()`` (or ``execute()``) or one of the
variation methods. Nothing is emitted until the terminal call, and a session
refuses to build while any intent is still open.

Examples:
    Both providers below write into one session registry.

    >>> (bedrock.add_model("claude-3-7", "anthropic.claude-3-7-sonnet-20250219-v1:0")
    ...     .with_region_fallback("eu", "us")
    ...     .build())
    <BedrockProvider entries=2>
    >>> (anthropic.add_model("claude", "claude-3-7-sonnet-latest")
    ...     .with_api_keys([env("ANTHROPIC_KEY_1"), env("ANTHROPIC_KEY_2")])
    ...     .with_thinking_variations([1024, 16384]))
    <AnthropicProvider entries=6>
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING, Any, Iterable, Mapping, Optional, Sequence, Tuple, Union

from litellm_config.core.exceptions import (
    ConfigurationError,
    IntentCommittedError,
    UnsupportedAxisError,
)
from litellm_config.models.schemas import (
    DEFAULT_FALLBACK_SUFFIX,
    ApiKeyCredential,
    ExpansionResult,
    FallbackConfig,
    LoadBalanceConfig,
    LoadBalanceStrategy,
    ModelIntent,
    Variation,
)

if TYPE_CHECKING:
    from litellm_config.models.providers.base import BaseProvider

logger = logging.getLogger(__name__)

DEFAULT_THINKING_BUDGETS: Tuple[int, ...] = (1024, 16384)
DEFAULT_TEMPERATURES: Tuple[float, ...] = (0.1, 0.7, 1.0)

VariationLike = Union[Variation, Mapping[str, Any]]


class ModelIntentBuilder:
    """Accumulates axes for one intent until a terminal call commits it."""

    def __init__(self, provider: "BaseProvider", intent: ModelIntent):
        self._provider = provider
        self._intent = intent
        self._load_balancing = False
        self._regions: Tuple[str, ...] = ()
        self._credentials: Tuple[Any, ...] = ()
        self._strategy = LoadBalanceStrategy.CARTESIAN
        self._fallback: Optional[FallbackConfig] = None
        self._cross_region = False
        self._committed = False
        self._result: Optional[ExpansionResult] = None

    def __repr__(self) -> str:
        state = "committed" if self._committed else "open"
        return f"<ModelIntentBuilder {self._intent.display_name!r} ({state})>"

    @property
    def display_name(self) -> str:
        return self._intent.display_name

    @property
    def intent(self) -> ModelIntent:
        return self._intent

    @property
    def committed(self) -> bool:
        return self._committed

    @property
    def result(self) -> Optional[ExpansionResult]:
        """Expansion result, available once the intent was committed."""
        return self._result

    def load_balance_config(self) -> Optional[LoadBalanceConfig]:
        """Snapshot of the configured axes, None when no axis was set."""
        if not self._load_balancing:
            return None
        return LoadBalanceConfig(
            regions=self._regions,
            credentials=self._credentials,
            strategy=self._strategy,
            fallback=self._fallback,
        )

    # Axis configuration

    def with_load_balancing(
        self,
        *,
        regions: Optional[Sequence[str]] = None,
        credentials: Optional[Sequence[Any]] = None,
    ) -> "ModelIntentBuilder":
        """Set the region and credential axes (cartesian strategy by default)."""
        self._ensure_open()
        if regions:
            self._require_regions()
        self._load_balancing = True
        self._regions = tuple(regions or ())
        self._credentials = tuple(credentials or ())
        self._strategy = LoadBalanceStrategy.CARTESIAN
        self._fallback = None
        return self

    def with_strategy(self, strategy: Union[LoadBalanceStrategy, str]) -> "ModelIntentBuilder":
        """Choose how axes combine (``"cartesian"`` or ``"fallback"``)."""
        self._ensure_open()
        if not self._load_balancing:
            raise ConfigurationError("Must call with_load_balancing() before with_strategy()")
        self._strategy = LoadBalanceStrategy.parse(strategy)
        return self

    def with_fallback_config(
        self,
        primary: Union[FallbackConfig, str],
        suffix: str = DEFAULT_FALLBACK_SUFFIX,
    ) -> "ModelIntentBuilder":
        """Name the primary region and the suffix given to fallback entries."""
        self._ensure_open()
        if not self._load_balancing:
            raise ConfigurationError("Must call with_load_balancing() before with_fallback_config()")
        self._fallback = primary if isinstance(primary, FallbackConfig) else FallbackConfig(primary, suffix)
        return self

    def with_regions(self, regions: Sequence[str]) -> "ModelIntentBuilder":
        """Add a region axis."""
        self._ensure_open()
        self._require_regions()
        if not regions:
            raise ConfigurationError("with_regions() needs at least one region")
        self._load_balancing = True
        self._regions = tuple(regions)
        return self

    def with_credentials(self, credentials: Sequence[Any]) -> "ModelIntentBuilder":
        """Add a credential axis (provider-specific credential bundles)."""
        self._ensure_open()
        if not credentials:
            raise ConfigurationError(
                f"At least one credential must be specified for {self._provider.name} load balancing"
            )
        self._load_balancing = True
        self._credentials = tuple(credentials)
        return self

    def with_api_keys(self, api_keys: Sequence[Any]) -> "ModelIntentBuilder":
        """Add a credential axis of plain API keys."""
        if not self._provider.accepts_api_keys:
            raise UnsupportedAxisError(provider=self._provider.name, axis="api key")
        return self.with_credentials([ApiKeyCredential(key) for key in api_keys])

    def with_region_fallback(
        self,
        primary: str,
        fallback: str,
        suffix: str = DEFAULT_FALLBACK_SUFFIX,
    ) -> "ModelIntentBuilder":
        """Serve from ``primary`` and fall back to ``fallback`` under ``{name}{suffix}``."""
        self._ensure_open()
        self._require_regions()
        if not self._provider.supports_fallback:
            raise UnsupportedAxisError(provider=self._provider.name, axis="fallback")
        self._load_balancing = True
        self._regions = (primary, fallback)
        self._strategy = LoadBalanceStrategy.FALLBACK
        self._fallback = FallbackConfig(primary=primary, suffix=suffix)
        return self

    def with_multi_axis(self, regions: Sequence[str], credentials: Sequence[Any]) -> "ModelIntentBuilder":
        """Regions x credentials, cartesian."""
        return self.with_load_balancing(regions=regions, credentials=credentials)

    def with_cross_region(self) -> "ModelIntentBuilder":
        """Emit one entry per supported region regardless of CRIS detection."""
        self._ensure_open()
        self._require_regions()
        self._cross_region = True
        return self

    def with_rate_limit(self, rpm: int) -> "ModelIntentBuilder":
        """Set the ``rpm`` entry-level limit."""
        self._ensure_open()
        if rpm <= 0:
            raise ConfigurationError("rpm must be positive", rpm=rpm)
        self._intent = replace(self._intent, root_params={**self._intent.root_params, "rpm": rpm})
        return self

    # Terminal calls

    def build(self) -> "BaseProvider":
        """Commit the intent with the configured axes and return the provider."""
        self._commit(None)
        return self._provider

    def execute(self) -> "BaseProvider":
        """Alias of :meth:`build`."""
        return self.build()

    def with_variations(self, variations: Iterable[VariationLike]) -> "BaseProvider":
        """Commit one entry per variation on top of every axis combination."""
        self._commit([_to_variation(variation) for variation in variations])
        return self._provider

    def with_thinking_variations(
        self, budgets: Sequence[int] = DEFAULT_THINKING_BUDGETS
    ) -> "BaseProvider":
        """Variations ``think-{budget}`` enabling extended thinking."""
        return self.with_variations(
            Variation(
                suffix=f"think-{budget}",
                params={"thinking": {"type": "enabled", "budget_tokens": budget}},
            )
            for budget in budgets
        )

    def with_temperature_variations(
        self, temperatures: Sequence[float] = DEFAULT_TEMPERATURES
    ) -> "BaseProvider":
        """Variations ``temp-{temperature}``."""
        return self.with_variations(
            Variation(
                suffix=f"temp-{_format_temperature(temperature)}",
                params={"temperature": temperature},
            )
            for temperature in temperatures
        )

    # Internals

    def _ensure_open(self) -> None:
        if self._committed:
            raise IntentCommittedError(self._intent.display_name)

    def _require_regions(self) -> None:
        if not self._provider.regions:
            raise UnsupportedAxisError(provider=self._provider.name, axis="region")

    def _commit(self, variations: Optional[Sequence[Variation]]) -> None:
        self._ensure_open()
        load_balance = self.load_balance_config()
        if self._cross_region and load_balance is not None:
            raise ConfigurationError(
                "with_cross_region() cannot be combined with load balancing axes; use with_regions()",
                display_name=self._intent.display_name,
            )
        # An intent is closed after its terminal call even when expansion fails.
        self._committed = True
        self._provider._release(self)
        self._result = self._provider.commit(
            self._intent,
            load_balance,
            variations,
            cross_region=self._cross_region,
        )
        logger.debug(
            "Committed %s: %d entries, %d fallbacks",
            self._intent.display_name,
            len(self._result.entries),
            len(self._result.fallbacks),
        )


def _format_temperature(temperature: float) -> str:
    """Shortest round-tripping form, without a trailing ``.0`` for whole numbers."""
    text = repr(float(temperature))
    return text[:-2] if text.endswith(".0") else text


def _to_variation(value: VariationLike) -> Variation:
    if isinstance(value, Variation):
        return value
    if isinstance(value, Mapping):
        if "suffix" not in value:
            raise ConfigurationError("Every variation needs a suffix")
        return Variation(
            suffix=value["suffix"],
            params=dict(value.get("params") or value.get("litellm_params") or {}),
            root_params=dict(value.get("root_params") or {}),
        )
    raise ConfigurationError(f"Unsupported variation: {type(value).__name__}")


__all__ = [
    "DEFAULT_TEMPERATURES",
    "DEFAULT_THINKING_BUDGETS",
    "ModelIntentBuilder",
]
