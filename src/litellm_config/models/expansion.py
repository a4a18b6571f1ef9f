"""Expansion engine: turns one model intent into concrete routing entries.

An intent is multiplied along up to three axes (regions, credentials,
variations) and resolved against the provider's catalog. The engine works in
a single synchronous pass and returns the complete result; callers append it
to the registry only after expansion succeeded, so a failing intent never
leaves partial entries behind.

Modes:
    simple: no axis. One entry for the declared (or default) region, unless
        the identifier is cross-region eligible and the provider auto-detects
        CRIS, in which case the intent is upgraded to cross-region.
    cross-region: one entry per supported region, all sharing the display name.
    cartesian: regions (outer loop) x credentials (inner loop), all sharing
        the display name.
    fallback: one primary-region entry under the display name plus one entry
        per other region named ``{display_name}{suffix}``, each recorded as a
        fallback relation.

Variations are applied last: every computed combination is emitted once per
variation, named ``{display_name}-{suffix}``.

Parameter layers, lowest to highest priority:
    provider base auth -> intent params -> axis overlay -> variation params
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Protocol, Sequence, Tuple

from litellm_config.core.exceptions import ConfigurationError, UnsupportedAxisError
from litellm_config.models.schemas import (
    ConcreteEntry,
    ExpansionResult,
    FallbackRelation,
    LoadBalanceConfig,
    LoadBalanceStrategy,
    ModelIntent,
    ParameterLayers,
    Variation,
)

logger = logging.getLogger(__name__)


class ExpansionTarget(Protocol):
    """Provider hooks the engine relies on."""

    name: str
    regions: Tuple[str, ...]
    detect_cross_region: bool
    supports_fallback: bool

    @property
    def default_region(self) -> Optional[str]: ...

    def is_cross_region_eligible(self, model_id: str) -> bool: ...

    def model_path(self, model_id: str, region: Optional[str]) -> str: ...

    def base_params(
        self, intent: ModelIntent, region: Optional[str], *, credentialed: bool
    ) -> Dict[str, Any]: ...

    def region_params(self, region: str) -> Dict[str, Any]: ...

    def credential_params(self, credential: Any) -> Dict[str, Any]: ...


@dataclass(frozen=True)
class _Slot:
    """One region/credential combination before variations are applied."""

    region: Optional[str]
    axis_params: Mapping[str, Any] = field(default_factory=dict)
    credentialed: bool = False
    name_suffix: str = ""


@dataclass(frozen=True)
class _Plan:
    slots: Tuple[_Slot, ...]
    fallback_regions: Tuple[str, ...] = ()
    fallback_suffix: str = ""


class ExpansionEngine:
    """Compute the entries one provider emits for a model intent."""

    def __init__(self, target: ExpansionTarget):
        self._target = target

    def expand(
        self,
        intent: ModelIntent,
        load_balance: Optional[LoadBalanceConfig] = None,
        variations: Optional[Sequence[Variation]] = None,
        *,
        cross_region: bool = False,
    ) -> ExpansionResult:
        """Expand ``intent`` along the configured axes.

        Args:
            intent: The model to emit.
            load_balance: Region/credential axes and strategy; None for simple mode.
            variations: Terminal variation axis; None when absent.
            cross_region: Emit one entry per supported region without load
                balancing axes (ignored when ``load_balance`` is given).

        Returns:
            ExpansionResult: Entries in emission order plus fallback relations.

        Raises:
            ConfigurationError: If the intent or axes violate a precondition.
        """
        self._check_intent(intent)
        variants = self._check_variations(variations)

        if load_balance is None and cross_region:
            plan = self._plan_cross_region()
        elif load_balance is None:
            plan = self._plan_simple(intent)
        elif load_balance.strategy is LoadBalanceStrategy.FALLBACK:
            plan = self._plan_fallback(load_balance)
        else:
            plan = self._plan_cartesian(load_balance)

        entries: List[ConcreteEntry] = []
        for slot in plan.slots:
            for variation in variants:
                name = _variant_name(intent.display_name, variation) + slot.name_suffix
                entry = self._build_entry(intent, slot, variation, name)
                logger.debug(
                    "Expanded %s -> %s (%s)",
                    intent.display_name,
                    entry.display_name,
                    entry.model_path,
                )
                entries.append(entry)

        fallbacks = [
            FallbackRelation(
                primary=_variant_name(intent.display_name, variation),
                fallback=_variant_name(intent.display_name, variation) + plan.fallback_suffix,
            )
            for variation in variants
            for _ in plan.fallback_regions
        ]

        return ExpansionResult(entries=tuple(entries), fallbacks=tuple(fallbacks))

    # Planning

    def _plan_simple(self, intent: ModelIntent) -> _Plan:
        target = self._target
        if target.regions and target.detect_cross_region and target.is_cross_region_eligible(
            intent.model_id
        ):
            logger.debug(
                "%s is available in every region; emitting cross-region entries for %s",
                intent.model_id,
                intent.display_name,
            )
            return self._plan_cross_region()

        if not target.regions:
            if intent.region is not None:
                raise UnsupportedAxisError(provider=target.name, axis="region")
            return _Plan(slots=(_Slot(region=None),))

        region = intent.region or target.default_region
        self._check_regions([region])
        return _Plan(slots=(_Slot(region=region),))

    def _plan_cross_region(self) -> _Plan:
        """One slot per supported region, region pointer in the base auth layer."""
        if not self._target.regions:
            raise UnsupportedAxisError(provider=self._target.name, axis="region")
        return _Plan(slots=tuple(_Slot(region=region) for region in self._target.regions))

    def _plan_cartesian(self, config: LoadBalanceConfig) -> _Plan:
        target = self._target
        regions = tuple(config.regions)
        credentials = tuple(config.credentials)

        if regions:
            self._check_regions(regions)
        if not regions and not credentials:
            raise ConfigurationError(
                f"Load balancing on '{target.name}' needs at least one region or credential",
                provider=target.name,
            )

        credential_layers = [target.credential_params(credential) for credential in credentials]

        if not regions:
            region = target.default_region
            return _Plan(
                slots=tuple(
                    _Slot(region=region, axis_params=layer, credentialed=True)
                    for layer in credential_layers
                )
            )

        if not credentials:
            return _Plan(
                slots=tuple(
                    _Slot(region=region, axis_params=target.region_params(region))
                    for region in regions
                )
            )

        slots = []
        for region in regions:
            region_layer = target.region_params(region)
            for layer in credential_layers:
                slots.append(
                    _Slot(
                        region=region,
                        axis_params={**region_layer, **layer},
                        credentialed=True,
                    )
                )
        return _Plan(slots=tuple(slots))

    def _plan_fallback(self, config: LoadBalanceConfig) -> _Plan:
        target = self._target
        if not target.supports_fallback:
            raise ConfigurationError(
                f"Provider '{target.name}' only supports the cartesian load balancing strategy",
                provider=target.name,
                strategy=str(config.strategy),
            )
        if config.fallback is None:
            raise ConfigurationError(
                "The fallback strategy requires a fallback config naming the primary region",
                provider=target.name,
            )
        regions = tuple(config.regions)
        if not regions:
            raise ConfigurationError(
                "The fallback strategy requires at least one region",
                provider=target.name,
            )

        primary = config.fallback.primary
        suffix = config.fallback.suffix
        self._check_regions((primary, *regions))
        secondary = tuple(region for region in regions if region != primary)

        credential_layers: List[Optional[Dict[str, Any]]] = [
            target.credential_params(credential) for credential in config.credentials
        ] or [None]

        slots = []
        for region, name_suffix in ((primary, ""), *((region, suffix) for region in secondary)):
            region_layer = target.region_params(region)
            for layer in credential_layers:
                slots.append(
                    _Slot(
                        region=region,
                        axis_params={**region_layer, **(layer or {})},
                        credentialed=layer is not None,
                        name_suffix=name_suffix,
                    )
                )

        if len(secondary) > 1:
            logger.warning(
                "Fallback regions %s share the fallback name suffix %r",
                ", ".join(secondary),
                suffix,
            )
        return _Plan(slots=tuple(slots), fallback_regions=secondary, fallback_suffix=suffix)

    # Validation

    def _check_intent(self, intent: ModelIntent) -> None:
        if not intent.display_name:
            raise ConfigurationError("A display name is required", model_id=intent.model_id)
        if not intent.model_id:
            raise ConfigurationError(
                f"A model id is required for '{intent.display_name}'",
                display_name=intent.display_name,
            )

    def _check_variations(self, variations: Optional[Sequence[Variation]]) -> List[Optional[Variation]]:
        if variations is None:
            return [None]
        if not variations:
            raise ConfigurationError("At least one variation must be given")
        for variation in variations:
            if not variation.suffix:
                raise ConfigurationError("Every variation needs a non-empty suffix")
        return list(variations)

    def _check_regions(self, regions: Sequence[Optional[str]]) -> None:
        target = self._target
        if not target.regions:
            raise UnsupportedAxisError(provider=target.name, axis="region")
        for region in regions:
            if region not in target.regions:
                raise ConfigurationError(
                    f"Unknown region {region!r} for provider '{target.name}'",
                    provider=target.name,
                    region=region,
                    supported=list(target.regions),
                )

    # Entry construction

    def _build_entry(
        self,
        intent: ModelIntent,
        slot: _Slot,
        variation: Optional[Variation],
        display_name: str,
    ) -> ConcreteEntry:
        layers = ParameterLayers()
        layers.add(
            "provider",
            self._target.base_params(intent, slot.region, credentialed=slot.credentialed),
        )
        layers.add("intent", intent.params)
        layers.add("axis", slot.axis_params)
        root_params = dict(intent.root_params)
        if variation is not None:
            layers.add("variation", variation.params)
            root_params.update(variation.root_params)

        return ConcreteEntry(
            display_name=display_name,
            model_path=self._target.model_path(intent.model_id, slot.region),
            params=layers.merge(),
            root_params=root_params,
        )


def _variant_name(display_name: str, variation: Optional[Variation]) -> str:
    if variation is None:
        return display_name
    return f"{display_name}-{variation.suffix}"


__all__ = ["ExpansionEngine", "ExpansionTarget"]
