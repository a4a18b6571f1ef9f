"""Typed schemas shared across the expansion stack.

Model intents and expansion axes are transient inputs; concrete entries and
fallback relations are the write-once outputs collected by the registry. The
dataclasses stay free of side effects so they are easy to compare in tests and
hand to a renderer.

Examples:
    >>> entry = ConcreteEntry(display_name="nova-pro", model_path="bedrock/eu.amazon.nova-pro-v1:0")
    >>> entry.to_dict()
    {'model_name': 'nova-pro', 'litellm_params': {'model': 'bedrock/eu.amazon.nova-pro-v1:0'}}
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

from litellm_config.core.exceptions import InvalidStrategyError
from litellm_config.core.values import ConfigValue

DEFAULT_FALLBACK_SUFFIX = "-fallback"


def _frozen(mapping: Optional[Mapping[str, Any]]) -> Mapping[str, Any]:
    return MappingProxyType(dict(mapping or {}))


# Inputs


@dataclass(frozen=True)
class ModelIntent:
    """What the caller wants emitted for one model.

    Attributes:
        display_name: Route name, and prefix of generated variant names.
        model_id: Provider model identifier, bare or region-tagged.
        params: Call parameters merged into every emitted entry.
        root_params: Entry-level metadata merged outside the call parameters.
        region: Declared region for regional providers (default region if None).
        api_key: Single credential for API-key providers.
    """

    display_name: str
    model_id: str
    params: Mapping[str, Any] = field(default_factory=dict)
    root_params: Mapping[str, Any] = field(default_factory=dict)
    region: Optional[str] = None
    api_key: Optional[ConfigValue] = None


@dataclass(frozen=True)
class Variation:
    """A named parameter overlay producing ``{display_name}-{suffix}``."""

    suffix: str
    params: Mapping[str, Any] = field(default_factory=dict)
    root_params: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ApiKeyCredential:
    """API key bundle for key-authenticated providers."""

    api_key: ConfigValue

    def to_params(self) -> Dict[str, Any]:
        return {"api_key": self.api_key}


@dataclass(frozen=True)
class AwsCredential:
    """AWS credential bundle merged over the provider's base auth fields."""

    access_key_id: ConfigValue
    secret_access_key: ConfigValue
    session_token: Optional[ConfigValue] = None

    def to_params(self) -> Dict[str, Any]:
        params: Dict[str, Any] = {
            "aws_access_key_id": self.access_key_id,
            "aws_secret_access_key": self.secret_access_key,
        }
        if self.session_token:
            params["aws_session_token"] = self.session_token
        return params


class LoadBalanceStrategy(StrEnum):
    """How configured axes combine."""

    CARTESIAN = "cartesian"
    FALLBACK = "fallback"

    @classmethod
    def parse(cls, value: "LoadBalanceStrategy | str") -> "LoadBalanceStrategy":
        try:
            return cls(value)
        except ValueError as exc:
            raise InvalidStrategyError(value) from exc


@dataclass(frozen=True)
class FallbackConfig:
    """Primary region and name suffix for the fallback strategy."""

    primary: str
    suffix: str = DEFAULT_FALLBACK_SUFFIX


@dataclass(frozen=True)
class LoadBalanceConfig:
    """Expansion axes for one intent.

    Attributes:
        regions: Region axis, in emission order.
        credentials: Credential axis, in emission order.
        strategy: Cartesian product or primary-plus-fallback.
        fallback: Fallback settings, required for the fallback strategy.
    """

    regions: Tuple[str, ...] = ()
    credentials: Tuple[Any, ...] = ()
    strategy: LoadBalanceStrategy = LoadBalanceStrategy.CARTESIAN
    fallback: Optional[FallbackConfig] = None


class ParameterLayers:
    """Ordered, named parameter layers merged lowest to highest priority.

    The expansion engine stacks ``provider`` (base auth), ``intent``, ``axis``
    and ``variation`` layers; later layers overwrite earlier keys.

    Examples:
        >>> layers = ParameterLayers()
        >>> layers.add("provider", {"api_key": "a", "region": "eu"})
        >>> layers.add("axis", {"api_key": "b"})
        >>> layers.merge()
        {'api_key': 'b', 'region': 'eu'}
        >>> layers.source_of("region")
        'provider'
    """

    def __init__(self) -> None:
        self._layers: list[tuple[str, Mapping[str, Any]]] = []

    def add(self, name: str, values: Optional[Mapping[str, Any]]) -> None:
        self._layers.append((name, dict(values or {})))

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(name for name, _ in self._layers)

    def merge(self) -> Dict[str, Any]:
        merged: Dict[str, Any] = {}
        for _, values in self._layers:
            merged.update(values)
        return merged

    def source_of(self, key: str) -> Optional[str]:
        """Name of the layer whose value for ``key`` wins, or None."""
        for name, values in reversed(self._layers):
            if key in values:
                return name
        return None


# Outputs


@dataclass(frozen=True)
class ConcreteEntry:
    """One fully resolved routing entry.

    Attributes:
        display_name: Route name after expansion suffixes.
        model_path: ``{provider_prefix}/{resolved_identifier}``.
        params: Merged call parameters.
        root_params: Merged entry-level metadata.
    """

    display_name: str
    model_path: str
    params: Mapping[str, Any] = field(default_factory=dict)
    root_params: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", _frozen(self.params))
        object.__setattr__(self, "root_params", _frozen(self.root_params))

    @property
    def provider_prefix(self) -> str:
        return self.model_path.partition("/")[0]

    @property
    def model_id(self) -> str:
        return self.model_path.partition("/")[2]

    def to_dict(self) -> Dict[str, Any]:
        """Return the gateway's ``model_list`` item shape."""
        entry: Dict[str, Any] = {
            "model_name": self.display_name,
            "litellm_params": {"model": self.model_path, **self.params},
        }
        for key, value in self.root_params.items():
            entry[key] = value
        return entry


@dataclass(frozen=True)
class FallbackRelation:
    """Routing hint: try ``fallback`` when ``primary`` fails."""

    primary: str
    fallback: str

    def to_dict(self) -> Dict[str, list[str]]:
        return {self.primary: [self.fallback]}


@dataclass(frozen=True)
class ExpansionResult:
    """Entries and fallback relations computed for one intent."""

    entries: Tuple[ConcreteEntry, ...] = ()
    fallbacks: Tuple[FallbackRelation, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def display_names(self) -> Sequence[str]:
        return [entry.display_name for entry in self.entries]


__all__ = [
    "DEFAULT_FALLBACK_SUFFIX",
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
