"""Configuration session assembling settings and generated model entries.

A :class:`LiteLLMConfigBuilder` owns one entry registry shared by every
provider it creates. Providers expand model intents into that registry; the
session attaches the passthrough settings sections and produces the final
document.

Examples:
    >>> builder = LiteLLMConfigBuilder().with_router_settings({"num_retries": 2})
    >>> aws = builder.create_bedrock_provider(
    ...     access_key_id=env("AWS_ACCESS_KEY_ID"),
    ...     secret_access_key=env("AWS_SECRET_ACCESS_KEY"),
    ...     default_region_map={"eu": env("AWS_REGION_EU"), "us": env("AWS_REGION_US")},
    ... )
    >>> aws.add_model("nova-pro", "amazon.nova-pro-v1:0", region="eu").build()
    <BedrockProvider entries=2>
    >>> [m["litellm_params"]["model"] for m in builder.build()["model_list"]]
    ['bedrock/eu.amazon.nova-pro-v1:0', 'bedrock/us.amazon.nova-pro-v1:0']
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, TypeVar, Union

from pydantic import BaseModel

from litellm_config.core.config.schema import (
    BuilderConfig,
    GeneralSettings,
    LiteLLMSettings,
    RouterSettings,
)
from litellm_config.core.exceptions import PendingIntentError
from litellm_config.core.utils.logging import configure_logging
from litellm_config.core.values import resolve_config_values
from litellm_config.models.catalog import BEDROCK_CATALOG, ModelIdentityCatalog
from litellm_config.models.providers import (
    AnthropicProvider,
    BaseProvider,
    BedrockProvider,
    GeminiProvider,
    OpenRouterProvider,
)
from litellm_config.models.registry import EntryRegistry
from litellm_config.rendering.yaml_generator import YamlGenerator, dump_yaml

logger = logging.getLogger(__name__)

SettingsT = TypeVar("SettingsT", bound=BaseModel)


@dataclass
class ValidationResult:
    """Outcome of :meth:`LiteLLMConfigBuilder.validate`."""

    valid: bool
    errors: List[str] = field(default_factory=list)


def _coerce_settings(model_cls: type[SettingsT], settings: Union[SettingsT, Mapping[str, Any]]) -> SettingsT:
    if isinstance(settings, model_cls):
        return settings
    return model_cls.model_validate(dict(settings))


def settings_to_dict(settings: BaseModel) -> Dict[str, Any]:
    """Dump a settings model without unset fields, keeping ConfigValue objects intact."""
    data: Dict[str, Any] = {}
    for key, value in settings:
        if value is None:
            continue
        if isinstance(value, BaseModel):
            value = settings_to_dict(value)
        data[key] = value
    return data


class LiteLLMConfigBuilder:
    """Main configuration builder for the gateway."""

    def __init__(self, catalog: ModelIdentityCatalog = BEDROCK_CATALOG):
        self._catalog = catalog
        self._registry = EntryRegistry()
        self._providers: List[BaseProvider] = []
        self._litellm_settings: Optional[LiteLLMSettings] = None
        self._general_settings: Optional[GeneralSettings] = None
        self._router_settings: Optional[RouterSettings] = None
        self._environment_variables: Dict[str, str] = {}
        self._include_files: List[str] = []

    @classmethod
    def from_config(cls, config: BuilderConfig) -> "LiteLLMConfigBuilder":
        """Create a session seeded from a loaded :class:`BuilderConfig`."""
        configure_logging(level=config.logging.level)

        catalog = BEDROCK_CATALOG
        if config.catalog.bedrock_model_ids:
            catalog = catalog.with_identifiers(config.catalog.bedrock_model_ids)

        builder = cls(catalog=catalog)
        if config.litellm_settings is not None:
            builder.with_litellm_settings(config.litellm_settings)
        if config.general_settings is not None:
            builder.with_general_settings(config.general_settings)
        if config.router_settings is not None:
            builder.with_router_settings(config.router_settings)
        if config.environment_variables:
            builder.with_environment_variables(config.environment_variables)
        if config.include:
            builder.with_include_files(config.include)
        return builder

    @property
    def registry(self) -> EntryRegistry:
        """Registry shared by every provider of this session."""
        return self._registry

    @property
    def catalog(self) -> ModelIdentityCatalog:
        return self._catalog

    # Providers

    def create_bedrock_provider(self, **options: Any) -> BedrockProvider:
        """Create an AWS Bedrock provider writing into this session.

        Accepts the keyword arguments of :class:`BedrockProvider` except
        ``registry``; ``catalog`` defaults to the session catalog.
        """
        options.setdefault("catalog", self._catalog)
        return self._track(BedrockProvider(registry=self._registry, **options))

    def create_anthropic_provider(self) -> AnthropicProvider:
        return self._track(AnthropicProvider(registry=self._registry))

    def create_gemini_provider(self) -> GeminiProvider:
        return self._track(GeminiProvider(registry=self._registry))

    def create_openrouter_provider(self) -> OpenRouterProvider:
        return self._track(OpenRouterProvider(registry=self._registry))

    def _track(self, provider: BaseProvider) -> Any:
        self._providers.append(provider)
        return provider

    # Settings

    def with_litellm_settings(
        self, settings: Union[LiteLLMSettings, Mapping[str, Any]]
    ) -> "LiteLLMConfigBuilder":
        self._litellm_settings = _coerce_settings(LiteLLMSettings, settings)
        return self

    def with_general_settings(
        self, settings: Union[GeneralSettings, Mapping[str, Any]]
    ) -> "LiteLLMConfigBuilder":
        self._general_settings = _coerce_settings(GeneralSettings, settings)
        return self

    def with_router_settings(
        self, settings: Union[RouterSettings, Mapping[str, Any]]
    ) -> "LiteLLMConfigBuilder":
        self._router_settings = _coerce_settings(RouterSettings, settings)
        return self

    def with_environment_variables(self, variables: Mapping[str, str]) -> "LiteLLMConfigBuilder":
        """Merge ``variables`` into the document's environment variables."""
        self._environment_variables = {**self._environment_variables, **variables}
        return self

    def with_include_files(self, files: Sequence[str]) -> "LiteLLMConfigBuilder":
        self._include_files = list(files)
        return self

    def with_region_fallbacks(self, provider: BaseProvider) -> "LiteLLMConfigBuilder":
        """Append ``provider``'s fallback relations to ``router_settings.fallbacks``."""
        relations = [relation.to_dict() for relation in provider.fallbacks()]
        router = self._router_settings or RouterSettings()
        existing = list(router.fallbacks or [])
        self._router_settings = router.model_copy(update={"fallbacks": existing + relations})
        logger.debug("Added %d fallback relations from %s", len(relations), provider.name)
        return self

    # Output

    def regions(self) -> Tuple[str, ...]:
        """Region tags of the session catalog and of every provider, in first-seen order."""
        tags = list(self._catalog.regions)
        for provider in self._providers:
            tags.extend(provider.regions)
        return tuple(dict.fromkeys(tags))

    def pending_intents(self) -> List[str]:
        """Display names of model intents still waiting for a terminal call."""
        return [name for provider in self._providers for name in provider.pending_intents()]

    def build(self) -> Dict[str, Any]:
        """Build the complete configuration as a plain dict.

        Raises:
            PendingIntentError: If a model intent builder was never committed.
        """
        pending = self.pending_intents()
        if pending:
            raise PendingIntentError(pending)

        config: Dict[str, Any] = {}
        if self._include_files:
            config["include"] = list(self._include_files)
        if self._litellm_settings is not None:
            config["litellm_settings"] = settings_to_dict(self._litellm_settings)
        if self._general_settings is not None:
            config["general_settings"] = settings_to_dict(self._general_settings)
        if self._router_settings is not None:
            config["router_settings"] = settings_to_dict(self._router_settings)
        if self._environment_variables:
            config["environment_variables"] = dict(self._environment_variables)

        models = [entry.to_dict() for entry in self._registry.all_entries()]
        if models:
            config["model_list"] = models

        return resolve_config_values(config)

    def validate(self) -> ValidationResult:
        """Check the session for problems the gateway would reject."""
        errors: List[str] = []

        pending = self.pending_intents()
        if pending:
            errors.append(f"Uncommitted model intents: {', '.join(pending)}")

        names = {entry.display_name for entry in self._registry.all_entries()}
        if not names:
            errors.append("Config must have at least one model defined")

        fallbacks = (self._router_settings.fallbacks if self._router_settings else None) or []
        for mapping in fallbacks:
            for primary, targets in mapping.items():
                for target in [primary, *targets]:
                    if target not in names:
                        errors.append(f"Fallback references unknown model '{target}'")

        return ValidationResult(valid=not errors, errors=errors)

    def generate_yaml(self) -> str:
        """Generate nicely formatted YAML with comments."""
        return YamlGenerator(self.build(), self.regions()).generate()

    def write_to_file(self, file_path: Union[str, Path], enhanced: bool = True) -> Path:
        """Write the configuration, using the commented format by default."""
        if enhanced:
            return YamlGenerator(self.build(), self.regions()).write_to_file(file_path)

        path = Path(file_path)
        path.write_text(dump_yaml(self.build()), encoding="utf-8")
        logger.info("Config written to %s", path)
        return path


__all__ = ["LiteLLMConfigBuilder", "ValidationResult", "settings_to_dict"]
