"""Amazon Bedrock provider with cross-region inference support."""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from litellm_config.core.exceptions import ConfigurationError
from litellm_config.core.values import ConfigValue, to_config_value
from litellm_config.models.catalog import BEDROCK_CATALOG, ModelIdentityCatalog
from litellm_config.models.providers.base import BaseProvider
from litellm_config.models.registry import EntryRegistry
from litellm_config.models.schemas import AwsCredential, ModelIntent

logger = logging.getLogger(__name__)


class BedrockProvider(BaseProvider):
    """Emits ``bedrock/...`` entries authenticated with AWS keys.

    Region-tagged identifiers are resolved through the catalog, so the same
    intent can be emitted for every region the model is served in. Entries point
    the gateway at the concrete AWS region through ``aws_region_name``.

    Args:
        access_key_id: Base ``aws_access_key_id``.
        secret_access_key: Base ``aws_secret_access_key``.
        default_region_map: Region tag -> AWS region name (e.g. ``{"eu": env("AWS_REGION_EU")}``),
            one entry per catalog region. The first key is the default region.
        session_token: Optional ``aws_session_token``.
        detect_cris: Upgrade simple intents on cross-region eligible ids to
            one entry per region.
        catalog: Identifier catalog used for resolution.
        registry: Registry receiving the emitted entries.
    """

    name = "bedrock"
    path_prefix = "bedrock"
    supports_fallback = True

    def __init__(
        self,
        *,
        access_key_id: ConfigValue,
        secret_access_key: ConfigValue,
        default_region_map: Mapping[str, ConfigValue],
        session_token: Optional[ConfigValue] = None,
        detect_cris: bool = True,
        catalog: ModelIdentityCatalog = BEDROCK_CATALOG,
        registry: Optional[EntryRegistry] = None,
    ):
        super().__init__(registry=registry, catalog=catalog)
        if not default_region_map:
            raise ConfigurationError("default_region_map needs at least one region", provider=self.name)
        unknown = [region for region in default_region_map if region not in catalog.regions]
        if unknown:
            raise ConfigurationError(
                f"Unknown regions in default_region_map: {', '.join(unknown)}",
                provider=self.name,
                supported=list(catalog.regions),
            )
        missing = [region for region in catalog.regions if region not in default_region_map]
        if missing:
            raise ConfigurationError(
                f"default_region_map has no AWS region for: {', '.join(missing)}",
                provider=self.name,
                missing=missing,
            )

        self.regions = catalog.regions
        self.detect_cross_region = detect_cris
        self._access_key_id = to_config_value(access_key_id)
        self._secret_access_key = to_config_value(secret_access_key)
        self._session_token = to_config_value(session_token)
        self._region_map = {region: to_config_value(value) for region, value in default_region_map.items()}

    @property
    def default_region(self) -> Optional[str]:
        return next(iter(self._region_map))

    def is_cross_region_eligible(self, model_id: str) -> bool:
        return self._catalog.is_cross_region_eligible(model_id)

    def model_path(self, model_id: str, region: Optional[str]) -> str:
        resolved = self._catalog.resolve_for_region(model_id, region) if region else None
        if resolved is None and region is not None:
            logger.debug("No %s variant of %s; using it verbatim", region, model_id)
        return f"{self.path_prefix}/{resolved or model_id}"

    def region_params(self, region: str) -> Dict[str, Any]:
        return {"aws_region_name": self._region_pointer(region)}

    def base_params(
        self, intent: ModelIntent, region: Optional[str], *, credentialed: bool
    ) -> Dict[str, Any]:
        params: Dict[str, Any] = {
            "aws_access_key_id": self._access_key_id,
            "aws_secret_access_key": self._secret_access_key,
            "aws_region_name": self._region_pointer(region),
        }
        # A credential bundle brings its own token; the base one belongs to the base keys.
        if self._session_token and not credentialed:
            params["aws_session_token"] = self._session_token
        return params

    def credential_params(self, credential: Any) -> Dict[str, Any]:
        if isinstance(credential, Mapping):
            try:
                credential = AwsCredential(**credential)
            except TypeError as exc:
                raise ConfigurationError(
                    f"Invalid AWS credential mapping: {exc}", provider=self.name
                ) from exc
        if not isinstance(credential, AwsCredential):
            raise ConfigurationError(
                f"Bedrock credentials must be AwsCredential, got {type(credential).__name__}",
                provider=self.name,
            )
        return {key: to_config_value(value) for key, value in credential.to_params().items()}

    def validate_intent(self, intent: ModelIntent) -> None:
        super().validate_intent(intent)
        if intent.api_key is not None:
            raise ConfigurationError(
                "Bedrock models authenticate with AWS credentials, not api_key",
                provider=self.name,
                display_name=intent.display_name,
            )

    def _region_pointer(self, region: Optional[str]) -> ConfigValue:
        if region is None or region not in self._region_map:
            raise ConfigurationError(
                f"No AWS region configured for {region!r}; add it to default_region_map",
                provider=self.name,
                region=region,
            )
        return self._region_map[region]


__all__ = ["BedrockProvider"]
