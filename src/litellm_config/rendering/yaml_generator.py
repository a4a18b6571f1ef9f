"""Commented YAML rendering of a built configuration.

The generator expects the plain dict produced by
``LiteLLMConfigBuilder.build()`` (config values already resolved to strings).
Models keep their registry order inside each group; groups are ordered by first
appearance, provider first and then region, with region-less entries before
regional ones.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Sequence, Union

import yaml

from litellm_config.models.catalog import SUPPORTED_REGIONS

logger = logging.getLogger(__name__)

SETTINGS_SECTIONS = (
    "litellm_settings",
    "general_settings",
    "router_settings",
    "environment_variables",
)

# Model path prefix -> heading used in the document.
PROVIDER_LABELS = {
    "bedrock": "aws",
}

GLOBAL_REGION = "global"


def dump_yaml(value: Any) -> str:
    """Block-style YAML that keeps key order."""
    return yaml.safe_dump(
        value,
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
        width=1000,
    )


def _indent(text: str, spaces: int) -> str:
    pad = " " * spaces
    return "".join(f"{pad}{line}" if line.strip() else line for line in text.splitlines(True))


def classify_model(
    model: Mapping[str, Any], regions: Sequence[str] = SUPPORTED_REGIONS
) -> tuple[str, str]:
    """Return ``(provider_label, region)`` for a ``model_list`` item.

    Bedrock entries are grouped by the region tag of their identifier, one of
    ``regions``; everything else is "global".
    """
    path = model.get("litellm_params", {}).get("model")
    if not isinstance(path, str) or "/" not in path:
        return "other", GLOBAL_REGION

    prefix, _, model_id = path.partition("/")
    label = PROVIDER_LABELS.get(prefix, prefix)
    region = GLOBAL_REGION
    if prefix == "bedrock":
        region = next(
            (tag for tag in regions if model_id.startswith(f"{tag}.")),
            GLOBAL_REGION,
        )
    return label, region


class YamlGenerator:
    """Render a config dict as readable, grouped YAML with comments."""

    def __init__(self, config: Mapping[str, Any], regions: Sequence[str] = SUPPORTED_REGIONS):
        self._config = config
        self._regions = tuple(regions)

    def generate(self) -> str:
        """Generate the document text."""
        parts: List[str] = []

        for section in SETTINGS_SECTIONS:
            value = self._config.get(section)
            if value:
                parts.append(dump_yaml({section: value}))

        models = self._config.get("model_list") or []
        if models:
            parts.append(self._format_model_list(models))

        include = self._config.get("include") or []
        if include:
            parts.append(dump_yaml({"include": list(include)}))

        return "\n".join(parts)

    def write_to_file(self, file_path: Union[str, Path]) -> Path:
        """Write the generated document to ``file_path``."""
        path = Path(file_path)
        path.write_text(self.generate(), encoding="utf-8")
        logger.info("Enhanced readable config written to %s", path)
        return path

    def _format_model_list(self, models: List[Mapping[str, Any]]) -> str:
        groups: Dict[str, Dict[str, List[Mapping[str, Any]]]] = {}
        for model in models:
            provider, region = classify_model(model, self._regions)
            groups.setdefault(provider, {}).setdefault(region, []).append(model)

        lines = ["model_list:"]
        for provider, regions in groups.items():
            lines.append("")
            lines.append(f"  # ========== {provider.upper()} MODELS ==========")

            ordered = sorted(regions.items(), key=lambda item: item[0] != GLOBAL_REGION)
            for region, region_models in ordered:
                if region != GLOBAL_REGION:
                    lines.append("")
                    lines.append(f"  # ----- Region: {region.upper()} -----")
                for model in region_models:
                    lines.extend(self._format_model(model))
        return "\n".join(lines) + "\n"

    def _format_model(self, model: Mapping[str, Any]) -> List[str]:
        lines = []
        thinking = model.get("litellm_params", {}).get("thinking")
        if isinstance(thinking, Mapping) and "budget_tokens" in thinking:
            lines.append(f"  # thinking enabled with {thinking['budget_tokens']} token budget")
        lines.append(_indent(dump_yaml([dict(model)]), 2).rstrip("\n"))
        return lines


__all__ = ["YamlGenerator", "classify_model", "dump_yaml"]
