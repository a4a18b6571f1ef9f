"""Model identity catalog and cross-region identifier resolution.

The catalog knows which provider identifiers exist and which of them are
region-tagged variants (``eu.`` / ``us.``) of a common bare identifier. A bare
identifier with a tagged variant in every supported region is eligible for
cross-region inference (CRIS) and can be load balanced across regions.

Region families are derived once, when the catalog is constructed, and never
change afterwards; extending a catalog returns a new instance.

Examples:
    >>> from litellm_config.models.catalog import BEDROCK_CATALOG
    >>> BEDROCK_CATALOG.parse_identifier("eu.amazon.nova-pro-v1:0")
    ParsedIdentifier(bare_id='amazon.nova-pro-v1:0', region_tag='eu')
    >>> BEDROCK_CATALOG.is_cross_region_eligible("amazon.nova-pro-v1:0")
    True
    >>> BEDROCK_CATALOG.resolve_for_region("amazon.nova-pro-v1:0", "us")
    'us.amazon.nova-pro-v1:0'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional, Sequence

from litellm_config.models.catalog.bedrock import BEDROCK_MODEL_IDS
from litellm_config.models.catalog.openrouter import OPENROUTER_MODEL_IDS

logger = logging.getLogger(__name__)

SUPPORTED_REGIONS: tuple[str, ...] = ("eu", "us")


@dataclass(frozen=True)
class ParsedIdentifier:
    """An identifier split into its bare form and optional region tag."""

    bare_id: str
    region_tag: Optional[str] = None

    @property
    def is_tagged(self) -> bool:
        return self.region_tag is not None


class ModelIdentityCatalog:
    """Immutable lookup over a provider's known model identifiers.

    Attributes:
        regions: Supported region tags, in preference order.
    """

    def __init__(self, identifiers: Iterable[str], regions: Sequence[str] = SUPPORTED_REGIONS):
        if not regions:
            raise ValueError("A catalog needs at least one supported region")
        self._regions: tuple[str, ...] = tuple(regions)
        self._identifiers: tuple[str, ...] = tuple(dict.fromkeys(identifiers))
        self._known = frozenset(self._identifiers)

        families: Dict[str, Dict[str, str]] = {}
        for identifier in self._identifiers:
            parsed = self.parse_identifier(identifier)
            if parsed.region_tag is None:
                continue
            families.setdefault(parsed.bare_id, {})[parsed.region_tag] = identifier

        self._families: Mapping[str, Mapping[str, str]] = MappingProxyType(
            {bare: MappingProxyType(members) for bare, members in families.items()}
        )
        logger.debug(
            "Catalog built with %d identifiers and %d region families",
            len(self._identifiers),
            len(self._families),
        )

    @property
    def regions(self) -> tuple[str, ...]:
        return self._regions

    @property
    def identifiers(self) -> tuple[str, ...]:
        return self._identifiers

    @property
    def families(self) -> Mapping[str, Mapping[str, str]]:
        """Bare identifier -> (region tag -> tagged identifier)."""
        return self._families

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._known

    def __iter__(self) -> Iterator[str]:
        return iter(self._identifiers)

    def __len__(self) -> int:
        return len(self._identifiers)

    def family(self, identifier: str) -> Mapping[str, str]:
        """Return the region family of ``identifier`` (empty when it has none)."""
        bare = self.parse_identifier(identifier).bare_id
        return self._families.get(bare, MappingProxyType({}))

    def parse_identifier(self, identifier: str) -> ParsedIdentifier:
        """Split ``identifier`` into bare form and region tag."""
        for region in self._regions:
            prefix = f"{region}."
            if identifier.startswith(prefix):
                return ParsedIdentifier(bare_id=identifier[len(prefix):], region_tag=region)
        return ParsedIdentifier(bare_id=identifier)

    def is_cross_region_eligible(self, identifier: str) -> bool:
        """True when the bare form has a tagged variant in every supported region."""
        members = self.family(identifier)
        return all(region in members for region in self._regions)

    def resolve_for_region(self, identifier: str, region: str) -> Optional[str]:
        """Compute the identifier to use in ``region``.

        Resolution order:
            1. ``identifier`` already tagged for ``region``: returned unchanged.
            2. Bare form is cross-region eligible: the family's ``region`` variant.
            3. Tagged for another region: the re-tagged id, if the catalog knows it.
            4. Otherwise None; callers use ``identifier`` verbatim.
        """
        if identifier.startswith(f"{region}."):
            return identifier

        parsed = self.parse_identifier(identifier)
        if self.is_cross_region_eligible(parsed.bare_id):
            return self._families[parsed.bare_id].get(region)

        if parsed.is_tagged:
            candidate = f"{region}.{parsed.bare_id}"
            if candidate in self._known:
                return candidate

        return None

    def with_identifiers(self, extra: Iterable[str]) -> "ModelIdentityCatalog":
        """Return a new catalog that also knows ``extra``."""
        return ModelIdentityCatalog((*self._identifiers, *extra), regions=self._regions)


BEDROCK_CATALOG = ModelIdentityCatalog(BEDROCK_MODEL_IDS)


def parse_identifier(identifier: str) -> ParsedIdentifier:
    """Split a Bedrock identifier using the bundled catalog."""
    return BEDROCK_CATALOG.parse_identifier(identifier)


def is_cross_region_eligible(identifier: str) -> bool:
    """Check CRIS eligibility against the bundled Bedrock catalog."""
    return BEDROCK_CATALOG.is_cross_region_eligible(identifier)


def resolve_for_region(identifier: str, region: str) -> Optional[str]:
    """Resolve a Bedrock identifier for ``region`` using the bundled catalog."""
    return BEDROCK_CATALOG.resolve_for_region(identifier, region)


__all__ = [
    "BEDROCK_CATALOG",
    "BEDROCK_MODEL_IDS",
    "OPENROUTER_MODEL_IDS",
    "SUPPORTED_REGIONS",
    "ModelIdentityCatalog",
    "ParsedIdentifier",
    "is_cross_region_eligible",
    "parse_identifier",
    "resolve_for_region",
]
