"""Append-only registry of emitted routing entries.

The registry is the only state shared between model intents. Entries are
appended in expansion order and read back once, in insertion order, by the
renderer; nothing is removed or looked up by name, and duplicate display names
are allowed (the gateway load balances across same-named entries).
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Sequence

from litellm_config.models.schemas import ConcreteEntry

logger = logging.getLogger(__name__)


class EntryRegistry:
    """Ordered write sink for :class:`ConcreteEntry` records."""

    def __init__(self) -> None:
        self._entries: List[ConcreteEntry] = []

    def append(self, entry: ConcreteEntry) -> None:
        """Append one entry. No uniqueness check is made."""
        if not isinstance(entry, ConcreteEntry):
            raise TypeError(f"Expected ConcreteEntry, got {type(entry).__name__}")
        self._entries.append(entry)

    def extend(self, entries: Iterable[ConcreteEntry]) -> None:
        """Append a batch of entries, all or nothing."""
        batch = list(entries)
        for entry in batch:
            if not isinstance(entry, ConcreteEntry):
                raise TypeError(f"Expected ConcreteEntry, got {type(entry).__name__}")
        self._entries.extend(batch)
        logger.debug("Registered %d entries (total %d)", len(batch), len(self._entries))

    def all_entries(self) -> Sequence[ConcreteEntry]:
        """Return every entry in insertion order (read-only snapshot)."""
        return tuple(self._entries)

    def __iter__(self) -> Iterator[ConcreteEntry]:
        return iter(tuple(self._entries))

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["EntryRegistry"]
