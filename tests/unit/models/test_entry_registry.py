"""Tests for the append-only entry registry."""

import pytest

from litellm_config.models.registry import EntryRegistry
from litellm_config.models.schemas import ConcreteEntry


def _entry(name, path="gemini/gemini-2.0-flash"):
    return ConcreteEntry(display_name=name, model_path=path)


def test_entries_keep_insertion_order():
    registry = EntryRegistry()
    registry.append(_entry("a"))
    registry.extend([_entry("b"), _entry("c")])

    assert [entry.display_name for entry in registry.all_entries()] == ["a", "b", "c"]
    assert [entry.display_name for entry in registry] == ["a", "b", "c"]
    assert len(registry) == 3


def test_duplicate_display_names_are_allowed():
    registry = EntryRegistry()
    registry.extend([_entry("same"), _entry("same", "gemini/gemini-2.5-pro")])
    assert len(registry) == 2


def test_snapshot_is_not_affected_by_later_appends():
    registry = EntryRegistry()
    registry.append(_entry("a"))
    snapshot = registry.all_entries()
    registry.append(_entry("b"))

    assert len(snapshot) == 1
    assert isinstance(snapshot, tuple)


def test_append_rejects_non_entries():
    registry = EntryRegistry()
    with pytest.raises(TypeError):
        registry.append({"model_name": "a"})  # type: ignore[arg-type]


def test_extend_is_all_or_nothing():
    registry = EntryRegistry()
    with pytest.raises(TypeError):
        registry.extend([_entry("a"), "not an entry"])  # type: ignore[list-item]
    assert len(registry) == 0
