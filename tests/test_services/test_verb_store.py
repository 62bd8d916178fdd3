"""Tests for the invocation key registry."""

from verbnav.domain.verbs import Verb, VerbRecord
from verbnav.services.verb_store import VerbRegistry


def test_empty_registry_finds_nothing():
    registry = VerbRegistry()

    assert registry.lookup("o") is None
    assert registry.lookup("") is None
    assert len(registry) == 0


def test_second_insert_with_same_key_wins():
    registry = VerbRegistry()
    registry.insert_from_config(
        [
            VerbRecord(invocation="e", name="edit", execution="vi {file}"),
            VerbRecord(invocation="e", name="emacs", execution="emacs {file}"),
        ]
    )

    verb = registry.lookup("e")

    assert len(registry) == 1
    assert verb.name == "emacs"
    assert verb.exec_pattern == "emacs {file}"


def test_lookup_is_exact_match_only():
    registry = VerbRegistry()
    registry.insert("open", Verb(name="open", exec_pattern=":open"))

    assert registry.lookup("op") is None
    assert registry.lookup("open ") is None
    assert registry.lookup("open").exec_pattern == ":open"
    assert "open" in registry


def test_patterns_are_not_validated_at_load_time():
    registry = VerbRegistry()

    count = registry.insert_from_config(
        [VerbRecord(invocation="x", name="broken", execution="{nope} {")]
    )

    assert count == 1
    assert registry.lookup("x").exec_pattern == "{nope} {"


def test_items_are_sorted_by_key():
    registry = VerbRegistry()
    registry.insert("q", Verb(name="quit", exec_pattern=":quit"))
    registry.insert("b", Verb(name="back", exec_pattern=":back"))

    assert [key for key, _ in registry.items()] == ["b", "q"]
