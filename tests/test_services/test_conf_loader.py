"""Tests for loading verbs from TOML configuration."""

from pathlib import Path

import pytest

from verbnav.domain.verbs import VerbKind, VerbRecord
from verbnav.errors import ConfigError
from verbnav.services.conf_loader import (
    DEFAULT_VERBS,
    build_registry,
    parse_verbs,
    read_verbs_file,
)


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "conf.toml"
    path.write_text(text, encoding="utf-8")
    return path


def test_reads_verb_tables_in_order(tmp_path: Path):
    path = _write(
        tmp_path,
        """
[[verbs]]
invocation = "e"
name = "edit"
execution = "nvim {file}"

[[verbs]]
invocation = "p"
execution = ":parent"
""",
    )

    records = read_verbs_file(path)

    assert records == [
        VerbRecord(invocation="e", name="edit", execution="nvim {file}"),
        VerbRecord(invocation="p", name="p", execution=":parent"),
    ]


def test_missing_file_yields_no_records(tmp_path: Path):
    assert read_verbs_file(tmp_path / "absent.toml") == []


def test_invalid_toml_raises_config_error(tmp_path: Path):
    path = _write(tmp_path, "[[verbs]\ninvocation = ")

    with pytest.raises(ConfigError, match="invalid TOML"):
        read_verbs_file(path)


def test_entry_without_execution_names_its_index():
    payload = {"verbs": [{"invocation": "a", "execution": ":back"}, {"invocation": "b"}]}

    with pytest.raises(ConfigError, match="verb #1"):
        parse_verbs(payload, source="conf.toml")


def test_verbs_must_be_an_array():
    with pytest.raises(ConfigError, match="array"):
        parse_verbs({"verbs": "nope"})


def test_unknown_keys_are_ignored():
    records = parse_verbs(
        {"verbs": [{"invocation": "q", "execution": ":quit", "shortcut": "Q"}]}
    )

    assert records == [VerbRecord(invocation="q", name="q", execution=":quit")]


def test_user_file_overrides_defaults(tmp_path: Path):
    path = _write(
        tmp_path,
        """
[[verbs]]
invocation = "e"
name = "edit"
execution = "vim {file}"
""",
    )

    registry = build_registry(path, use_defaults=True)

    assert len(registry) == len(DEFAULT_VERBS)
    assert registry.lookup("e").exec_pattern == "vim {file}"
    assert registry.lookup("o").kind is VerbKind.OPEN


def test_without_defaults_only_user_verbs_are_loaded(tmp_path: Path):
    path = _write(
        tmp_path,
        """
[[verbs]]
invocation = "x"
execution = "make {file}"
""",
    )

    registry = build_registry(path, use_defaults=False)

    assert list(registry) == ["x"]
