"""Load verb definitions from a TOML configuration file.

The file holds ``[[verbs]]`` tables::

    [[verbs]]
    invocation = "e"
    name = "edit"
    execution = "nvim {file}"

Execution patterns are stored as written; templates are only expanded when
the verb runs.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from ..config.settings import settings
from ..domain.verbs import VerbRecord
from ..errors import ConfigError
from ..logging import log_event
from .verb_store import VerbRegistry

DEFAULT_VERBS: Tuple[VerbRecord, ...] = (
    VerbRecord(invocation="b", name="back", execution=":back"),
    VerbRecord(invocation="f", name="focus", execution=":focus"),
    VerbRecord(invocation="h", name="toggle hidden", execution=":toggle_hidden"),
    VerbRecord(invocation="o", name="open", execution=":open"),
    VerbRecord(invocation="p", name="parent", execution=":parent"),
    VerbRecord(invocation="q", name="quit", execution=":quit"),
    VerbRecord(invocation="e", name="edit", execution="nvim {file}"),
)


class VerbEntry(BaseModel):
    """Validated ``[[verbs]]`` table."""

    model_config = ConfigDict(extra="ignore")

    invocation: str = Field(min_length=1)
    name: str = ""
    execution: str = Field(min_length=1)

    @model_validator(mode="after")
    def default_name_to_invocation(self) -> "VerbEntry":
        if not self.name:
            self.name = self.invocation
        return self

    def to_record(self) -> VerbRecord:
        return VerbRecord(
            invocation=self.invocation, name=self.name, execution=self.execution
        )


def parse_verbs(payload: Any, *, source: str = "<config>") -> List[VerbRecord]:
    """Validate the ``verbs`` array of a parsed configuration document."""
    if not isinstance(payload, dict):
        raise ConfigError(f"{source}: configuration root must be a table")
    raw_verbs = payload.get("verbs", [])
    if not isinstance(raw_verbs, list):
        raise ConfigError(f"{source}: 'verbs' must be an array of tables")

    records: List[VerbRecord] = []
    for index, raw in enumerate(raw_verbs):
        if not isinstance(raw, dict):
            raise ConfigError(f"{source}: verb #{index} must be a table")
        try:
            records.append(VerbEntry.model_validate(raw).to_record())
        except ValidationError as exc:
            raise ConfigError(f"{source}: invalid verb #{index}: {exc}") from exc
    return records


def read_verbs_file(path: Path) -> List[VerbRecord]:
    """Parse a verbs file. A missing file yields no records."""
    try:
        with path.open("rb") as handle:
            payload = tomllib.load(handle)
    except FileNotFoundError:
        log_event("verbs_file_missing", path=str(path))
        return []
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"{path}: invalid TOML: {exc}") from exc
    return parse_verbs(payload, source=str(path))


def build_registry(
    config_path: Optional[Path] = None,
    *,
    use_defaults: Optional[bool] = None,
) -> VerbRegistry:
    """Build the process verb registry from defaults and the user file."""
    path = config_path if config_path is not None else settings.verbs.resolved_path
    if use_defaults is None:
        use_defaults = settings.verbs.use_defaults

    registry = VerbRegistry()
    if use_defaults:
        registry.insert_from_config(DEFAULT_VERBS)
    registry.insert_from_config(read_verbs_file(path))
    return registry
