"""Verb records and their one-time classification into built-in kinds."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict


class VerbKind(str, Enum):
    """What executing a verb does, decided when the verb is built."""

    BACK = "back"
    FOCUS = "focus"
    TOGGLE_HIDDEN = "toggle_hidden"
    OPEN = "open"
    PARENT = "parent"
    QUIT = "quit"
    TEMPLATE = "template"


BUILTIN_PATTERNS: Dict[str, VerbKind] = {
    ":back": VerbKind.BACK,
    ":focus": VerbKind.FOCUS,
    ":toggle_hidden": VerbKind.TOGGLE_HIDDEN,
    ":open": VerbKind.OPEN,
    ":parent": VerbKind.PARENT,
    ":quit": VerbKind.QUIT,
}


def classify(exec_pattern: str) -> VerbKind:
    """Exact match against the built-in patterns; anything else is a template."""
    return BUILTIN_PATTERNS.get(exec_pattern, VerbKind.TEMPLATE)


@dataclass(frozen=True)
class VerbRecord:
    """Raw verb triple as produced by a configuration source."""

    invocation: str
    name: str
    execution: str


@dataclass(frozen=True)
class Verb:
    """Immutable, user-invocable action bound to an execution pattern."""

    name: str
    exec_pattern: str
    kind: VerbKind = field(init=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", classify(self.exec_pattern))

    @classmethod
    def from_record(cls, record: VerbRecord) -> "Verb":
        return cls(name=record.name, exec_pattern=record.execution)

    @property
    def is_builtin(self) -> bool:
        return self.kind is not VerbKind.TEMPLATE
