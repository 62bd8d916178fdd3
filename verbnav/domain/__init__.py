"""Value types shared by the verb registry, executor and navigator."""

from .commands import AppCommandResult, Launch, NewOptions, NewRoot, PopState, Quit
from .tree import AppState, Tree, TreeLine, TreeOptions
from .verbs import BUILTIN_PATTERNS, Verb, VerbKind, VerbRecord

__all__ = [
    "AppCommandResult",
    "AppState",
    "BUILTIN_PATTERNS",
    "Launch",
    "NewOptions",
    "NewRoot",
    "PopState",
    "Quit",
    "Tree",
    "TreeLine",
    "TreeOptions",
    "Verb",
    "VerbKind",
    "VerbRecord",
]
