"""Turn a verb and the current navigation state into an application command."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict

from ..domain.commands import AppCommandResult, Launch, NewOptions, NewRoot, PopState, Quit
from ..domain.tree import AppState
from ..domain.verbs import Verb, VerbKind
from ..errors import NoParentError
from ..logging import log_event
from .launcher import Launchable, LauncherService
from .substitution import substitute


def _parent_of(path: Path) -> Path:
    parent = path.parent
    if parent == path:
        raise NoParentError(path)
    return parent


def execute(
    verb: Verb,
    state: AppState,
    launcher: LauncherService = Launchable,
) -> AppCommandResult:
    """Decide what the application does next for ``verb``.

    Never mutates ``state``. Launcher failures propagate as ``OSError``;
    ``:parent`` on a root path raises :class:`NoParentError`.
    """
    path = state.selected_path

    handlers: Dict[VerbKind, Callable[[], AppCommandResult]] = {
        VerbKind.BACK: PopState,
        VerbKind.FOCUS: lambda: NewRoot(path),
        VerbKind.TOGGLE_HIDDEN: lambda: NewOptions(state.options.with_hidden_toggled()),
        VerbKind.OPEN: lambda: Launch(launcher.opener(path)),
        VerbKind.PARENT: lambda: NewRoot(_parent_of(path)),
        VerbKind.QUIT: Quit,
    }
    handler = handlers.get(verb.kind)
    if handler is not None:
        result = handler()
    else:
        command = substitute(verb.exec_pattern, path)
        log_event("verb_template_expanded", verb=verb.name, command=command)
        result = Launch(launcher.from_command(command))

    log_event(
        "verb_executed",
        verb=verb.name,
        kind=verb.kind.value,
        result=type(result).__name__,
    )
    return result
