"""Navigation driver applying verb outcomes to a stack of tree frames."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from ..domain.commands import AppCommandResult, Launch, NewOptions, NewRoot, PopState, Quit
from ..domain.tree import AppState, Tree, TreeLine, TreeOptions
from ..errors import NoSelectionError, VerbExecutionError
from ..logging import log_event, log_warning
from ..services.error_mapper import ErrorMapping, map_exception
from ..services.executor import execute
from ..services.launcher import Launchable, LauncherService
from ..services.verb_store import VerbRegistry

LaunchRunner = Callable[[Launchable], object]


def _run_launchable(request: Launchable) -> object:
    return request.execute()


class NavigationStack:
    """Owns the navigation frames and routes key presses to verbs."""

    def __init__(
        self,
        registry: VerbRegistry,
        root: Path,
        *,
        options: Optional[TreeOptions] = None,
        launcher: LauncherService = Launchable,
        runner: Optional[LaunchRunner] = None,
    ) -> None:
        self.registry = registry
        self.launcher = launcher
        self.runner: LaunchRunner = runner or _run_launchable
        self.frames: List[AppState] = [
            AppState(tree=Tree.rooted_at(Path(root)), options=options or TreeOptions())
        ]
        self.finished = False
        self.last_error: Optional[ErrorMapping] = None

    @property
    def current(self) -> AppState:
        return self.frames[-1]

    @property
    def root(self) -> Path:
        root = self.current.tree.root
        if root is None:
            raise NoSelectionError("The current frame has no root")
        return root

    def _replace_current(self, state: AppState) -> None:
        self.frames[-1] = state

    def _frame_for(self, path: Path) -> AppState:
        """Frame rooted at ``path``, or at its directory with the file selected."""
        if path.is_file():
            tree = Tree(
                lines=(
                    TreeLine(path=path.parent, is_dir=True),
                    TreeLine(path=path, depth=1),
                ),
                selection=1,
            )
        else:
            tree = Tree.rooted_at(path)
        return AppState(tree=tree, options=self.current.options)

    def select(self, path: Path) -> None:
        """Move the selection of the full tree to ``path``."""
        path = Path(path)
        root_line = self.current.tree.lines[0]
        if path == root_line.path:
            tree = Tree(lines=(root_line,), selection=0)
        else:
            try:
                depth = len(path.relative_to(root_line.path).parts)
            except ValueError:
                depth = 1
            tree = Tree(lines=(root_line, TreeLine(path=path, depth=depth)), selection=1)
        self._replace_current(replace(self.current, tree=tree))

    def set_filter(self, paths: Sequence[Path], selection: int = 0) -> None:
        """Install a filtered view whose selection takes precedence."""
        filtered = Tree(lines=tuple(TreeLine(path=Path(p)) for p in paths), selection=selection)
        self._replace_current(replace(self.current, filtered_tree=filtered))

    def clear_filter(self) -> None:
        self._replace_current(replace(self.current, filtered_tree=None))

    def apply(self, result: AppCommandResult) -> None:
        """Apply a verb outcome to the navigation state."""
        if isinstance(result, PopState):
            if len(self.frames) > 1:
                self.frames.pop()
            else:
                self.finished = True
        elif isinstance(result, NewRoot):
            self.frames.append(self._frame_for(Path(result.path)))
        elif isinstance(result, NewOptions):
            self._replace_current(replace(self.current, options=result.options))
        elif isinstance(result, Launch):
            self.runner(result.request)
        elif isinstance(result, Quit):
            self.finished = True
        else:
            raise TypeError(f"Unknown command result: {result!r}")
        log_event("command_applied", result=type(result).__name__, depth=len(self.frames))

    def handle_key(self, key: str) -> Optional[AppCommandResult]:
        """Run the verb bound to ``key``; unbound keys are ignored.

        Recoverable failures are recorded in ``last_error`` and leave the
        navigation state unchanged.
        """
        verb = self.registry.lookup(key)
        if verb is None:
            return None
        self.last_error = None
        try:
            result = execute(verb, self.current, launcher=self.launcher)
            self.apply(result)
        except (VerbExecutionError, OSError) as exc:
            self.last_error = map_exception(exc)
            log_warning(
                "verb_failed",
                key=key,
                verb=verb.name,
                code=self.last_error.code,
                error=str(exc),
            )
            return None
        return result
