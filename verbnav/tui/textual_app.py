"""Textual-based navigator dispatching key presses to verbs."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

from rich.markup import escape
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.events import Key
from textual.screen import Screen
from textual.widgets import DirectoryTree, Footer, Header, Label, Static, Tree

from ..config import settings
from ..domain.commands import AppCommandResult, NewOptions
from ..domain.tree import TreeOptions
from ..services.launcher import Launchable
from ..services.verb_store import VerbRegistry
from .navigation import NavigationStack


class VerbDirectoryTree(DirectoryTree):
    """Directory tree honouring the navigator's hidden-file option."""

    show_hidden: bool = False

    def filter_paths(self, paths: Iterable[Path]) -> Iterable[Path]:
        if self.show_hidden:
            return paths
        return [path for path in paths if not path.name.startswith(".")]


class VerbHelpScreen(Screen):
    """Lists the configured verbs, Esc to close."""

    def __init__(self, registry: VerbRegistry) -> None:
        super().__init__()
        self._registry = registry

    def compose(self) -> ComposeResult:
        lines = [
            f"{key:>6}  {verb.name:<16} {verb.exec_pattern}"
            for key, verb in self._registry.items()
        ]
        lines += ["", "Press Esc to close."]
        with Container(id="screen-body"):
            yield Label("Verbs", id="screen-title")
            yield Static(escape("\n".join(lines)), id="screen-help")

    def on_key(self, event: Key) -> None:
        if event.key == "escape":
            self.dismiss()


class VerbnavTextualApp(App[None]):
    """Interactive tree navigator whose keys are bound to verbs."""

    CSS = """
    #screen-body {
        padding: 1 2;
    }

    #screen-title {
        text-style: bold;
        color: cyan;
        margin-bottom: 1;
    }

    #screen-help {
        color: $text-muted;
    }

    #status {
        height: 1;
        color: $text-muted;
    }
    """

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("question_mark", "show_verbs", "Verbs"),
    ]

    def __init__(
        self,
        registry: VerbRegistry,
        root: Path,
        *,
        options: Optional[TreeOptions] = None,
    ) -> None:
        super().__init__()
        self.registry = registry
        self.navigator = NavigationStack(
            registry,
            Path(root).resolve(),
            options=options or TreeOptions(show_hidden=settings.tree.show_hidden),
            launcher=Launchable,
            runner=self._run_suspended,
        )

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        tree = VerbDirectoryTree(str(self.navigator.root), id="tree")
        tree.show_hidden = self.navigator.current.options.show_hidden
        yield tree
        yield Static("", id="status")
        yield Footer()

    def _run_suspended(self, request: Launchable) -> object:
        with self.suspend():
            return request.execute()

    def on_tree_node_highlighted(self, event: Tree.NodeHighlighted) -> None:
        entry = event.node.data
        if entry is not None:
            self.navigator.select(entry.path)

    def on_key(self, event: Key) -> None:
        if isinstance(self.screen, VerbHelpScreen):
            return
        key = event.character if event.is_printable and event.character else event.key
        if key not in self.registry:
            return
        event.stop()
        result = self.navigator.handle_key(key)
        self._sync(result)

    def _sync(self, result: Optional[AppCommandResult]) -> None:
        status = self.query_one("#status", Static)
        if self.navigator.last_error is not None:
            mapped = self.navigator.last_error
            status.update(f"[red]{escape(mapped.message)}[/red] {escape(mapped.hint)}")
            self.notify(escape(mapped.message), severity="error")
            return
        if self.navigator.finished:
            self.exit()
            return
        if result is None:
            return
        tree = self.query_one("#tree", VerbDirectoryTree)
        if isinstance(result, NewOptions):
            tree.show_hidden = result.options.show_hidden
            tree.reload()
        elif Path(str(tree.path)) != self.navigator.root:
            tree.path = self.navigator.root
        status.update(escape(f"{type(result).__name__}: {self.navigator.root}"))

    def action_show_verbs(self) -> None:
        self.push_screen(VerbHelpScreen(self.registry))
