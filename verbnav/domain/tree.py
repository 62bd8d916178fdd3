"""Read-only view of the navigator state consumed by verb execution."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Optional, Tuple

from ..errors import NoSelectionError


@dataclass(frozen=True)
class TreeOptions:
    """Display and filter options of a tree view."""

    show_hidden: bool = False

    def with_hidden_toggled(self) -> "TreeOptions":
        return replace(self, show_hidden=not self.show_hidden)


@dataclass(frozen=True)
class TreeLine:
    """One displayed row of the tree."""

    path: Path
    depth: int = 0
    is_dir: bool = False


@dataclass(frozen=True)
class Tree:
    """Displayed lines of a tree with the index of the selected one."""

    lines: Tuple[TreeLine, ...] = ()
    selection: int = 0

    @classmethod
    def rooted_at(cls, root: Path) -> "Tree":
        return cls(lines=(TreeLine(path=Path(root), is_dir=True),))

    @property
    def root(self) -> Optional[Path]:
        return self.lines[0].path if self.lines else None

    def selected_line(self) -> Optional[TreeLine]:
        if 0 <= self.selection < len(self.lines):
            return self.lines[self.selection]
        return None

    def select(self, index: int) -> "Tree":
        return replace(self, selection=index)


@dataclass(frozen=True)
class AppState:
    """One navigation frame: a tree, an optional filtered view and the options."""

    tree: Tree
    options: TreeOptions = field(default_factory=TreeOptions)
    filtered_tree: Optional[Tree] = None

    def selected_line(self) -> Optional[TreeLine]:
        if self.filtered_tree is not None:
            return self.filtered_tree.selected_line()
        return self.tree.selected_line()

    @property
    def selected_path(self) -> Path:
        """Selected path, preferring the filtered view over the full tree."""
        line = self.selected_line()
        if line is None:
            raise NoSelectionError("No entry is selected in the current tree")
        return line.path
