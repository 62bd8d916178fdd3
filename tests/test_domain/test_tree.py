"""Tests for the read-only navigation view."""

from pathlib import Path

import pytest

from verbnav.domain.tree import AppState, Tree, TreeLine, TreeOptions
from verbnav.errors import NoSelectionError


def test_filtered_selection_takes_precedence():
    tree = Tree(lines=(TreeLine(Path("/a")), TreeLine(Path("/a/b"))), selection=1)
    filtered = Tree(lines=(TreeLine(Path("/a/c")),), selection=0)

    state = AppState(tree=tree, filtered_tree=filtered)

    assert state.selected_path == Path("/a/c")


def test_unfiltered_selection_is_used_without_filter():
    tree = Tree(lines=(TreeLine(Path("/a")), TreeLine(Path("/a/b"))), selection=1)

    assert AppState(tree=tree).selected_path == Path("/a/b")


def test_empty_tree_has_no_selection():
    with pytest.raises(NoSelectionError):
        AppState(tree=Tree()).selected_path


def test_toggle_hidden_is_an_involution():
    options = TreeOptions(show_hidden=False)

    toggled = options.with_hidden_toggled()

    assert toggled.show_hidden is True
    assert toggled.with_hidden_toggled() == options
    assert options.show_hidden is False
