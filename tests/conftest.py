"""
Pytest configuration and fixtures for verbnav tests.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List

import pytest

from verbnav import logging as event_logging
from verbnav.config import settings
from verbnav.domain.tree import AppState, Tree, TreeLine, TreeOptions
from verbnav.services.launcher import CommandLaunch, OpenerLaunch


@dataclass
class FakeLauncher:
    """Records launcher calls instead of touching the OS."""

    calls: List[tuple] = field(default_factory=list)

    def opener(self, path: Path) -> OpenerLaunch:
        self.calls.append(("opener", path))
        return OpenerLaunch(path=Path(path), program="xdg-open")

    def from_command(self, line: str) -> CommandLaunch:
        self.calls.append(("from_command", line))
        parts = line.split()
        return CommandLaunch(executable=parts[0], args=tuple(parts[1:]))


def state_for(path, *, show_hidden: bool = False) -> AppState:
    """Build a frame rooted at the parent of ``path`` with ``path`` selected."""
    selected = Path(path)
    tree = Tree(
        lines=(
            TreeLine(path=selected.parent, is_dir=True),
            TreeLine(path=selected, depth=1),
        ),
        selection=1,
    )
    return AppState(tree=tree, options=TreeOptions(show_hidden=show_hidden))


@pytest.fixture
def fake_launcher():
    return FakeLauncher()


@pytest.fixture
def make_state():
    return state_for


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path):
    """Set up test environment variables and a per-test event log."""
    log_path = tmp_path / "logs" / "events.log"
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("LOG_FILE_PATH", str(log_path))
    monkeypatch.setattr(settings.logging, "file_path", str(log_path))
    event_logging.configure_logging()
    return log_path


@pytest.fixture
def event_log_path(setup_test_environment):
    return setup_test_environment
