"""Launch requests handed to the operating system.

The executor only decides *what* to launch; these classes know how to turn
that decision into a running process.
"""

from __future__ import annotations

import os
import shutil
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol, Tuple

from ..errors import LaunchError


def _default_opener() -> Optional[str]:
    if sys.platform == "darwin":
        return shutil.which("open")
    return shutil.which("xdg-open")


class Launchable:
    """Base class for resolved launch requests."""

    def execute(self) -> int:
        raise NotImplementedError

    @staticmethod
    def opener(path: Path) -> "OpenerLaunch":
        """Build a request opening ``path`` with the OS default handler."""
        if sys.platform == "win32":
            return OpenerLaunch(path=Path(path), program=None)
        program = _default_opener()
        if program is None:
            raise LaunchError(f"No default opener available to open {path}")
        return OpenerLaunch(path=Path(path), program=program)

    @staticmethod
    def from_command(line: str) -> "CommandLaunch":
        """Build a request running a resolved command line."""
        parts = line.split()
        if not parts:
            raise LaunchError("empty launch string")
        return CommandLaunch(executable=parts[0], args=tuple(parts[1:]))


@dataclass(frozen=True)
class OpenerLaunch(Launchable):
    """Open a path with the OS default handler."""

    path: Path
    program: Optional[str] = None

    def execute(self) -> int:
        if self.program is None:
            os.startfile(str(self.path))  # type: ignore[attr-defined]
            return 0
        return subprocess.run([self.program, str(self.path)], check=False).returncode


@dataclass(frozen=True)
class CommandLaunch(Launchable):
    """Run an executable with already substituted arguments."""

    executable: str
    args: Tuple[str, ...] = ()

    @property
    def argv(self) -> Tuple[str, ...]:
        return (self.executable, *self.args)

    @property
    def command_line(self) -> str:
        return " ".join(self.argv)

    def execute(self) -> int:
        return subprocess.run(list(self.argv), check=False).returncode


class LauncherService(Protocol):
    """Launcher collaborator used by the verb executor."""

    def opener(self, path: Path) -> Launchable: ...

    def from_command(self, line: str) -> Launchable: ...
