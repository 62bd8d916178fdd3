"""Outcomes of executing a verb, applied by the navigation driver."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Union

from .tree import TreeOptions

if TYPE_CHECKING:
    from ..services.launcher import Launchable


@dataclass(frozen=True)
class PopState:
    """Discard the current navigation frame."""


@dataclass(frozen=True)
class NewRoot:
    """Replace the navigation root."""

    path: Path


@dataclass(frozen=True)
class NewOptions:
    """Replace the active display options."""

    options: TreeOptions


@dataclass(frozen=True)
class Launch:
    """Hand a resolved request to the external launcher."""

    request: "Launchable"


@dataclass(frozen=True)
class Quit:
    """Terminate the interactive session."""


AppCommandResult = Union[PopState, NewRoot, NewOptions, Launch, Quit]
