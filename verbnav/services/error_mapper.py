"""Centralized exception mapping for consistent user-facing errors."""

from dataclasses import dataclass
from typing import Any

from ..errors import ConfigError, LaunchError, NoParentError, NoSelectionError


@dataclass(frozen=True)
class ErrorMapping:
    """Normalized user-facing error payload shown by the navigator."""

    code: str
    message: str
    hint: str = ""
    fatal: bool = False


def map_exception(error: Any) -> ErrorMapping:
    """Map raised exceptions into stable user-facing error semantics."""
    raw_message = str(error).strip() if error is not None else ""

    if isinstance(error, NoParentError):
        return ErrorMapping(
            code="no_parent",
            message="Already at the filesystem root.",
            hint="Use back or focus to navigate elsewhere.",
        )

    if isinstance(error, NoSelectionError):
        return ErrorMapping(
            code="no_selection",
            message="Nothing is selected.",
        )

    if isinstance(error, ConfigError):
        return ErrorMapping(
            code="config_error",
            message=raw_message or "Invalid verbs configuration",
            hint="Fix the verbs file and restart.",
            fatal=True,
        )

    if isinstance(error, LaunchError):
        return ErrorMapping(
            code="launch_error",
            message=raw_message or "Launch failed",
            hint="Check the verb's execution pattern.",
        )

    if isinstance(error, FileNotFoundError):
        return ErrorMapping(
            code="command_not_found",
            message=f"Command not found: {error.filename or raw_message}",
            hint="Check that the program is installed and on PATH.",
        )

    if isinstance(error, PermissionError):
        return ErrorMapping(
            code="permission_denied",
            message=f"Permission denied: {error.filename or raw_message}",
        )

    if isinstance(error, OSError):
        return ErrorMapping(
            code="os_error",
            message=raw_message or "Operating system error",
        )

    return ErrorMapping(
        code="internal_error",
        message=raw_message or "Unexpected error",
        fatal=True,
    )
