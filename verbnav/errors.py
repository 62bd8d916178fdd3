"""Exception hierarchy for verb loading and execution."""


class VerbnavError(Exception):
    """Base class for all verbnav errors."""


class ConfigError(VerbnavError):
    """Raised when the verbs configuration file cannot be loaded."""


class VerbExecutionError(VerbnavError):
    """Recoverable failure while executing a verb against the current state."""


class NoSelectionError(VerbExecutionError):
    """The navigation state has no selected entry."""


class NoParentError(VerbExecutionError):
    """`:parent` was invoked on a path without a parent directory."""

    def __init__(self, path) -> None:
        super().__init__(f"Path has no parent directory: {path}")
        self.path = path


class LaunchError(OSError):
    """The launcher could not build or start a request."""
