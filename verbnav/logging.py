"""Structured event logging.

Events are JSON lines in a rotating file. Nothing is configured at import:
the first event (or an explicit :func:`configure_logging`) opens the file at
``LOG_FILE_PATH``, or under the user's state directory when it is unset.
"""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Optional, Union

import structlog

from .config.settings import settings

LOG_FILE_NAME = "events.log"
MAX_LOG_BYTES = 5 * 1024 * 1024
BACKUP_LOG_FILES = 5
_LOGGER_NAME = "verbnav.events"

_structlog_ready = False
_handler: Optional[RotatingFileHandler] = None


def default_log_path() -> Path:
    """``$XDG_STATE_HOME/verbnav/events.log``, defaulting to ``~/.local/state``."""
    state_home = os.environ.get("XDG_STATE_HOME") or "~/.local/state"
    return Path(state_home).expanduser() / settings.app_name / LOG_FILE_NAME


def resolve_log_path() -> Path:
    configured_path = settings.logging.file_path
    if configured_path:
        return Path(configured_path).expanduser()
    return default_log_path()


def configure_logging(log_path: Optional[Union[str, Path]] = None) -> Path:
    """(Re)attach the rotating event file handler. Returns the log path."""
    global _handler, _structlog_ready

    path = Path(log_path).expanduser() if log_path else resolve_log_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(_LOGGER_NAME)
    if _handler is not None:
        logger.removeHandler(_handler)
        _handler.close()
    _handler = RotatingFileHandler(
        path,
        maxBytes=MAX_LOG_BYTES,
        backupCount=BACKUP_LOG_FILES,
        encoding="utf-8",
    )
    _handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(_handler)
    logger.setLevel(getattr(logging, settings.logging.level, logging.INFO))
    logger.propagate = False

    if not _structlog_ready:
        structlog.configure(
            processors=[
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.add_log_level,
                structlog.processors.JSONRenderer(),
            ],
            wrapper_class=structlog.stdlib.BoundLogger,
            logger_factory=structlog.stdlib.LoggerFactory(),
            cache_logger_on_first_use=True,
        )
        _structlog_ready = True
    return path


def _event_logger():
    if _handler is None:
        configure_logging()
    return structlog.get_logger(_LOGGER_NAME)


def log_event(event: str, **payload: Any) -> None:
    """Emit a structured event."""
    _event_logger().info(event, **payload)


def log_warning(event: str, **payload: Any) -> None:
    """Emit a structured warning event."""
    _event_logger().warning(event, **payload)
