"""
Spaces Admin Log Module

Logging helpers plus the user notification channel. Notifications are
logged and kept in a bounded in-memory buffer that a UI or the CLI drains.
"""

import logging
import sys
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Literal


# Module-level logger
_logger = logging.getLogger("spaces_admin")

MAX_NOTIFICATIONS = 100


def _configure_logger():
    """Configure the package logger with console output."""
    if not _logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(
            "%(asctime)s - [spaces-admin] %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))
        _logger.addHandler(handler)
        _logger.setLevel(logging.INFO)


# Configure on import
_configure_logger()


def _format_metadata(metadata: dict[str, Any] | None) -> str:
    """Format metadata for log output."""
    if not metadata:
        return ""
    parts = [f"{k}={v}" for k, v in metadata.items()]
    return f" [{', '.join(parts)}]"


def info(message: str, **metadata: Any):
    """
    Log info message.

    Args:
        message: Log message
        **metadata: Additional metadata as keyword arguments
    """
    _logger.info(f"{message}{_format_metadata(metadata)}")


def warning(message: str, **metadata: Any):
    """
    Log warning message.

    Args:
        message: Log message
        **metadata: Additional metadata as keyword arguments
    """
    _logger.warning(f"{message}{_format_metadata(metadata)}")


def error(message: str, **metadata: Any):
    """
    Log error message.

    Args:
        message: Log message
        **metadata: Additional metadata as keyword arguments
    """
    _logger.error(f"{message}{_format_metadata(metadata)}")


def debug(message: str, **metadata: Any):
    """
    Log debug message (only emitted at DEBUG level).

    Args:
        message: Log message
        **metadata: Additional metadata as keyword arguments
    """
    _logger.debug(f"{message}{_format_metadata(metadata)}")


def set_level(level: str | int):
    """
    Set log level.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR) or logging constant
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    _logger.setLevel(level)


# Convenience aliases
warn = warning


# ==================== NOTIFICATIONS ====================


@dataclass
class Notification:
    """Transient message shown to the user."""

    level: Literal["success", "error"]
    message: str
    metadata: dict[str, Any] = field(default_factory=dict)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


notifications: deque[Notification] = deque(maxlen=MAX_NOTIFICATIONS)


def notify_success(message: str, **metadata: Any):
    """Log and queue a success notification."""
    info(message, **metadata)
    notifications.append(Notification("success", message, metadata))


def notify_error(message: str, **metadata: Any):
    """Log and queue an error notification."""
    error(message, **metadata)
    notifications.append(Notification("error", message, metadata))


def drain_notifications() -> list[Notification]:
    """Return and clear the pending notifications."""
    pending = list(notifications)
    notifications.clear()
    return pending
