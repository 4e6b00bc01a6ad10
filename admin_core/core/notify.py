"""
User notification channel.

Sessions report outcomes (saved, failed to load, invalid import) through a
``Notifier``. Notifications are transient and never block the caller.
"""

import logging
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    def notify_success(self, message: str, **metadata: Any) -> None: ...

    def notify_error(self, message: str, **metadata: Any) -> None: ...


class LogNotifier:
    """Notifier that only writes to the log."""

    def notify_success(self, message: str, **metadata: Any) -> None:
        logger.info(message, extra={"metadata": metadata} if metadata else None)

    def notify_error(self, message: str, **metadata: Any) -> None:
        logger.error(message, extra={"metadata": metadata} if metadata else None)
