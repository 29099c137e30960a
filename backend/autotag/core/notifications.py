from __future__ import annotations

from typing import Protocol

from autotag.utils.logging import get_logger

logger = get_logger(__name__)


class Notifier(Protocol):
    """Receives plain-text, user-facing messages. Fire-and-forget."""

    def notify(self, message: str) -> None: ...


class LoggingNotifier:
    """Fallback notifier for hosts without a UI: notices become log lines."""

    def notify(self, message: str) -> None:
        logger.info("Notice: %s", message)


class CollectingNotifier:
    """Keeps notices in memory so a request handler can return them."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def notify(self, message: str) -> None:
        self.messages.append(message)
