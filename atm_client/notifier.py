"""User-facing notices for failed actions."""

from abc import ABC, abstractmethod

import structlog

logger = structlog.get_logger(__name__)


class Notifier(ABC):
    """Delivers a blocking notice to the user."""

    @abstractmethod
    def alert(self, message: str) -> None:
        pass


class LogNotifier(Notifier):
    """Writes alerts to the log; used when no interactive surface is attached."""

    def __init__(self):
        self.alerts: list[str] = []

    def alert(self, message: str) -> None:
        self.alerts.append(message)
        logger.warning("User alert", message=message)
