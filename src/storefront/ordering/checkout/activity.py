"""Order activity log: port and structlog adapter."""

from abc import ABC, abstractmethod

import structlog

logger = structlog.get_logger(__name__)


class ActivityLog(ABC):
    @abstractmethod
    def log_order_activity(self, customer, activity: str) -> None:
        """Record that ``activity`` happened on ``customer``'s order."""
        ...


class StructlogActivityLog(ActivityLog):
    """Writes order activity to the application log and keeps a copy."""

    def __init__(self) -> None:
        self.entries: list[str] = []

    def log_order_activity(self, customer, activity: str) -> None:
        entry = f"{customer.name}: {activity}"
        self.entries.append(entry)
        logger.info(activity, customer=customer.name)
