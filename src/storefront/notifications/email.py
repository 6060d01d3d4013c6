"""Order confirmation notifications: port and e-mail adapter."""

from abc import ABC, abstractmethod
from uuid import uuid4

import structlog

logger = structlog.get_logger(__name__)


class NotificationService(ABC):
    """Abstract interface for telling a customer their order went through."""

    @abstractmethod
    def send_confirmation(self, customer) -> dict:
        """Send an order confirmation.

        Returns:
            dict with keys: message_id, status ("sent")
        """
        ...


class EmailNotificationService(NotificationService):
    """E-mail adapter that records messages in memory instead of sending them."""

    def __init__(self) -> None:
        self.sent: list[dict] = []

    def send_confirmation(self, customer) -> dict:
        message_id = f"email-{uuid4().hex[:12]}"
        record = {
            "message_id": message_id,
            "to": customer.name,
            "subject": "Order confirmed",
            "body": f"Email sent: Order confirmed for {customer.name}.",
        }
        self.sent.append(record)

        logger.info("Confirmation email sent", customer=customer.name, message_id=message_id)
        return {"message_id": message_id, "status": "sent"}

    def reset(self) -> None:
        """Clear sent messages (useful between tests)."""
        self.sent.clear()
