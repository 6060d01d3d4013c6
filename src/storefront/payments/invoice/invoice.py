"""Invoice generation port and adapter."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import uuid4

import structlog

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Invoice:
    """A priced record of what a customer bought."""

    customer_name: str
    total: float
    lines: tuple[str, ...] = ()
    invoice_number: str = field(default_factory=lambda: f"INV-{uuid4().hex[:8].upper()}")
    issued_at: datetime = field(default_factory=lambda: datetime.now(UTC))


class InvoiceService(ABC):
    """Abstract invoice generation interface."""

    @abstractmethod
    def generate_invoice(self, customer, cart) -> Invoice:
        """Produce an invoice for the customer's cart."""
        ...


class InvoiceGenerationService(InvoiceService):
    """Builds invoices in memory and keeps the ones it issued."""

    def __init__(self) -> None:
        self.issued: list[Invoice] = []

    def generate_invoice(self, customer, cart) -> Invoice:
        invoice = Invoice(
            customer_name=customer.name,
            total=cart.total_price(),
            lines=tuple(item.describe() for item in cart.items),
        )
        self.issued.append(invoice)

        logger.info(
            "Invoice generated",
            customer=customer.name,
            invoice_number=invoice.invoice_number,
            total=invoice.total,
        )
        return invoice
