"""Payment gateway port (abstract interface).

Defines the contract that all payment gateway adapters must implement.
Checkout code depends on this interface only, so adapters can be swapped
or added without touching it.
"""

from abc import ABC, abstractmethod


class PaymentGateway(ABC):
    """Abstract payment gateway interface."""

    @abstractmethod
    def process_payment(self, amount: float, customer=None) -> bool:
        """Charge ``amount`` on behalf of ``customer``. Returns True on success."""
        ...
