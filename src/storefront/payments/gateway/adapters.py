"""Payment gateway adapters.

None of these talk to a real processor. Each one logs the charge, records
the call for inspection and reports success, so any of them can stand in
wherever a PaymentGateway is expected.
"""

from uuid import uuid4

import structlog

from storefront.payments.gateway.port import PaymentGateway

logger = structlog.get_logger(__name__)


class RecordingGateway(PaymentGateway):
    """Base adapter: records calls and always succeeds."""

    gateway_name = "generic"

    def __init__(self) -> None:
        self.calls: list[dict] = []

    def describe_charge(self, amount: float, customer_name: str | None) -> str:
        return "Generic processing logic"

    def process_payment(self, amount: float, customer=None) -> bool:
        customer_name = customer.name if customer is not None else None
        transaction_id = f"{self.gateway_name}_txn_{uuid4().hex[:12]}"
        self.calls.append(
            {
                "method": "process_payment",
                "amount": amount,
                "customer": customer_name,
                "transaction_id": transaction_id,
            }
        )

        logger.info(
            "Payment processed",
            description=self.describe_charge(amount, customer_name),
            gateway=self.gateway_name,
            amount=amount,
            customer=customer_name,
            transaction_id=transaction_id,
        )
        return True


class GenericPaymentGateway(RecordingGateway):
    gateway_name = "generic"


class CryptoPaymentGateway(RecordingGateway):
    gateway_name = "crypto"

    def describe_charge(self, amount, customer_name):
        return f"Crypto steps for processing {customer_name or 'guest'}'s order"


class CreditCardPaymentGateway(RecordingGateway):
    gateway_name = "credit_card"

    def describe_charge(self, amount, customer_name):
        return f"Processing credit card payment of ${amount}"


class PayPalPaymentGateway(RecordingGateway):
    gateway_name = "paypal"

    def describe_charge(self, amount, customer_name):
        return f"Processing PayPal payment of ${amount}"


class StripePaymentGateway(RecordingGateway):
    """Stripe adapter (stub). No SDK calls are made."""

    gateway_name = "stripe"

    def describe_charge(self, amount, customer_name):
        return f"Processing payment using Stripe for {customer_name or 'guest'}'s order"
