"""Checkout: pays for a cart through whichever gateway it was given.

Adding a payment provider means registering a new adapter with the
gateway factory; nothing here changes.
"""

import structlog

from storefront.payments.gateway.port import PaymentGateway

logger = structlog.get_logger(__name__)


class CheckoutService:
    def __init__(self, payment_gateway: PaymentGateway) -> None:
        self.payment_gateway = payment_gateway

    def process_order_payment(self, customer, cart) -> bool:
        paid = self.payment_gateway.process_payment(cart.total_price(), customer=customer)
        if paid:
            logger.info("Payment successful", customer=customer.name, amount=cart.total_price())
        else:
            logger.warning("Payment failed", customer=customer.name, amount=cart.total_price())
        return paid
