"""Order manager: coordinates payment, invoicing, notification and activity logging.

Each concern sits behind its own port; the manager only sequences them.
"""

import structlog

from storefront.notifications.email import NotificationService
from storefront.ordering.checkout.activity import ActivityLog
from storefront.payments.gateway.port import PaymentGateway
from storefront.payments.invoice.invoice import InvoiceService


class OrderManager:
    def __init__(
        self,
        notification_service: NotificationService,
        payment_gateway: PaymentGateway,
        invoice_service: InvoiceService,
        activity_log: ActivityLog,
    ) -> None:
        self.notification_service = notification_service
        self.payment_gateway = payment_gateway
        self.invoice_service = invoice_service
        self.activity_log = activity_log

    def create_order(self, customer, cart) -> bool:
        """Charge the cart and, if that works, invoice and confirm. Returns whether payment succeeded."""
        with structlog.contextvars.bound_contextvars(cart_id=str(cart.id), customer=customer.name):
            self.activity_log.log_order_activity(customer, "Order created.")

            if not self.payment_gateway.process_payment(cart.total_price(), customer=customer):
                self.activity_log.log_order_activity(customer, "Payment failed.")
                return False

            self.activity_log.log_order_activity(customer, "Payment successful.")
            self.invoice_service.generate_invoice(customer, cart)
            self.notification_service.send_confirmation(customer)
            return True
