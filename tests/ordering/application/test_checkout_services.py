"""Application tests for checkout, order manager and order service."""

import structlog
from protean import current_domain

from storefront.identity.customer import Customer
from storefront.notifications.email import EmailNotificationService
from storefront.ordering.cart.cart import OrderItem, ShoppingCart
from storefront.ordering.checkout import checkout as checkout_module
from storefront.ordering.checkout.activity import StructlogActivityLog
from storefront.ordering.checkout.checkout import CheckoutService
from storefront.ordering.checkout.manager import OrderManager
from storefront.ordering.order import repository as repository_module
from storefront.ordering.order.order import Order
from storefront.ordering.order.repository import DomainOrderRepository, OrderRepository
from storefront.ordering.order.service import OrderService
from storefront.payments.gateway.adapters import CreditCardPaymentGateway, GenericPaymentGateway, PayPalPaymentGateway
from storefront.payments.gateway.port import PaymentGateway
from storefront.payments.invoice.invoice import InvoiceGenerationService


class DecliningGateway(PaymentGateway):
    def __init__(self):
        self.amounts = []

    def process_payment(self, amount, customer=None):
        self.amounts.append(amount)
        return False


class ContextRecordingActivityLog(StructlogActivityLog):
    def __init__(self):
        super().__init__()
        self.contexts = []

    def log_order_activity(self, customer, activity):
        self.contexts.append(structlog.contextvars.get_contextvars())
        super().log_order_activity(customer, activity)


class InMemoryOrderRepository(OrderRepository):
    def __init__(self):
        self.orders = []

    def create_order(self, cart, customer=None):
        order = Order.place(cart, customer=customer)
        self.orders.append(order)
        return order


def _cart(laptop):
    cart = ShoppingCart.create()
    cart.add_item(OrderItem(product=laptop, quantity=2))
    return cart


def _manager(gateway):
    return OrderManager(
        EmailNotificationService(),
        gateway,
        InvoiceGenerationService(),
        StructlogActivityLog(),
    )


class TestCheckoutService:
    def test_charges_cart_total(self, laptop):
        gateway = PayPalPaymentGateway()
        customer = Customer.register("Elon Musk")

        assert CheckoutService(gateway).process_order_payment(customer, _cart(laptop)) is True
        assert gateway.calls[0]["amount"] == 2400.0
        assert gateway.calls[0]["customer"] == "Elon Musk"

    def test_reports_declined_payment(self, laptop):
        customer = Customer.register("Elon Musk")
        assert CheckoutService(DecliningGateway()).process_order_payment(customer, _cart(laptop)) is False


class TestOrderManager:
    def test_successful_order_runs_every_step(self, laptop):
        manager = _manager(CreditCardPaymentGateway())
        customer = Customer.register("Elon Musk")

        assert manager.create_order(customer, _cart(laptop)) is True
        assert manager.activity_log.entries == [
            "Elon Musk: Order created.",
            "Elon Musk: Payment successful.",
        ]
        assert len(manager.invoice_service.issued) == 1
        assert manager.invoice_service.issued[0].total == 2400.0
        assert manager.notification_service.sent[0]["body"] == "Email sent: Order confirmed for Elon Musk."

    def test_failed_payment_skips_invoice_and_email(self, laptop):
        gateway = DecliningGateway()
        manager = _manager(gateway)
        customer = Customer.register("Elon Musk")

        assert manager.create_order(customer, _cart(laptop)) is False
        assert gateway.amounts == [2400.0]
        assert manager.activity_log.entries == [
            "Elon Musk: Order created.",
            "Elon Musk: Payment failed.",
        ]
        assert manager.invoice_service.issued == []
        assert manager.notification_service.sent == []


class TestOrderService:
    def test_uses_injected_repository(self, laptop):
        repository = InMemoryOrderRepository()
        order = OrderService(repository).process_order(_cart(laptop))

        assert repository.orders == [order]
        assert order.total == 2400.0

    def test_domain_repository_persists_order(self, laptop):
        customer = Customer.register("Elon Musk")
        order = OrderService(DomainOrderRepository()).process_order(_cart(laptop), customer=customer)

        stored = current_domain.repository_for(Order).get(order.id)
        assert stored.total == 2400.0
        assert stored.item_count == 1
        assert stored.customer_id == str(customer.id)


class TestOrderManagerLogContext:
    def test_binds_cart_and_customer_while_processing(self, laptop):
        activity = ContextRecordingActivityLog()
        manager = OrderManager(EmailNotificationService(), GenericPaymentGateway(), InvoiceGenerationService(), activity)
        customer = Customer.register("Elon Musk")
        cart = _cart(laptop)

        manager.create_order(customer, cart)

        assert activity.contexts == [
            {"cart_id": str(cart.id), "customer": "Elon Musk"},
            {"cart_id": str(cart.id), "customer": "Elon Musk"},
        ]

    def test_context_released_after_order(self, laptop):
        _manager(GenericPaymentGateway()).create_order(Customer.register("Elon Musk"), _cart(laptop))
        assert structlog.contextvars.get_contextvars() == {}

    def test_context_released_after_declined_payment(self, laptop):
        _manager(DecliningGateway()).create_order(Customer.register("Elon Musk"), _cart(laptop))
        assert structlog.contextvars.get_contextvars() == {}


class TestStructuredLogEvents:
    def test_checkout_logs_static_event_with_fields(self, laptop, monkeypatch):
        capture = structlog.testing.CapturingLogger()
        monkeypatch.setattr(checkout_module, "logger", capture)

        CheckoutService(PayPalPaymentGateway()).process_order_payment(Customer.register("Elon Musk"), _cart(laptop))

        assert capture.calls == [
            structlog.testing.CapturedCall(
                "info", ("Payment successful",), {"customer": "Elon Musk", "amount": 2400.0}
            )
        ]

    def test_declined_checkout_logs_warning(self, laptop, monkeypatch):
        capture = structlog.testing.CapturingLogger()
        monkeypatch.setattr(checkout_module, "logger", capture)

        CheckoutService(DecliningGateway()).process_order_payment(Customer.register("Elon Musk"), _cart(laptop))

        assert [(call.method_name, call.args) for call in capture.calls] == [("warning", ("Payment failed",))]

    def test_order_repository_logs_placed_order(self, laptop, monkeypatch):
        capture = structlog.testing.CapturingLogger()
        monkeypatch.setattr(repository_module, "logger", capture)

        order = DomainOrderRepository().create_order(_cart(laptop))

        [call] = capture.calls
        assert call.args == ("Order placed",)
        assert call.kwargs["total"] == 2400.0
        assert call.kwargs["order_id"] == str(order.id)
