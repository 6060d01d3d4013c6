"""Storefront design walkthroughs.

Each subcommand builds a few domain objects, exercises one design idea and
prints what happened.

Usage:
    storefront composition        # cart owns its line items
    storefront aggregation        # customer only refers to a cart
    storefront singleton          # one shared cart per process
    storefront factory --gateway paypal
    storefront observer           # availability listeners
    storefront srp | ocp | lsp | isp | dip
    storefront all
"""

import argparse
import sys


def _products():
    from storefront.catalogue.product import Product

    return Product(name="Laptop", price=1200.0), Product(name="Smartphone", price=800.0)


def _print_cart(cart):
    print()
    for line in cart.describe():
        print(line)


def _cart_with(*lines):
    from storefront.ordering.cart.cart import OrderItem, ShoppingCart

    cart = ShoppingCart.create()
    for product, quantity in lines:
        cart.add_item(OrderItem(product=product, quantity=quantity))
    return cart


def run_composition(args):
    laptop, smartphone = _products()
    order = _cart_with((laptop, 2), (smartphone, 1))
    _print_cart(order)

    print("Canceling Order ...")
    order.clear()
    _print_cart(order)
    print(f"Products still valid: {laptop}, {smartphone}")


def run_aggregation(args):
    from storefront.identity.customer import Customer
    from storefront.ordering.cart.cart import OrderItem

    customer = Customer.register("Elon Musk")
    laptop, smartphone = _products()

    cart = _cart_with()
    customer.assign_cart(cart)
    print(f"Created an order for customer: {customer.name}")
    print("Adding items to order")
    for product, quantity in ((laptop, 2), (smartphone, 1)):
        cart.add_item(OrderItem(product=product, quantity=quantity))
    _print_cart(cart)
    print(f"Number of Line Items: {cart.item_count()}")

    print("\nCancelling Order ...")
    customer.release_cart()
    cart = None

    print(f"\nCustomer exist: {customer.name}")
    print(f"Number of Line Items: {cart.item_count() if cart is not None else 0}")
    print(f"Does order exist?: {'Yes' if cart is not None else 'No'}")


def run_singleton(args):
    from storefront.ordering.cart.cart import OrderItem
    from storefront.ordering.cart.shared import reset_shared_cart, shared_cart

    laptop, smartphone = _products()
    first = shared_cart()
    second = shared_cart()
    print("Created an instance of cart...")

    first.add_item(OrderItem(product=laptop, quantity=2))
    second.add_item(OrderItem(product=smartphone, quantity=1))
    _print_cart(first)
    print(f"Same cart from both references: {first is second}")
    reset_shared_cart()


def run_factory(args):
    from storefront.payments.gateway import get_factory

    laptop, smartphone = _products()
    cart = _cart_with((laptop, 2), (smartphone, 1))
    _print_cart(cart)

    gateway = get_factory().create(args.gateway)
    paid = gateway.process_payment(cart.total_price())
    print(f"Payment of ${cart.total_price()} via {args.gateway}: {'succeeded' if paid else 'failed'}")


def run_observer(args):
    from storefront.catalogue.availability import ProductAvailability
    from storefront.identity.availability import CustomerAvailabilityListener
    from storefront.identity.customer import Customer
    from storefront.ordering.cart.availability import CartAvailabilityListener

    customer = Customer.register("Elon Musk")
    laptop, _ = _products()
    cart = _cart_with((laptop, 2))
    _print_cart(cart)

    availability = ProductAvailability(laptop)
    cart_listener = CartAvailabilityListener(cart)
    customer_listener = CustomerAvailabilityListener(customer)
    availability.add_listener(cart_listener)
    availability.add_listener(customer_listener)
    availability.set_availability(False)

    for notice in cart_listener.notices:
        print(f"Availability Change (cart): {notice}")
    for notice in customer_listener.notices:
        print(f"Availability Change (customer): {notice}")


def run_srp(args):
    from storefront.identity.customer import Customer
    from storefront.notifications.email import EmailNotificationService
    from storefront.ordering.checkout.activity import StructlogActivityLog
    from storefront.ordering.checkout.manager import OrderManager
    from storefront.payments.gateway import PaymentGatewayType, get_factory
    from storefront.payments.invoice.invoice import InvoiceGenerationService

    customer = Customer.register("Elon Musk")
    laptop, _ = _products()
    cart = _cart_with((laptop, 2))
    _print_cart(cart)

    notifications = EmailNotificationService()
    invoices = InvoiceGenerationService()
    activity = StructlogActivityLog()
    manager = OrderManager(
        notifications,
        get_factory().create(PaymentGatewayType.CREDIT_CARD),
        invoices,
        activity,
    )
    manager.create_order(customer, cart)

    for entry in activity.entries:
        print(entry)
    for invoice in invoices.issued:
        print(f"Invoice {invoice.invoice_number} generated for {invoice.customer_name}'s order.")
    for message in notifications.sent:
        print(message["body"])


def run_ocp(args):
    from storefront.identity.customer import Customer
    from storefront.ordering.checkout.checkout import CheckoutService
    from storefront.payments.gateway import get_factory

    customer = Customer.register("Elon Musk")
    laptop, _ = _products()
    cart = _cart_with((laptop, 2))
    _print_cart(cart)

    checkout = CheckoutService(get_factory().create(args.gateway))
    if checkout.process_order_payment(customer, cart):
        print(f"Payment successful. Order for {customer.name} has been processed.")
    else:
        print(f"Payment failed for order of {customer.name}.")


def run_lsp(args):
    from storefront.identity.customer import Customer
    from storefront.payments.gateway import PaymentGatewayType, get_factory

    customer = Customer.register("Elon Musk")
    laptop, _ = _products()
    cart = _cart_with((laptop, 2))
    _print_cart(cart)

    for kind in (PaymentGatewayType.CRYPTO, PaymentGatewayType.GENERIC):
        gateway = get_factory().create(kind)
        result = gateway.process_payment(cart.total_price(), customer=customer)
        print(f"Payment result ({kind.value}): {result}")


def run_isp(args):
    from storefront.identity.accounts import KidsAccount, ParentAccount
    from storefront.payments.gateway import PaymentGatewayType

    laptop, smartphone = _products()

    parent = ParentAccount(_cart_with())
    print(f"Parent account viewing products: {', '.join(parent.view_products([laptop, smartphone]))}")
    parent.add_to_cart(laptop)
    print(f"Product added to the cart (Parent): {laptop.name}")
    gateway = parent.manage_payment_settings(PaymentGatewayType.PAYPAL)
    print(f"Parent account pays with: {type(gateway).__name__}")

    kids = KidsAccount(_cart_with())
    kids.add_to_cart(smartphone)
    print(f"Product added to the cart (Kids): {smartphone.name}")
    print(f"Kids account can manage payment settings: {hasattr(kids, 'manage_payment_settings')}")

    for line in kids.view_cart():
        print(line)


def run_dip(args):
    from storefront.identity.customer import Customer
    from storefront.ordering.order.repository import DomainOrderRepository
    from storefront.ordering.order.service import OrderService

    customer = Customer.register("Elon Musk")
    laptop, _ = _products()
    cart = _cart_with((laptop, 2))
    _print_cart(cart)

    print("Processing order...")
    order = OrderService(DomainOrderRepository()).process_order(cart, customer=customer)
    print(f"Create order for cart with total of {order.total}")


WALKTHROUGHS = {
    "composition": (run_composition, "A cart owns its line items"),
    "aggregation": (run_aggregation, "A customer refers to a cart it does not own"),
    "singleton": (run_singleton, "One shared cart per process"),
    "factory": (run_factory, "Pick a payment gateway by kind"),
    "observer": (run_observer, "Notify listeners of availability changes"),
    "srp": (run_srp, "Single responsibility: order manager and its services"),
    "ocp": (run_ocp, "Open/closed: checkout over any gateway"),
    "lsp": (run_lsp, "Liskov substitution: gateways are interchangeable"),
    "isp": (run_isp, "Interface segregation: parent and kids accounts"),
    "dip": (run_dip, "Dependency inversion: order service over a repository port"),
}


def run_all(args):
    for name, (func, _) in WALKTHROUGHS.items():
        print(f"\n=== {name} ===")
        func(args)


def build_parser():
    from storefront.payments.gateway import PaymentGatewayType

    parser = argparse.ArgumentParser(description="Storefront design walkthroughs")
    subparsers = parser.add_subparsers(dest="command", required=True)

    gateway_choices = [kind.value for kind in PaymentGatewayType]
    for name, (_, help_text) in [*WALKTHROUGHS.items(), ("all", (run_all, "Run every walkthrough"))]:
        sub = subparsers.add_parser(name, help=help_text)
        if name in ("factory", "ocp", "all"):
            sub.add_argument(
                "--gateway",
                choices=gateway_choices,
                default=PaymentGatewayType.PAYPAL.value,
                help="Payment gateway to use (default: paypal)",
            )
    return parser


def main(argv=None):
    from storefront.domain import storefront

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "all":
        command = run_all
    elif args.command in WALKTHROUGHS:
        command = WALKTHROUGHS[args.command][0]
    else:
        parser.print_help()
        sys.exit(1)

    storefront.init()
    with storefront.domain_context():
        command(args)


if __name__ == "__main__":
    main()
