"""Account roles.

Shopping and payment settings are separate interfaces, so an account only
implements what it is allowed to do: parents do both, kids only shop.
"""

from abc import ABC, abstractmethod

import structlog

from storefront.catalogue.product import Product
from storefront.ordering.cart.cart import OrderItem, ShoppingCart
from storefront.payments.gateway import PaymentGatewayType, get_factory
from storefront.payments.gateway.port import PaymentGateway

logger = structlog.get_logger(__name__)


class ShopperAccount(ABC):
    @abstractmethod
    def view_products(self, products: list[Product]) -> list[str]: ...

    @abstractmethod
    def add_to_cart(self, product: Product, quantity: int = 1) -> OrderItem: ...

    @abstractmethod
    def view_cart(self) -> list[str]: ...


class PaymentSettingsAccount(ABC):
    @abstractmethod
    def manage_payment_settings(self, kind: PaymentGatewayType | str) -> PaymentGateway: ...


class _CartShopper(ShopperAccount):
    role = "Shopper"

    def __init__(self, cart: ShoppingCart) -> None:
        self.cart = cart

    def view_products(self, products: list[Product]) -> list[str]:
        logger.debug("Account viewing products", role=self.role, product_count=len(products))
        return [str(product) for product in products]

    def add_to_cart(self, product: Product, quantity: int = 1) -> OrderItem:
        item = self.cart.add_item(OrderItem(product=product, quantity=quantity))
        logger.info("Product added to the cart", role=self.role, product=product.name, quantity=quantity)
        return item

    def view_cart(self) -> list[str]:
        return self.cart.describe()


class ParentAccount(_CartShopper, PaymentSettingsAccount):
    role = "Parent"

    def __init__(self, cart: ShoppingCart) -> None:
        super().__init__(cart)
        self.payment_gateway: PaymentGateway | None = None

    def manage_payment_settings(self, kind: PaymentGatewayType | str) -> PaymentGateway:
        """Choose the gateway this account pays with."""
        self.payment_gateway = get_factory().create(kind)
        logger.info("Payment settings updated", role=self.role, gateway=type(self.payment_gateway).__name__)
        return self.payment_gateway


class KidsAccount(_CartShopper):
    role = "Kids"
