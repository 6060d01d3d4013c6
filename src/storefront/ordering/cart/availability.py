"""Cart-side reaction to catalogue availability changes.

Items are not removed from the cart automatically. The listener counts the
affected line items and keeps a notice the storefront can show at checkout.
"""

import structlog

from storefront.catalogue.availability import AvailabilityListener
from storefront.catalogue.product import Product
from storefront.ordering.cart.cart import ShoppingCart

logger = structlog.get_logger(__name__)


class CartAvailabilityListener(AvailabilityListener):
    """Keeps a shopping cart informed about the products it holds."""

    def __init__(self, cart: ShoppingCart) -> None:
        self.cart = cart
        self.notices: list[str] = []

    def on_availability_changed(self, product: Product, available: bool) -> None:
        affected = [item for item in self.cart.items if item.product == product]
        state = "available again" if available else "no longer available"
        self.notices.append(f"{product.name} is {state}; {len(affected)} line item(s) affected")

        if affected and not available:
            logger.warning(
                "Cart holds an unavailable product",
                cart_id=str(self.cart.id),
                product=product.name,
                affected_item_count=len(affected),
            )
        else:
            logger.info(
                "Cart notified of availability change",
                cart_id=str(self.cart.id),
                product=product.name,
                available=available,
            )
