"""Customer-to-cart lookup.

The association is resolved through the ShoppingCart repository rather than
held as an object reference, so the cart's lifetime stays its own.
"""

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.identity.customer import Customer
from storefront.ordering.cart.cart import ShoppingCart

logger = structlog.get_logger(__name__)


def find_cart(customer: Customer) -> ShoppingCart | None:
    """Return the customer's cart, or None if there is none to find."""
    if not customer.has_cart:
        return None

    try:
        return current_domain.repository_for(ShoppingCart).get(customer.cart_id)
    except ObjectNotFoundError:
        logger.info(
            "Customer refers to a cart that no longer exists",
            customer_id=str(customer.id),
            cart_id=str(customer.cart_id),
        )
        return None
