"""Customer aggregate: a named shopper who may be working on a cart.

The customer refers to a cart by identifier only (aggregation). Releasing
or replacing the reference never touches the cart itself, and dropping the
cart never invalidates the customer.
"""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, String

from storefront.domain import storefront
from storefront.identity.events import CartAssigned, CartReleased, CustomerRegistered


@storefront.aggregate
class Customer:
    name = String(required=True, max_length=255)
    cart_id = Identifier()
    registered_at = DateTime()

    @classmethod
    def register(cls, name):
        now = datetime.now(UTC)
        customer = cls(name=name, registered_at=now)
        customer.raise_(
            CustomerRegistered(
                customer_id=str(customer.id),
                name=name,
                registered_at=now,
            )
        )
        return customer

    @property
    def has_cart(self) -> bool:
        return self.cart_id is not None

    def assign_cart(self, cart) -> None:
        """Associate a cart, replacing any previous association."""
        if cart is None:
            raise ValidationError({"cart": ["A cart is required"]})

        previous = str(self.cart_id) if self.cart_id else None
        self.cart_id = str(cart.id)

        self.raise_(
            CartAssigned(
                customer_id=str(self.id),
                cart_id=str(cart.id),
                previous_cart_id=previous,
            )
        )

    def release_cart(self) -> None:
        """Drop the cart reference. A customer without a cart is left as is."""
        if self.cart_id is None:
            return

        released = str(self.cart_id)
        self.cart_id = None

        self.raise_(
            CartReleased(
                customer_id=str(self.id),
                cart_id=released,
            )
        )
