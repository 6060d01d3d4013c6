"""Order aggregate: a priced snapshot of a cart at the moment it was placed."""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Identifier, Integer, String

from storefront.domain import storefront
from storefront.ordering.order.events import OrderPlaced


class OrderStatus(Enum):
    PLACED = "Placed"


@storefront.aggregate
class Order:
    cart_id = Identifier(required=True)
    customer_id = Identifier()
    total = Float(required=True, min_value=0.0)
    item_count = Integer(required=True, min_value=1)
    status = String(choices=OrderStatus, default=OrderStatus.PLACED.value)
    placed_at = DateTime()

    @classmethod
    def place(cls, cart, customer=None):
        """Snapshot ``cart`` into a new order. Empty carts cannot be placed."""
        if not cart.items:
            raise ValidationError({"cart": ["Cannot place an order for an empty cart"]})

        now = datetime.now(UTC)
        order = cls(
            cart_id=str(cart.id),
            customer_id=str(customer.id) if customer is not None else None,
            total=cart.total_price(),
            item_count=cart.item_count(),
            status=OrderStatus.PLACED.value,
            placed_at=now,
        )
        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                cart_id=order.cart_id,
                customer_id=order.customer_id,
                total=order.total,
                item_count=order.item_count,
                placed_at=now,
            )
        )
        return order
