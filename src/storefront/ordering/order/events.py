"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer

from storefront.domain import storefront


@storefront.event(part_of="Order")
class OrderPlaced:
    """A cart was turned into an order."""

    __version__ = 1

    order_id = Identifier(required=True)
    cart_id = Identifier(required=True)
    customer_id = Identifier()
    total = Float(required=True)
    item_count = Integer(required=True)
    placed_at = DateTime(required=True)
