"""Domain events for the ShoppingCart aggregate."""

from protean.fields import Float, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="ShoppingCart")
class CartItemAdded:
    """A line item was appended to the shopping cart."""

    __version__ = 1

    cart_id = Identifier(required=True)
    item_id = Identifier(required=True)
    product_name = String(required=True)
    unit_price = Float(required=True)
    quantity = Integer(required=True)
    line_total = Float(required=True)


@storefront.event(part_of="ShoppingCart")
class CartCleared:
    """Every line item was discarded from the shopping cart."""

    __version__ = 1

    cart_id = Identifier(required=True)
    items_discarded = Integer(required=True)
