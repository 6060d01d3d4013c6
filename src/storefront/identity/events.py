"""Domain events for the Customer aggregate."""

from protean.fields import DateTime, Identifier, String

from storefront.domain import storefront


@storefront.event(part_of="Customer")
class CustomerRegistered:
    """A new customer was registered."""

    __version__ = 1

    customer_id = Identifier(required=True)
    name = String(required=True)
    registered_at = DateTime(required=True)


@storefront.event(part_of="Customer")
class CartAssigned:
    """A shopping cart was associated with the customer."""

    __version__ = 1

    customer_id = Identifier(required=True)
    cart_id = Identifier(required=True)
    previous_cart_id = Identifier()


@storefront.event(part_of="Customer")
class CartReleased:
    """The customer let go of their shopping cart reference."""

    __version__ = 1

    customer_id = Identifier(required=True)
    cart_id = Identifier(required=True)
