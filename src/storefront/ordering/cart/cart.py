"""Shopping Cart aggregate: owns its line items and prices them on demand.

Line items live and die with the cart that holds them (composition): they
are entities inside the aggregate, never stored or referenced on their own.
The products they carry are value objects and stay valid after the cart is
cleared or thrown away.

The total is recomputed from the items on every call; nothing is cached.
"""

from datetime import UTC, datetime

from protean.fields import DateTime, HasMany, Integer, ValueObject

from storefront.catalogue.product import Product
from storefront.domain import storefront
from storefront.ordering.cart.events import CartCleared, CartItemAdded


@storefront.entity(part_of="ShoppingCart")
class OrderItem:
    """A product and how many of it; contributes ``price * quantity`` to the cart."""

    product = ValueObject(Product, required=True)
    quantity = Integer(required=True, min_value=1)

    def line_total(self) -> float:
        return self.product.price * self.quantity

    def describe(self) -> str:
        return f"- Line Item  Name: {self.product.name}, quantity: {self.quantity}, price: {self.line_total()}"


@storefront.aggregate
class ShoppingCart:
    items = HasMany(OrderItem)
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, cart_id=None):
        now = datetime.now(UTC)
        if cart_id:
            return cls(id=cart_id, created_at=now, updated_at=now)
        return cls(created_at=now, updated_at=now)

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def add_item(self, item: OrderItem) -> OrderItem:
        """Append a line item and return the one the cart now holds.

        The cart takes its own copy, so every call adds exactly one line item
        and no item is ever shared with another cart. Items for the same
        product are kept apart.
        """
        item = OrderItem(product=item.product, quantity=item.quantity)
        self.add_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartItemAdded(
                cart_id=str(self.id),
                item_id=str(item.id),
                product_name=item.product.name,
                unit_price=item.product.price,
                quantity=item.quantity,
                line_total=item.line_total(),
            )
        )
        return item

    def clear(self) -> int:
        """Discard every line item. Returns how many were dropped."""
        discarded = list(self.items)
        for item in discarded:
            self.remove_items(item)

        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartCleared(
                cart_id=str(self.id),
                items_discarded=len(discarded),
            )
        )
        return len(discarded)

    # -------------------------------------------------------------------
    # Pricing
    # -------------------------------------------------------------------
    def total_price(self) -> float:
        return sum((item.line_total() for item in self.items), 0.0)

    def item_count(self) -> int:
        """Number of line items, not the sum of their quantities."""
        return len(self.items)

    def describe(self) -> list[str]:
        lines = [
            "Here are the details of the order:",
            f"Total Price: ${self.total_price()}",
            f"Number of Line Items: {self.item_count()}",
        ]
        lines.extend(item.describe() for item in self.items)
        return lines
