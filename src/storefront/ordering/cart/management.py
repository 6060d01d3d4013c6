"""Cart management: creation command and handler."""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.ordering.cart.cart import ShoppingCart


@storefront.command(part_of="ShoppingCart")
class CreateCart:
    """Open a new, empty shopping cart."""

    cart_id = Identifier()  # Generated when not supplied


@storefront.command_handler(part_of=ShoppingCart)
class ManageCartHandler:
    @handle(CreateCart)
    def create_cart(self, command):
        cart = ShoppingCart.create(cart_id=command.cart_id)
        current_domain.repository_for(ShoppingCart).add(cart)
        return str(cart.id)
