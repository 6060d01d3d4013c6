"""Customer registration and cart association: commands and handler."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.identity.customer import Customer
from storefront.ordering.cart.cart import ShoppingCart


@storefront.command(part_of="Customer")
class RegisterCustomer:
    name = String(required=True, max_length=255)


@storefront.command(part_of="Customer")
class AssignCart:
    customer_id = Identifier(required=True)
    cart_id = Identifier(required=True)


@storefront.command(part_of="Customer")
class ReleaseCart:
    customer_id = Identifier(required=True)


@storefront.command_handler(part_of=Customer)
class CustomerCartHandler:
    @handle(RegisterCustomer)
    def register_customer(self, command):
        customer = Customer.register(name=command.name)
        current_domain.repository_for(Customer).add(customer)
        return str(customer.id)

    @handle(AssignCart)
    def assign_cart(self, command):
        cart = current_domain.repository_for(ShoppingCart).get(command.cart_id)

        repo = current_domain.repository_for(Customer)
        customer = repo.get(command.customer_id)
        customer.assign_cart(cart)
        repo.add(customer)

    @handle(ReleaseCart)
    def release_cart(self, command):
        repo = current_domain.repository_for(Customer)
        customer = repo.get(command.customer_id)
        customer.release_cart()
        repo.add(customer)
