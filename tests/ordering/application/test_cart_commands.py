"""Application tests for cart commands."""

import pytest
from protean import current_domain
from protean.exceptions import ValidationError

from storefront.ordering.cart.cart import ShoppingCart
from storefront.ordering.cart.items import AddToCart, ClearCart
from storefront.ordering.cart.management import CreateCart


def _create_cart(**kwargs):
    return current_domain.process(CreateCart(**kwargs), asynchronous=False)


def _add(cart_id, name, price, quantity):
    current_domain.process(
        AddToCart(cart_id=cart_id, product_name=name, unit_price=price, quantity=quantity),
        asynchronous=False,
    )


class TestCreateCartCommand:
    def test_returns_id_of_persisted_cart(self):
        cart_id = _create_cart()
        cart = current_domain.repository_for(ShoppingCart).get(cart_id)
        assert cart.item_count() == 0

    def test_honours_supplied_id(self):
        cart_id = _create_cart(cart_id="cart-fixed")
        assert cart_id == "cart-fixed"
        assert current_domain.repository_for(ShoppingCart).get("cart-fixed") is not None


class TestAddToCartCommand:
    def test_add_item_persists(self):
        cart_id = _create_cart()
        _add(cart_id, "Laptop", 1200.0, 2)

        cart = current_domain.repository_for(ShoppingCart).get(cart_id)
        assert cart.item_count() == 1
        assert cart.items[0].product.name == "Laptop"
        assert cart.items[0].quantity == 2

    def test_totals_survive_round_trip(self):
        cart_id = _create_cart()
        _add(cart_id, "Laptop", 1200.0, 2)
        _add(cart_id, "Smartphone", 800.0, 1)

        cart = current_domain.repository_for(ShoppingCart).get(cart_id)
        assert cart.item_count() == 2
        assert cart.total_price() == 3200.0

    def test_zero_quantity_rejected_by_command(self):
        with pytest.raises(ValidationError):
            AddToCart(cart_id="cart-001", product_name="Laptop", unit_price=1200.0, quantity=0)

    def test_negative_price_rejected_by_command(self):
        with pytest.raises(ValidationError):
            AddToCart(cart_id="cart-001", product_name="Laptop", unit_price=-5.0, quantity=1)


class TestClearCartCommand:
    def test_clear_persists(self):
        cart_id = _create_cart()
        _add(cart_id, "Laptop", 1200.0, 2)

        current_domain.process(ClearCart(cart_id=cart_id), asynchronous=False)

        cart = current_domain.repository_for(ShoppingCart).get(cart_id)
        assert cart.item_count() == 0
        assert cart.total_price() == 0
