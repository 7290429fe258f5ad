"""Application tests for the cart service."""

from decimal import Decimal

import pytest
from protean import current_domain

from storefront.cart.cart import Cart
from storefront.cart.service import CartService
from storefront.product.product import Product


@pytest.fixture()
def service():
    return CartService()


@pytest.fixture()
def identity(customer, identity_for):
    return identity_for(customer)


class TestGetCart:
    def test_no_cart_reads_as_empty(self, service, identity, customer):
        result = service.get_cart(identity)

        assert result.status_code == 200
        assert result.message == "Cart is empty"
        cart = result.response_object
        assert cart.id == 0
        assert cart.user_id == str(customer.id)
        assert cart.items == []
        assert cart.items_count == 0
        assert cart.total_amount == Decimal("0")

    def test_cart_uses_live_product_data(self, service, identity, make_product):
        product = make_product(name="Mug", price="7.50", stock=10)
        service.add_item(identity, str(product.id), 2)

        product.update_details(price=Decimal("8.00"))
        current_domain.repository_for(Product).add(product)

        cart = service.get_cart(identity).response_object
        assert cart.items[0].price == Decimal("8.00")
        assert cart.total_amount == Decimal("16.00")


class TestAddItem:
    def test_add_merges_quantities(self, service, identity, make_product):
        product = make_product(stock=5)

        service.add_item(identity, str(product.id), 2)
        result = service.add_item(identity, str(product.id), 3)

        assert result.message == "Cart retrieved"
        cart = result.response_object
        assert len(cart.items) == 1
        assert cart.items[0].quantity == 5
        assert cart.items_count == 1

    def test_merge_beyond_stock_fails_and_keeps_quantity(self, service, identity, make_product):
        product = make_product(stock=4)
        service.add_item(identity, str(product.id), 2)

        result = service.add_item(identity, str(product.id), 3)

        assert result.status_code == 400
        assert result.message == "Not enough stock after adding"
        assert service.get_cart(identity).response_object.items[0].quantity == 2

    def test_single_add_beyond_stock(self, service, identity, make_product):
        product = make_product(stock=1)
        result = service.add_item(identity, str(product.id), 2)
        assert result.status_code == 400
        assert result.message == "Insufficient stock"

    def test_inactive_product(self, service, identity, make_product):
        product = make_product(is_active=False)
        result = service.add_item(identity, str(product.id), 1)
        assert result.status_code == 404
        assert result.message == "Product not found or unavailable"

    def test_missing_product(self, service, identity):
        result = service.add_item(identity, "no-such-product", 1)
        assert result.status_code == 404

    def test_totals(self, service, identity, make_product):
        mug = make_product(price="7.50")
        plate = make_product(price="0.10")
        service.add_item(identity, str(mug.id), 2)
        result = service.add_item(identity, str(plate.id), 3)

        cart = result.response_object
        assert cart.items_count == 2
        assert cart.total_amount == Decimal("15.30")


class TestUpdateItem:
    def test_no_cart(self, service, identity):
        result = service.update_item(identity, "no-such-product", 2)
        assert result.status_code == 404
        assert result.message == "Cart not found"

    def test_item_not_in_cart(self, service, identity, make_product):
        in_cart = make_product()
        other = make_product()
        service.add_item(identity, str(in_cart.id), 1)

        result = service.update_item(identity, str(other.id), 1)

        assert result.status_code == 404
        assert result.message == "Item not in cart"

    def test_quantity_above_stock(self, service, identity, make_product):
        product = make_product(stock=3)
        service.add_item(identity, str(product.id), 1)

        result = service.update_item(identity, str(product.id), 4)

        assert result.status_code == 400
        assert result.message == "Not enough stock"

    def test_replaces_quantity(self, service, identity, make_product):
        product = make_product(stock=3)
        service.add_item(identity, str(product.id), 1)

        result = service.update_item(identity, str(product.id), 3)

        assert result.response_object.items[0].quantity == 3


class TestRemoveAndClear:
    def test_removing_last_item_empties_cart(self, service, identity, make_product):
        product = make_product()
        service.add_item(identity, str(product.id), 1)

        result = service.remove_item(identity, str(product.id))

        assert result.message == "Cart is empty"
        assert result.response_object.items == []
        assert result.response_object.items_count == 0

    def test_removing_one_of_two(self, service, identity, make_product):
        first, second = make_product(), make_product()
        service.add_item(identity, str(first.id), 1)
        service.add_item(identity, str(second.id), 1)

        result = service.remove_item(identity, str(first.id))

        assert [item.product_id for item in result.response_object.items] == [str(second.id)]

    def test_remove_without_cart(self, service, identity):
        assert service.remove_item(identity, "no-such-product").status_code == 404

    def test_clear(self, service, identity, make_product, customer):
        service.add_item(identity, str(make_product().id), 1)

        result = service.clear(identity)

        assert result.message == "Cart cleared successfully"
        assert current_domain.repository_for(Cart).find_by_user(customer.id) is None

    def test_cart_can_be_refilled_after_clearing(self, service, identity, make_product):
        product = make_product()
        service.add_item(identity, str(product.id), 1)
        service.clear(identity)

        result = service.add_item(identity, str(product.id), 2)

        assert result.response_object.items[0].quantity == 2
