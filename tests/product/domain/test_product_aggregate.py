"""Tests for the Product aggregate."""

from decimal import Decimal

import pytest
from protean.exceptions import ValidationError

from storefront.product.category import Category
from storefront.product.product import MAX_IMAGES, Product


def _product(**overrides):
    fields = {"name": "Mug", "slug": "mug", "price": Decimal("7.00"), "stock": 5, "category_id": "cat-1"}
    fields.update(overrides)
    return Product.create(**fields)


class TestProductCreate:
    def test_create(self):
        product = _product(original_price=Decimal("9.50"))
        assert product.price == Decimal("7.00")
        assert product.original_price == Decimal("9.50")
        assert product.stock == 5
        assert product.is_active is True
        assert product.rating == Decimal("0.00")

    def test_price_must_be_positive(self):
        with pytest.raises(ValidationError):
            _product(price=Decimal("0"))

    def test_stock_cannot_be_negative(self):
        with pytest.raises(ValidationError):
            _product(stock=-1)

    def test_slug_must_be_url_safe(self):
        with pytest.raises(ValidationError):
            _product(slug="Not A Slug")

    def test_price_is_quantized(self):
        assert _product(price="19.999").price == Decimal("20.00")


class TestProductImages:
    def test_first_image_is_primary(self):
        product = _product(images=[{"url": "a.jpg"}, {"url": "b.jpg"}])
        assert product.primary_image == "a.jpg"

    def test_explicit_primary_wins(self):
        product = _product(images=[{"url": "a.jpg"}, {"url": "b.jpg", "is_primary": True}])
        assert product.primary_image == "b.jpg"
        assert [img.is_primary for img in product.images] == [False, True]

    def test_no_images(self):
        assert _product().primary_image is None

    def test_images_keep_display_order(self):
        product = _product(images=[{"url": "a.jpg"}, {"url": "b.jpg"}, {"url": "c.jpg"}])
        assert [img.url for img in product.ordered_images] == ["a.jpg", "b.jpg", "c.jpg"]

    def test_new_primary_clears_previous(self):
        product = _product(images=[{"url": "a.jpg"}])
        product.add_image("b.jpg", is_primary=True)
        assert [img.is_primary for img in product.ordered_images] == [False, True]

    def test_image_limit(self):
        product = _product(images=[{"url": f"{i}.jpg"} for i in range(MAX_IMAGES)])
        with pytest.raises(ValidationError):
            product.add_image("extra.jpg")


class TestProductStock:
    def test_has_stock(self):
        product = _product(stock=2)
        assert product.has_stock(2) is True
        assert product.has_stock(3) is False

    def test_stock_may_not_be_set_negative(self):
        product = _product(stock=2)
        with pytest.raises(ValidationError) as exc:
            product.stock = -1
        assert exc.value.messages["stock"] == ["Stock cannot be negative"]


class TestProductUpdate:
    def test_partial_update(self):
        product = _product()
        product.update_details(price=Decimal("8.25"), is_featured=True)
        assert product.price == Decimal("8.25")
        assert product.is_featured is True
        assert product.name == "Mug"

    def test_optional_fields_may_be_cleared(self):
        product = _product(brand="Acme")
        product.update_details(brand=None)
        assert product.brand is None

    def test_required_fields_may_not_be_nulled(self):
        with pytest.raises(ValidationError):
            _product().update_details(price=None)

    def test_unknown_field(self):
        with pytest.raises(ValidationError):
            _product().update_details(rating=Decimal("5"))


class TestCategory:
    def test_slug_defaults_from_name(self):
        assert Category.create(name="Home & Kitchen").slug == "home-kitchen"

    def test_empty_name(self):
        with pytest.raises(ValidationError):
            Category.create(name="  ")

    def test_explicit_slug_is_validated(self):
        with pytest.raises(ValidationError):
            Category.create(name="Books", slug="Not A Slug")
