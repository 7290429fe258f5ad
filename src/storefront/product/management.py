"""Product management: commands and handlers for creating, changing and deleting products."""

import json

from protean import handle
from protean.fields import Boolean, Identifier, Integer, String, Text
from protean.utils.globals import current_domain
from protean.utils.query import Q

from storefront.cart.cart import CartItem
from storefront.domain import storefront
from storefront.order.order import OrderItem
from storefront.product.category import Category
from storefront.product.product import Product, ProductImage
from storefront.shared.errors import BadRequestError, ConflictError, NotFoundError
from storefront.wishlist.wishlist import WishlistItem


@storefront.command(part_of="Product")
class CreateProduct:
    name = String(required=True, max_length=255)
    slug = String(required=True, max_length=255)
    brand = String(max_length=100)
    description = Text()
    short_description = String(max_length=500)
    price = String(required=True, max_length=20)
    original_price = String(max_length=20)
    discount = String(max_length=50)
    sku = String(max_length=100)
    stock = Integer(default=0)
    is_active = Boolean(default=True)
    is_featured = Boolean(default=False)
    category_id = Identifier(required=True)
    images = Text(sanitize=False)  # JSON list of {url, alt_text, is_primary}


@storefront.command(part_of="Product")
class UpdateProduct:
    product_id = Identifier(required=True)
    changes = Text(required=True, sanitize=False)  # JSON: only the fields that were sent


@storefront.command(part_of="Product")
class DeleteProduct:
    product_id = Identifier(required=True)


def _ensure_category(category_id) -> None:
    if current_domain.repository_for(Category).get_or_none(category_id) is None:
        raise BadRequestError("Category not found")


@storefront.command_handler(part_of=Product)
class ManageProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        repo = current_domain.repository_for(Product)
        if repo.find_by_slug(command.slug) is not None:
            raise ConflictError("Product with this slug already exists")
        _ensure_category(command.category_id)

        product = Product.create(
            name=command.name,
            slug=command.slug,
            price=command.price,
            category_id=command.category_id,
            stock=command.stock,
            brand=command.brand,
            description=command.description,
            short_description=command.short_description,
            original_price=command.original_price,
            discount=command.discount,
            sku=command.sku,
            is_active=command.is_active,
            is_featured=command.is_featured,
            images=json.loads(command.images) if command.images else None,
        )
        repo.add(product)
        return str(product.id)

    @handle(UpdateProduct)
    def update_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get_or_none(command.product_id)
        if product is None:
            raise NotFoundError("Product not found")

        changes = json.loads(command.changes)
        slug = changes.get("slug")
        if slug is not None and slug != product.slug and repo.find_by_slug(slug) is not None:
            raise ConflictError("Product with this slug already exists")
        if changes.get("category_id") is not None:
            _ensure_category(changes["category_id"])

        product.update_details(**changes)
        repo.add(product)

    @handle(DeleteProduct)
    def delete_product(self, command):
        """Remove the product and whatever still points at it.

        Images, cart lines and wishlist entries go with it. Order items keep
        their snapshot and lose only the product reference.
        """
        repo = current_domain.repository_for(Product)
        product = repo.get_or_none(command.product_id)
        if product is None:
            raise NotFoundError("Product not found")

        product_id = str(product.id)
        current_domain.repository_for(ProductImage)._dao._delete_all(Q(product_id=product_id))
        current_domain.repository_for(CartItem)._dao._delete_all(Q(product_id=product_id))
        current_domain.repository_for(WishlistItem)._dao._delete_all(Q(product_id=product_id))
        current_domain.repository_for(OrderItem)._dao._update_all(Q(product_id=product_id), {"product_id": None})
        repo._dao.delete(product)
