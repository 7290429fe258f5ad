"""Cart contents: commands and handler for adding, changing and removing lines."""

from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from storefront.cart.cart import Cart, find_line, lines_of, with_added, with_quantity, without
from storefront.domain import storefront
from storefront.product.product import Product
from storefront.shared.errors import BadRequestError, NotFoundError
from storefront.shared.money import line_total
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Cart")
class AddToCart:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(default=1, min_value=1)


@storefront.command(part_of="Cart")
class UpdateCartItem:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@storefront.command(part_of="Cart")
class RemoveFromCart:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)


@storefront.command(part_of="Cart")
class ClearCart:
    user_id = Identifier(required=True)


@storefront.command_handler(part_of=Cart)
class ManageCartHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        product = current_domain.repository_for(Product).get_or_none(command.product_id)
        if product is None or not product.is_active:
            raise NotFoundError("Product not found or unavailable")
        if not product.has_stock(command.quantity):
            raise BadRequestError("Insufficient stock")

        repo = current_domain.repository_for(Cart)
        cart = repo.find_by_user(command.user_id) or Cart.open_for(command.user_id)

        updated = with_added(lines_of(cart), command.product_id, command.quantity)
        if not product.has_stock(find_line(updated, command.product_id).quantity):
            raise BadRequestError("Not enough stock after adding")

        cart.set_contents(updated)
        repo.add(cart)

        logger.info(
            "Cart item added",
            user_id=str(command.user_id),
            product_id=str(command.product_id),
            quantity=command.quantity,
            line_total=str(line_total(product.price, command.quantity)),
        )

    @handle(UpdateCartItem)
    def update_cart_item(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.find_by_user(command.user_id)
        if cart is None:
            raise NotFoundError("Cart not found")

        lines = lines_of(cart)
        if find_line(lines, command.product_id) is None:
            raise NotFoundError("Item not in cart")

        product = current_domain.repository_for(Product).get_or_none(command.product_id)
        if product is None or not product.has_stock(command.quantity):
            raise BadRequestError("Not enough stock")

        cart.set_contents(with_quantity(lines, command.product_id, command.quantity))
        repo.add(cart)

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.find_by_user(command.user_id)
        if cart is None:
            raise NotFoundError("Cart not found")

        remaining = without(lines_of(cart), command.product_id)
        if remaining:
            cart.set_contents(remaining)
            repo.add(cart)
        else:
            repo.discard(cart)

    @handle(ClearCart)
    def clear_cart(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.find_by_user(command.user_id)
        if cart is not None:
            repo.discard(cart)
        logger.info("Cart cleared", user_id=str(command.user_id))
