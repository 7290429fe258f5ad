"""Wishlist entries: commands and handler."""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.product.product import Product
from storefront.shared.errors import ConflictError, GoneError, NotFoundError
from storefront.utils.logging import get_logger
from storefront.wishlist.wishlist import WishlistItem

logger = get_logger(__name__)


@storefront.command(part_of="WishlistItem")
class AddToWishlist:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)


@storefront.command(part_of="WishlistItem")
class RemoveFromWishlist:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)


@storefront.command(part_of="WishlistItem")
class ClearWishlist:
    user_id = Identifier(required=True)


@storefront.command_handler(part_of=WishlistItem)
class ManageWishlistHandler:
    @handle(AddToWishlist)
    def add_to_wishlist(self, command):
        product = current_domain.repository_for(Product).get_or_none(command.product_id)
        if product is None:
            raise NotFoundError("Product not found")
        if not product.is_active:
            raise GoneError("Product is no longer available")

        repo = current_domain.repository_for(WishlistItem)
        if repo.find_entry(command.user_id, command.product_id) is not None:
            raise ConflictError("Product already in wishlist")

        item = WishlistItem.add(user_id=command.user_id, product_id=command.product_id)
        repo.add(item)
        return str(item.id)

    @handle(RemoveFromWishlist)
    def remove_from_wishlist(self, command):
        repo = current_domain.repository_for(WishlistItem)
        item = repo.find_entry(command.user_id, command.product_id)
        if item is None:
            raise NotFoundError("Item not in wishlist")
        repo.remove(item)

    @handle(ClearWishlist)
    def clear_wishlist(self, command):
        removed = current_domain.repository_for(WishlistItem).clear(command.user_id)
        logger.info("Wishlist cleared", user_id=str(command.user_id), removed=removed)
        return removed
