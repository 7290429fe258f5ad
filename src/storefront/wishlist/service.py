"""Wishlist service."""

from http import HTTPStatus

from protean.exceptions import TransactionError
from protean.utils.globals import current_domain

from storefront.auth.identity import Identity
from storefront.product.product import Product
from storefront.shared.errors import ConflictError
from storefront.shared.pagination import PageRequest
from storefront.shared.response import ServiceResponse, service_operation
from storefront.wishlist.entries import AddToWishlist, ClearWishlist, RemoveFromWishlist
from storefront.wishlist.views import WishlistItemView, WishlistPage, WishlistProduct
from storefront.wishlist.wishlist import WishlistItem

DEFAULT_PAGE_SIZE = 12


def item_view(item: WishlistItem, product: Product) -> WishlistItemView:
    return WishlistItemView(
        id=str(item.id),
        user_id=str(item.user_id),
        product_id=str(item.product_id),
        created_at=item.created_at,
        product=WishlistProduct(
            id=str(product.id),
            name=product.name,
            slug=product.slug,
            price=product.price,
            original_price=product.original_price,
            discount=product.discount,
            image=product.primary_image,
            is_active=product.is_active,
            stock=product.stock,
        ),
    )


def _is_unique_violation(exc: TransactionError) -> bool:
    return (exc.extra_info or {}).get("original_exception") == "IntegrityError"


class WishlistService:
    @property
    def wishlist(self):
        return current_domain.repository_for(WishlistItem)

    @service_operation("Error adding to wishlist")
    def add(self, identity: Identity, product_id: str) -> ServiceResponse:
        try:
            item_id = current_domain.process(
                AddToWishlist(user_id=identity.user_id, product_id=product_id),
                asynchronous=False,
            )
        except TransactionError as exc:
            if not _is_unique_violation(exc):
                raise
            # A concurrent request added the same pair between the check and the insert
            raise ConflictError("Product already in wishlist") from None

        item = self.wishlist.get(item_id)
        product = current_domain.repository_for(Product).get(item.product_id)
        return ServiceResponse.ok("Added to wishlist", item_view(item, product), HTTPStatus.CREATED)

    @service_operation("Error fetching wishlist")
    def find_all(self, identity: Identity, page: int | None = None, limit: int | None = None) -> ServiceResponse:
        request = PageRequest.clamp(page, limit, default_limit=DEFAULT_PAGE_SIZE)
        items, total = self.wishlist.find_page(identity.user_id, request)
        products = current_domain.repository_for(Product).find_many([item.product_id for item in items])
        payload = WishlistPage(
            data=[
                item_view(item, products[str(item.product_id)])
                for item in items
                if str(item.product_id) in products
            ],
            total=total,
        )
        return ServiceResponse.ok("Wishlist retrieved", payload)

    @service_operation("Error removing from wishlist")
    def remove(self, identity: Identity, product_id: str) -> ServiceResponse:
        current_domain.process(
            RemoveFromWishlist(user_id=identity.user_id, product_id=product_id),
            asynchronous=False,
        )
        return ServiceResponse.ok("Removed from wishlist")

    @service_operation("Error clearing wishlist")
    def clear(self, identity: Identity) -> ServiceResponse:
        current_domain.process(ClearWishlist(user_id=identity.user_id), asynchronous=False)
        return ServiceResponse.ok("Wishlist cleared")
