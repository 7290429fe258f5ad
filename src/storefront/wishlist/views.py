"""Read models returned by the wishlist service."""

from decimal import Decimal

from storefront.shared.model import CamelModel, UtcDateTime


class WishlistProduct(CamelModel):
    id: str
    name: str
    slug: str
    price: Decimal
    original_price: Decimal | None = None
    discount: str | None = None
    image: str | None = None
    is_active: bool
    stock: int


class WishlistItemView(CamelModel):
    id: str
    user_id: str
    product_id: str
    created_at: UtcDateTime
    product: WishlistProduct


class WishlistPage(CamelModel):
    data: list[WishlistItemView]
    total: int
