"""Read models returned by the cart service."""

from decimal import Decimal

from storefront.shared.model import CamelModel, UtcDateTime


class CartItemView(CamelModel):
    product_id: str
    name: str
    slug: str
    price: Decimal
    image: str | None = None
    stock: int
    quantity: int


class CartView(CamelModel):
    # 0 for a user who has no cart yet
    id: str | int
    user_id: str
    items: list[CartItemView]
    items_count: int
    total_amount: Decimal
    updated_at: UtcDateTime
