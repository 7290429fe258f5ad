"""Read models returned by the product service."""

from decimal import Decimal

from pydantic import Field

from storefront.shared.model import CamelModel, UtcDateTime
from storefront.shared.pagination import Pagination


class ProductImageView(CamelModel):
    id: str
    url: str
    alt_text: str | None = None
    is_primary: bool
    display_order: int


class ProductView(CamelModel):
    id: str
    name: str
    slug: str
    brand: str | None = None
    description: str | None = None
    short_description: str | None = None
    price: Decimal
    original_price: Decimal | None = None
    discount: str | None = None
    sku: str | None = None
    stock: int
    rating: Decimal
    reviews_count: int
    is_active: bool
    is_featured: bool
    category_id: str
    primary_image: str | None = None
    images: list[ProductImageView] = Field(default_factory=list, validation_alias="ordered_images")
    created_at: UtcDateTime
    updated_at: UtcDateTime


class ProductPage(CamelModel):
    data: list[ProductView]
    pagination: Pagination


class CategoryView(CamelModel):
    id: str
    name: str
    slug: str
    description: str | None = None
    is_active: bool
