"""Read models returned by the order service."""

from decimal import Decimal

from pydantic import Field

from storefront.shared.model import CamelModel, UtcDateTime
from storefront.shared.pagination import Pagination


class ShippingAddressView(CamelModel):
    firstname: str
    lastname: str
    street: str
    city: str
    state: str
    zipcode: str
    country: str
    phone: str


class OrderItemView(CamelModel):
    product_id: str | None = None
    name: str
    image: str | None = None
    price: Decimal
    quantity: int


class OrderDetail(CamelModel):
    id: str
    order_number: str
    user_id: str
    status: str
    total_amount: Decimal
    payment_method: str
    payment_status: str
    notes: str | None = None
    shipping_address: ShippingAddressView
    items: list[OrderItemView] = Field(validation_alias="ordered_items")
    created_at: UtcDateTime
    updated_at: UtcDateTime


class OrderSummary(CamelModel):
    id: str
    order_number: str
    user_id: str
    status: str
    total_amount: Decimal
    payment_status: str
    items_count: int
    shipping_city: str
    created_at: UtcDateTime
    updated_at: UtcDateTime


class OrderPage(CamelModel):
    data: list[OrderSummary]
    pagination: Pagination
