"""Pydantic request schemas for the storefront API.

Bodies are accepted in camelCase (``productId``) or snake_case (``product_id``).
"""

from decimal import Decimal

from pydantic import EmailStr, Field

from storefront.order.order import OrderStatus
from storefront.shared.model import CamelModel

# --- Users ---


class RegisterRequest(CamelModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "firstname": "Jane",
                    "lastname": "Doe",
                    "email": "jane@example.com",
                    "password": "s3cret-pass",
                    "mobilenumber": "+15551234567",
                }
            ]
        }
    }

    firstname: str = Field(..., min_length=1, max_length=100)
    lastname: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=128)
    mobilenumber: str | None = Field(None, max_length=20)
    avatar: str | None = Field(None, max_length=500)


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class RefreshRequest(CamelModel):
    refresh_token: str = Field(..., min_length=1)


class UpdateProfileRequest(CamelModel):
    firstname: str | None = Field(None, min_length=1, max_length=100)
    lastname: str | None = Field(None, min_length=1, max_length=100)
    mobilenumber: str | None = Field(None, max_length=20)
    avatar: str | None = Field(None, max_length=500)


class AddressRequest(CamelModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "firstname": "Jane",
                    "lastname": "Doe",
                    "street": "12 Market Street",
                    "city": "Springfield",
                    "state": "IL",
                    "zipcode": "62701",
                    "country": "US",
                    "phone": "+15551234567",
                    "isDefault": True,
                }
            ]
        }
    }

    firstname: str = Field(..., min_length=1, max_length=100)
    lastname: str = Field(..., min_length=1, max_length=100)
    street: str = Field(..., min_length=1, max_length=255)
    city: str = Field(..., min_length=1, max_length=100)
    state: str = Field(..., min_length=1, max_length=100)
    zipcode: str = Field(..., min_length=1, max_length=20)
    country: str = Field(..., min_length=1, max_length=100)
    phone: str = Field(..., min_length=1, max_length=20)
    is_default: bool = False


# --- Catalogue ---


class ProductImageRequest(CamelModel):
    url: str = Field(..., min_length=1, max_length=500)
    alt_text: str | None = Field(None, max_length=255)
    is_primary: bool = False


class CreateProductRequest(CamelModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Classic Black T-Shirt",
                    "slug": "classic-black-tshirt",
                    "brand": "Acme Apparel",
                    "price": "19.99",
                    "originalPrice": "24.99",
                    "discount": "20% off",
                    "stock": 40,
                    "categoryId": "4f6c2a9e-1b7d-4c35-9a51-2f0e8d3c7b14",
                    "images": [{"url": "https://cdn.example.com/tshirt.jpg", "isPrimary": True}],
                }
            ]
        }
    }

    name: str = Field(..., min_length=1, max_length=255)
    slug: str = Field(..., min_length=1, max_length=255)
    brand: str | None = Field(None, max_length=100)
    description: str | None = None
    short_description: str | None = Field(None, max_length=500)
    price: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    original_price: Decimal | None = Field(None, gt=0, max_digits=10, decimal_places=2)
    discount: str | None = Field(None, max_length=50)
    sku: str | None = Field(None, max_length=100)
    stock: int = Field(..., ge=0)
    is_active: bool = True
    is_featured: bool = False
    category_id: str = Field(..., min_length=1)
    images: list[ProductImageRequest] = Field(default_factory=list, max_length=10)


class UpdateProductRequest(CamelModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    slug: str | None = Field(None, min_length=1, max_length=255)
    brand: str | None = Field(None, max_length=100)
    description: str | None = None
    short_description: str | None = Field(None, max_length=500)
    price: Decimal | None = Field(None, gt=0, max_digits=10, decimal_places=2)
    original_price: Decimal | None = Field(None, gt=0, max_digits=10, decimal_places=2)
    discount: str | None = Field(None, max_length=50)
    sku: str | None = Field(None, max_length=100)
    stock: int | None = Field(None, ge=0)
    is_active: bool | None = None
    is_featured: bool | None = None
    category_id: str | None = Field(None, min_length=1)


class CreateCategoryRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    slug: str | None = Field(None, max_length=120)
    description: str | None = None


# --- Cart ---


class AddToCartRequest(CamelModel):
    product_id: str = Field(..., min_length=1)
    quantity: int = Field(1, ge=1)


class UpdateCartItemRequest(CamelModel):
    quantity: int = Field(..., ge=1)


# --- Orders ---


class OrderItemRequest(CamelModel):
    product_id: str = Field(..., min_length=1)
    quantity: int = Field(..., ge=1)


class CreateOrderRequest(CamelModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "shippingAddressId": "0b9d7e21-5c4a-4e8f-8d6b-3a1f2e7c9d50",
                    "paymentMethod": "card",
                    "notes": "Leave at the front desk",
                    "items": [{"productId": "9a3e5c71-2d8b-4f60-b1c4-7e2d9f0a6b38", "quantity": 2}],
                }
            ]
        }
    }

    shipping_address_id: str = Field(..., min_length=1)
    payment_method: str = Field(..., min_length=1, max_length=50)
    notes: str | None = None
    items: list[OrderItemRequest] = Field(..., min_length=1)


class UpdateOrderStatusRequest(CamelModel):
    status: OrderStatus


# --- Wishlist ---


class AddToWishlistRequest(CamelModel):
    product_id: str = Field(..., min_length=1)
