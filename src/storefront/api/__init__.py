"""Storefront HTTP API package."""

from storefront.api.cart import router as cart_router
from storefront.api.envelope import register_exception_handlers
from storefront.api.orders import router as order_router
from storefront.api.products import category_router, product_router
from storefront.api.users import router as user_router
from storefront.api.wishlist import router as wishlist_router

routers = [user_router, product_router, category_router, cart_router, order_router, wishlist_router]

__all__ = [
    "cart_router",
    "category_router",
    "order_router",
    "product_router",
    "register_exception_handlers",
    "routers",
    "user_router",
    "wishlist_router",
]
