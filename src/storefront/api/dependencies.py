"""Request-scoped dependencies: authenticated identity and services."""

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from protean.utils.globals import current_domain

from storefront.auth.identity import Identity, authenticate
from storefront.cart.service import CartService
from storefront.domain import revocations, settings
from storefront.order.service import OrderService
from storefront.product.service import ProductService
from storefront.user.service import UserService
from storefront.user.user import User
from storefront.utils.logging import add_context
from storefront.wishlist.service import WishlistService

bearer_scheme = HTTPBearer(auto_error=False)


async def get_identity(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Identity:
    token = credentials.credentials if credentials is not None else None
    identity = authenticate(token, current_domain.repository_for(User), revocations, settings.auth)
    add_context(user_id=identity.user_id)
    return identity


async def get_user_service() -> UserService:
    return UserService(settings.auth, revocations)


async def get_product_service() -> ProductService:
    return ProductService()


async def get_cart_service() -> CartService:
    return CartService()


async def get_order_service() -> OrderService:
    return OrderService()


async def get_wishlist_service() -> WishlistService:
    return WishlistService()
