"""FastAPI endpoints for the authenticated user's cart."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from storefront.api.dependencies import get_cart_service, get_identity
from storefront.api.envelope import respond
from storefront.api.schemas import AddToCartRequest, UpdateCartItemRequest
from storefront.auth.identity import Identity
from storefront.cart.service import CartService

router = APIRouter(prefix="/cart", tags=["cart"])


@router.get("")
async def get_cart(
    identity: Identity = Depends(get_identity),
    service: CartService = Depends(get_cart_service),
) -> JSONResponse:
    return respond(service.get_cart(identity))


@router.post("")
async def add_to_cart(
    body: AddToCartRequest,
    identity: Identity = Depends(get_identity),
    service: CartService = Depends(get_cart_service),
) -> JSONResponse:
    return respond(service.add_item(identity, body.product_id, body.quantity))


@router.patch("/{product_id}")
async def update_cart_item(
    product_id: str,
    body: UpdateCartItemRequest,
    identity: Identity = Depends(get_identity),
    service: CartService = Depends(get_cart_service),
) -> JSONResponse:
    return respond(service.update_item(identity, product_id, body.quantity))


@router.delete("/{product_id}")
async def remove_cart_item(
    product_id: str,
    identity: Identity = Depends(get_identity),
    service: CartService = Depends(get_cart_service),
) -> JSONResponse:
    return respond(service.remove_item(identity, product_id))


@router.delete("")
async def clear_cart(
    identity: Identity = Depends(get_identity),
    service: CartService = Depends(get_cart_service),
) -> JSONResponse:
    return respond(service.clear(identity))
