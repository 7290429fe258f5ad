"""FastAPI endpoints for the authenticated user's wishlist."""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from storefront.api.dependencies import get_identity, get_wishlist_service
from storefront.api.envelope import respond
from storefront.api.schemas import AddToWishlistRequest
from storefront.auth.identity import Identity
from storefront.wishlist.service import WishlistService

router = APIRouter(prefix="/wishlist", tags=["wishlist"])


@router.post("", status_code=201)
async def add_to_wishlist(
    body: AddToWishlistRequest,
    identity: Identity = Depends(get_identity),
    service: WishlistService = Depends(get_wishlist_service),
) -> JSONResponse:
    return respond(service.add(identity, body.product_id))


@router.get("")
async def get_wishlist(
    page: int | None = Query(None),
    limit: int | None = Query(None),
    identity: Identity = Depends(get_identity),
    service: WishlistService = Depends(get_wishlist_service),
) -> JSONResponse:
    return respond(service.find_all(identity, page=page, limit=limit))


@router.delete("/{product_id}")
async def remove_from_wishlist(
    product_id: str,
    identity: Identity = Depends(get_identity),
    service: WishlistService = Depends(get_wishlist_service),
) -> JSONResponse:
    return respond(service.remove(identity, product_id))


@router.delete("")
async def clear_wishlist(
    identity: Identity = Depends(get_identity),
    service: WishlistService = Depends(get_wishlist_service),
) -> JSONResponse:
    return respond(service.clear(identity))
