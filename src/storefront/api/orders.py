"""FastAPI endpoints for orders."""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from storefront.api.dependencies import get_identity, get_order_service
from storefront.api.envelope import respond
from storefront.api.schemas import CreateOrderRequest, UpdateOrderStatusRequest
from storefront.auth.identity import Identity
from storefront.order.order import OrderStatus
from storefront.order.service import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("", status_code=201)
async def create_order(
    body: CreateOrderRequest,
    identity: Identity = Depends(get_identity),
    service: OrderService = Depends(get_order_service),
) -> JSONResponse:
    return respond(
        service.place_order(
            identity,
            shipping_address_id=body.shipping_address_id,
            payment_method=body.payment_method,
            items=[item.model_dump() for item in body.items],
            notes=body.notes,
        )
    )


@router.get("")
async def list_orders(
    page: int | None = Query(None),
    limit: int | None = Query(None),
    status: OrderStatus | None = Query(None),
    identity: Identity = Depends(get_identity),
    service: OrderService = Depends(get_order_service),
) -> JSONResponse:
    return respond(service.find_all(identity, page=page, limit=limit, status=status))


@router.get("/{order_id}")
async def get_order(
    order_id: str,
    identity: Identity = Depends(get_identity),
    service: OrderService = Depends(get_order_service),
) -> JSONResponse:
    return respond(service.find_by_id(identity, order_id))


@router.patch("/{order_id}/status")
async def update_order_status(
    order_id: str,
    body: UpdateOrderStatusRequest,
    identity: Identity = Depends(get_identity),
    service: OrderService = Depends(get_order_service),
) -> JSONResponse:
    return respond(service.update_status(identity, order_id, body.status))
