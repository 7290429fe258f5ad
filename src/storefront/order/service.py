"""Order service: placement, listing, detail and status changes."""

import json
from http import HTTPStatus

from protean.utils.globals import current_domain

from storefront.auth.identity import Identity
from storefront.order.creation import PlaceOrder
from storefront.order.order import Order, OrderStatus
from storefront.order.status import ChangeOrderStatus
from storefront.order.views import OrderDetail, OrderPage, OrderSummary
from storefront.shared.errors import NotFoundError
from storefront.shared.pagination import PageRequest, Pagination
from storefront.shared.policy import Action, authorize, is_allowed
from storefront.shared.response import ServiceResponse, service_operation
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class OrderService:
    @property
    def orders(self):
        return current_domain.repository_for(Order)

    def _order(self, order_id) -> Order:
        order = self.orders.get_or_none(order_id)
        if order is None:
            raise NotFoundError("Order not found")
        return order

    @service_operation("Error creating order")
    def place_order(
        self,
        identity: Identity,
        shipping_address_id: str,
        payment_method: str,
        items: list[dict],
        notes: str | None = None,
    ) -> ServiceResponse:
        command = PlaceOrder(
            user_id=identity.user_id,
            shipping_address_id=shipping_address_id,
            payment_method=payment_method,
            items=json.dumps(items),
            notes=notes,
        )
        order = self._order(current_domain.process(command, asynchronous=False))

        logger.info(
            "Order placed",
            order_id=str(order.id),
            order_number=order.order_number,
            user_id=str(order.user_id),
            total_amount=str(order.total_amount),
            items_count=order.items_count,
        )
        return ServiceResponse.ok("Order created successfully", OrderDetail.model_validate(order), HTTPStatus.CREATED)

    @service_operation("Error fetching orders")
    def find_all(
        self,
        identity: Identity,
        page: int | None = None,
        limit: int | None = None,
        status: OrderStatus | None = None,
    ) -> ServiceResponse:
        request = PageRequest.clamp(page, limit)
        owner = None if is_allowed(identity, Action.VIEW_ALL_ORDERS) else identity.user_id
        orders, total = self.orders.find_page(
            request,
            user_id=owner,
            status=OrderStatus(status).value if status else None,
        )
        payload = OrderPage(
            data=[OrderSummary.model_validate(order) for order in orders],
            pagination=Pagination.build(request, total),
        )
        return ServiceResponse.ok("Orders retrieved", payload)

    @service_operation("Error fetching order")
    def find_by_id(self, identity: Identity, order_id: str) -> ServiceResponse:
        order = self._order(order_id)
        authorize(identity, Action.VIEW_ORDER, owner_id=order.user_id)
        return ServiceResponse.ok("Order found", OrderDetail.model_validate(order))

    @service_operation("Error updating order")
    def update_status(self, identity: Identity, order_id: str, status: OrderStatus) -> ServiceResponse:
        authorize(identity, Action.UPDATE_ORDER_STATUS, message="Unauthorized")

        current_domain.process(
            ChangeOrderStatus(order_id=order_id, status=OrderStatus(status).value),
            asynchronous=False,
        )
        return ServiceResponse.ok("Order status updated", OrderDetail.model_validate(self._order(order_id)))
