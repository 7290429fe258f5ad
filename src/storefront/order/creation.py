"""Order placement: command and handler.

The handler runs in one unit of work. It raises on the first problem, and
the unit of work then rolls back every stock reservation made so far along
with the order itself.
"""

import json

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.order.order import Order, ShippingAddress
from storefront.product.product import Product
from storefront.shared.errors import BadRequestError
from storefront.user.user import User
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Order")
class PlaceOrder:
    user_id = Identifier(required=True)
    shipping_address_id = Identifier(required=True)
    payment_method = String(required=True, max_length=50)
    items = Text(required=True, sanitize=False)  # JSON: list of {product_id, quantity}
    notes = Text()


@storefront.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        user = current_domain.repository_for(User).get_or_none(command.user_id)
        address = user.address(command.shipping_address_id) if user is not None else None
        if address is None:
            raise BadRequestError("Invalid shipping address")

        products = current_domain.repository_for(Product)
        snapshots = []
        for line in json.loads(command.items):
            product_id, quantity = str(line["product_id"]), int(line["quantity"])
            if quantity < 1:
                raise ValidationError({"quantity": ["Quantity must be at least 1"]})

            product = products.get_or_none(product_id)
            if product is None:
                raise BadRequestError(f"Product not found: {product_id}")

            # The product itself is never saved here: stock only moves through
            # the conditional update, which fails instead of overselling.
            if not products.reserve_stock(product_id, quantity):
                raise BadRequestError(f"Insufficient stock for {product.name}")

            snapshots.append(
                {
                    "product_id": product_id,
                    "name": product.name,
                    "image": product.primary_image,
                    "price": product.price,
                    "quantity": quantity,
                }
            )
            logger.debug("Stock decremented", product_id=product_id, quantity=quantity)

        order = Order.place(
            user_id=command.user_id,
            shipping_address=ShippingAddress.copy_of(address),
            payment_method=command.payment_method,
            items=snapshots,
            notes=command.notes,
        )
        current_domain.repository_for(Order).add(order)
        return str(order.id)
