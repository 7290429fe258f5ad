"""Order aggregate with OrderItem snapshots.

An order freezes everything it was placed with: each item keeps the name,
image and unit price the product had at purchase time, and the shipping
address is copied from the user's address book. Later catalogue or address
changes never alter an existing order, and ``total_amount`` is computed once.

Status values:
    PENDING → CONFIRMED → SHIPPED → DELIVERED, or CANCELLED / REFUNDED.
    Administrators may set any status from any other.
"""

import secrets
from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Decimal, HasMany, Identifier, Integer, String, Text, ValueObject

from storefront.domain import storefront
from storefront.shared.money import total_of


class OrderStatus(str, Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"
    REFUNDED = "REFUNDED"


class PaymentStatus(str, Enum):
    PENDING = "PENDING"
    PAID = "PAID"
    FAILED = "FAILED"
    REFUNDED = "REFUNDED"


def generate_order_number(now: datetime | None = None) -> str:
    """``ORD-<yyyymmdd>-<6 hex chars>``, e.g. ``ORD-20261019-8F3A2C``."""
    now = now or datetime.now(UTC)
    return f"ORD-{now:%Y%m%d}-{secrets.token_hex(3).upper()}"


@storefront.value_object(part_of="Order")
class ShippingAddress:
    """Where the order ships, copied from the user's address at checkout."""

    firstname = String(required=True, max_length=100)
    lastname = String(required=True, max_length=100)
    street = String(required=True, max_length=255)
    city = String(required=True, max_length=100)
    state = String(required=True, max_length=100)
    zipcode = String(required=True, max_length=20)
    country = String(required=True, max_length=100)
    phone = String(required=True, max_length=20)

    @classmethod
    def copy_of(cls, address) -> "ShippingAddress":
        return cls(
            firstname=address.firstname,
            lastname=address.lastname,
            street=address.street,
            city=address.city,
            state=address.state,
            zipcode=address.zipcode,
            country=address.country,
            phone=address.phone,
        )


@storefront.entity(part_of="Order")
class OrderItem:
    # Cleared when the product is deleted; the snapshot fields still describe it
    product_id = Identifier()
    name = String(required=True, max_length=255)
    image = String(max_length=500, sanitize=False)
    price = Decimal(required=True, precision=10, scale=2)
    quantity = Integer(required=True)
    position = Integer(default=0)

    @invariant.post
    def quantity_must_be_positive(self):
        if self.quantity is not None and self.quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})


@storefront.aggregate
class Order:
    order_number = String(required=True, max_length=32, unique=True)
    user_id = Identifier(required=True)
    status = String(max_length=20, choices=OrderStatus, default=OrderStatus.PENDING.value)
    total_amount = Decimal(required=True, precision=12, scale=2)
    payment_method = String(required=True, max_length=50)
    payment_status = String(max_length=20, choices=PaymentStatus, default=PaymentStatus.PENDING.value)
    notes = Text()
    shipping_address = ValueObject(ShippingAddress, required=True)
    items = HasMany(OrderItem)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def place(cls, user_id, shipping_address: ShippingAddress, payment_method, items, notes=None):
        """Build a new pending order from captured item snapshots.

        ``items`` is a sequence of dicts with ``product_id``, ``name``,
        ``image``, ``price`` and ``quantity``.
        """
        if not items:
            raise ValidationError({"items": ["Order must contain at least one item"]})
        if not payment_method:
            raise ValidationError({"payment_method": ["Payment method is required"]})

        order_items = [OrderItem(**item, position=position) for position, item in enumerate(items)]

        now = datetime.now(UTC)
        return cls(
            order_number=generate_order_number(now),
            user_id=user_id,
            status=OrderStatus.PENDING.value,
            total_amount=total_of((item.price, item.quantity) for item in order_items),
            payment_method=payment_method,
            payment_status=PaymentStatus.PENDING.value,
            notes=notes,
            shipping_address=shipping_address,
            items=order_items,
            created_at=now,
            updated_at=now,
        )

    @property
    def ordered_items(self) -> list[OrderItem]:
        return sorted(self.items, key=lambda item: item.position)

    @property
    def items_count(self) -> int:
        return sum(item.quantity for item in self.items)

    @property
    def shipping_city(self) -> str:
        return self.shipping_address.city

    def change_status(self, status) -> str:
        """Set the status; returns the previous one."""
        try:
            new_status = OrderStatus(status)
        except ValueError:
            raise ValidationError({"status": [f"Invalid order status '{status}'"]}) from None

        previous = self.status
        self.status = new_status.value
        self.updated_at = datetime.now(UTC)
        return previous
