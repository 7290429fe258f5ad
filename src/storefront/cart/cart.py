"""Cart aggregate: one per user, holding product lines with quantities."""

from dataclasses import dataclass
from datetime import UTC, datetime

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer

from storefront.domain import storefront


@storefront.entity(part_of="Cart")
class CartItem:
    product_id = Identifier(required=True)
    quantity = Integer(required=True)
    position = Integer(default=0)

    @invariant.post
    def quantity_must_be_positive(self):
        if self.quantity is not None and self.quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})


@storefront.aggregate
class Cart:
    user_id = Identifier(required=True, unique=True)
    items = HasMany(CartItem)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def open_for(cls, user_id):
        now = datetime.now(UTC)
        return cls(user_id=user_id, created_at=now, updated_at=now)

    @property
    def ordered_items(self) -> list[CartItem]:
        return sorted(self.items, key=lambda item: item.position)

    def lines(self) -> list["CartLine"]:
        return [CartLine(str(item.product_id), item.quantity) for item in self.ordered_items]

    def set_contents(self, lines: list["CartLine"]) -> None:
        """Replace every item with ``lines``, in that order."""
        with atomic_change(self):
            for item in list(self.items):
                self.remove_items(item)
            for position, line in enumerate(lines):
                self.add_items(CartItem(product_id=line.product_id, quantity=line.quantity, position=position))
            self.updated_at = datetime.now(UTC)


@dataclass(frozen=True)
class CartLine:
    """What the cart stores for one product: its id and how many."""

    product_id: str
    quantity: int

    def __post_init__(self):
        if self.quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})


def lines_of(cart: Cart | None) -> list[CartLine]:
    if cart is None:
        return []
    return cart.lines()


def find_line(lines: list[CartLine], product_id: str) -> CartLine | None:
    return next((line for line in lines if line.product_id == str(product_id)), None)


def with_added(lines: list[CartLine], product_id: str, quantity: int) -> list[CartLine]:
    """Add ``quantity`` to the product's line, appending a new line if there is none."""
    product_id = str(product_id)
    if find_line(lines, product_id) is None:
        return [*lines, CartLine(product_id, quantity)]
    return [
        CartLine(line.product_id, line.quantity + quantity) if line.product_id == product_id else line
        for line in lines
    ]


def with_quantity(lines: list[CartLine], product_id: str, quantity: int) -> list[CartLine]:
    return [CartLine(line.product_id, quantity) if line.product_id == str(product_id) else line for line in lines]


def without(lines: list[CartLine], product_id: str) -> list[CartLine]:
    return [line for line in lines if line.product_id != str(product_id)]
