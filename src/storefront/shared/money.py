"""Fixed-point money helpers. Amounts are ``Decimal`` everywhere, never float."""

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")
ZERO = Decimal("0.00")


def to_money(value: Decimal | int | str) -> Decimal:
    """Quantize to cents. Floats are refused rather than silently rounded."""
    if isinstance(value, float):
        raise TypeError("Monetary amounts must not be floats")
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def line_total(price: Decimal, quantity: int) -> Decimal:
    return to_money(price * quantity)


def total_of(lines: Iterable[tuple[Decimal, int]]) -> Decimal:
    return to_money(sum((price * quantity for price, quantity in lines), ZERO))
