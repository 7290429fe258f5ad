from decimal import Decimal

import pytest
from storefront.shared.money import line_total, to_money, total_of


class TestToMoney:
    def test_quantizes_to_cents(self):
        assert to_money("19.999") == Decimal("20.00")
        assert to_money(Decimal("0.005")) == Decimal("0.01")
        assert to_money(7) == Decimal("7.00")

    def test_refuses_floats(self):
        with pytest.raises(TypeError):
            to_money(19.99)


class TestTotals:
    def test_line_total(self):
        assert line_total(Decimal("19.99"), 3) == Decimal("59.97")

    def test_total_of_lines_has_no_float_drift(self):
        lines = [(Decimal("0.10"), 1), (Decimal("0.20"), 1)]
        assert total_of(lines) == Decimal("0.30")

    def test_total_of_nothing_is_zero(self):
        assert total_of([]) == Decimal("0.00")
