from decimal import Decimal

from apps.core.money import to_cents, from_cents, divide_cents, format_currency


class TestCents:
    """Tests for centavo conversion."""

    def test_to_cents_from_decimal(self):
        assert to_cents(Decimal('150.25')) == 15025

    def test_to_cents_from_float_and_str(self):
        assert to_cents(0.1) == 10
        assert to_cents('99.99') == 9999

    def test_to_cents_rounds_half_up(self):
        assert to_cents(Decimal('0.005')) == 1

    def test_from_cents_has_two_places(self):
        assert from_cents(15000) == Decimal('150.00')
        assert str(from_cents(5)) == '0.05'


class TestDivideCents:
    """Tests for equal split of a total."""

    def test_even_split(self):
        assert divide_cents(30000, 2) == 15000

    def test_rounds_half_up(self):
        # 100.00 / 3 = 33.333...
        assert divide_cents(10000, 3) == 3333
        # 0.05 / 2 = 0.025
        assert divide_cents(5, 2) == 3

    def test_zero_parts_is_zero(self):
        assert divide_cents(10000, 0) == 0


class TestFormatCurrency:
    """Tests for display formatting."""

    def test_thousands_separator(self):
        assert format_currency(Decimal('1234.5')) == '$1,234.50'

    def test_negative(self):
        assert format_currency(Decimal('-150')) == '-$150.00'

    def test_compact(self):
        assert format_currency(Decimal('1234.5'), compact=True) == '$1,235'
