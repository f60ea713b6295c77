"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from pharmacare.domain.exceptions import ValidationError
from pharmacare.domain.model.value_objects import Money, Quantity, format_currency


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation_defaults_to_dirham(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "DH"

    def test_of_parses_decimal_text(self):
        assert Money.of("45.00").amount == Decimal("45.00")

    def test_of_strips_whitespace(self):
        assert Money.of(" 12.5 ").amount == Decimal("12.5")

    def test_of_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("abc")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_float_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(1.5)

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_multiplication_by_int(self):
        assert Money.of("7.50") * 3 == Money.of("22.50")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("7.50") * 1.5

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money.of("10", "DH") + Money.of("5", "EUR")

    def test_rounded_half_up(self):
        assert Money.of("0.005").rounded().amount == Decimal("0.01")
        assert Money.of("2.344").rounded().amount == Decimal("2.34")

    def test_zero(self):
        assert Money.zero().amount == Decimal("0")


class TestFormatCurrency:

    def test_two_decimals_with_comma(self):
        assert format_currency(Money.of("45")) == "45,00 DH"

    def test_thousands_grouped_with_space(self):
        assert format_currency(Money.of("1234.5")) == "1 234,50 DH"

    def test_str_delegates(self):
        assert str(Money.of("320.00")) == "320,00 DH"


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(-3)

    def test_non_integer_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(1.5)

    def test_addition(self):
        assert Quantity(2) + Quantity(3) == Quantity(5)
