"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from storefront.domain.exceptions import InvalidArgumentError, ValidationError
from storefront.domain.model.value_objects import Address, Money, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "USD"

    def test_of_factory_from_string(self):
        m = Money.of("25.99")
        assert m.amount == Decimal("25.99")

    def test_of_factory_from_int(self):
        m = Money.of(10)
        assert m.amount == Decimal("10")

    def test_of_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount") as exc_info:
            Money.of("ten dollars")
        assert exc_info.value.field == "price"

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    @pytest.mark.parametrize("raw", ["nan", "Infinity"])
    def test_non_finite_amount_rejected(self, raw):
        with pytest.raises(ValidationError, match="finite number"):
            Money.of(raw)

    def test_addition(self):
        result = Money.of("10") + Money.of("5.50")
        assert result == Money.of("15.50")

    def test_multiplication_by_int(self):
        result = Money.of("7.50") * 3
        assert result == Money.of("22.50")

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "USD") + Money(Decimal("5"), "EUR")

    def test_str_formatting(self):
        assert str(Money.of("15")) == "$15.00"
        assert str(Money.of("9.5")) == "$9.50"

    def test_comparison_operators(self):
        assert Money.of("5") < Money.of("10")
        assert Money.of("10") > Money.of("5")
        assert Money.of("10") >= Money.of("10")
        assert Money.of("10") <= Money.of("10")


class TestMoneyDiscount:

    def test_ten_percent_off(self):
        assert Money.of("100").discounted(Decimal("10")) == Money.of("90")

    def test_rounds_half_up_to_cents(self):
        # 0.99 * 0.85 = 0.8415
        assert Money.of("0.99").discounted(Decimal("15")).amount == Decimal("0.84")
        # 0.05 * 0.5 = 0.025
        assert Money.of("0.05").discounted(Decimal("50")).amount == Decimal("0.03")

    def test_zero_and_full_discount(self):
        assert Money.of("42").discounted(Decimal("0")) == Money.of("42")
        assert Money.of("42").discounted(Decimal("100")) == Money.zero()

    def test_over_100_rejected(self):
        with pytest.raises(InvalidArgumentError, match="between 0 and 100"):
            Money.of("100").discounted(Decimal("150"))

    def test_negative_rejected(self):
        with pytest.raises(InvalidArgumentError, match="between 0 and 100"):
            Money.of("100").discounted(Decimal("-5"))

    def test_nan_rejected(self):
        with pytest.raises(InvalidArgumentError, match="between 0 and 100"):
            Money.of("100").discounted(Decimal("NaN"))


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        q = Quantity(5)
        assert q.value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(-3)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(True)


# ── Address ──────────────────────────────────────────────────────────────────


class TestAddress:

    def test_default_is_empty(self):
        assert Address().is_empty()
        assert Address().one_line() == ""

    def test_one_line(self):
        address = Address("123 Main St", "New York", "NY", "10001", "USA")
        assert not address.is_empty()
        assert address.one_line() == "123 Main St, New York, NY 10001, USA"

    def test_one_line_skips_missing_parts(self):
        assert Address(city="Paris", country="France").one_line() == "Paris, France"
