from decimal import Decimal

import pytest

from app.services import discount_policy
from app.services.discount_policy import DiscountTooHighError, InvalidDiscountError

PRICES = [Decimal("0.01"), Decimal("10"), Decimal("12.99"), Decimal("250.50")]


@pytest.mark.parametrize("price", PRICES)
@pytest.mark.parametrize("discount", ["0", "0.5", "10", "19.99", "20"])
def test_discounts_up_to_twenty_percent_are_accepted(discount, price):
    discount = Decimal(discount)

    discount_policy.validate(discount, price)

    assert discount_policy.compute_price(discount, price) >= price * Decimal("0.8")


@pytest.mark.parametrize("price", PRICES)
@pytest.mark.parametrize("discount", ["20.01", "21", "50", "99.99", "100"])
def test_discounts_above_twenty_percent_are_too_high(discount, price):
    with pytest.raises(DiscountTooHighError, match="Added discount is too high"):
        discount_policy.validate(Decimal(discount), price)


@pytest.mark.parametrize("discount", ["-0.01", "-5", "100.01", "250"])
def test_out_of_range_discounts_are_invalid(discount):
    with pytest.raises(InvalidDiscountError):
        discount_policy.validate(Decimal(discount), Decimal("10"))


def test_policy_errors_are_value_errors():
    assert issubclass(DiscountTooHighError, ValueError)
    assert issubclass(InvalidDiscountError, ValueError)


def test_compute_price():
    assert discount_policy.compute_price(Decimal("2"), Decimal("10")) == Decimal("9.8")
    assert discount_policy.compute_price(Decimal("0"), Decimal("12.99")) == Decimal("12.99")


def test_compute_price_trusts_stored_values():
    assert discount_policy.compute_price(Decimal("150"), Decimal("10")) == Decimal("-5")


def test_check_bounds_ignores_price_ratio():
    discount_policy.check_bounds(Decimal("90"))

    with pytest.raises(InvalidDiscountError):
        discount_policy.check_bounds(Decimal("-1"))
