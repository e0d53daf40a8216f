"""
Discount policy: decides whether a percentage discount is acceptable for a
dish and computes the discounted price.

A discount is rejected when the resulting price would fall below 80% of the
dish's base price, i.e. any discount above 20%.
"""

import logging
from decimal import Decimal

from app.metrics import DISCOUNT_DECISIONS

logger = logging.getLogger(__name__)

HUNDRED = Decimal("100")
MIN_PRICE_RATIO = Decimal("0.8")


class PolicyError(ValueError):
    """Base class for rejected discounts."""


class InvalidDiscountError(PolicyError):
    """Discount percentage outside [0, 100]."""


class DiscountTooHighError(PolicyError):
    """Discounted price would drop below the minimum price ratio."""


def compute_price(discount: Decimal, base_price: Decimal) -> Decimal:
    return base_price * (HUNDRED - discount) / HUNDRED


def check_bounds(discount: Decimal) -> None:
    if discount < 0 or discount > HUNDRED:
        DISCOUNT_DECISIONS.labels(outcome="invalid").inc()
        raise InvalidDiscountError(f"Discount must be between 0 and 100, got {discount}")


def validate(discount: Decimal, base_price: Decimal) -> None:
    check_bounds(discount)

    price_after = compute_price(discount, base_price)
    if price_after < base_price * MIN_PRICE_RATIO:
        DISCOUNT_DECISIONS.labels(outcome="too_high").inc()
        logger.info(
            "Rejected discount",
            extra={"discount": str(discount), "base_price": str(base_price)},
        )
        raise DiscountTooHighError("Added discount is too high")

    DISCOUNT_DECISIONS.labels(outcome="accepted").inc()
