"""Restaurant discounts service: orders, dishes and per-dish discounts."""

__version__ = "1.0.0"
