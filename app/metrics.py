from prometheus_client import Counter

DISCOUNT_DECISIONS = Counter(
    "discount_decisions_total",
    "Discount policy decisions",
    ["outcome"],  # accepted | too_high | invalid
)
