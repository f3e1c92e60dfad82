"""Fee, savings and price estimation."""

from seller_dashboard.pricing.estimator import estimate_price
from seller_dashboard.pricing.fees import (
    aggregate_fees,
    calculate_fees,
    platform_fee,
    standard_fee,
    validate_price,
)
from seller_dashboard.pricing.savings import DEFAULT_ADD_ONS, aggregate_savings

__all__ = [
    "DEFAULT_ADD_ONS",
    "aggregate_fees",
    "aggregate_savings",
    "calculate_fees",
    "estimate_price",
    "platform_fee",
    "standard_fee",
    "validate_price",
]
