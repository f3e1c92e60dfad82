"""Brokerage and platform fee calculation.

Prices are in 10,000-yen units. The standard fee follows the statutory
brokerage ceiling tiers:

==================  =====================
price               standard fee
==================  =====================
p <= 200            p * 5%
200 < p <= 400      p * 4% + 2
p > 400             p * 3% + 6
==================  =====================

The platform fee is a flat 0.5% of the price.
"""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from typing import Iterable

from seller_dashboard.exceptions import ValidationError
from seller_dashboard.models import FeeBreakdown, FeeTotals, Property, PropertyStatus

logger = logging.getLogger(__name__)

# (upper bound inclusive, rate, fixed addition)
STANDARD_FEE_TIERS: tuple[tuple[Decimal | None, Decimal, Decimal], ...] = (
    (Decimal("200"), Decimal("0.05"), Decimal("0")),
    (Decimal("400"), Decimal("0.04"), Decimal("2")),
    (None, Decimal("0.03"), Decimal("6")),
)
PLATFORM_FEE_RATE = Decimal("0.005")

FEE_STATUSES: frozenset[PropertyStatus] = frozenset(
    {PropertyStatus.ACTIVE, PropertyStatus.SOLD}
)


def validate_price(price: int | float | Decimal | str) -> Decimal:
    """Convert a price to ``Decimal``, rejecting invalid values.

    Parameters
    ----------
    price : int | float | Decimal | str
        Price in 10,000-yen units. Floats are converted through ``str`` so
        that ``200.0001`` stays exactly ``200.0001``.

    Returns
    -------
    Decimal
        The validated price.

    Raises
    ------
    ValidationError
        If the price is negative, NaN, infinite or not a number.
    """
    if isinstance(price, bool):
        raise ValidationError(f"Price must be a number, got {price!r}")

    try:
        if isinstance(price, Decimal):
            value = price
        elif isinstance(price, (int, float, str)):
            value = Decimal(str(price).strip())
        else:
            raise ValidationError(f"Price must be a number, got {type(price).__name__}")
    except InvalidOperation as e:
        raise ValidationError(f"Price must be a number, got {price!r}") from e

    if not value.is_finite():
        raise ValidationError(f"Price must be finite, got {price!r}")
    if value < 0:
        raise ValidationError(f"Price must not be negative, got {price!r}")
    return value


def standard_fee(price: int | float | Decimal | str) -> Decimal:
    """Conventional brokerage commission for a sale at ``price``."""
    value = validate_price(price)
    for upper, rate, fixed in STANDARD_FEE_TIERS:
        if upper is None or value <= upper:
            return value * rate + fixed
    raise AssertionError("unreachable: last tier is unbounded")


def platform_fee(price: int | float | Decimal | str) -> Decimal:
    """Commission this marketplace charges for a sale at ``price``."""
    return validate_price(price) * PLATFORM_FEE_RATE


def calculate_fees(prop: Property) -> FeeBreakdown:
    """Compute both fees for a single property."""
    price = validate_price(prop.price)
    return FeeBreakdown(
        property_id=prop.property_id,
        price=price,
        standard_fee=standard_fee(price),
        platform_fee=platform_fee(price),
    )


def aggregate_fees(
    properties: Iterable[Property],
    statuses: Iterable[PropertyStatus] = FEE_STATUSES,
) -> FeeTotals:
    """Sum standard and platform fees over properties in ``statuses``.

    Parameters
    ----------
    properties : Iterable[Property]
        The user's properties.
    statuses : Iterable[PropertyStatus]
        Statuses to include (default ACTIVE and SOLD).

    Returns
    -------
    FeeTotals
        Per-property breakdowns and their sums. Empty when nothing matches.
    """
    wanted = frozenset(statuses)
    breakdowns = tuple(calculate_fees(p) for p in properties if p.status in wanted)

    totals = FeeTotals(
        breakdowns=breakdowns,
        total_standard_fee=sum((b.standard_fee for b in breakdowns), Decimal("0")),
        total_platform_fee=sum((b.platform_fee for b in breakdowns), Decimal("0")),
    )
    logger.debug(
        "Aggregated fees over %d properties: standard=%s platform=%s",
        totals.property_count,
        totals.total_standard_fee,
        totals.total_platform_fee,
    )
    return totals
