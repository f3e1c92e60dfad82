"""Heuristic price estimator shown on the appraisal page."""

from __future__ import annotations

import random
from decimal import ROUND_HALF_UP, Decimal

from seller_dashboard.exceptions import ValidationError
from seller_dashboard.models import PriceEstimate

BASE_PRICE_PER_SQM = Decimal("50")  # 500,000 yen
DEPRECIATION_PER_YEAR = Decimal("0.02")
MIN_DEPRECIATION_RATE = Decimal("0.5")
PRICE_VARIANCE = Decimal("0.15")
CONFIDENCE_RANGE = (70, 90)

PREFECTURE_MULTIPLIERS: dict[str, Decimal] = {
    "東京都": Decimal("1.5"),
    "神奈川県": Decimal("1.3"),
    "大阪府": Decimal("1.2"),
    "愛知県": Decimal("1.1"),
}


def _round_man(value: Decimal) -> Decimal:
    return value.quantize(Decimal("1"), rounding=ROUND_HALF_UP)


def estimate_price(
    area_sqm: float | Decimal,
    build_year: int,
    prefecture: str,
    current_year: int,
    rng: random.Random | None = None,
) -> PriceEstimate:
    """Estimate a sale price from floor area, age and prefecture.

    Parameters
    ----------
    area_sqm : float | Decimal
        Floor area in square metres.
    build_year : int
        Year of construction.
    prefecture : str
        Prefecture name; unknown prefectures use a multiplier of 1.0.
    current_year : int
        Reference year for the building age.
    rng : random.Random | None
        Source for the confidence figure. Pass a seeded instance for
        reproducible results.

    Returns
    -------
    PriceEstimate
        Estimate and a +/-15% range, rounded to whole 10,000-yen units.
    """
    area = Decimal(str(area_sqm))
    if not area.is_finite() or area <= 0:
        raise ValidationError(f"Area must be positive, got {area_sqm!r}")
    if build_year > current_year:
        raise ValidationError(f"Build year {build_year} is in the future")

    age = current_year - build_year
    depreciation = max(MIN_DEPRECIATION_RATE, 1 - age * DEPRECIATION_PER_YEAR)
    multiplier = PREFECTURE_MULTIPLIERS.get(prefecture, Decimal("1"))

    estimated = _round_man(area * BASE_PRICE_PER_SQM * depreciation * multiplier)
    variance = estimated * PRICE_VARIANCE

    rng = rng or random.Random()
    return PriceEstimate(
        estimated_price=estimated,
        min_price=_round_man(estimated - variance),
        max_price=_round_man(estimated + variance),
        confidence=rng.randint(*CONFIDENCE_RANGE),
    )
