"""Tests for the fee calculator."""

import math
from decimal import Decimal

import pytest

from seller_dashboard.exceptions import ValidationError
from seller_dashboard.models import PropertyStatus
from seller_dashboard.pricing.fees import (
    aggregate_fees,
    calculate_fees,
    platform_fee,
    standard_fee,
    validate_price,
)


class TestStandardFee:
    """Tests for the three-tier standard fee."""

    @pytest.mark.parametrize(
        "price,expected",
        [
            (0, Decimal("0")),
            (100, Decimal("5")),
            (200, Decimal("10")),
            (300, Decimal("14")),
            (400, Decimal("18")),
            (1000, Decimal("36")),
        ],
    )
    def test_tiers(self, price: int, expected: Decimal) -> None:
        assert standard_fee(price) == expected

    def test_continuous_at_lower_boundary(self) -> None:
        diff = standard_fee(200.0001) - standard_fee(200)
        assert Decimal("0") < diff < Decimal("0.001")

    def test_continuous_at_upper_boundary(self) -> None:
        diff = standard_fee(400.0001) - standard_fee(400)
        assert Decimal("0") < diff < Decimal("0.001")

    def test_accepts_decimal_and_string(self) -> None:
        assert standard_fee(Decimal("300")) == standard_fee("300") == Decimal("14")


class TestPlatformFee:
    """Tests for the platform fee."""

    @pytest.mark.parametrize("price", [0, 1, 150, 300, 1234.5, Decimal("98765")])
    def test_half_percent(self, price) -> None:
        assert platform_fee(price) == Decimal(str(price)) * Decimal("0.005")

    def test_example_price(self) -> None:
        assert platform_fee(300) == Decimal("1.5")


class TestValidatePrice:
    """Tests for price validation."""

    @pytest.mark.parametrize(
        "bad",
        [-1, -0.01, Decimal("-5"), math.nan, math.inf, -math.inf, Decimal("NaN"), "abc", True, None],
    )
    def test_rejects_invalid(self, bad) -> None:
        with pytest.raises(ValidationError):
            validate_price(bad)

    def test_does_not_clamp(self) -> None:
        with pytest.raises(ValidationError):
            standard_fee(-100)

    def test_float_converted_exactly(self) -> None:
        assert validate_price(200.0001) == Decimal("200.0001")


class TestCalculateFees:
    """Tests for per-property fee breakdowns."""

    def test_breakdown(self, make_property) -> None:
        breakdown = calculate_fees(make_property(price=300))

        assert breakdown.property_id == "prop-001"
        assert breakdown.standard_fee == Decimal("14")
        assert breakdown.platform_fee == Decimal("1.5")
        assert breakdown.savings == Decimal("12.5")

    def test_invalid_price_raises(self, make_property) -> None:
        prop = make_property(price=300)
        prop.price = Decimal("-1")
        with pytest.raises(ValidationError):
            calculate_fees(prop)


class TestAggregateFees:
    """Tests for fee aggregation."""

    def test_filters_active_and_sold(self, make_property) -> None:
        props = [
            make_property("a", price=100, status=PropertyStatus.ACTIVE),
            make_property("b", price=300, status=PropertyStatus.SOLD),
            make_property("c", price=500, status=PropertyStatus.DRAFT),
            make_property("d", price=500, status=PropertyStatus.NEGOTIATING),
        ]

        totals = aggregate_fees(props)

        assert totals.property_count == 2
        assert totals.total_standard_fee == Decimal("19")
        assert totals.total_platform_fee == Decimal("2")

    def test_custom_statuses(self, make_property) -> None:
        props = [
            make_property("a", price=100, status=PropertyStatus.ACTIVE),
            make_property("b", price=300, status=PropertyStatus.NEGOTIATING),
        ]

        totals = aggregate_fees(props, statuses=[PropertyStatus.NEGOTIATING])

        assert [b.property_id for b in totals.breakdowns] == ["b"]

    def test_empty(self) -> None:
        totals = aggregate_fees([])

        assert totals.property_count == 0
        assert totals.total_standard_fee == 0
        assert totals.total_platform_fee == 0
