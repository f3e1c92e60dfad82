"""Fee and savings result models. Derived on every view, never persisted."""

from dataclasses import dataclass, field
from decimal import Decimal

ZERO = Decimal("0")


@dataclass(frozen=True)
class FeeBreakdown:
    """Standard and platform fee for one property."""

    property_id: str
    price: Decimal
    standard_fee: Decimal
    platform_fee: Decimal

    @property
    def savings(self) -> Decimal:
        return self.standard_fee - self.platform_fee


@dataclass(frozen=True)
class FeeTotals:
    """Fees summed over a filtered property set."""

    breakdowns: tuple[FeeBreakdown, ...] = ()
    total_standard_fee: Decimal = ZERO
    total_platform_fee: Decimal = ZERO

    @property
    def property_count(self) -> int:
        return len(self.breakdowns)


@dataclass(frozen=True)
class AddOn:
    """Optional paid service selectable per listing.

    A flat add-on costs ``unit_cost`` per property. When ``months`` is set
    the cost is ``unit_cost * months`` per property.
    """

    key: str
    label: str
    unit_cost: Decimal
    months: int | None = None

    @property
    def cost_per_property(self) -> Decimal:
        if self.months is None:
            return self.unit_cost
        return self.unit_cost * self.months


@dataclass(frozen=True)
class SavingsSummary:
    """What a seller saves by listing here instead of through a broker."""

    property_count: int = 0
    total_standard_fee: Decimal = ZERO
    total_platform_fee: Decimal = ZERO
    total_add_on_cost: Decimal = ZERO
    selected_add_ons: tuple[str, ...] = field(default_factory=tuple)

    @property
    def has_applicable_properties(self) -> bool:
        return self.property_count > 0

    @property
    def net_savings_without_add_ons(self) -> Decimal:
        return self.total_standard_fee - self.total_platform_fee

    @property
    def net_savings_with_add_ons(self) -> Decimal:
        return self.total_standard_fee - (self.total_platform_fee + self.total_add_on_cost)


@dataclass(frozen=True)
class PriceEstimate:
    """Heuristic appraisal result, in 10,000-yen units."""

    estimated_price: Decimal
    min_price: Decimal
    max_price: Decimal
    confidence: int  # percent
