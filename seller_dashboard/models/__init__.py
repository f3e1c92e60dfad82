"""Domain models for the seller dashboard."""

from seller_dashboard.models.actions import (
    ActionItem,
    ActionLink,
    PropertyAdvice,
    SchedulePhase,
)
from seller_dashboard.models.base import Location, User
from seller_dashboard.models.enums import Priority, PropertyStatus
from seller_dashboard.models.fees import (
    AddOn,
    FeeBreakdown,
    FeeTotals,
    PriceEstimate,
    SavingsSummary,
)
from seller_dashboard.models.property import Property
from seller_dashboard.models.stats import PlatformStats, SellerStats

__all__ = [
    "ActionItem",
    "ActionLink",
    "AddOn",
    "FeeBreakdown",
    "FeeTotals",
    "Location",
    "PlatformStats",
    "PriceEstimate",
    "Priority",
    "Property",
    "PropertyAdvice",
    "PropertyStatus",
    "SavingsSummary",
    "SchedulePhase",
    "SellerStats",
    "User",
]
