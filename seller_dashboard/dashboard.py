"""Seller dashboard and back-office views composed from the core functions."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from seller_dashboard.advisor import advise_portfolio, sale_schedule
from seller_dashboard.config import AdvisorConfig
from seller_dashboard.exceptions import AuthorizationError
from seller_dashboard.models import (
    FeeTotals,
    PlatformStats,
    PropertyAdvice,
    PropertyStatus,
    SavingsSummary,
    SchedulePhase,
    SellerStats,
)
from seller_dashboard.pricing.fees import aggregate_fees
from seller_dashboard.pricing.savings import aggregate_savings
from seller_dashboard.session import SessionContext
from seller_dashboard.stats import platform_stats, seller_stats
from seller_dashboard.store.listings import ListingStore

logger = logging.getLogger(__name__)


@dataclass
class SellerDashboard:
    """Everything the seller tab of "my page" shows."""

    user_id: str
    stats: SellerStats
    fees: FeeTotals
    savings: SavingsSummary
    advice: list[PropertyAdvice] = field(default_factory=list)
    schedules: dict[str, list[SchedulePhase]] = field(default_factory=dict)


def build_seller_dashboard(
    session: SessionContext,
    store: ListingStore,
    add_ons: Iterable[str] = (),
    advisor_config: AdvisorConfig | None = None,
) -> SellerDashboard:
    """Build the dashboard for the session user's own listings.

    Parameters
    ----------
    session : SessionContext
        Caller identity and clock.
    store : ListingStore
        Source of the user's property snapshots.
    add_ons : Iterable[str]
        Add-on keys to include in the savings comparison.
    advisor_config : AdvisorConfig | None
        Advisor thresholds.

    Returns
    -------
    SellerDashboard
        Stats, fees, savings, and advice and schedules for unsold listings.
    """
    now = session.current_time()
    properties = store.properties_for_owner(session.user_id)

    advice = advise_portfolio(properties, now, advisor_config)
    schedules = {
        p.property_id: sale_schedule(p, now)
        for p in properties
        if p.status != PropertyStatus.SOLD
    }

    dashboard = SellerDashboard(
        user_id=session.user_id,
        stats=seller_stats(properties),
        fees=aggregate_fees(properties),
        savings=aggregate_savings(properties, add_ons),
        advice=advice,
        schedules=schedules,
    )
    logger.info(
        "Built dashboard for %s: %d properties, net savings %s",
        session.user_id,
        dashboard.stats.total_properties,
        dashboard.savings.net_savings_with_add_ons,
    )
    return dashboard


def build_admin_stats(session: SessionContext, store: ListingStore) -> PlatformStats:
    """Platform-wide counters. Only administrators may call this."""
    if not session.is_admin:
        raise AuthorizationError(f"User {session.user_id} is not an administrator")
    return platform_stats(
        users=store.users.values(),
        properties=store.all_properties(),
        message_count=store.message_count,
        now=session.current_time(),
    )
