"""Savings compared with listing through a conventional broker."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterable, Mapping

from seller_dashboard.exceptions import ValidationError
from seller_dashboard.models import AddOn, Property, SavingsSummary
from seller_dashboard.pricing.fees import FEE_STATUSES, aggregate_fees

logger = logging.getLogger(__name__)

# Costs in 10,000-yen units
DEFAULT_ADD_ONS: dict[str, AddOn] = {
    "professional_photo": AddOn(
        key="professional_photo",
        label="Professional photography",
        unit_cost=Decimal("3"),
    ),
    "ad_listing": AddOn(
        key="ad_listing",
        label="Portal advertising",
        unit_cost=Decimal("1"),
        months=3,
    ),
    "viewing_assistance": AddOn(
        key="viewing_assistance",
        label="Viewing assistance",
        unit_cost=Decimal("2"),
    ),
}


def resolve_add_ons(
    selected: Iterable[str],
    catalog: Mapping[str, AddOn] = DEFAULT_ADD_ONS,
) -> list[AddOn]:
    """Look up selected add-on keys, dropping duplicates.

    Raises
    ------
    ValidationError
        If a key is not in the catalog.
    """
    add_ons: list[AddOn] = []
    seen: set[str] = set()
    for key in selected:
        if key in seen:
            continue
        if key not in catalog:
            raise ValidationError(f"Unknown add-on: {key}")
        seen.add(key)
        add_ons.append(catalog[key])
    return add_ons


def aggregate_savings(
    properties: Iterable[Property],
    selected: Iterable[str] = (),
    catalog: Mapping[str, AddOn] = DEFAULT_ADD_ONS,
) -> SavingsSummary:
    """Compute what a seller saves across their active and sold listings.

    Parameters
    ----------
    properties : Iterable[Property]
        The seller's properties, in any order.
    selected : Iterable[str]
        Keys of the add-ons the seller picked.
    catalog : Mapping[str, AddOn]
        Available add-ons.

    Returns
    -------
    SavingsSummary
        Totals and net savings. When no property is ACTIVE or SOLD the
        summary reports no applicable properties and every sum is zero.
    """
    add_ons = resolve_add_ons(selected, catalog)
    fees = aggregate_fees(properties, FEE_STATUSES)

    if fees.property_count == 0:
        logger.debug("No active or sold properties; savings are zero")
        return SavingsSummary(selected_add_ons=tuple(a.key for a in add_ons))

    add_on_cost = sum(
        (a.cost_per_property * fees.property_count for a in add_ons),
        Decimal("0"),
    )

    return SavingsSummary(
        property_count=fees.property_count,
        total_standard_fee=fees.total_standard_fee,
        total_platform_fee=fees.total_platform_fee,
        total_add_on_cost=add_on_cost,
        selected_add_ons=tuple(a.key for a in add_ons),
    )
