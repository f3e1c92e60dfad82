"""Listing action advisor.

Evaluates a fixed list of independent rules against each property and
collects every rule that matches. Rules keyed to the listing age are
skipped, not failed, when the property has no usable creation time.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Iterable

from seller_dashboard.config import AdvisorConfig
from seller_dashboard.exceptions import PartialDataError
from seller_dashboard.models import (
    ActionItem,
    ActionLink,
    Priority,
    Property,
    PropertyAdvice,
    PropertyStatus,
    SchedulePhase,
)

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def days_since_listing(prop: Property, now: datetime) -> int:
    """Whole days between ``prop.created_at`` and ``now``.

    Naive datetimes are taken to be UTC.

    Raises
    ------
    PartialDataError
        If the creation time is missing, not a datetime, or in the future.
    """
    created_at = prop.created_at
    if created_at is None:
        raise PartialDataError(f"Property {prop.property_id} has no creation time")
    if not isinstance(created_at, datetime):
        raise PartialDataError(
            f"Property {prop.property_id} has invalid creation time {created_at!r}"
        )

    elapsed = (_as_utc(now) - _as_utc(created_at)).total_seconds()
    if elapsed < 0:
        raise PartialDataError(
            f"Property {prop.property_id} was created after {now.isoformat()}"
        )
    return int(elapsed // SECONDS_PER_DAY)


@dataclass(frozen=True)
class _Facts:
    """Snapshot of the values the rules read."""

    prop: Property
    days: int | None
    config: AdvisorConfig


@dataclass(frozen=True)
class _Rule:
    rule_id: str
    needs_days: bool
    matches: Callable[[_Facts], bool]
    build: Callable[[_Facts], ActionItem]


def _edit_link(prop: Property, label: str) -> ActionLink:
    return ActionLink(label=label, href=f"/properties/{prop.property_id}/edit")


def _add_photos(f: _Facts) -> ActionItem:
    return ActionItem(
        rule_id="add_photos",
        priority=Priority.HIGH,
        title="Add more photos",
        description=(
            f"This listing has {f.prop.image_count} photos. Listings with "
            f"{f.config.min_photos} or more get noticeably more inquiries."
        ),
        link=_edit_link(f.prop, "Add photos"),
    )


def _no_inquiries(f: _Facts) -> ActionItem:
    return ActionItem(
        rule_id="no_inquiries",
        priority=Priority.HIGH,
        title="No inquiries yet",
        description=(
            f"Listed {f.days} days ago without a single inquiry. "
            "Consider reviewing the price or improving the description."
        ),
        link=ActionLink(label="Get a price check", command="price_suggest"),
    )


def _interest_without_contact(f: _Facts) -> ActionItem:
    return ActionItem(
        rule_id="interest_without_contact",
        priority=Priority.MEDIUM,
        title="Buyers are interested",
        description=(
            f"{f.prop.favorite_count} users saved this listing but nobody has "
            "made contact. A fuller description can turn interest into inquiries."
        ),
        link=_edit_link(f.prop, "Edit description"),
    )


def _price_review(f: _Facts) -> ActionItem:
    return ActionItem(
        rule_id="price_review",
        priority=Priority.MEDIUM,
        title="Consider a price review",
        description=(
            f"Listed for {f.days} days. Adjusting to current market prices "
            "may improve the chance of a sale."
        ),
        link=ActionLink(label="AI price check", command="price_suggest"),
    )


def _reply_to_inquiries(f: _Facts) -> ActionItem:
    return ActionItem(
        rule_id="reply_to_inquiries",
        priority=Priority.HIGH,
        title="Reply to inquiries",
        description=(
            f"There are {f.prop.message_count} inquiries. Replying quickly "
            "leads to more closed sales."
        ),
        link=ActionLink(
            label="Open messages",
            href=f"/messages?propertyId={f.prop.property_id}",
        ),
    )


def _publish_listing(f: _Facts) -> ActionItem:
    return ActionItem(
        rule_id="publish_listing",
        priority=Priority.HIGH,
        title="Publish the listing",
        description="This listing is still a draft. Publish it when ready to reach buyers.",
        link=_edit_link(f.prop, "Publish settings"),
    )


ALL_GOOD = ActionItem(
    rule_id="all_good",
    priority=Priority.LOW,
    title="All good",
    description="Nothing needs your attention right now.",
)

RULES: tuple[_Rule, ...] = (
    _Rule(
        "add_photos",
        needs_days=False,
        matches=lambda f: f.prop.image_count < f.config.min_photos,
        build=_add_photos,
    ),
    _Rule(
        "no_inquiries",
        needs_days=True,
        matches=lambda f: (
            f.prop.status == PropertyStatus.ACTIVE
            and f.days >= f.config.no_inquiry_days
            and f.prop.message_count == 0
        ),
        build=_no_inquiries,
    ),
    _Rule(
        "interest_without_contact",
        needs_days=False,
        matches=lambda f: (
            f.prop.favorite_count >= f.config.interest_favorites
            and f.prop.message_count == 0
        ),
        build=_interest_without_contact,
    ),
    _Rule(
        "price_review",
        needs_days=True,
        matches=lambda f: (
            f.prop.status == PropertyStatus.ACTIVE
            and f.days >= f.config.price_review_days
        ),
        build=_price_review,
    ),
    _Rule(
        "reply_to_inquiries",
        needs_days=False,
        matches=lambda f: f.prop.message_count > 0,
        build=_reply_to_inquiries,
    ),
    _Rule(
        "publish_listing",
        needs_days=False,
        matches=lambda f: f.prop.status == PropertyStatus.DRAFT,
        build=_publish_listing,
    ),
)


def advise_property(
    prop: Property,
    now: datetime,
    config: AdvisorConfig | None = None,
) -> PropertyAdvice:
    """Collect every action item that applies to ``prop``.

    Parameters
    ----------
    prop : Property
        Property snapshot.
    now : datetime
        Reference time for the listing age.
    config : AdvisorConfig | None
        Rule thresholds; defaults apply when omitted.

    Returns
    -------
    PropertyAdvice
        Matching items in rule order, or a single low-priority "all good"
        item when nothing matched. Rules that need the listing age are
        reported in ``skipped_rules`` when it is unavailable.
    """
    config = config or AdvisorConfig()
    advice = PropertyAdvice(property_id=prop.property_id)

    try:
        days: int | None = days_since_listing(prop, now)
    except PartialDataError as e:
        days = None
        advice.issues.append(str(e))
        logger.warning(
            "Skipping age-based rules: %s",
            e,
            extra={"property_id": prop.property_id, "owner_id": prop.owner_id},
        )

    facts = _Facts(prop=prop, days=days, config=config)
    for rule in RULES:
        if rule.needs_days and days is None:
            advice.skipped_rules.append(rule.rule_id)
            continue
        if rule.matches(facts):
            advice.actions.append(rule.build(facts))

    if not advice.actions:
        advice.actions.append(ALL_GOOD)

    return advice


def advise_portfolio(
    properties: Iterable[Property],
    now: datetime,
    config: AdvisorConfig | None = None,
    include_sold: bool = False,
) -> list[PropertyAdvice]:
    """Advise on each property of a seller.

    Sold listings are left out unless ``include_sold`` is set.
    """
    results = [
        advise_property(p, now, config)
        for p in properties
        if include_sold or p.status != PropertyStatus.SOLD
    ]
    logger.debug("Advised on %d properties", len(results))
    return results


def sort_actions(actions: Iterable[ActionItem]) -> list[ActionItem]:
    """Order items high to medium to low, keeping rule order within a priority."""
    return sorted(actions, key=lambda a: a.priority.rank)


# (name, target day)
SCHEDULE_PHASES: tuple[tuple[str, int], ...] = (
    ("Listing start", 0),
    ("Inquiry handling", 7),
    ("Viewing and negotiation", 30),
    ("Contract", 60),
    ("Handover", 90),
)


def sale_schedule(prop: Property, now: datetime) -> list[SchedulePhase]:
    """Sale schedule with the phases this listing has completed."""
    try:
        days: int | None = days_since_listing(prop, now)
    except PartialDataError:
        days = None

    completed = (
        True,
        days is not None and days >= 7,
        prop.status in (PropertyStatus.NEGOTIATING, PropertyStatus.SOLD),
        prop.status == PropertyStatus.SOLD,
        False,
    )
    return [
        SchedulePhase(name=name, target_day=day, completed=done)
        for (name, day), done in zip(SCHEDULE_PHASES, completed)
    ]
