"""Seller and platform statistics."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Iterable

from seller_dashboard.models import (
    PlatformStats,
    Property,
    PropertyStatus,
    SellerStats,
    User,
)


def seller_stats(properties: Iterable[Property]) -> SellerStats:
    """Summarise a seller's listings."""
    stats = SellerStats(status_counts={status: 0 for status in PropertyStatus})
    for prop in properties:
        stats.total_properties += 1
        stats.status_counts[prop.status] += 1
        stats.total_favorites += prop.favorite_count
        stats.total_messages += prop.message_count
        if prop.message_count > 0:
            stats.properties_with_inquiries += 1
    return stats


def _is_recent(created_at: datetime | None, since: datetime) -> bool:
    if created_at is None:
        return False
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    return created_at >= since


def platform_stats(
    users: Iterable[User],
    properties: Iterable[Property],
    message_count: int,
    now: datetime,
    window_days: int = 7,
) -> PlatformStats:
    """Back-office totals, with counts of what was created in the last ``window_days``."""
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    since = now - timedelta(days=window_days)

    stats = PlatformStats(total_messages=message_count)
    for user in users:
        stats.total_users += 1
        if _is_recent(user.created_at, since):
            stats.recent_users += 1

    for prop in properties:
        stats.total_properties += 1
        if prop.status == PropertyStatus.ACTIVE:
            stats.active_properties += 1
        elif prop.status == PropertyStatus.SOLD:
            stats.sold_properties += 1
        if _is_recent(prop.created_at, since):
            stats.recent_properties += 1

    return stats
