"""Dashboard statistics models."""

from dataclasses import dataclass, field

from seller_dashboard.models.enums import PropertyStatus


@dataclass
class SellerStats:
    """Counters shown at the top of a seller's dashboard."""

    total_properties: int = 0
    status_counts: dict[PropertyStatus, int] = field(default_factory=dict)
    total_favorites: int = 0
    total_messages: int = 0
    properties_with_inquiries: int = 0


@dataclass
class PlatformStats:
    """Back-office counters for administrators."""

    total_users: int = 0
    total_properties: int = 0
    total_messages: int = 0
    active_properties: int = 0
    sold_properties: int = 0
    recent_users: int = 0
    recent_properties: int = 0
