"""Property listing model."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from seller_dashboard.models.base import Location
from seller_dashboard.models.enums import PropertyStatus


@dataclass
class Property:
    """A property listing owned by exactly one user.

    ``price`` is in 10,000-yen units (see ``seller_dashboard.units``).
    """

    property_id: str
    owner_id: str
    title: str
    price: Decimal
    status: PropertyStatus = PropertyStatus.DRAFT
    created_at: datetime | None = None
    images: list[str] = field(default_factory=list)
    favorite_count: int = 0
    message_count: int = 0
    location: Location | None = None
    layout: str | None = None  # e.g. 3LDK
    area_sqm: float | None = None
    build_year: int | None = None
    description: str = ""

    @property
    def image_count(self) -> int:
        """Number of listing photos."""
        return len(self.images)

    @property
    def is_listed(self) -> bool:
        """Whether buyers can see the listing."""
        return self.status != PropertyStatus.DRAFT
