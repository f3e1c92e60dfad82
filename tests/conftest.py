"""Pytest configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Any, Callable

import pytest

from seller_dashboard.models import Property, PropertyStatus, User
from seller_dashboard.store import ListingStore


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def now() -> datetime:
    """Fixed reference time."""
    return datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def make_property(now: datetime) -> Callable[..., Property]:
    """Factory for properties listed ``days_listed`` days before ``now``."""

    def _make(
        property_id: str = "prop-001",
        owner_id: str = "user-001",
        price: Decimal | int = 300,
        status: PropertyStatus = PropertyStatus.ACTIVE,
        days_listed: int | None = 0,
        image_count: int = 5,
        **kwargs: Any,
    ) -> Property:
        created_at = now - timedelta(days=days_listed) if days_listed is not None else None
        return Property(
            property_id=property_id,
            owner_id=owner_id,
            title=kwargs.pop("title", "Test listing"),
            price=Decimal(price),
            status=status,
            created_at=created_at,
            images=[f"/img/{i}.jpg" for i in range(image_count)],
            **kwargs,
        )

    return _make


@pytest.fixture
def seller() -> User:
    """Sample seller."""
    return User(user_id="user-001", login_id="seller1", name="Test Seller")


@pytest.fixture
def buyer() -> User:
    """Sample buyer."""
    return User(user_id="user-002", login_id="buyer1", name="Test Buyer")


@pytest.fixture
def store(seller: User, buyer: User) -> ListingStore:
    """Store with one seller and one buyer."""
    store = ListingStore()
    store.add_user(seller)
    store.add_user(buyer)
    return store
