"""Base models shared across the dashboard."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Location:
    """Where a property is.

    ``prefecture`` is the Japanese prefecture name (e.g. ``"東京都"``),
    which the price estimator uses for its regional multiplier.
    """

    prefecture: str
    city: str
    address: str = ""


@dataclass
class User:
    """Marketplace account. Sellers and buyers share the same model."""

    user_id: str
    login_id: str
    name: str | None = None
    email: str | None = None
    is_admin: bool = False
    created_at: datetime | None = None
