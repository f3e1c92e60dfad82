"""Typed deserialization of raw listing rows.

Rows come from the web application's database with the photo list stored
as a JSON-encoded string and camelCase keys. Everything is validated here
so the dashboard only ever sees well-typed ``Property`` objects.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import Any, Mapping

from seller_dashboard.exceptions import ValidationError
from seller_dashboard.models import Location, Property, PropertyStatus, User
from seller_dashboard.pricing.fees import validate_price
from seller_dashboard.units import yen_to_man

logger = logging.getLogger(__name__)

PRICE_UNITS = ("man", "yen")


def _get(record: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    """Return the first key present, so camelCase and snake_case rows both work."""
    for key in keys:
        if key in record and record[key] is not None:
            return record[key]
    return default


def parse_images(raw: Any) -> list[str]:
    """Parse a photo list stored as a list or a JSON-encoded list of strings."""
    if raw is None or raw == "":
        return []
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ValidationError(f"Image list is not valid JSON: {e}") from e
    if not isinstance(raw, list) or not all(isinstance(i, str) for i in raw):
        raise ValidationError("Image list must be a list of strings")
    return list(raw)


def parse_timestamp(raw: Any) -> datetime | None:
    """Parse an ISO 8601 timestamp. Returns None when missing or malformed."""
    if raw is None or raw == "":
        return None
    if isinstance(raw, datetime):
        return raw
    if isinstance(raw, str):
        try:
            # fromisoformat before 3.11 rejects the Z suffix
            return datetime.fromisoformat(raw.replace("Z", "+00:00"))
        except ValueError:
            logger.warning("Unparseable timestamp %r", raw)
            return None
    logger.warning("Unexpected timestamp type %s", type(raw).__name__)
    return None


def parse_status(raw: Any) -> PropertyStatus:
    try:
        return PropertyStatus(str(raw).upper())
    except ValueError as e:
        raise ValidationError(f"Unknown property status: {raw!r}") from e


def _parse_count(record: Mapping[str, Any], *keys: str) -> int:
    value = _get(record, *keys, default=0)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValidationError(f"{keys[0]} must be a non-negative integer, got {value!r}")
    return value


def _optional_number(record: Mapping[str, Any], cast: type, *keys: str) -> Any:
    value = _get(record, *keys)
    if value is None:
        return None
    try:
        return cast(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{keys[0]} must be a number, got {value!r}") from e


def _engagement_counts(record: Mapping[str, Any]) -> Mapping[str, Any]:
    """Flat counters, or the nested ``_count`` object that aggregate queries return."""
    nested = record.get("_count")
    if nested is None:
        return record
    if not isinstance(nested, Mapping):
        raise ValidationError(f"_count must be an object, got {nested!r}")
    return {**nested, **{k: v for k, v in record.items() if k != "_count"}}


def property_from_record(record: Mapping[str, Any], price_unit: str = "man") -> Property:
    """Build a ``Property`` from a raw row.

    Parameters
    ----------
    record : Mapping[str, Any]
        Raw row with camelCase or snake_case keys. Engagement counts may be
        flat (``favoriteCount``) or nested as ``_count: {favorites, messages}``;
        flat keys win when both are present.
    price_unit : str
        ``"man"`` if the row's price is already in 10,000-yen units,
        ``"yen"`` to convert from yen.

    Returns
    -------
    Property
        Validated property. A missing or malformed creation time becomes
        ``None``; the advisor reports it later instead of failing here.

    Raises
    ------
    ValidationError
        If the id, owner or price is missing, or any field is invalid.
    """
    if price_unit not in PRICE_UNITS:
        raise ValidationError(f"price_unit must be one of {PRICE_UNITS}, got {price_unit!r}")

    property_id = _get(record, "id", "property_id")
    owner_id = _get(record, "userId", "owner_id")
    if not property_id or not owner_id:
        raise ValidationError("Property record needs an id and an owner")

    raw_price = _get(record, "price")
    if raw_price is None:
        raise ValidationError(f"Property record {property_id} needs a price")
    price = validate_price(raw_price)
    if price_unit == "yen":
        price = yen_to_man(price)

    prefecture = _get(record, "prefecture")
    location = (
        Location(
            prefecture=prefecture,
            city=_get(record, "city", default=""),
            address=_get(record, "address", default=""),
        )
        if prefecture
        else None
    )

    counts = _engagement_counts(record)
    area = _optional_number(record, float, "area", "area_sqm")
    build_year = _optional_number(record, int, "buildYear", "build_year")

    return Property(
        property_id=str(property_id),
        owner_id=str(owner_id),
        title=_get(record, "title", default=""),
        price=price,
        status=parse_status(_get(record, "status", default=PropertyStatus.DRAFT.value)),
        created_at=parse_timestamp(_get(record, "createdAt", "created_at")),
        images=parse_images(_get(record, "images")),
        favorite_count=_parse_count(counts, "favoriteCount", "favorite_count", "favorites"),
        message_count=_parse_count(counts, "messageCount", "message_count", "messages"),
        location=location,
        layout=_get(record, "layout"),
        area_sqm=area,
        build_year=build_year,
        description=_get(record, "description", default=""),
    )


def user_from_record(record: Mapping[str, Any]) -> User:
    """Build a ``User`` from a raw row."""
    user_id = _get(record, "id", "user_id")
    login_id = _get(record, "loginId", "login_id")
    if not user_id or not login_id:
        raise ValidationError("User record needs an id and a login id")
    return User(
        user_id=str(user_id),
        login_id=str(login_id),
        name=_get(record, "name"),
        email=_get(record, "email"),
        is_admin=bool(_get(record, "isAdmin", "is_admin", default=False)),
        created_at=parse_timestamp(_get(record, "createdAt", "created_at")),
    )
