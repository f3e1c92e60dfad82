"""Shared serialization utilities for sinks."""

from dataclasses import fields, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from seller_dashboard.models import (
    FeeBreakdown,
    FeeTotals,
    Property,
    PropertyAdvice,
    SavingsSummary,
)

# Computed properties worth exporting alongside the stored fields
DERIVED_FIELDS: dict[type, tuple[str, ...]] = {
    FeeBreakdown: ("savings",),
    FeeTotals: ("property_count",),
    SavingsSummary: (
        "has_applicable_properties",
        "net_savings_without_add_ons",
        "net_savings_with_add_ons",
    ),
    Property: ("image_count",),
    PropertyAdvice: ("top_priority",),
}


def to_dict(obj: Any) -> dict:
    """Convert object to dictionary."""
    if is_dataclass(obj) and not isinstance(obj, type):
        return dataclass_to_dict(obj)
    elif isinstance(obj, dict):
        return {_serialize_key(k): serialize_value(v) for k, v in obj.items()}
    else:
        return {"value": str(obj)}


def dataclass_to_dict(obj: Any) -> dict:
    """Convert dataclass to dict, including derived fields.

    Fields whose names start with an underscore are internal indexes and
    are left out.
    """
    result = {
        f.name: serialize_value(getattr(obj, f.name))
        for f in fields(obj)
        if not f.name.startswith("_")
    }
    for name in DERIVED_FIELDS.get(type(obj), ()):
        result[name] = serialize_value(getattr(obj, name))
    return result


def _serialize_key(key: Any) -> Any:
    if isinstance(key, Enum):
        return key.value
    return key


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif is_dataclass(value) and not isinstance(value, type):
        return dataclass_to_dict(value)
    elif isinstance(value, dict):
        return {_serialize_key(k): serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value
