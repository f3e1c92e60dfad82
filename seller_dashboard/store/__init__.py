"""In-memory listing repository and record parsing."""

from seller_dashboard.store.listings import ListingStore, Message
from seller_dashboard.store.records import (
    parse_images,
    property_from_record,
    user_from_record,
)

__all__ = [
    "ListingStore",
    "Message",
    "parse_images",
    "property_from_record",
    "user_from_record",
]
