"""In-memory listing store with referential integrity."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any

from seller_dashboard.exceptions import (
    AuthorizationError,
    EntityNotFoundError,
    ReferentialIntegrityError,
    ValidationError,
)
from seller_dashboard.models import Property, PropertyStatus, User
from seller_dashboard.pricing.fees import validate_price
from seller_dashboard.session import SessionContext
from seller_dashboard.store.records import parse_images

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = frozenset({"status", "price", "title", "description", "images"})
IDENTITY_FIELDS = frozenset({"property_id", "owner_id", "created_at"})


@dataclass
class Message:
    """Buyer-seller message about a property."""

    message_id: str
    property_id: str
    sender_id: str
    receiver_id: str
    content: str
    created_at: datetime | None = None


@dataclass
class ListingStore:
    """In-memory store for users, listings, favorites and messages."""

    users: dict[str, User] = field(default_factory=dict)
    properties: dict[str, Property] = field(default_factory=dict)
    messages: list[Message] = field(default_factory=list)

    # Relationship indexes
    _owner_properties: dict[str, list[str]] = field(default_factory=dict)
    _favorites: dict[str, set[str]] = field(default_factory=dict)
    _property_messages: dict[str, list[int]] = field(default_factory=dict)

    def add_user(self, user: User) -> None:
        """Add a user to the store."""
        if user.created_at is None:
            user.created_at = datetime.now(timezone.utc)
        self.users[user.user_id] = user
        self._owner_properties.setdefault(user.user_id, [])

    def add_property(self, prop: Property) -> None:
        """Add a property to the store.

        Raises
        ------
        ReferentialIntegrityError
            If the owner is not in the store.
        ValidationError
            If a property with the same id already exists. Use
            ``update_property`` to change a stored listing.
        """
        if prop.owner_id not in self.users:
            raise ReferentialIntegrityError(f"User {prop.owner_id} not found")
        if prop.property_id in self.properties:
            raise ValidationError(f"Property {prop.property_id} already exists")

        self.properties[prop.property_id] = prop
        self._owner_properties[prop.owner_id].append(prop.property_id)
        self._favorites.setdefault(prop.property_id, set())
        self._property_messages.setdefault(prop.property_id, [])

    def add_favorite(self, user_id: str, property_id: str) -> None:
        """Record that a user saved a property. Saving twice is a no-op."""
        if user_id not in self.users:
            raise ReferentialIntegrityError(f"User {user_id} not found")
        if property_id not in self.properties:
            raise ReferentialIntegrityError(f"Property {property_id} not found")
        self._favorites[property_id].add(user_id)

    def add_message(self, message: Message) -> None:
        """Add a message to the store."""
        if message.property_id not in self.properties:
            raise ReferentialIntegrityError(f"Property {message.property_id} not found")
        for user_id in (message.sender_id, message.receiver_id):
            if user_id not in self.users:
                raise ReferentialIntegrityError(f"User {user_id} not found")

        if message.created_at is None:
            message.created_at = datetime.now(timezone.utc)
        idx = len(self.messages)
        self.messages.append(message)
        self._property_messages[message.property_id].append(idx)

    def get_user(self, user_id: str) -> User:
        """Get a user by ID."""
        try:
            return self.users[user_id]
        except KeyError:
            raise EntityNotFoundError(f"User {user_id} not found") from None

    def get_property(self, property_id: str) -> Property:
        """Get a property snapshot with current favorite and message counts."""
        try:
            prop = self.properties[property_id]
        except KeyError:
            raise EntityNotFoundError(f"Property {property_id} not found") from None
        return self._snapshot(prop)

    def properties_for_owner(self, owner_id: str) -> list[Property]:
        """Snapshots of every property a user owns, in insertion order."""
        if owner_id not in self.users:
            raise EntityNotFoundError(f"User {owner_id} not found")
        return [self._snapshot(self.properties[pid]) for pid in self._owner_properties[owner_id]]

    def all_properties(self) -> list[Property]:
        return [self._snapshot(p) for p in self.properties.values()]

    def favorites_of(self, user_id: str) -> list[Property]:
        """Properties a user has saved."""
        return [
            self._snapshot(self.properties[pid])
            for pid, fans in self._favorites.items()
            if user_id in fans
        ]

    def messages_for_property(self, property_id: str) -> list[Message]:
        return [self.messages[i] for i in self._property_messages.get(property_id, [])]

    def update_property(
        self,
        session: SessionContext,
        property_id: str,
        **changes: Any,
    ) -> Property:
        """Apply owner edits to a property.

        Raises
        ------
        EntityNotFoundError
            If the property does not exist.
        AuthorizationError
            If the session user does not own the property.
        ValidationError
            If a field is immutable, unknown or invalid.
        """
        try:
            prop = self.properties[property_id]
        except KeyError:
            raise EntityNotFoundError(f"Property {property_id} not found") from None

        if prop.owner_id != session.user_id:
            raise AuthorizationError(
                f"User {session.user_id} may not edit property {property_id}"
            )

        immutable = IDENTITY_FIELDS.intersection(changes)
        if immutable:
            raise ValidationError(f"Fields are immutable: {', '.join(sorted(immutable))}")
        unknown = set(changes) - EDITABLE_FIELDS
        if unknown:
            raise ValidationError(f"Fields are not editable: {', '.join(sorted(unknown))}")

        if "price" in changes:
            changes["price"] = validate_price(changes["price"])
        if "status" in changes:
            try:
                changes["status"] = PropertyStatus(changes["status"])
            except ValueError as e:
                raise ValidationError(f"Unknown property status: {changes['status']!r}") from e
        if "images" in changes:
            changes["images"] = parse_images(changes["images"])

        updated = replace(prop, **changes)
        self.properties[property_id] = updated
        logger.info(
            "Property %s updated by %s: %s",
            property_id,
            session.user_id,
            ", ".join(sorted(changes)),
        )
        return self._snapshot(updated)

    @property
    def message_count(self) -> int:
        return len(self.messages)

    def _snapshot(self, prop: Property) -> Property:
        """Copy of ``prop`` with engagement counters derived from the store."""
        return replace(
            prop,
            images=list(prop.images),
            favorite_count=len(self._favorites.get(prop.property_id, ())),
            message_count=len(self._property_messages.get(prop.property_id, ())),
        )
