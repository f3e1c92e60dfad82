"""Enumeration types for listing entities."""

from enum import Enum


class PropertyStatus(str, Enum):
    DRAFT = "DRAFT"
    ACTIVE = "ACTIVE"
    NEGOTIATING = "NEGOTIATING"
    SOLD = "SOLD"


class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        """Sort key, lowest first."""
        return _PRIORITY_RANK[self]


_PRIORITY_RANK = {
    Priority.HIGH: 0,
    Priority.MEDIUM: 1,
    Priority.LOW: 2,
}
