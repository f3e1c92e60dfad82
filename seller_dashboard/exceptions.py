"""Custom exception hierarchy for seller-dashboard."""


class SellerDashboardError(Exception):
    """Base exception for all seller-dashboard errors."""


class ValidationError(SellerDashboardError):
    """Raised when input is invalid and the computation must not proceed."""


class PartialDataError(SellerDashboardError):
    """Raised when a property lacks an optional field a single rule needs."""


class EntityNotFoundError(SellerDashboardError):
    """Raised when a referenced entity does not exist."""


class ReferentialIntegrityError(EntityNotFoundError):
    """Raised when a foreign key reference is violated."""


class AuthorizationError(SellerDashboardError):
    """Raised when the session may not perform the operation."""


class ConfigurationError(SellerDashboardError):
    """Raised when configuration is invalid or missing."""


class SinkError(SellerDashboardError):
    """Raised when a sink operation fails."""
