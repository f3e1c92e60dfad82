"""Sample data generators."""

from seller_dashboard.generators.listing import PropertyGenerator, UserGenerator

__all__ = ["PropertyGenerator", "UserGenerator"]
