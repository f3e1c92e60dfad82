"""Scenarios for generating sample marketplaces."""

from seller_dashboard.scenarios.portfolio import SellerPortfolioScenario

__all__ = ["SellerPortfolioScenario"]
