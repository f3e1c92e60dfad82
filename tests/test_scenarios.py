"""Tests for the seller portfolio scenario."""

from datetime import datetime

from seller_dashboard.dashboard import build_seller_dashboard
from seller_dashboard.models import PropertyStatus
from seller_dashboard.scenarios import SellerPortfolioScenario
from seller_dashboard.session import SessionContext


class TestSellerPortfolioScenario:
    """Tests for SellerPortfolioScenario."""

    def test_generate(self, seed: int, now: datetime) -> None:
        scenario = SellerPortfolioScenario(
            num_sellers=3,
            properties_per_seller=(2, 3),
            num_buyers=4,
            seed=seed,
            now=now,
        )

        store = scenario.generate()

        assert len(scenario.sellers) == 3
        assert len(scenario.buyers) == 4
        assert len(store.users) == 7
        assert 6 <= len(store.properties) <= 9

    def test_drafts_have_no_engagement(self, seed: int, now: datetime) -> None:
        scenario = SellerPortfolioScenario(
            num_sellers=5,
            num_buyers=10,
            favorite_rate=1.0,
            inquiry_rate=1.0,
            seed=seed,
            now=now,
        )
        store = scenario.generate()

        for prop in store.all_properties():
            if prop.status == PropertyStatus.DRAFT:
                assert prop.favorite_count == 0
                assert prop.message_count == 0
            else:
                assert prop.favorite_count == 10

    def test_dashboards_build_for_every_seller(self, seed: int, now: datetime) -> None:
        scenario = SellerPortfolioScenario(num_sellers=3, seed=seed, now=now)
        store = scenario.generate()

        for seller in scenario.sellers:
            dashboard = build_seller_dashboard(SessionContext(user_id=seller.user_id, now=now), store)
            assert dashboard.stats.total_properties == len(store.properties_for_owner(seller.user_id))
            assert all(advice.actions for advice in dashboard.advice)
