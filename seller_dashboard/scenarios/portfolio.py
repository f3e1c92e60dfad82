"""Seller portfolio scenario: a small marketplace with engagement history."""

import logging
import random
from datetime import datetime, timedelta, timezone

from seller_dashboard.generators import PropertyGenerator, UserGenerator
from seller_dashboard.models import PropertyStatus, User
from seller_dashboard.store.listings import ListingStore, Message

logger = logging.getLogger(__name__)


class SellerPortfolioScenario:
    """Generate sellers with listings, plus buyers who save and ask about them.

    Buyers only interact with listings that are visible, so drafts never
    collect favorites or messages.
    """

    def __init__(
        self,
        num_sellers: int = 5,
        properties_per_seller: tuple[int, int] = (1, 4),
        num_buyers: int = 10,
        favorite_rate: float = 0.3,
        inquiry_rate: float = 0.15,
        seed: int | None = None,
        locale: str = "ja_JP",
        now: datetime | None = None,
    ) -> None:
        """Initialize the scenario.

        Parameters
        ----------
        num_sellers : int
            Number of sellers to generate.
        properties_per_seller : tuple[int, int]
            Min and max listings per seller.
        num_buyers : int
            Number of buyers browsing the marketplace.
        favorite_rate : float
            Chance that a buyer saves a given visible listing.
        inquiry_rate : float
            Chance that a buyer messages the seller of a given visible listing.
        seed : int | None
            Random seed for reproducibility.
        locale : str
            Faker locale.
        now : datetime | None
            Reference time; defaults to the current UTC time.
        """
        self.num_sellers = num_sellers
        self.properties_per_seller = properties_per_seller
        self.num_buyers = num_buyers
        self.favorite_rate = favorite_rate
        self.inquiry_rate = inquiry_rate
        self.now = now or datetime.now(timezone.utc)

        self._random = random.Random(seed)
        self.store = ListingStore()
        self._user_gen = UserGenerator(seed=seed, locale=locale)
        # Offset so property ids never repeat user ids
        self._property_gen = PropertyGenerator(
            seed=seed + 1 if seed is not None else None,
            locale=locale,
        )
        self.sellers: list[User] = []
        self.buyers: list[User] = []

    def generate(self) -> ListingStore:
        """Generate all data for the scenario.

        Returns
        -------
        ListingStore
            Store containing all generated data.
        """
        logger.info(
            "Starting seller portfolio scenario: %d sellers, %d buyers",
            self.num_sellers,
            self.num_buyers,
        )

        for user in self._user_gen.generate_batch(self.num_sellers, self.now):
            self.store.add_user(user)
            self.sellers.append(user)
            count = self._random.randint(*self.properties_per_seller)
            for prop in self._property_gen.generate_for_owner(user.user_id, count, self.now):
                self.store.add_property(prop)

        for user in self._user_gen.generate_batch(self.num_buyers, self.now):
            self.store.add_user(user)
            self.buyers.append(user)

        self._generate_engagement()

        logger.info(
            "Generated marketplace: %d users, %d properties, %d messages",
            len(self.store.users),
            len(self.store.properties),
            self.store.message_count,
        )
        return self.store

    def _generate_engagement(self) -> None:
        """Favorites and inquiries from buyers on visible listings."""
        visible = [p for p in self.store.properties.values() if p.is_listed]
        for buyer in self.buyers:
            for prop in visible:
                if self._random.random() < self.favorite_rate:
                    self.store.add_favorite(buyer.user_id, prop.property_id)
                if prop.status != PropertyStatus.SOLD and self._random.random() < self.inquiry_rate:
                    self.store.add_message(self._inquiry(buyer, prop.property_id, prop.owner_id))

    def _inquiry(self, buyer: User, property_id: str, seller_id: str) -> Message:
        sent_at = self.now - timedelta(hours=self._random.randint(1, 24 * 14))
        return Message(
            message_id=self._user_gen.fake.uuid4(),
            property_id=property_id,
            sender_id=buyer.user_id,
            receiver_id=seller_id,
            content="内覧は可能でしょうか？",
            created_at=sent_at,
        )
