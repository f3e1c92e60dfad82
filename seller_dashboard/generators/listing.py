"""User and property generators for sample marketplaces."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Iterator

from seller_dashboard.generators.base import BaseGenerator
from seller_dashboard.models import Location, Property, PropertyStatus, User

LAYOUTS = ["1K", "1LDK", "2LDK", "3LDK", "4LDK"]


class UserGenerator(BaseGenerator):
    """Generate marketplace accounts."""

    def generate(self, now: datetime | None = None) -> User:
        """Generate a single user created within the last year.

        Returns
        -------
        User
            Generated user.
        """
        now = now or datetime.now(timezone.utc)
        return User(
            user_id=self.fake.uuid4(),
            login_id=self.fake.unique.user_name(),
            name=self.fake.name(),
            email=self.fake.email(),
            created_at=now - timedelta(days=self.random.randint(0, 365)),
        )

    def generate_batch(self, count: int, now: datetime | None = None) -> Iterator[User]:
        for _ in range(count):
            yield self.generate(now)


class PropertyGenerator(BaseGenerator):
    """Generate property listings in a realistic mix of lifecycle stages."""

    STATUSES = list(PropertyStatus)
    STATUS_WEIGHTS = [0.15, 0.55, 0.15, 0.15]  # DRAFT, ACTIVE, NEGOTIATING, SOLD

    # Price per square metre in 10,000-yen units
    PRICE_PER_SQM_RANGE = (20, 120)

    def generate(self, owner_id: str, now: datetime | None = None) -> Property:
        """Generate a property listed within the last 90 days.

        Parameters
        ----------
        owner_id : str
            Owning user.
        now : datetime | None
            Reference time for the creation timestamp.

        Returns
        -------
        Property
            Generated property with no favorites or messages; the store
            derives those counters.
        """
        now = now or datetime.now(timezone.utc)
        status = self.random.choices(self.STATUSES, weights=self.STATUS_WEIGHTS, k=1)[0]

        area = round(self.random.uniform(20, 120), 1)
        price_per_sqm = self.random.randint(*self.PRICE_PER_SQM_RANGE)
        price = Decimal(int(area * price_per_sqm))
        prefecture = self.fake.prefecture()
        city = self.fake.city()
        layout = self.random.choice(LAYOUTS)

        return Property(
            property_id=self.fake.uuid4(),
            owner_id=owner_id,
            title=f"{city} {layout}",
            price=price,
            status=status,
            created_at=now - timedelta(days=self.random.randint(0, 90)),
            images=[
                f"/uploads/{self.fake.uuid4()}.jpg"
                for _ in range(self.random.randint(0, 10))
            ],
            location=Location(
                prefecture=prefecture,
                city=city,
                address=self.fake.town(),
            ),
            layout=layout,
            area_sqm=area,
            build_year=self.random.randint(1975, now.year),
            description=self.fake.text(max_nb_chars=120),
        )

    def generate_for_owner(
        self,
        owner_id: str,
        count: int,
        now: datetime | None = None,
    ) -> Iterator[Property]:
        for _ in range(count):
            yield self.generate(owner_id, now)
