"""Tests for the listing action advisor."""

import logging
from datetime import datetime, timedelta

import pytest

from seller_dashboard.advisor import (
    advise_portfolio,
    advise_property,
    days_since_listing,
    sale_schedule,
    sort_actions,
)
from seller_dashboard.config import AdvisorConfig
from seller_dashboard.exceptions import PartialDataError
from seller_dashboard.models import Priority, PropertyStatus


class TestDaysSinceListing:
    """Tests for listing age."""

    def test_whole_days_floored(self, make_property, now: datetime) -> None:
        prop = make_property(days_listed=0)
        prop.created_at = now - timedelta(days=6, hours=23)
        assert days_since_listing(prop, now) == 6

    def test_naive_timestamps_are_utc(self, make_property, now: datetime) -> None:
        prop = make_property()
        prop.created_at = (now - timedelta(days=3)).replace(tzinfo=None)
        assert days_since_listing(prop, now) == 3

    def test_missing(self, make_property, now: datetime) -> None:
        with pytest.raises(PartialDataError):
            days_since_listing(make_property(days_listed=None), now)

    def test_wrong_type(self, make_property, now: datetime) -> None:
        prop = make_property()
        prop.created_at = "2025-01-01"
        with pytest.raises(PartialDataError):
            days_since_listing(prop, now)

    def test_future(self, make_property, now: datetime) -> None:
        prop = make_property()
        prop.created_at = now + timedelta(days=1)
        with pytest.raises(PartialDataError):
            days_since_listing(prop, now)


class TestAdviseProperty:
    """Tests for rule evaluation on a single property."""

    def test_few_photos_and_no_inquiries(self, make_property, now: datetime) -> None:
        prop = make_property(image_count=2, status=PropertyStatus.ACTIVE, days_listed=10)

        advice = advise_property(prop, now)

        assert advice.rule_ids == ["add_photos", "no_inquiries"]
        assert all(a.priority == Priority.HIGH for a in advice.actions)
        assert advice.skipped_rules == []

    def test_draft_with_enough_photos(self, make_property, now: datetime) -> None:
        prop = make_property(image_count=10, status=PropertyStatus.DRAFT, days_listed=0)

        advice = advise_property(prop, now)

        assert advice.rule_ids == ["publish_listing"]
        assert advice.actions[0].priority == Priority.HIGH

    def test_draft_never_gets_age_rules(self, make_property, now: datetime) -> None:
        prop = make_property(image_count=10, status=PropertyStatus.DRAFT, days_listed=45)
        assert advise_property(prop, now).rule_ids == ["publish_listing"]

    def test_messages_trigger_reply(self, make_property, now: datetime) -> None:
        prop = make_property(image_count=5, days_listed=2, message_count=1)

        advice = advise_property(prop, now)

        assert advice.rule_ids == ["reply_to_inquiries"]
        assert advice.actions[0].link.href == "/messages?propertyId=prop-001"

    def test_all_good(self, make_property, now: datetime) -> None:
        prop = make_property(image_count=5, days_listed=3, favorite_count=2)

        advice = advise_property(prop, now)

        assert advice.rule_ids == ["all_good"]
        assert advice.actions[0].priority == Priority.LOW
        assert advice.top_priority == Priority.LOW

    def test_interest_without_contact(self, make_property, now: datetime) -> None:
        prop = make_property(image_count=8, days_listed=1, favorite_count=3)

        advice = advise_property(prop, now)

        assert advice.rule_ids == ["interest_without_contact"]
        assert advice.actions[0].priority == Priority.MEDIUM

    def test_long_listing_collects_every_match(self, make_property, now: datetime) -> None:
        prop = make_property(image_count=1, days_listed=31, favorite_count=4)

        advice = advise_property(prop, now)

        assert advice.rule_ids == [
            "add_photos",
            "no_inquiries",
            "interest_without_contact",
            "price_review",
        ]
        assert advice.actions[3].link.command == "price_suggest"

    def test_price_review_with_inquiries(self, make_property, now: datetime) -> None:
        prop = make_property(image_count=6, days_listed=30, message_count=2)

        assert advise_property(prop, now).rule_ids == ["price_review", "reply_to_inquiries"]

    def test_negotiating_skips_active_only_rules(self, make_property, now: datetime) -> None:
        prop = make_property(status=PropertyStatus.NEGOTIATING, image_count=6, days_listed=40)
        assert advise_property(prop, now).rule_ids == ["all_good"]

    def test_thresholds_at_boundaries(self, make_property, now: datetime) -> None:
        six_days = make_property(image_count=5, days_listed=6)
        seven_days = make_property(image_count=5, days_listed=7)

        assert advise_property(six_days, now).rule_ids == ["all_good"]
        assert advise_property(seven_days, now).rule_ids == ["no_inquiries"]

    def test_missing_timestamp_skips_age_rules(self, make_property, now: datetime) -> None:
        prop = make_property(image_count=2, days_listed=None)

        advice = advise_property(prop, now)

        assert advice.rule_ids == ["add_photos"]
        assert advice.skipped_rules == ["no_inquiries", "price_review"]
        assert len(advice.issues) == 1

    def test_missing_timestamp_is_logged(
        self, make_property, now: datetime, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="seller_dashboard.advisor"):
            advise_property(make_property(days_listed=None), now)
        assert "Skipping age-based rules" in caplog.text

    def test_custom_config(self, make_property, now: datetime) -> None:
        config = AdvisorConfig(min_photos=3, no_inquiry_days=2)
        prop = make_property(image_count=3, days_listed=2)

        assert advise_property(prop, now, config).rule_ids == ["no_inquiries"]

    def test_deterministic(self, make_property, now: datetime) -> None:
        prop = make_property(image_count=1, days_listed=12, favorite_count=5)
        assert advise_property(prop, now) == advise_property(prop, now)

    def test_does_not_mutate_property(self, make_property, now: datetime) -> None:
        prop = make_property(image_count=1, days_listed=12)
        before = (prop.status, list(prop.images), prop.created_at)
        advise_property(prop, now)
        assert (prop.status, prop.images, prop.created_at) == before


class TestAdvisePortfolio:
    """Tests for batch advice."""

    def test_malformed_property_does_not_abort_batch(self, make_property, now: datetime) -> None:
        props = [
            make_property("a", image_count=2, days_listed=10),
            make_property("b", image_count=2, days_listed=None),
            make_property("c", image_count=6, days_listed=1),
        ]

        results = advise_portfolio(props, now)

        assert [r.property_id for r in results] == ["a", "b", "c"]
        assert results[0].rule_ids == ["add_photos", "no_inquiries"]
        assert results[1].skipped_rules == ["no_inquiries", "price_review"]
        assert results[2].rule_ids == ["all_good"]

    def test_sold_excluded_by_default(self, make_property, now: datetime) -> None:
        props = [
            make_property("a", status=PropertyStatus.SOLD),
            make_property("b", status=PropertyStatus.ACTIVE),
        ]

        assert [r.property_id for r in advise_portfolio(props, now)] == ["b"]
        assert len(advise_portfolio(props, now, include_sold=True)) == 2


class TestSortActions:
    """Tests for priority ordering."""

    def test_stable_priority_order(self, make_property, now: datetime) -> None:
        prop = make_property(image_count=1, days_listed=31, favorite_count=4)
        actions = advise_property(prop, now).actions

        ordered = sort_actions(actions)

        assert [a.rule_id for a in ordered] == [
            "add_photos",
            "no_inquiries",
            "interest_without_contact",
            "price_review",
        ]
        assert [a.priority for a in ordered] == [
            Priority.HIGH,
            Priority.HIGH,
            Priority.MEDIUM,
            Priority.MEDIUM,
        ]

    def test_high_before_medium(self, make_property, now: datetime) -> None:
        prop = make_property(image_count=6, days_listed=30, message_count=2)
        actions = advise_property(prop, now).actions

        assert [a.rule_id for a in sort_actions(actions)] == ["reply_to_inquiries", "price_review"]


class TestSaleSchedule:
    """Tests for the sale schedule."""

    def test_new_listing(self, make_property, now: datetime) -> None:
        phases = sale_schedule(make_property(days_listed=0), now)

        assert [p.target_day for p in phases] == [0, 7, 30, 60, 90]
        assert [p.completed for p in phases] == [True, False, False, False, False]

    def test_negotiating(self, make_property, now: datetime) -> None:
        prop = make_property(status=PropertyStatus.NEGOTIATING, days_listed=20)
        assert [p.completed for p in sale_schedule(prop, now)] == [True, True, True, False, False]

    def test_sold(self, make_property, now: datetime) -> None:
        prop = make_property(status=PropertyStatus.SOLD, days_listed=70)
        assert [p.completed for p in sale_schedule(prop, now)] == [True, True, True, True, False]

    def test_missing_timestamp(self, make_property, now: datetime) -> None:
        phases = sale_schedule(make_property(days_listed=None), now)
        assert phases[1].completed is False
