"""Shared fixtures: a fake provider and sample businesses."""

from datetime import datetime, timedelta, timezone
from typing import Optional

import pytest

from reviewrot.models import PlaceDetails, Review


def make_place(days_since_review: int = 10, now: Optional[datetime] = None, **overrides) -> PlaceDetails:
    """A complete, well-kept profile whose newest review is N days old."""
    now = now or datetime.now(timezone.utc)
    newest = now - timedelta(days=days_since_review)

    values = dict(
        place_id="ChIJ-joe",
        name="Joe's Plumbing Austin",
        address="1 Main St, Austin, TX 78701",
        rating=4.8,
        review_count=80,
        reviews=[
            Review(published_at=newest - timedelta(days=7 * i), has_owner_response=i < 4)
            for i in range(5)
        ],
        categories=["plumber", "water_heater_installer", "drainage_service"],
        phone="(512) 555-0100",
        website="https://joesplumbing.example.com",
        has_hours=True,
        description="Family-owned plumbers serving Austin homes and businesses since 1985.",
        photo_count=60,
        has_service_attributes=True,
        source="fake",
    )
    values.update(overrides)
    return PlaceDetails(**values)


class FakeProvider:
    """Provider double that returns a fixed place and records lookups."""

    name = "fake"

    def __init__(self, place: Optional[PlaceDetails] = None):
        self.place = place
        self.calls = []
        self.closed = False

    def find_business(self, query: str, place_id: Optional[str] = None) -> Optional[PlaceDetails]:
        self.calls.append((query, place_id))
        return self.place

    def close(self):
        self.closed = True


@pytest.fixture
def healthy_place():
    return make_place()


@pytest.fixture
def fake_provider(healthy_place):
    return FakeProvider(healthy_place)
