"""Build scoring snapshots from provider lookups."""

from datetime import datetime
from typing import Optional

from .config import ScoringConfig
from .dates import days_since_last_review, sort_newest_first
from .models import BusinessSnapshot, PlaceDetails


def build_snapshot(
    place: PlaceDetails,
    now: Optional[datetime] = None,
    config: Optional[ScoringConfig] = None,
) -> BusinessSnapshot:
    """
    Normalize a provider result into the signals the scorers need.

    Reviews are ordered newest first before the days-since-last-review
    count is taken. No datable reviews gives the stale sentinel (999).

    Args:
        place: Provider lookup result
        now: Reference instant (defaults to current UTC time)
        config: Scoring configuration (uses defaults if not provided)

    Returns:
        BusinessSnapshot for the scoring engine
    """
    config = config or ScoringConfig()
    reviews = sort_newest_first(place.reviews, now)
    description = (place.description or "").strip()

    return BusinessSnapshot(
        days_since_last_review=days_since_last_review(
            reviews, now, sentinel=config.stale_days_sentinel
        ),
        total_reviews=place.review_count or 0,
        avg_rating=float(place.rating or 0.0),
        has_name=bool(place.name),
        has_address=bool(place.address) and not place.service_area,
        is_service_area=place.service_area,
        has_phone=bool(place.phone),
        has_website=bool(place.website),
        has_hours=place.has_hours,
        has_description=bool(description),
        description_length=len(description),
        category_count=len(place.categories),
        has_service_attributes=place.has_service_attributes,
        photo_count=place.photo_count,
        photos_capped=place.photos_capped,
        reviews=tuple(reviews),
    )
