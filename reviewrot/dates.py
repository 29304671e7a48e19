"""Review date parsing: relative strings, provider timestamps, days since last review."""

import calendar
import logging
import re
from datetime import datetime, timedelta, timezone
from typing import Iterable, Optional

from .models import Review

logger = logging.getLogger(__name__)

STALE_DAYS_SENTINEL = 999

_NUMBER = re.compile(r"\d+")
# Fractional seconds beyond microseconds (Places API returns nanoseconds)
_LONG_FRACTION = re.compile(r"(\.\d{6})\d+")


def _utc(dt: datetime) -> datetime:
    """Treat naive datetimes as UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def subtract_months(dt: datetime, months: int) -> datetime:
    """Step back whole calendar months, clamping the day to the month's end."""
    total = dt.year * 12 + (dt.month - 1) - months
    year, month = divmod(total, 12)
    month += 1
    day = min(dt.day, calendar.monthrange(year, month)[1])
    return dt.replace(year=year, month=month, day=day)


def subtract_years(dt: datetime, years: int) -> datetime:
    """Step back whole calendar years (Feb 29 becomes Feb 28)."""
    try:
        return dt.replace(year=dt.year - years)
    except ValueError:
        return dt.replace(year=dt.year - years, day=28)


def parse_relative_date(text: Optional[str], now: Optional[datetime] = None) -> Optional[datetime]:
    """
    Convert a relative timestamp like "2 months ago" into an instant.

    The first integer in the text is the quantity ("a week ago" means 1).
    Units are checked in order: hour/minute/second (treated as now), day,
    week, month, year. Months and years are calendar steps, not fixed
    day counts.

    Args:
        text: Relative date string from a provider
        now: Reference instant (defaults to current UTC time)

    Returns:
        The instant, or None if no unit keyword was found
    """
    if not text:
        return None

    now = _utc(now) if now else datetime.now(timezone.utc)
    lowered = text.lower()

    match = _NUMBER.search(lowered)
    amount = int(match.group()) if match else 1

    if "hour" in lowered or "minute" in lowered or "second" in lowered:
        return now
    if "day" in lowered:
        return now - timedelta(days=amount)
    if "week" in lowered:
        return now - timedelta(weeks=amount)
    if "month" in lowered:
        return subtract_months(now, amount)
    if "year" in lowered:
        return subtract_years(now, amount)

    logger.debug("Could not parse relative date: %r", text)
    return None


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """
    Parse an ISO 8601 timestamp from a provider response.

    Handles a trailing "Z" and sub-microsecond fractions.
    """
    if not value:
        return None

    cleaned = _LONG_FRACTION.sub(r"\1", value.strip())
    if cleaned.endswith("Z"):
        cleaned = cleaned[:-1] + "+00:00"

    try:
        return _utc(datetime.fromisoformat(cleaned))
    except ValueError:
        logger.debug("Could not parse timestamp: %r", value)
        return None


def review_instant(review: Review, now: Optional[datetime] = None) -> Optional[datetime]:
    """When a review was published: absolute timestamp first, else its relative date."""
    if review.published_at is not None:
        return _utc(review.published_at)
    return parse_relative_date(review.relative_date, now)


def sort_newest_first(reviews: Iterable[Review], now: Optional[datetime] = None) -> list[Review]:
    """Order reviews newest first; undated reviews go last."""
    oldest = datetime.min.replace(tzinfo=timezone.utc)
    return sorted(
        reviews,
        key=lambda r: review_instant(r, now) or oldest,
        reverse=True,
    )


def days_since_last_review(
    reviews: Iterable[Review],
    now: Optional[datetime] = None,
    sentinel: int = STALE_DAYS_SENTINEL,
) -> int:
    """
    Whole days between now and the newest review.

    Args:
        reviews: Reviews in any order
        now: Reference instant (defaults to current UTC time)
        sentinel: Returned when there are no datable reviews

    Returns:
        Days elapsed (floored, never negative), or the sentinel
    """
    now = _utc(now) if now else datetime.now(timezone.utc)
    instants = [t for t in (review_instant(r, now) for r in reviews) if t is not None]

    if not instants:
        return sentinel

    elapsed = now - max(instants)
    return max(0, elapsed.days)
