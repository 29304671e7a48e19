"""Rot score calculation - How stale are the reviews?"""

from typing import Optional

from ..config import ScoringConfig
from ..models import RotReport, RotStatus
from .common import round_half_up

# (last day of band, start score, score span, band length in days)
ROT_BANDS = [
    (14, 0, 10, 14),
    (21, 10, 20, 7),
    (56, 30, 30, 35),
    (70, 60, 20, 14),
]


def calculate_rot_score(days_since_review: int) -> int:
    """
    Calculate the rot score for a business.

    Piecewise linear over five day bands: 0-14 days maps to 0-10,
    15-21 to 10-30, 22-56 to 30-60, 57-70 to 60-80 and anything older
    ramps from 80 to a cap of 100 over the following 30 days.

    Args:
        days_since_review: Whole days since the newest review (999 = none)

    Returns:
        Rot score from 0-100 (higher = staler)
    """
    days = max(0, days_since_review)
    band_start = 0

    for band_end, score_start, score_span, band_days in ROT_BANDS:
        if days <= band_end:
            return round_half_up(score_start + (days - band_start) / band_days * score_span)
        band_start = band_end

    return min(100, round_half_up(80 + (days - 70) / 30 * 20))


def get_rot_status(rot_score: int) -> RotStatus:
    """Map a rot score to its status label (urgency via .urgency)."""
    if rot_score <= 10:
        return RotStatus.HEALTHY_HEARTBEAT
    if rot_score <= 30:
        return RotStatus.EARLY_DECAY
    if rot_score <= 60:
        return RotStatus.FRESHNESS_FAILING
    if rot_score <= 80:
        return RotStatus.ROT_ZONE
    return RotStatus.CRITICAL_DECAY


def score_rot(
    days_since_review: int,
    config: Optional[ScoringConfig] = None,
) -> RotReport:
    """
    Score review freshness on its own.

    Args:
        days_since_review: Whole days since the newest review
        config: Scoring configuration (uses defaults if not provided)

    Returns:
        RotReport with score, status and days left before the rot zone
    """
    config = config or ScoringConfig()
    rot_score = calculate_rot_score(days_since_review)

    return RotReport(
        rot_score=rot_score,
        status=get_rot_status(rot_score),
        days_since_review=days_since_review,
        days_until_danger=max(0, config.danger_days - days_since_review),
    )
