"""Review health score - Are the reviews fresh, plentiful and positive?"""

from typing import Optional

from ..config import ScoringConfig
from ..models import HealthStatus
from .common import clamp_score
from .rot import calculate_rot_score


def calculate_review_health_score(
    days_since_review: int,
    total_reviews: int,
    avg_rating: float,
    config: Optional[ScoringConfig] = None,
) -> int:
    """
    Calculate the review health score.

    Weighted blend of freshness (the inverse of the rot score), volume
    (review count against a target of 100) and quality (rating out of 5).

    Args:
        days_since_review: Whole days since the newest review
        total_reviews: Total review count on the profile
        avg_rating: Average star rating (0.0-5.0)
        config: Scoring configuration (uses defaults if not provided)

    Returns:
        Review health score from 0-100 (higher = healthier)
    """
    config = config or ScoringConfig()

    freshness = 100 - calculate_rot_score(days_since_review)
    volume = min(100.0, max(0, total_reviews) / config.volume_target * 100)
    quality = max(0.0, min(5.0, avg_rating)) / 5 * 100

    return clamp_score(
        freshness * config.freshness_weight
        + volume * config.volume_weight
        + quality * config.quality_weight
    )


def get_health_status(score: int) -> HealthStatus:
    """Map a 0-100 health-style score to its label (color via .color)."""
    if score >= 90:
        return HealthStatus.EXCELLENT
    if score >= 70:
        return HealthStatus.GOOD
    if score >= 50:
        return HealthStatus.FAIR
    if score >= 30:
        return HealthStatus.POOR
    return HealthStatus.CRITICAL
