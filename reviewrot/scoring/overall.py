"""Overall audit score and the entry point tying the scorers together."""

import logging
from typing import Optional

from ..config import ScoringConfig
from ..models import BusinessSnapshot, PotentialImpact, ScoreReport
from .common import clamp_score, round_half_up
from .health import calculate_review_health_score, get_health_status
from .photos import calculate_photo_score
from .profile import calculate_profile_score
from .responses import calculate_response_score
from .rot import calculate_rot_score, get_rot_status

logger = logging.getLogger(__name__)


def calculate_overall_score(
    review_health: int,
    profile: int,
    photos: Optional[int],
    responses: Optional[int],
    config: Optional[ScoringConfig] = None,
) -> int:
    """
    Combine the four sub-scores with fixed weights (35/25/20/20).

    An unknown (None) photo or response score is left out and the
    remaining weights are scaled back up to a total of 1.

    Returns:
        Overall score from 0-100
    """
    config = config or ScoringConfig()
    factors = [
        (review_health, config.review_health_weight),
        (profile, config.profile_weight),
        (photos, config.photo_weight),
        (responses, config.response_weight),
    ]
    known = [(value, weight) for value, weight in factors if value is not None]

    total = sum(value * weight for value, weight in known)
    if len(known) < len(factors):
        total /= sum(weight for _, weight in known)

    return clamp_score(total)


def estimate_potential_impact(
    overall_score: int,
    config: Optional[ScoringConfig] = None,
) -> PotentialImpact:
    """
    Estimate what closing the gap to a score of 70 is worth.

    Linear in the gap; used for display copy only.
    """
    config = config or ScoringConfig()
    gap = max(0, config.impact_target - overall_score)

    return PotentialImpact(
        gap=gap,
        visibility_gain_pct=round_half_up(gap * config.visibility_per_point),
        missed_calls_per_month=round_half_up(gap * config.calls_per_point),
        revenue_at_risk=gap * config.revenue_per_point,
    )


def audit_snapshot(
    snapshot: BusinessSnapshot,
    config: Optional[ScoringConfig] = None,
) -> ScoreReport:
    """
    Run the full multi-factor audit on a snapshot.

    Args:
        snapshot: Business signals to score
        config: Scoring configuration (uses defaults if not provided)

    Returns:
        Immutable ScoreReport
    """
    config = config or ScoringConfig()

    rot_score = calculate_rot_score(snapshot.days_since_last_review)
    review_health = calculate_review_health_score(
        snapshot.days_since_last_review,
        snapshot.total_reviews,
        snapshot.avg_rating,
        config,
    )
    profile = calculate_profile_score(snapshot, config)
    photos = calculate_photo_score(snapshot.photo_count, capped=snapshot.photos_capped)
    responses = calculate_response_score(snapshot.reviews)

    overall = calculate_overall_score(
        review_health, profile.value, photos.value, responses.value, config
    )

    logger.debug(
        "Audit scores: health=%d profile=%d photos=%s responses=%s overall=%d",
        review_health, profile.value, photos.value, responses.value, overall,
    )

    return ScoreReport(
        rot_score=rot_score,
        review_health_score=review_health,
        profile=profile,
        photos=photos,
        responses=responses,
        overall_score=overall,
        status=get_health_status(overall),
        rot_status=get_rot_status(rot_score),
        impact=estimate_potential_impact(overall, config),
    )
