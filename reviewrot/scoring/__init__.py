"""Scoring engine for review freshness and profile health."""

from .rot import calculate_rot_score, get_rot_status, score_rot
from .health import calculate_review_health_score, get_health_status
from .profile import calculate_profile_score
from .photos import calculate_photo_score
from .responses import calculate_response_score
from .overall import (
    audit_snapshot,
    calculate_overall_score,
    estimate_potential_impact,
)

__all__ = [
    "calculate_rot_score",
    "get_rot_status",
    "score_rot",
    "calculate_review_health_score",
    "get_health_status",
    "calculate_profile_score",
    "calculate_photo_score",
    "calculate_response_score",
    "calculate_overall_score",
    "estimate_potential_impact",
    "audit_snapshot",
]
