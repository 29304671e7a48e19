"""Response score - Does the owner reply to reviews?"""

from typing import Sequence

from ..models import Review, ResponseScore
from .common import round_half_up


def calculate_response_score(reviews: Sequence[Review]) -> ResponseScore:
    """
    Score the share of reviews with an owner response.

    Reviews whose provider does not report owner replies are left out.
    If none of them report it, the score is None.

    Args:
        reviews: Reviews to check (order irrelevant)

    Returns:
        ResponseScore where score equals the response rate (0-100)
    """
    if not reviews:
        return ResponseScore(
            value=0,
            response_rate=0,
            issues=("No reviews to respond to",),
            recommendations=("Start asking happy customers for reviews and reply to each one",),
        )

    known = [review.has_owner_response for review in reviews if review.has_owner_response is not None]
    if not known:
        return ResponseScore(value=None, response_rate=None)

    rate = round_half_up(sum(known) / len(known) * 100)

    issues = []
    recommendations = []

    if rate < 50:
        issues.append(f"Low review response rate ({rate}%)")
        recommendations.append("Respond to every review, positive or negative, within 48 hours")
    elif rate < 100:
        recommendations.append(f"Good response rate ({rate}%) - aim to respond to every review")

    return ResponseScore(
        value=rate,
        response_rate=rate,
        issues=tuple(issues),
        recommendations=tuple(recommendations),
    )
