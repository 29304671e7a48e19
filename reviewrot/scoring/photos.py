"""Photo score - Does the profile show customers what to expect?"""

from ..models import PhotoScore


def calculate_photo_score(photo_count: int, capped: bool = False) -> PhotoScore:
    """
    Score a profile's photo count in fixed tiers.

    0 -> 0, 1-9 -> 25, 10-24 -> 50, 25-49 -> 75, 50+ -> 100.

    A capped count is only a lower bound: below 50 the tier is unknown
    and the score is None.

    Args:
        photo_count: Number of photos on the profile
        capped: Whether the provider stopped counting at a limit

    Returns:
        PhotoScore with tier score, count, issues and recommendations
    """
    count = max(0, photo_count)

    if capped and count < 50:
        return PhotoScore(
            value=None,
            count=count,
            recommendations=(f"At least {count} photos found - keep adding fresh photos every month",),
        )

    if count == 0:
        return PhotoScore(
            value=0,
            count=count,
            issues=("CRITICAL: No photos on your profile",),
            recommendations=(
                "Upload at least 10 photos: storefront, team, work in progress and finished jobs",
            ),
        )

    if count < 10:
        return PhotoScore(
            value=25,
            count=count,
            issues=(f"Very few photos ({count})",),
            recommendations=("Add more photos to reach at least 10 - profiles with photos get more clicks",),
        )

    if count < 25:
        return PhotoScore(
            value=50,
            count=count,
            issues=(f"Low photo count ({count})",),
            recommendations=("Aim for 25+ photos and add new ones every month",),
        )

    if count < 50:
        return PhotoScore(
            value=75,
            count=count,
            recommendations=(f"Good photo coverage ({count}) - add {50 - count} more to reach 50",),
        )

    return PhotoScore(
        value=100,
        count=count,
        recommendations=("Great photo coverage - keep adding fresh photos regularly",),
    )
