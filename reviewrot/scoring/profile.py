"""Profile completeness score - Is the business profile filled out?"""

from typing import Optional

from ..config import ScoringConfig
from ..models import BusinessSnapshot, ProfileScore
from .common import clamp_score


def calculate_profile_score(
    snapshot: BusinessSnapshot,
    config: Optional[ScoringConfig] = None,
) -> ProfileScore:
    """
    Score profile completeness against a fixed checklist.

    Checks run in a fixed order (name, address, phone, website, hours,
    description, categories, attributes); every missing or weak field
    adds an issue and a recommendation in that order.

    Args:
        snapshot: Business signals to score
        config: Scoring configuration (uses defaults if not provided)

    Returns:
        ProfileScore with value 0-100, issues and recommendations
    """
    config = config or ScoringConfig()
    earned = 0
    issues = []
    recommendations = []

    # Business name (10 points)
    if snapshot.has_name:
        earned += config.name_points
    else:
        issues.append("Business name is missing")
        recommendations.append("Add your exact business name as customers know it")

    # Address (10 points, 5 for service-area businesses)
    if snapshot.has_address:
        earned += config.address_points
    elif snapshot.is_service_area:
        earned += config.service_area_points
        issues.append("No storefront address listed (service area only)")
        recommendations.append("Define your service areas precisely so local searches can find you")
    else:
        issues.append("Business address is missing")
        recommendations.append("Add your business address or set up a service area")

    # Phone (15 points)
    if snapshot.has_phone:
        earned += config.phone_points
    else:
        issues.append("No phone number listed")
        recommendations.append("Add a local phone number so customers can call you directly")

    # Website (15 points)
    if snapshot.has_website:
        earned += config.website_points
    else:
        issues.append("No website linked")
        recommendations.append("Link your website to drive traffic from your profile")

    # Hours (15 points)
    if snapshot.has_hours:
        earned += config.hours_points
    else:
        issues.append("Business hours are not set")
        recommendations.append("Add your opening hours, including holiday hours")

    # Description (10 points, 5 if short)
    if snapshot.has_description and snapshot.description_length >= config.description_min_length:
        earned += config.description_points
    elif snapshot.has_description:
        earned += config.short_description_points
        issues.append("Business description is too short")
        recommendations.append(
            "Expand your description to explain your services, service area and what sets you apart"
        )
    else:
        issues.append("No business description")
        recommendations.append("Write a keyword-rich description of your business (up to 750 characters)")

    # Categories (15 points at 3+, 10 at 1-2)
    if snapshot.category_count >= config.recommended_categories:
        earned += config.categories_points
    elif snapshot.category_count > 0:
        earned += config.few_categories_points
        noun = "category" if snapshot.category_count == 1 else "categories"
        issues.append(f"Only {snapshot.category_count} business {noun} set")
        recommendations.append(
            f"Add secondary categories (at least {config.recommended_categories} total) to appear in more searches"
        )
    else:
        issues.append("No business categories set")
        recommendations.append("Choose a primary category and add relevant secondary categories")

    # Service attributes (10 points)
    if snapshot.has_service_attributes:
        earned += config.attributes_points
    else:
        issues.append("No service attributes listed")
        recommendations.append("Add attributes like payment options, accessibility and service options")

    return ProfileScore(
        value=clamp_score(earned / config.profile_total_points * 100),
        issues=tuple(issues),
        recommendations=tuple(recommendations),
    )
