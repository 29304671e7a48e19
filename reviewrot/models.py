"""Data models for review scoring."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


class Urgency(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class RotStatus(Enum):
    """Labels over the rot score (higher = worse)."""

    HEALTHY_HEARTBEAT = "Healthy Heartbeat"
    EARLY_DECAY = "Early Decay"
    FRESHNESS_FAILING = "Freshness Failing"
    ROT_ZONE = "Rot Zone"
    CRITICAL_DECAY = "Critical Decay"

    @property
    def urgency(self) -> Urgency:
        return _ROT_URGENCY[self]


_ROT_URGENCY = {
    RotStatus.HEALTHY_HEARTBEAT: Urgency.LOW,
    RotStatus.EARLY_DECAY: Urgency.MEDIUM,
    RotStatus.FRESHNESS_FAILING: Urgency.HIGH,
    RotStatus.ROT_ZONE: Urgency.CRITICAL,
    RotStatus.CRITICAL_DECAY: Urgency.CRITICAL,
}


class HealthStatus(Enum):
    """Labels over health-style scores (higher = better)."""

    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"
    CRITICAL = "Critical"

    @property
    def color(self) -> str:
        return _HEALTH_COLORS[self]


_HEALTH_COLORS = {
    HealthStatus.EXCELLENT: "#22c55e",  # Green
    HealthStatus.GOOD: "#84cc16",       # Lime
    HealthStatus.FAIR: "#eab308",       # Yellow
    HealthStatus.POOR: "#f97316",       # Orange
    HealthStatus.CRITICAL: "#ef4444",   # Red
}


@dataclass(frozen=True)
class Review:
    """A single review as returned by a provider."""

    published_at: Optional[datetime] = None
    relative_date: Optional[str] = None  # e.g. "2 months ago"
    has_owner_response: Optional[bool] = None  # None when the provider does not say
    rating: Optional[float] = None
    author: str = ""
    text: str = ""


@dataclass
class PlaceDetails:
    """Business identity and profile data from a provider lookup."""

    place_id: str
    name: str
    address: Optional[str] = None
    rating: Optional[float] = None
    review_count: Optional[int] = None
    reviews: list[Review] = field(default_factory=list)
    categories: list[str] = field(default_factory=list)
    phone: Optional[str] = None
    website: Optional[str] = None
    has_hours: bool = False
    description: Optional[str] = None
    photo_count: int = 0
    photos_capped: bool = False  # photo_count is a lower bound (provider limit reached)
    service_area: bool = False  # No storefront address, serves an area
    has_service_attributes: bool = False
    source: str = ""  # Which provider produced this record

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "place_id": self.place_id,
            "name": self.name,
            "address": self.address,
            "rating": self.rating,
            "review_count": self.review_count,
            "categories": self.categories,
            "phone": self.phone,
            "website": self.website,
            "has_hours": self.has_hours,
            "photo_count": self.photo_count,
            "photos_capped": self.photos_capped,
            "service_area": self.service_area,
            "reviews_loaded": len(self.reviews),
            "source": self.source,
        }


@dataclass(frozen=True)
class BusinessSnapshot:
    """Normalized business signals fed to the scoring engine."""

    days_since_last_review: int = 999
    total_reviews: int = 0
    avg_rating: float = 0.0
    has_name: bool = False
    has_address: bool = False
    is_service_area: bool = False
    has_phone: bool = False
    has_website: bool = False
    has_hours: bool = False
    has_description: bool = False
    description_length: int = 0
    category_count: int = 0
    has_service_attributes: bool = False
    photo_count: int = 0
    photos_capped: bool = False
    reviews: tuple[Review, ...] = ()


@dataclass(frozen=True)
class ProfileScore:
    value: int
    issues: tuple[str, ...] = ()
    recommendations: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "score": self.value,
            "issues": list(self.issues),
            "recommendations": list(self.recommendations),
        }


@dataclass(frozen=True)
class PhotoScore:
    value: Optional[int]  # None when the count is only a lower bound
    count: int
    issues: tuple[str, ...] = ()
    recommendations: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "score": self.value,
            "count": self.count,
            "issues": list(self.issues),
            "recommendations": list(self.recommendations),
        }


@dataclass(frozen=True)
class ResponseScore:
    value: Optional[int]  # None when no review says whether the owner replied
    response_rate: Optional[int]
    issues: tuple[str, ...] = ()
    recommendations: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "score": self.value,
            "response_rate": self.response_rate,
            "issues": list(self.issues),
            "recommendations": list(self.recommendations),
        }


@dataclass(frozen=True)
class PotentialImpact:
    """Display-only estimate of what closing the gap to 70 is worth."""

    gap: int
    visibility_gain_pct: int
    missed_calls_per_month: int
    revenue_at_risk: int

    def to_dict(self) -> dict:
        return {
            "gap": self.gap,
            "visibility_gain_pct": self.visibility_gain_pct,
            "missed_calls_per_month": self.missed_calls_per_month,
            "revenue_at_risk": self.revenue_at_risk,
        }


@dataclass(frozen=True)
class RotReport:
    """Single-metric result: how stale are the reviews?"""

    rot_score: int
    status: RotStatus
    days_since_review: int
    days_until_danger: int

    @property
    def urgency(self) -> Urgency:
        return self.status.urgency

    def to_dict(self) -> dict:
        return {
            "rot_score": self.rot_score,
            "status": self.status.value,
            "urgency": self.urgency.value,
            "days_since_review": self.days_since_review,
            "days_until_danger": self.days_until_danger,
        }


@dataclass(frozen=True)
class ScoreReport:
    """Multi-factor audit result."""

    rot_score: int
    review_health_score: int
    profile: ProfileScore
    photos: PhotoScore
    responses: ResponseScore
    overall_score: int
    status: HealthStatus
    rot_status: RotStatus
    impact: PotentialImpact

    @property
    def urgency(self) -> Urgency:
        return self.rot_status.urgency

    @property
    def issues(self) -> list[str]:
        """All issues in check order: profile, photos, responses."""
        return [*self.profile.issues, *self.photos.issues, *self.responses.issues]

    @property
    def recommendations(self) -> list[str]:
        return [
            *self.profile.recommendations,
            *self.photos.recommendations,
            *self.responses.recommendations,
        ]

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "overall_score": self.overall_score,
            "status": self.status.value,
            "status_color": self.status.color,
            "rot_score": self.rot_score,
            "rot_status": self.rot_status.value,
            "urgency": self.urgency.value,
            "review_health_score": self.review_health_score,
            "profile": self.profile.to_dict(),
            "photos": self.photos.to_dict(),
            "responses": self.responses.to_dict(),
            "issues": self.issues,
            "recommendations": self.recommendations,
            "potential_impact": self.impact.to_dict(),
        }


@dataclass
class LeadRecord:
    """Flat lead data handed to the lead store, webhook and notifier."""

    email: str
    business_name: str
    variant: str = "rot"  # "rot" or "audit"
    found: bool = True
    status: str = "Not Found"
    address: Optional[str] = None
    rot_score: Optional[int] = None
    urgency: Optional[str] = None
    days_since_review: Optional[int] = None
    days_until_danger: Optional[int] = None
    total_reviews: Optional[int] = None
    avg_rating: Optional[float] = None
    overall_score: Optional[int] = None
    review_health_score: Optional[int] = None
    profile_score: Optional[int] = None
    photo_score: Optional[int] = None
    response_score: Optional[int] = None
    status_color: Optional[str] = None
    issues: tuple[str, ...] = ()
    recommendations: tuple[str, ...] = ()
    impact: Optional[PotentialImpact] = None
    calendly_url: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.now)

    @property
    def hot_score(self) -> Optional[int]:
        """Urgency-oriented score compared against the hot lead threshold."""
        if not self.found:
            return None
        if self.variant == "audit" and self.overall_score is not None:
            return 100 - self.overall_score
        return self.rot_score

    def to_payload(self) -> dict:
        """
        Flat payload for downstream automation.

        Issues and recommendations are newline-joined strings and the
        potential impact is spread over impact_* keys, so every value is
        a scalar.
        """
        impact = self.impact
        return {
            "email": self.email,
            "business_name": self.business_name,
            "variant": self.variant,
            "found": self.found,
            "status": self.status,
            "address": self.address,
            "rot_score": self.rot_score,
            "urgency": self.urgency,
            "days_since_review": self.days_since_review,
            "days_until_danger": self.days_until_danger,
            "total_reviews": self.total_reviews,
            "avg_rating": self.avg_rating,
            "overall_score": self.overall_score,
            "review_health_score": self.review_health_score,
            "profile_score": self.profile_score,
            "photo_score": self.photo_score,
            "response_score": self.response_score,
            "status_color": self.status_color,
            "issues": "\n".join(self.issues),
            "recommendations": "\n".join(self.recommendations),
            "impact_gap": impact.gap if impact else None,
            "impact_visibility_gain_pct": impact.visibility_gain_pct if impact else None,
            "impact_missed_calls_per_month": impact.missed_calls_per_month if impact else None,
            "impact_revenue_at_risk": impact.revenue_at_risk if impact else None,
            "calendly_url": self.calendly_url,
            "created_at": self.created_at.isoformat(),
        }
