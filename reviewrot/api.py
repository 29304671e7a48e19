"""
Programmatic API for ReviewRot.

Usage:
    from reviewrot.api import ReviewRotService
    from reviewrot.config import load_config

    service = ReviewRotService(load_config())
    outcome = service.calculate_rot("owner@example.com", "Joe's Plumbing Austin")
    print(outcome.response["rot_score"])

    # Sink deliveries are returned, not run
    asyncio.run(run_post_response_tasks(outcome.tasks))
"""

import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from reviewrot.config import ScoringConfig, Settings
from reviewrot.errors import AuthenticationError, InputValidationError, NotFoundError
from reviewrot.models import LeadRecord, PlaceDetails
from reviewrot.providers import BusinessProvider, create_provider
from reviewrot.scoring import audit_snapshot, score_rot
from reviewrot.sinks import LeadSink, PostResponseTask, build_post_response_tasks, create_sinks
from reviewrot.snapshot import build_snapshot

logger = logging.getLogger(__name__)

SERVICE_AREA_ADDRESS = "Service area business"


@dataclass
class CheckOutcome:
    """Response envelope plus the sink deliveries to run after sending it."""

    response: dict
    lead: LeadRecord
    tasks: list[PostResponseTask] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.lead.found


class ReviewRotService:
    """
    Look up a business, score it, and prepare lead deliveries.

    Two flows share the lookup and snapshot: calculate_rot() scores review
    freshness only, run_audit() scores the whole profile.
    """

    def __init__(
        self,
        settings: Settings,
        provider: Optional[BusinessProvider] = None,
        sinks: Optional[list[LeadSink]] = None,
        scoring: Optional[ScoringConfig] = None,
    ):
        self.settings = settings
        self.scoring = scoring or ScoringConfig()
        self.sinks = create_sinks(settings) if sinks is None else sinks
        self._provider = provider
        self._provider_lock = threading.Lock()

    @property
    def provider(self) -> BusinessProvider:
        """Provider from settings, created once on first use."""
        if self._provider is None:
            with self._provider_lock:
                if self._provider is None:
                    self._provider = create_provider(self.settings)
        return self._provider

    def calculate_rot(
        self,
        email: Optional[str],
        business_name: Optional[str],
        place_id: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> CheckOutcome:
        """
        Score how stale a business's reviews are.

        Raises:
            InputValidationError: if email or business name is missing
        """
        email, business_name = self._validate(email, business_name)
        logger.info("Rot check: business='%s' place_id=%s", business_name, place_id or "none")

        try:
            place = self._lookup(business_name, place_id)
        except NotFoundError:
            return self._not_found(email, business_name, "rot")

        snapshot = build_snapshot(place, now=now, config=self.scoring)
        report = score_rot(snapshot.days_since_last_review, self.scoring)

        response = {
            "success": True,
            "found": True,
            "business_name": place.name or business_name,
            "address": place.address or SERVICE_AREA_ADDRESS,
            **report.to_dict(),
            "total_reviews": snapshot.total_reviews,
            "avg_rating": snapshot.avg_rating,
            "calendly_url": self.settings.calendly_url,
        }

        logger.info(
            "Rot score for '%s': %d (%s, %d days since review)",
            response["business_name"], report.rot_score, report.status.value, report.days_since_review,
        )

        lead = LeadRecord(
            email=email,
            business_name=response["business_name"],
            variant="rot",
            status=report.status.value,
            address=response["address"],
            rot_score=report.rot_score,
            urgency=report.urgency.value,
            days_since_review=report.days_since_review,
            total_reviews=snapshot.total_reviews,
            avg_rating=snapshot.avg_rating,
            days_until_danger=report.days_until_danger,
            calendly_url=self.settings.calendly_url,
        )
        return CheckOutcome(response, lead, build_post_response_tasks(self.sinks, lead))

    def run_audit(
        self,
        email: Optional[str],
        business_name: Optional[str],
        place_id: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> CheckOutcome:
        """
        Score reviews, profile completeness, photos and responses.

        Raises:
            InputValidationError: if email or business name is missing
        """
        email, business_name = self._validate(email, business_name)
        logger.info("Profile audit: business='%s' place_id=%s", business_name, place_id or "none")

        try:
            place = self._lookup(business_name, place_id)
        except NotFoundError:
            return self._not_found(email, business_name, "audit")

        snapshot = build_snapshot(place, now=now, config=self.scoring)
        report = audit_snapshot(snapshot, self.scoring)

        response = {
            "success": True,
            "found": True,
            "business_name": place.name or business_name,
            "address": place.address or SERVICE_AREA_ADDRESS,
            "place_id": place.place_id,
            "days_since_review": snapshot.days_since_last_review,
            "total_reviews": snapshot.total_reviews,
            "avg_rating": snapshot.avg_rating,
            **report.to_dict(),
            "calendly_url": self.settings.calendly_url,
        }

        logger.info(
            "Audit for '%s': overall %d (%s)",
            response["business_name"], report.overall_score, report.status.value,
        )

        lead = LeadRecord(
            email=email,
            business_name=response["business_name"],
            variant="audit",
            status=report.status.value,
            address=response["address"],
            rot_score=report.rot_score,
            urgency=report.urgency.value,
            days_since_review=snapshot.days_since_last_review,
            days_until_danger=max(0, self.scoring.danger_days - snapshot.days_since_last_review),
            total_reviews=snapshot.total_reviews,
            avg_rating=snapshot.avg_rating,
            overall_score=report.overall_score,
            review_health_score=report.review_health_score,
            profile_score=report.profile.value,
            photo_score=report.photos.value,
            response_score=report.responses.value,
            status_color=report.status.color,
            issues=tuple(report.issues),
            recommendations=tuple(report.recommendations),
            impact=report.impact,
            calendly_url=self.settings.calendly_url,
        )
        return CheckOutcome(response, lead, build_post_response_tasks(self.sinks, lead))

    def close(self) -> None:
        if self._provider is not None:
            self._provider.close()

    def _validate(self, email: Optional[str], business_name: Optional[str]) -> tuple[str, str]:
        email = (email or "").strip()
        business_name = (business_name or "").strip()
        if not email or not business_name:
            raise InputValidationError("Email and business name are required")
        return email, business_name

    def _lookup(self, business_name: str, place_id: Optional[str]) -> PlaceDetails:
        try:
            provider = self.provider
        except AuthenticationError as e:
            logger.error("Business provider unavailable: %s", e)
            raise NotFoundError(business_name) from e

        place = provider.find_business(business_name, place_id)
        if place is None:
            raise NotFoundError(business_name)
        return place

    def _not_found(self, email: str, business_name: str, variant: str) -> CheckOutcome:
        """Not found is still a lead: store it and start the email sequence."""
        logger.info("Business not found: '%s'", business_name)

        lead = LeadRecord(
            email=email,
            business_name=business_name,
            variant=variant,
            found=False,
            calendly_url=self.settings.calendly_url,
        )
        response = {
            "success": True,
            "found": False,
            "business_name": business_name,
            "message": "Business not found on Google",
        }
        return CheckOutcome(response, lead, build_post_response_tasks(self.sinks, lead))
