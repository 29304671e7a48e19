"""Rot check and profile audit endpoints."""

from fastapi import APIRouter, BackgroundTasks, Depends, Request

from reviewrot.api import CheckOutcome, ReviewRotService
from reviewrot.sinks import run_post_response_tasks
from reviewrot.web.api.v1.models import CheckRequest

router = APIRouter()


def get_service(request: Request) -> ReviewRotService:
    return request.app.state.service


def _respond(outcome: CheckOutcome, background_tasks: BackgroundTasks) -> dict:
    # Lead store, webhook and notifier run after the response is sent
    if outcome.tasks:
        background_tasks.add_task(run_post_response_tasks, outcome.tasks)
    return outcome.response


@router.post("/calculate-rot")
def calculate_rot(
    payload: CheckRequest,
    background_tasks: BackgroundTasks,
    service: ReviewRotService = Depends(get_service),
):
    """
    Score how stale a business's reviews are.

    Returns found/not-found in a success envelope; a missing email or
    business name is a 400.
    """
    outcome = service.calculate_rot(payload.email, payload.business_name, payload.place_id)
    return _respond(outcome, background_tasks)


@router.post("/audit")
def audit(
    payload: CheckRequest,
    background_tasks: BackgroundTasks,
    service: ReviewRotService = Depends(get_service),
):
    """Full profile audit: reviews, completeness, photos and responses."""
    outcome = service.run_audit(payload.email, payload.business_name, payload.place_id)
    return _respond(outcome, background_tasks)
