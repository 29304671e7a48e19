"""Health check and integration test endpoints."""

import time
from datetime import datetime, timezone
from typing import Optional

import httpx
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from reviewrot import __version__
from reviewrot.api import ReviewRotService
from reviewrot.errors import ProviderError, SinkError
from reviewrot.sinks import AutomationWebhook, LeadSink, SlackNotifier
from reviewrot.web.api.v1.checks import get_service
from reviewrot.web.api.v1.models import HealthResponse, IntegrationStatus

router = APIRouter()

_start_time = time.time()


def _find_sink(service: ReviewRotService, sink_type: type) -> Optional[LeadSink]:
    for sink in service.sinks:
        if isinstance(sink, sink_type):
            return sink
    return None


def _error(message: str, status_code: int = 500) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


@router.get("/health", response_model=HealthResponse)
async def health_check(service: ReviewRotService = Depends(get_service)):
    """
    Health check endpoint.

    Returns service status and which integrations are configured.
    """
    settings = service.settings
    webhook = _find_sink(service, AutomationWebhook)
    slack = _find_sink(service, SlackNotifier)

    return HealthResponse(
        status="ok",
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=__version__,
        uptime_seconds=int(time.time() - _start_time),
        config=IntegrationStatus(
            provider=settings.provider,
            provider_configured=settings.provider_configured,
            airtable=settings.airtable_configured,
            webhook=bool(webhook and webhook.configured),
            slack=bool(slack and slack.configured),
        ),
    )


@router.get("/test/provider")
def test_provider(
    q: str = "Starbucks New York",
    service: ReviewRotService = Depends(get_service),
):
    """Look up a business with the configured provider."""
    try:
        place = service.provider.find_business(q)
    except ProviderError as e:
        return _error(str(e))

    if place is None:
        return {"success": True, "found": False}

    return {
        "success": True,
        "found": True,
        "name": place.name,
        "address": place.address,
        "rating": place.rating,
        "reviews": place.review_count,
        "has_review_data": bool(place.reviews),
        "source": place.source,
    }


@router.get("/test/webhook")
async def test_webhook(request: Request):
    """Send a test payload to the automation webhook."""
    sink = _find_sink(get_service(request), AutomationWebhook)
    if not sink or not sink.configured:
        return {"success": False, "error": "Automation webhook not configured"}

    try:
        await sink.send_test()
    except (SinkError, httpx.HTTPError) as e:
        return _error(str(e))
    return {"success": True, "message": "Test webhook sent"}


@router.get("/test/slack")
async def test_slack(request: Request):
    """Send a test message to Slack."""
    sink = _find_sink(get_service(request), SlackNotifier)
    if not sink or not sink.configured:
        return {"success": False, "error": "Slack webhook not configured"}

    try:
        await sink.send_test()
    except (SinkError, httpx.HTTPError) as e:
        return _error(str(e))
    return {"success": True, "message": "Test Slack message sent"}
