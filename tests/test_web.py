"""Tests for the HTTP API."""

import json

import httpx
import pytest
from fastapi.testclient import TestClient

from conftest import FakeProvider, make_place
from reviewrot.api import ReviewRotService
from reviewrot.config import Settings
from reviewrot.sinks import AutomationWebhook, SlackNotifier
from reviewrot.web.app import create_app


class RecordingEndpoint:
    """MockTransport handler that records request bodies."""

    def __init__(self, status_code=200):
        self.status_code = status_code
        self.bodies = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.bodies.append(json.loads(request.content))
        return httpx.Response(self.status_code, text="ok")

    @property
    def transport(self):
        return httpx.MockTransport(self)


def make_client(place=None, sinks=None, settings=None) -> TestClient:
    settings = settings or Settings()
    service = ReviewRotService(settings, provider=FakeProvider(place), sinks=sinks or [])
    return TestClient(create_app(settings=settings, service=service))


@pytest.fixture
def client():
    """Client backed by a fake provider that finds a healthy business."""
    return make_client(make_place(days_since_review=10))


class TestCalculateRot:
    """Test POST /api/v1/calculate-rot."""

    def test_found(self, client):
        response = client.post("/api/v1/calculate-rot", json={
            "email": "owner@example.com",
            "businessName": "Joe's Plumbing",
        })

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["found"] is True
        assert data["business_name"] == "Joe's Plumbing Austin"
        assert data["rot_score"] == 7
        assert data["status"] == "Healthy Heartbeat"
        assert data["urgency"] == "low"
        assert data["days_until_danger"] == 60
        assert data["calendly_url"]

    def test_snake_case_fields_accepted(self, client):
        response = client.post("/api/v1/calculate-rot", json={
            "email": "owner@example.com",
            "business_name": "Joe's Plumbing",
            "place_id": "ChIJ-joe",
        })
        assert response.status_code == 200
        assert response.json()["found"] is True

    @pytest.mark.parametrize("payload", [
        {"businessName": "Joe's Plumbing"},
        {"email": "owner@example.com"},
        {"email": "", "businessName": ""},
        {},
    ])
    def test_missing_fields_are_400(self, client, payload):
        response = client.post("/api/v1/calculate-rot", json=payload)

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "error": "Email and business name are required",
        }

    def test_not_found_is_200(self):
        client = make_client(None)
        response = client.post("/api/v1/calculate-rot", json={
            "email": "owner@example.com",
            "businessName": "Nowhere Co",
        })

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "found": False,
            "business_name": "Nowhere Co",
            "message": "Business not found on Google",
        }

    def test_sinks_run_after_response(self):
        """Lead deliveries run as background tasks."""
        endpoint = RecordingEndpoint()
        webhook = AutomationWebhook(url="https://hooks.example.com/1", transport=endpoint.transport)
        client = make_client(make_place(days_since_review=10), sinks=[webhook])

        response = client.post("/api/v1/calculate-rot", json={
            "email": "owner@example.com",
            "businessName": "Joe's Plumbing",
        })

        assert response.status_code == 200
        assert len(endpoint.bodies) == 1
        assert endpoint.bodies[0]["email"] == "owner@example.com"
        assert endpoint.bodies[0]["rot_score"] == 7

    def test_sink_failure_does_not_affect_response(self):
        endpoint = RecordingEndpoint(status_code=500)
        webhook = AutomationWebhook(url="https://hooks.example.com/1", transport=endpoint.transport)
        client = make_client(make_place(days_since_review=10), sinks=[webhook])

        response = client.post("/api/v1/calculate-rot", json={
            "email": "owner@example.com",
            "businessName": "Joe's Plumbing",
        })

        assert response.status_code == 200
        assert response.json()["found"] is True


class TestAudit:
    """Test POST /api/v1/audit."""

    def test_found(self, client):
        response = client.post("/api/v1/audit", json={
            "email": "owner@example.com",
            "businessName": "Joe's Plumbing",
        })

        assert response.status_code == 200
        data = response.json()
        assert data["overall_score"] == 93
        assert data["status"] == "Excellent"
        assert data["status_color"] == "#22c55e"
        assert data["profile"]["score"] == 100
        assert data["responses"]["response_rate"] == 80

    def test_missing_fields_are_400(self, client):
        response = client.post("/api/v1/audit", json={"email": "owner@example.com"})
        assert response.status_code == 400


class TestHealth:
    """Test GET /api/v1/health."""

    def test_health(self, client):
        response = client.get("/api/v1/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["version"] == "1.2.0"
        assert data["uptime_seconds"] >= 0
        assert data["config"]["provider"] == "google_places"
        assert data["config"]["provider_configured"] is False
        assert data["config"]["webhook"] is False
        assert data["config"]["slack"] is False

    def test_reports_configured_integrations(self):
        settings = Settings(google_places_api_key="k", slack_webhook_url="https://hooks.slack.com/x")
        client = make_client(
            make_place(),
            settings=settings,
            sinks=[SlackNotifier(webhook_url=settings.slack_webhook_url)],
        )

        config = client.get("/api/v1/health").json()["config"]
        assert config["provider_configured"] is True
        assert config["slack"] is True


class TestIntegrationTests:
    """Test the /api/v1/test/* endpoints."""

    def test_provider_found(self, client):
        response = client.get("/api/v1/test/provider", params={"q": "Joe's Plumbing"})

        data = response.json()
        assert data["success"] is True
        assert data["found"] is True
        assert data["name"] == "Joe's Plumbing Austin"
        assert data["has_review_data"] is True

    def test_provider_not_found(self):
        response = make_client(None).get("/api/v1/test/provider")
        assert response.json() == {"success": True, "found": False}

    def test_webhook_not_configured(self, client):
        response = client.get("/api/v1/test/webhook")
        assert response.json() == {"success": False, "error": "Automation webhook not configured"}

    def test_webhook_sends_test_payload(self):
        endpoint = RecordingEndpoint()
        webhook = AutomationWebhook(url="https://hooks.example.com/1", transport=endpoint.transport)
        client = make_client(make_place(), sinks=[webhook])

        response = client.get("/api/v1/test/webhook")

        assert response.json()["success"] is True
        assert endpoint.bodies[0]["test"] is True

    def test_slack_not_configured(self, client):
        response = client.get("/api/v1/test/slack")
        assert response.json() == {"success": False, "error": "Slack webhook not configured"}

    def test_slack_failure(self):
        endpoint = RecordingEndpoint(status_code=404)
        slack = SlackNotifier(webhook_url="https://hooks.slack.com/x", transport=endpoint.transport)
        client = make_client(make_place(), sinks=[slack])

        response = client.get("/api/v1/test/slack")

        assert response.status_code == 500
        assert response.json()["success"] is False
        assert "404" in response.json()["error"]
