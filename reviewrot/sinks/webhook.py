"""Automation webhook (Zapier catch hook or similar)."""

from typing import Optional

import httpx

from ..models import LeadRecord
from .base import LeadSink

TEST_PAYLOAD = {
    "test": True,
    "email": "test@example.com",
    "business_name": "Test Business",
    "rot_score": 50,
}


class AutomationWebhook(LeadSink):
    """Post the flat lead payload for downstream email sequencing."""

    name = "webhook"

    def __init__(
        self,
        url: str,
        timeout: float = 30,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(timeout=timeout, transport=transport)
        self.url = url

    @property
    def configured(self) -> bool:
        return bool(self.url)

    async def send(self, client: httpx.AsyncClient, lead: LeadRecord) -> None:
        response = await client.post(self.url, json=lead.to_payload())
        self._check(response)

    async def send_test(self) -> None:
        """Post a test payload. Raises on failure."""
        async with self._client() as client:
            response = await client.post(self.url, json=TEST_PAYLOAD)
            self._check(response)
