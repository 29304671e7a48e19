"""Slack hot lead notifier."""

from typing import Optional

import httpx

from ..models import LeadRecord
from .base import LeadSink


def build_hot_lead_message(lead: LeadRecord) -> dict:
    """Slack Block Kit payload for a hot lead alert."""
    lines = [
        "*🔥 HOT LEAD ALERT*",
        "",
        f"*Business:* {lead.business_name}",
        f"*Email:* {lead.email}",
    ]

    if lead.variant == "audit":
        lines.append(f"*Overall Score:* {lead.overall_score} ({lead.status})")
    lines.append(f"*Rot Score:* {lead.rot_score}")
    lines.append(f"*Days Silent:* {lead.days_since_review}")

    return {
        "text": f"🔥 HOT LEAD: {lead.business_name}",
        "blocks": [
            {
                "type": "section",
                "text": {"type": "mrkdwn", "text": "\n".join(lines)},
            }
        ],
    }


class SlackNotifier(LeadSink):
    """Alert the team when a found lead reaches the hot lead threshold."""

    name = "slack"

    def __init__(
        self,
        webhook_url: str,
        threshold: int = 60,
        timeout: float = 30,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(timeout=timeout, transport=transport)
        self.webhook_url = webhook_url
        self.threshold = threshold

    @property
    def configured(self) -> bool:
        return bool(self.webhook_url)

    def accepts(self, lead: LeadRecord) -> bool:
        hot_score = lead.hot_score
        return self.configured and hot_score is not None and hot_score >= self.threshold

    async def send(self, client: httpx.AsyncClient, lead: LeadRecord) -> None:
        response = await client.post(self.webhook_url, json=build_hot_lead_message(lead))
        self._check(response)

    async def send_test(self) -> None:
        """Post a test message. Raises on failure."""
        async with self._client() as client:
            response = await client.post(
                self.webhook_url,
                json={"text": "🧪 Test alert from ReviewRot API"},
            )
            self._check(response)
