"""Airtable lead store."""

from typing import Optional

import httpx

from ..models import LeadRecord
from .base import LeadSink

API_BASE = "https://api.airtable.com/v0"


def lead_to_fields(lead: LeadRecord) -> dict:
    """Map a lead to Airtable column names. Empty scores are left out."""
    fields = {
        "Email": lead.email,
        "Business Name": lead.business_name,
        "Status": lead.status,
        "Rot Score": lead.rot_score,
        "Days Since Review": lead.days_since_review,
        "Total Reviews": lead.total_reviews,
        "Avg Rating": lead.avg_rating,
    }

    if lead.variant == "audit":
        fields.update({
            "Overall Score": lead.overall_score,
            "Review Health Score": lead.review_health_score,
            "Profile Score": lead.profile_score,
            "Photo Score": lead.photo_score,
            "Response Score": lead.response_score,
        })

    return {k: v for k, v in fields.items() if v is not None}


class AirtableLeadStore(LeadSink):
    """
    Persist leads as Airtable records.

    Usage:
        store = AirtableLeadStore(api_key="key", base_id="app123")
        await store.deliver(lead)
    """

    name = "airtable"

    def __init__(
        self,
        api_key: str,
        base_id: str,
        table_name: str = "Leads",
        timeout: float = 30,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(timeout=timeout, transport=transport)
        self.api_key = api_key
        self.base_id = base_id
        self.table_name = table_name

    @property
    def configured(self) -> bool:
        return bool(self.api_key and self.base_id)

    @property
    def url(self) -> str:
        return f"{API_BASE}/{self.base_id}/{self.table_name}"

    async def send(self, client: httpx.AsyncClient, lead: LeadRecord) -> None:
        response = await client.post(
            self.url,
            json={"records": [{"fields": lead_to_fields(lead)}]},
            headers={
                "Authorization": f"Bearer {self.api_key}",
                "Content-Type": "application/json",
            },
        )
        self._check(response)
