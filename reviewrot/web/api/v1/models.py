"""Pydantic models for API v1."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CheckRequest(BaseModel):
    """Rot check / audit request payload."""
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "email": "owner@example.com",
                "businessName": "Joe's Plumbing Austin",
                "placeId": "ChIJN1t_tDeuEmsRUsoyG83frY4",
            }
        },
    )

    # Optional here so a missing field is a 400 from the service, not a 422
    email: Optional[str] = None
    business_name: Optional[str] = Field(default=None, alias="businessName")
    place_id: Optional[str] = Field(default=None, alias="placeId")


class IntegrationStatus(BaseModel):
    """Which integrations are configured."""
    provider: str
    provider_configured: bool
    airtable: bool
    webhook: bool
    slack: bool


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    timestamp: str
    version: str
    uptime_seconds: int
    config: IntegrationStatus
