"""Configuration settings for ReviewRot."""

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv

load_dotenv()

DEFAULT_CALENDLY_URL = "https://calendly.com/seanmichaellewis"

# Environment variable -> Settings field
ENV_OVERRIDES = {
    "GOOGLE_PLACES_API_KEY": "google_places_api_key",
    "SERPAPI_KEY": "serpapi_key",
    "REVIEWROT_PROVIDER": "provider",
    "AIRTABLE_API_KEY": "airtable_api_key",
    "AIRTABLE_BASE_ID": "airtable_base_id",
    "AIRTABLE_TABLE_NAME": "airtable_table_name",
    "ZAPIER_WEBHOOK_URL": "zapier_webhook_url",
    "SLACK_WEBHOOK_URL": "slack_webhook_url",
    "CALENDLY_URL": "calendly_url",
    "HOT_LEAD_THRESHOLD": "hot_lead_threshold",
    "REQUEST_TIMEOUT": "request_timeout",
    "ALLOWED_ORIGINS": "allowed_origins",
}

PROVIDERS = ("google_places", "serpapi")


@dataclass(frozen=True)
class Settings:
    """Service settings. Built once by load_config() and passed around."""

    # Business data providers
    google_places_api_key: str = ""
    serpapi_key: str = ""
    provider: str = "google_places"

    # Lead store
    airtable_api_key: str = ""
    airtable_base_id: str = ""
    airtable_table_name: str = "Leads"

    # Automation + notification
    zapier_webhook_url: str = ""
    slack_webhook_url: str = ""
    hot_lead_threshold: int = 60

    # Response copy
    calendly_url: str = DEFAULT_CALENDLY_URL

    # HTTP
    request_timeout: float = 30.0
    allowed_origins: str = "*"

    @property
    def airtable_configured(self) -> bool:
        return bool(self.airtable_api_key and self.airtable_base_id)

    @property
    def provider_configured(self) -> bool:
        if self.provider == "serpapi":
            return bool(self.serpapi_key)
        return bool(self.google_places_api_key)

    def origins(self) -> list[str]:
        """Parse allowed_origins into a list for CORS."""
        if self.allowed_origins.strip() == "*":
            return ["*"]
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]


def _coerce(name: str, value):
    """Cast a raw YAML/env value to the type of the Settings field."""
    if name == "hot_lead_threshold":
        return int(value)
    if name == "request_timeout":
        return float(value)
    return "" if value is None else str(value)


def load_config(path: Optional[str] = None, environ: Optional[dict] = None) -> Settings:
    """
    Load settings from YAML file with environment overrides.

    Priority: environment > config file > defaults

    Args:
        path: Path to YAML config file (optional)
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Settings instance with merged configuration
    """
    environ = os.environ if environ is None else environ
    known = {f.name for f in fields(Settings)}
    values = {}

    if path:
        config_path = Path(path)
        if config_path.exists():
            with open(config_path) as f:
                data = yaml.safe_load(f) or {}

            # Apply config values
            for key, value in data.items():
                if key in known:
                    values[key] = _coerce(key, value)

    # Environment overrides (always win)
    for env_name, key in ENV_OVERRIDES.items():
        if environ.get(env_name):
            values[key] = _coerce(key, environ[env_name])

    settings = Settings(**values)
    if settings.provider not in PROVIDERS:
        raise ValueError(
            f"Unknown provider '{settings.provider}' (expected one of {', '.join(PROVIDERS)})"
        )
    return settings


@dataclass(frozen=True)
class ScoringConfig:
    """Weights and thresholds for the scoring engine."""

    # Days-since-review sentinel for "no reviews / unknown"
    stale_days_sentinel: int = 999
    # Rot zone begins here; drives days_until_danger
    danger_days: int = 70

    # Review health weights (sum to 1.0)
    freshness_weight: float = 0.4
    volume_weight: float = 0.3
    quality_weight: float = 0.3
    volume_target: int = 100

    # Overall audit weights (sum to 1.0)
    review_health_weight: float = 0.35
    profile_weight: float = 0.25
    photo_weight: float = 0.20
    response_weight: float = 0.20

    # Profile checklist points (max 100 total)
    name_points: int = 10
    address_points: int = 10
    service_area_points: int = 5
    phone_points: int = 15
    website_points: int = 15
    hours_points: int = 15
    description_points: int = 10
    short_description_points: int = 5
    categories_points: int = 15
    few_categories_points: int = 10
    attributes_points: int = 10
    description_min_length: int = 50
    recommended_categories: int = 3

    # Potential impact copy
    impact_target: int = 70
    visibility_per_point: float = 2.0
    calls_per_point: float = 0.5
    revenue_per_point: int = 150

    @property
    def profile_total_points(self) -> int:
        return (
            self.name_points + self.address_points + self.phone_points
            + self.website_points + self.hours_points + self.description_points
            + self.categories_points + self.attributes_points
        )
