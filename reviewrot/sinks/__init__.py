"""Lead sinks: where scored leads go after the response."""

from ..config import Settings
from .base import (
    LeadSink,
    PostResponseTask,
    build_post_response_tasks,
    run_post_response_tasks,
)
from .airtable import AirtableLeadStore
from .webhook import AutomationWebhook
from .slack import SlackNotifier


def create_sinks(settings: Settings) -> list[LeadSink]:
    """Lead store, automation webhook and notifier from settings."""
    return [
        AirtableLeadStore(
            api_key=settings.airtable_api_key,
            base_id=settings.airtable_base_id,
            table_name=settings.airtable_table_name,
            timeout=settings.request_timeout,
        ),
        AutomationWebhook(url=settings.zapier_webhook_url, timeout=settings.request_timeout),
        SlackNotifier(
            webhook_url=settings.slack_webhook_url,
            threshold=settings.hot_lead_threshold,
            timeout=settings.request_timeout,
        ),
    ]


__all__ = [
    "LeadSink",
    "PostResponseTask",
    "AirtableLeadStore",
    "AutomationWebhook",
    "SlackNotifier",
    "build_post_response_tasks",
    "run_post_response_tasks",
    "create_sinks",
]
