"""Business data providers."""

from ..config import Settings
from .base import BusinessProvider, pick_best_match
from .places import GooglePlacesClient
from .serpapi import SerpAPIClient


def create_provider(settings: Settings) -> BusinessProvider:
    """
    Build the provider named by settings.provider.

    Raises:
        AuthenticationError: if the provider's API key is not configured
    """
    if settings.provider == "serpapi":
        return SerpAPIClient(api_key=settings.serpapi_key, timeout=settings.request_timeout)
    return GooglePlacesClient(api_key=settings.google_places_api_key, timeout=settings.request_timeout)


__all__ = [
    "BusinessProvider",
    "GooglePlacesClient",
    "SerpAPIClient",
    "create_provider",
    "pick_best_match",
]
