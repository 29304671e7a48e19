"""Common behaviour for business data providers."""

import logging
from abc import ABC, abstractmethod
from typing import Optional

import httpx

from ..errors import AuthenticationError, ProviderError, RateLimitError
from ..models import PlaceDetails

logger = logging.getLogger(__name__)


def pick_best_match(candidates: list[dict], query: str, name_of) -> dict:
    """
    Pick the candidate whose name best matches the query.

    First candidate whose name contains the query (or is contained by it),
    otherwise the first candidate.
    """
    search_name = query.lower().strip()

    for candidate in candidates:
        candidate_name = (name_of(candidate) or "").lower()
        if candidate_name and (search_name in candidate_name or candidate_name in search_name):
            return candidate

    return candidates[0]


class BusinessProvider(ABC):
    """
    Looks up a business and returns its profile and reviews.

    find_business() never raises for provider failures: they are logged
    and reported as "not found".
    """

    name = "provider"

    def __init__(self, timeout: float = 30, transport: Optional[httpx.BaseTransport] = None):
        self.timeout = timeout
        self._client = httpx.Client(timeout=timeout, transport=transport)

    def find_business(self, query: str, place_id: Optional[str] = None) -> Optional[PlaceDetails]:
        """
        Find a business by name (and optionally a stable place id).

        Args:
            query: Business name as typed by the user
            place_id: Provider place id from autocomplete (optional)

        Returns:
            PlaceDetails, or None if nothing was found or the provider failed
        """
        try:
            place = self._find(query, place_id)
        except (ProviderError, httpx.HTTPError) as e:
            logger.warning("%s lookup failed for '%s': %s", self.name, query, e)
            return None

        if place is None:
            logger.info("%s: no business found for '%s'", self.name, query)
        else:
            logger.info("%s: found '%s' (%d reviews loaded)", self.name, place.name, len(place.reviews))
        return place

    @abstractmethod
    def _find(self, query: str, place_id: Optional[str]) -> Optional[PlaceDetails]:
        """Provider-specific lookup. May raise ProviderError or httpx errors."""

    def _handle_errors(self, response: httpx.Response) -> None:
        """Map HTTP error responses to provider exceptions."""
        if response.status_code in (401, 403):
            raise AuthenticationError(f"{self.name}: invalid API key")
        elif response.status_code == 429:
            raise RateLimitError(f"{self.name}: rate limit exceeded")
        elif response.status_code >= 500:
            raise ProviderError(f"{self.name} server error: {response.status_code}")
        elif response.status_code >= 400:
            try:
                error_data = response.json()
                error_msg = error_data.get("error", response.text)
                if isinstance(error_msg, dict):
                    error_msg = error_msg.get("message", response.text)
            except (ValueError, AttributeError):
                error_msg = response.text
            raise ProviderError(f"{self.name} error: {error_msg}")

    def _json(self, response: httpx.Response) -> dict:
        """Decode a JSON body; anything else is a provider failure."""
        try:
            data = response.json()
        except ValueError as e:
            raise ProviderError(f"{self.name}: invalid JSON response") from e
        if not isinstance(data, dict):
            raise ProviderError(f"{self.name}: unexpected response body")
        return data

    def close(self):
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
