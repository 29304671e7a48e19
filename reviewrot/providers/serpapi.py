"""
SerpAPI client for Google Maps business lookups.

Uses the google_maps engine for the profile and google_maps_reviews for
reviews, which come with relative dates ("3 weeks ago") and owner replies.
"""

import logging
from typing import Optional

import httpx

from ..dates import parse_timestamp
from ..errors import AuthenticationError, ProviderError
from ..models import PlaceDetails, Review
from .base import BusinessProvider, pick_best_match

logger = logging.getLogger(__name__)


def _description_text(place: dict) -> Optional[str]:
    """Description is a plain string or a {"snippet": ...} block."""
    description = place.get("description")
    if isinstance(description, dict):
        return description.get("snippet")
    return description


def _local_places(data: dict) -> list[dict]:
    """local_results can be a list or a dict with a "places" key."""
    local_results = data.get("local_results", {})
    if isinstance(local_results, dict):
        places = local_results.get("places", [])
    elif isinstance(local_results, list):
        places = local_results
    else:
        places = []
    return [p for p in places if isinstance(p, dict)]


class SerpAPIClient(BusinessProvider):
    """
    Client for SerpAPI Google Maps endpoints.

    Usage:
        client = SerpAPIClient(api_key="your_key")
        place = client.find_business("Joe's Plumbing Austin")
    """

    name = "serpapi"

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://serpapi.com/search",
        timeout: float = 30,
        gl: str = "us",
        hl: str = "en",
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize SerpAPI client.

        Args:
            api_key: SerpAPI API key (required)
            base_url: SerpAPI endpoint URL
            timeout: Request timeout in seconds
            gl: Geolocation (country code)
            hl: Language code
            transport: Custom httpx transport (for testing)
        """
        if not api_key:
            raise AuthenticationError(
                "SerpAPI key not configured. "
                "Set SERPAPI_KEY environment variable or pass api_key parameter."
            )

        super().__init__(timeout=timeout, transport=transport)
        self.api_key = api_key
        self.base_url = base_url
        self.gl = gl
        self.hl = hl
        logger.debug("SerpAPI client initialized (gl=%s, hl=%s)", gl, hl)

    def _find(self, query: str, place_id: Optional[str]) -> Optional[PlaceDetails]:
        params = {"engine": "google_maps", "type": "search", "q": query}
        if place_id:
            params = {"engine": "google_maps", "type": "place", "place_id": place_id}

        logger.info("SerpAPI maps search: %s", place_id or query)
        data = self._request(params)

        place = data.get("place_results")
        if not place:
            local_results = _local_places(data)
            if not local_results:
                return None
            place = pick_best_match(local_results, query, lambda p: p.get("title"))

        reviews = self._fetch_reviews(place.get("data_id"))
        return self._parse_place(place, reviews)

    def _request(self, params: dict) -> dict:
        params = {
            **params,
            "api_key": self.api_key,
            "gl": self.gl,
            "hl": self.hl,
        }
        response = self._client.get(self.base_url, params=params)
        self._handle_errors(response)

        data = self._json(response)
        if data.get("error"):
            raise ProviderError(f"SerpAPI error: {data['error']}")
        return data

    def _fetch_reviews(self, data_id: Optional[str]) -> list[Review]:
        """Newest reviews for a place. Missing reviews are optional data."""
        if not data_id:
            return []

        try:
            data = self._request({
                "engine": "google_maps_reviews",
                "data_id": data_id,
                "sort_by": "newestFirst",
            })
        except (ProviderError, httpx.HTTPError) as e:
            logger.warning("SerpAPI reviews failed for %s: %s", data_id, e)
            return []

        return self._parse_reviews(data.get("reviews", []))

    def _parse_reviews(self, reviews_data: list) -> list[Review]:
        """Parse review results from SerpAPI response."""
        results = []

        for item in reviews_data:
            try:
                results.append(Review(
                    published_at=parse_timestamp(item.get("iso_date")),
                    relative_date=item.get("date"),
                    has_owner_response=bool(item.get("response")),
                    rating=item.get("rating"),
                    author=(item.get("user") or {}).get("name", ""),
                    text=item.get("snippet", "") or "",
                ))
            except (AttributeError, TypeError) as e:
                logger.debug("Failed to parse review: %s", e)

        return results

    def _parse_place(self, place: dict, reviews: list[Review]) -> PlaceDetails:
        """Parse a google_maps place into our model."""
        categories = place.get("types") or ([place["type"]] if place.get("type") else [])
        address = place.get("address")

        return PlaceDetails(
            place_id=place.get("place_id", ""),
            name=place.get("title", ""),
            address=address,
            rating=place.get("rating"),
            review_count=place.get("reviews"),
            reviews=reviews,
            categories=list(categories),
            phone=place.get("phone"),
            website=place.get("website"),
            has_hours=bool(place.get("hours") or place.get("operating_hours")),
            description=_description_text(place),
            photo_count=place.get("photos_count") or len(place.get("images", [])),
            service_area=not address,
            has_service_attributes=bool(place.get("extensions") or place.get("service_options")),
            source=self.name,
        )
