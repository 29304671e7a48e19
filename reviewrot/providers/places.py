"""
Google Places API (v1) client.

API docs: https://developers.google.com/maps/documentation/places/web-service/op-overview
"""

import logging
from typing import Optional

import httpx

from ..dates import parse_timestamp
from ..errors import AuthenticationError, ProviderError
from ..models import PlaceDetails, Review
from .base import BusinessProvider, pick_best_match

logger = logging.getLogger(__name__)

API_BASE = "https://places.googleapis.com/v1"

SEARCH_FIELD_MASK = "places.id,places.displayName,places.formattedAddress,places.types"

# Fields that count as "service attributes" on a profile
ATTRIBUTE_FIELDS = (
    "paymentOptions",
    "accessibilityOptions",
    "parkingOptions",
    "delivery",
    "takeout",
    "dineIn",
    "reservable",
)

DETAILS_FIELD_MASK = ",".join([
    "id",
    "displayName",
    "formattedAddress",
    "rating",
    "userRatingCount",
    "reviews",
    "types",
    "nationalPhoneNumber",
    "internationalPhoneNumber",
    "websiteUri",
    "regularOpeningHours",
    "photos",
    "editorialSummary",
    "pureServiceAreaBusiness",
    *ATTRIBUTE_FIELDS,
])

# Place types every listing carries; they say nothing about the business
GENERIC_TYPES = {"point_of_interest", "establishment"}

# Place details return at most this many photo references
PHOTO_LIMIT = 10


def _display_name(place: dict) -> str:
    return (place.get("displayName") or {}).get("text", "")


class GooglePlacesClient(BusinessProvider):
    """
    Client for the Google Places API.

    Usage:
        with GooglePlacesClient(api_key="your_key") as client:
            place = client.find_business("Joe's Plumbing Austin")
    """

    name = "google_places"

    def __init__(
        self,
        api_key: str,
        base_url: str = API_BASE,
        timeout: float = 30,
        max_results: int = 5,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize Places client.

        Args:
            api_key: Google Places API key (required)
            base_url: Places API base URL
            timeout: Request timeout in seconds
            max_results: Text search results to consider per query
            transport: Custom httpx transport (for testing)
        """
        if not api_key:
            raise AuthenticationError(
                "Google Places API key not configured. "
                "Set GOOGLE_PLACES_API_KEY environment variable or pass api_key parameter."
            )

        super().__init__(timeout=timeout, transport=transport)
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.max_results = max_results
        logger.debug("Places client initialized (max_results=%d)", max_results)

    def _find(self, query: str, place_id: Optional[str]) -> Optional[PlaceDetails]:
        # Autocomplete gave us an id: use it directly
        if place_id:
            try:
                data = self.get_details(place_id)
                if data.get("id"):
                    return self._parse_place(data)
            except (ProviderError, httpx.HTTPError) as e:
                logger.info("Place id lookup failed, trying text search: %s", e)

        for search_query in (query, f"{query} business", f"{query} company"):
            try:
                logger.info("Places search: %s", search_query)
                places = [p for p in self.search_text(search_query) if p.get("id")]
                if not places:
                    continue

                best = pick_best_match(places, query, _display_name)
                data = self.get_details(best["id"])
                if data:
                    return self._parse_place(data)
            except (ProviderError, httpx.HTTPError) as e:
                logger.warning("Search failed for '%s': %s", search_query, e)

        return None

    def search_text(self, query: str) -> list[dict]:
        """Run a text search and return the raw place stubs."""
        response = self._client.post(
            f"{self.base_url}/places:searchText",
            json={"textQuery": query, "maxResultCount": self.max_results},
            headers=self._headers(SEARCH_FIELD_MASK),
        )
        self._handle_errors(response)
        return self._json(response).get("places") or []

    def get_details(self, place_id: str) -> dict:
        """Fetch full place details including reviews."""
        response = self._client.get(
            f"{self.base_url}/places/{place_id}",
            headers=self._headers(DETAILS_FIELD_MASK),
        )
        self._handle_errors(response)
        return self._json(response)

    def _headers(self, field_mask: str) -> dict:
        return {
            "X-Goog-Api-Key": self.api_key,
            "X-Goog-FieldMask": field_mask,
        }

    def _parse_place(self, data: dict) -> PlaceDetails:
        """Parse a Places API place into our model."""
        reviews = []
        for item in data.get("reviews", []):
            try:
                reviews.append(Review(
                    published_at=parse_timestamp(item.get("publishTime")),
                    relative_date=item.get("relativePublishTimeDescription"),
                    rating=item.get("rating"),
                    author=(item.get("authorAttribution") or {}).get("displayName", ""),
                    text=(item.get("text") or {}).get("text", ""),
                    # Places API does not expose owner replies
                    has_owner_response=None,
                ))
            except (AttributeError, TypeError) as e:
                logger.debug("Failed to parse review: %s", e)

        categories = [t for t in data.get("types", []) if t not in GENERIC_TYPES]
        photos = data.get("photos") or []

        return PlaceDetails(
            place_id=data.get("id", ""),
            name=_display_name(data),
            address=data.get("formattedAddress"),
            rating=data.get("rating"),
            review_count=data.get("userRatingCount"),
            reviews=reviews,
            categories=categories,
            phone=data.get("nationalPhoneNumber") or data.get("internationalPhoneNumber"),
            website=data.get("websiteUri"),
            has_hours=bool(data.get("regularOpeningHours")),
            description=(data.get("editorialSummary") or {}).get("text"),
            photo_count=len(photos),
            photos_capped=len(photos) >= PHOTO_LIMIT,
            service_area=bool(data.get("pureServiceAreaBusiness")),
            has_service_attributes=any(key in data for key in ATTRIBUTE_FIELDS),
            source=self.name,
        )
