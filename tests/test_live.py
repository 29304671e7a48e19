"""Live provider lookups. Run with: pytest -m integration"""

import os

import pytest

from reviewrot.providers import GooglePlacesClient, SerpAPIClient

pytestmark = pytest.mark.integration


@pytest.mark.skipif(not os.environ.get("GOOGLE_PLACES_API_KEY"), reason="GOOGLE_PLACES_API_KEY not set")
def test_google_places_lookup():
    with GooglePlacesClient(api_key=os.environ["GOOGLE_PLACES_API_KEY"]) as client:
        place = client.find_business("Starbucks New York")

    assert place is not None
    assert place.name
    assert place.review_count


@pytest.mark.skipif(not os.environ.get("SERPAPI_KEY"), reason="SERPAPI_KEY not set")
def test_serpapi_lookup():
    with SerpAPIClient(api_key=os.environ["SERPAPI_KEY"]) as client:
        place = client.find_business("Starbucks New York")

    assert place is not None
    assert place.reviews
