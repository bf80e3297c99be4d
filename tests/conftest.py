"""
Shared pytest configuration and fixtures for the test suite.

This module provides the test API key, upstream stubs built on
``httpx.MockTransport`` and sample Google Maps payloads.
"""

import os
from collections.abc import Callable

import httpx
import pytest

from maps_proxy import handler as handler_module
from maps_proxy.integrations.google_maps import GoogleMapsClient, create_http_client
from maps_proxy.integrations.google_maps import transport as transport_module

# Ensure the API key is available for tests
os.environ.setdefault("GOOGLE_MAPS_API_KEY", "test-key")


@pytest.fixture(autouse=True)
def reset_process_state():
    """Drop the cached handler and shared transport between tests."""
    handler_module._handler = None
    transport_module._client = None
    yield
    handler_module._handler = None
    transport_module._client = None


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests (fast, isolated)"
    )
    config.addinivalue_line(
        "markers", "google: marks tests that interact with Google APIs"
    )


class UpstreamStub:
    """Records outbound requests and answers them with a canned response."""

    def __init__(self, responder: Callable[[httpx.Request], httpx.Response]):
        self._responder = responder
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._responder(request)

    @property
    def last_params(self) -> dict[str, str]:
        return dict(self.requests[-1].url.params)


@pytest.fixture
def make_client():
    """Build a GoogleMapsClient whose transport is answered by ``responder``."""

    def _make(
        responder: Callable[[httpx.Request], httpx.Response],
    ) -> tuple[GoogleMapsClient, UpstreamStub]:
        stub = UpstreamStub(responder)
        http_client = create_http_client(transport=httpx.MockTransport(stub))
        return GoogleMapsClient(http_client), stub

    return _make


@pytest.fixture
def json_responder():
    """Responder returning ``payload`` as JSON with the given status."""

    def _make(payload, status_code: int = 200):
        def _respond(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status_code, json=payload)

        return _respond

    return _make


# Test data fixtures
@pytest.fixture
def nearby_payload():
    """Nearby Search payload trimmed from a real Sydney response."""
    return {
        "html_attributions": [],
        "results": [
            {
                "geometry": {
                    "location": {"lat": -33.8587323, "lng": 151.2100055},
                    "viewport": {
                        "northeast": {"lat": -33.8573, "lng": 151.2113},
                        "southwest": {"lat": -33.8600, "lng": 151.2086},
                    },
                },
                "icon": "https://maps.gstatic.com/mapfiles/place_api/icons/cafe-71.png",
                "name": "Cafe Sydney",
                "opening_hours": {"open_now": True},
                "photos": [
                    {
                        "height": 2268,
                        "width": 4032,
                        "html_attributions": ["<a href=\"x\">A Google User</a>"],
                        "photo_reference": "CmRaAAAA",
                    }
                ],
                "place_id": "ChIJ2W0a0jmuEmsRYtwRjGXC3zM",
                "plus_code": {
                    "compound_code": "46R6+G2 Sydney",
                    "global_code": "4RRH46R6+G2",
                },
                "price_level": 3,
                "rating": 4.3,
                "reference": "ChIJ2W0a0jmuEmsRYtwRjGXC3zM",
                "scope": "GOOGLE",
                "types": ["cafe", "food", "point_of_interest"],
                "user_ratings_total": 1893,
                "vicinity": "31 Alfred St, Sydney",
                "business_status": "OPERATIONAL",
            }
        ],
        "status": "OK",
    }


@pytest.fixture
def geocode_payload():
    return {
        "results": [
            {
                "address_components": [
                    {
                        "long_name": "1600",
                        "short_name": "1600",
                        "types": ["street_number"],
                    },
                    {
                        "long_name": "Amphitheatre Parkway",
                        "short_name": "Amphitheatre Pkwy",
                        "types": ["route"],
                    },
                ],
                "formatted_address": "1600 Amphitheatre Pkwy, Mountain View, CA 94043, USA",
                "geometry": {
                    "location": {"lat": 37.4224428, "lng": -122.0842467},
                    "location_type": "ROOFTOP",
                    "viewport": {
                        "northeast": {"lat": 37.4239, "lng": -122.0829},
                        "southwest": {"lat": 37.4212, "lng": -122.0856},
                    },
                },
                "place_id": "ChIJeRpOeF67j4AR9ydy_PIzPuM",
                "plus_code": {
                    "compound_code": "CWC8+X8 Mountain View, CA",
                    "global_code": "849VCWC8+X8",
                },
                "types": ["street_address"],
            }
        ],
        "status": "OK",
    }


@pytest.fixture
def find_place_payload():
    return {
        "candidates": [
            {
                "formatted_address": "140 George St, The Rocks NSW 2000, Australia",
                "name": "Museum of Contemporary Art Australia",
                "rating": 4.4,
            }
        ],
        "status": "OK",
    }
