"""Shared pytest fixtures for the test suite."""

import copy

import pytest

from square_customers.clients.base_client import HttpResponse
from square_customers.core.config import Configuration, Environment, get_settings

CUSTOMER_JSON = {
    "id": "JDKYHBWT1D4F8MFH63DBMEN8Y4",
    "created_at": "2016-03-23T20:21:54.859Z",
    "updated_at": "2016-03-23T20:21:55Z",
    "given_name": "Amelia",
    "family_name": "Earhart",
    "email_address": "Amelia.Earhart@example.com",
    "address": {
        "address_line_1": "500 Electric Ave",
        "address_line_2": "Suite 600",
        "locality": "New York",
        "administrative_district_level_1": "NY",
        "postal_code": "10003",
        "country": "US",
    },
    "phone_number": "+1-212-555-4240",
    "reference_id": "YOUR_REFERENCE_ID",
    "note": "a customer",
    "preferences": {"email_unsubscribed": False},
    "creation_source": "THIRD_PARTY",
    "group_ids": ["545AXB44B4XXWMVQ4W8SBT3HHF"],
    "segment_ids": ["1KB9JE5EGJXCW.REACHABLE"],
    "version": 1,
}

LOCATION_UPDATED_JSON = {
    "merchant_id": "FWE2CSD5BZZTC",
    "location_id": "LM08D3C3F0WDJ",
    "type": "location.updated",
    "event_id": "a4ca56d5-6f18-4a2b-9c4c-ed7bd4b5d3f3",
    "created_at": "2020-01-26T02:25:34Z",
    "data": {"type": "location", "id": "LM08D3C3F0WDJ"},
}

NOT_FOUND_JSON = {
    "errors": [
        {
            "category": "INVALID_REQUEST_ERROR",
            "code": "NOT_FOUND",
            "detail": "Customer with ID `missing` not found.",
        }
    ]
}


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Each test sees settings built from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def configuration() -> Configuration:
    """Sandbox configuration with a fake token."""
    return Configuration(
        environment=Environment.SANDBOX,
        access_token="test-token",
        square_version="2023-01-19",
    )


@pytest.fixture
def customer_json() -> dict:
    return copy.deepcopy(CUSTOMER_JSON)


@pytest.fixture
def location_updated_json() -> dict:
    return copy.deepcopy(LOCATION_UPDATED_JSON)


@pytest.fixture
def not_found_json() -> dict:
    return copy.deepcopy(NOT_FOUND_JSON)


@pytest.fixture
def make_response():
    """Factory for HttpResponse objects as the transport would return them."""

    def _make(status: int = 200, body: str = "{}", method: str = "GET", url: str = "https://example.test") -> HttpResponse:
        return HttpResponse(method=method, url=url, status=status, body=body)

    return _make
