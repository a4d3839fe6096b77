"""Shared test fixtures: canonical Geocodio payloads and fake HTTP responses."""

import json
from typing import Any

import httpx
import pytest

from geocodio_client.core.config import Settings

SUPERDOME_COMPONENTS: dict[str, Any] = {
    "number": "1500",
    "street": "Sugar Bowl",
    "suffix": "Dr",
    "formatted_street": "Sugar Bowl Dr",
    "city": "New Orleans",
    "county": "Orleans Parish",
    "state": "LA",
    "zip": "70112",
    "country": "US",
}


def make_response(
    status_code: int = 200,
    json_data: object | None = None,
    *,
    text: str = "",
) -> httpx.Response:
    """Build a fake httpx.Response."""
    if json_data is not None:
        content = json.dumps(json_data).encode()
        headers = {"content-type": "application/json"}
    else:
        content = text.encode()
        headers = {"content-type": "text/plain"}
    return httpx.Response(
        status_code=status_code,
        content=content,
        headers=headers,
        request=httpx.Request("GET", "https://api.geocod.io/v1.7/geocode"),
    )


@pytest.fixture(name="make_response")
def make_response_fixture() -> Any:
    """Expose :func:`make_response` to tests."""
    return make_response


@pytest.fixture
def settings() -> Settings:
    """Test client settings."""
    return Settings(_env_file=None, geocodio_api_key="test-key")


@pytest.fixture
def geocode_payload() -> dict[str, Any]:
    """Single geocode response for the Superdome with two candidates."""
    return {
        "input": {
            "address_components": SUPERDOME_COMPONENTS,
            "formatted_address": "1500 Sugar Bowl Dr, New Orleans, LA 70112",
        },
        "results": [
            {
                "address_components": SUPERDOME_COMPONENTS,
                "formatted_address": "1500 Sugar Bowl Dr, New Orleans, LA 70112",
                "location": {"lat": 29.951065, "lng": -90.081236},
                "accuracy": 1,
                "accuracy_type": "rooftop",
                "source": "Orleans Parish",
            },
            {
                "address_components": SUPERDOME_COMPONENTS,
                "formatted_address": "1500 Sugar Bowl Dr, New Orleans, LA 70112",
                "location": {"lat": 29.9508, "lng": -90.0812},
                "accuracy": 0.8,
                "accuracy_type": "range_interpolation",
                "source": "TIGER/Line® dataset from the US Census Bureau",
            },
        ],
    }


@pytest.fixture
def reverse_payload() -> dict[str, Any]:
    """Reverse geocode response near MetLife Stadium."""
    return {
        "results": [
            {
                "address_components": {
                    "number": "1",
                    "street": "Metlife Stadium",
                    "suffix": "Dr",
                    "city": "East Rutherford",
                    "state": "NJ",
                    "zip": "07073",
                    "country": "US",
                },
                "formatted_address": "1 Metlife Stadium Dr, East Rutherford, NJ 07073",
                "location": {"lat": 40.81352, "lng": -74.074333},
                "accuracy": 1,
                "accuracy_type": "rooftop",
                "source": "Bergen County",
            }
        ]
    }


@pytest.fixture
def batch_payload() -> dict[str, Any]:
    """Batch geocode response with one match and one per-item failure."""
    return {
        "results": [
            {
                "query": "1500 Sugar Bowl Dr, New Orleans, LA 70112",
                "response": {
                    "input": {
                        "address_components": SUPERDOME_COMPONENTS,
                        "formatted_address": "1500 Sugar Bowl Dr, New Orleans, LA 70112",
                    },
                    "results": [
                        {
                            "address_components": SUPERDOME_COMPONENTS,
                            "formatted_address": "1500 Sugar Bowl Dr, New Orleans, LA 70112",
                            "location": {"lat": 29.951065, "lng": -90.081236},
                            "accuracy": 1,
                            "accuracy_type": "rooftop",
                            "source": "Orleans Parish",
                        }
                    ],
                },
            },
            {
                "query": "not an address",
                "response": {"error": "Could not geocode address. Postal code or city required."},
            },
        ]
    }


@pytest.fixture
def fields_payload() -> dict[str, Any]:
    """Extended ``fields`` block with every modeled record populated."""
    return {
        "timezone": {
            "name": "America/Chicago",
            "utc_offset": -6,
            "observes_dst": True,
            "abbreviation": "CST",
            "source": "© OpenStreetMap contributors",
        },
        "zip4": {
            "record_type": {"code": "S", "description": "Street"},
            "carrier_route": {"id": "C001", "description": "City Delivery"},
            "building_or_firm_name": None,
            "plus4": ["1234"],
            "zip9": ["70112-1234"],
            "government_building": None,
            "facility_code": {"code": "P", "description": "Post Office"},
            "city_delivery": True,
            "valid_delivery_area": True,
            "exact_match": True,
        },
        "congressional_districts": [
            {
                "name": "Congressional District 2",
                "district_number": 2,
                "ocd_id": "ocd-division/country:us/state:la/cd:2",
                "congress_number": "118th",
                "congress_years": "2023-2025",
                "proportion": 1,
                "current_legislators": [{"type": "representative", "bio": {"last_name": "Carter"}}],
            }
        ],
        "state_legislative_districts": {
            "house": [{"name": "State House District 93", "district_number": "93", "proportion": 1}],
            "senate": [{"name": "State Senate District 5", "district_number": "5", "proportion": 1}],
        },
        "school_districts": {
            "unified": {
                "name": "Orleans Parish School District",
                "lea_code": "2201170",
                "grade_low": "PK",
                "grade_high": "12",
            }
        },
        "census": {"2020": {"census_year": 2020, "block_code": "1000"}},
        "acs": {"meta": {"source": "American Community Survey"}, "demographics": {}},
    }
