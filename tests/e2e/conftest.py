"""E2E test fixtures: a proxy bound to the live Geocodio API.

These tests spend real lookups and only run when ``GEOCODIO_API_KEY`` is set.
"""

import os

import pytest

from geocodio_client.lib.geocoder import GeocodioProxy


@pytest.fixture
def geocodio() -> GeocodioProxy:
    """Return a proxy configured from the environment, or skip."""
    if not os.environ.get("GEOCODIO_API_KEY"):
        pytest.skip("GEOCODIO_API_KEY not set")
    return GeocodioProxy.from_env()
