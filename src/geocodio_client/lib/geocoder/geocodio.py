"""Geocodio API facade.

Uses the Geocodio API (https://www.geocod.io/docs/) for forward and reverse
geocoding, single or batched.  Requires an API key.
"""

from collections.abc import Sequence
from typing import TypeVar

import httpx
from loguru import logger
from pydantic import BaseModel

from geocodio_client.core.config import GEOCODIO_BASE_URL, Settings, get_settings
from geocodio_client.lib.geocoder.address import (
    AddressInput,
    Coordinates,
    render_address,
    render_coordinates,
)
from geocodio_client.lib.geocoder.base import ConfigError, DecodeError, GeocodioEndpoint
from geocodio_client.lib.geocoder.decoder import decode_response
from geocodio_client.lib.geocoder.request import (
    FieldNames,
    GeocodioRequest,
    build_batch_request,
    build_single_request,
    send_request,
)
from geocodio_client.schemas.geocoding import (
    GeocodeBatchResponse,
    GeocodeResponse,
    GeocodeReverseResponse,
)

DEFAULT_TIMEOUT = 30.0

ResponseT = TypeVar("ResponseT", bound=BaseModel)


class GeocodioProxy:
    """Single entry point for Geocodio lookups.

    Holds only immutable configuration; every call is an independent HTTP
    round trip and nothing is cached.

    Args:
        api_key: Geocodio API key.
        base_url: Versioned API base URL.
        timeout: Request timeout in seconds for per-call clients.
        client: Optional shared ``httpx.AsyncClient``.  When omitted each
            call opens and closes its own client.  An injected client is
            never closed by the proxy.

    Raises:
        ConfigError: If the API key is empty or the base URL is not http(s).
    """

    def __init__(
        self,
        api_key: str | None,
        *,
        base_url: str = GEOCODIO_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        if not api_key or not api_key.strip():
            raise ConfigError("API key is required")
        if not base_url.startswith(("http://", "https://")):
            raise ConfigError(f"Invalid base URL: {base_url!r}")
        self._api_key = api_key.strip()
        self._base_url = base_url if base_url.endswith("/") else f"{base_url}/"
        self._timeout = timeout
        self._client = client

    @classmethod
    def from_env(cls, settings: Settings | None = None, client: httpx.AsyncClient | None = None) -> "GeocodioProxy":
        """Create a proxy from ``GEOCODIO_API_KEY`` (environment or ``.env``).

        Raises:
            ConfigError: If no API key is configured.
        """
        settings = settings or get_settings()
        if not settings.geocodio_api_key:
            raise ConfigError("GEOCODIO_API_KEY is not set")
        return cls(
            settings.geocodio_api_key,
            base_url=settings.geocodio_base_url,
            timeout=settings.geocodio_timeout,
            client=client,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def api_key(self) -> str:
        return self._api_key

    async def geocode(self, address: AddressInput, fields: FieldNames | None = None) -> GeocodeResponse:
        """Geocode a single address.

        Args:
            address: Free-form string or ``StructuredAddress``.
            fields: Optional extended field names (e.g. ``["timezone", "cd"]``).

        Returns:
            The parsed input and candidate matches, best first.

        Raises:
            TransportError: If the HTTP exchange fails.
            RemoteError: If the service answers with a non-2xx status.
            DecodeError: If the response does not match ``GeocodeResponse``.
        """
        request = build_single_request(
            self._base_url, GeocodioEndpoint.GEOCODE, render_address(address), self._api_key, fields
        )
        return await self._fetch(request, GeocodeResponse)

    async def geocode_batch(
        self,
        addresses: Sequence[AddressInput],
        fields: FieldNames | None = None,
    ) -> GeocodeBatchResponse:
        """Geocode many addresses in one POST.

        Per-item failures are reported inside each ``BatchResult.response``;
        only a failure of the whole exchange raises.

        Returns:
            Batch results, index-aligned with ``addresses``.
        """
        queries = [render_address(address) for address in addresses]
        request = build_batch_request(self._base_url, GeocodioEndpoint.GEOCODE, queries, self._api_key, fields)
        response = await self._fetch(request, GeocodeBatchResponse)
        return _check_alignment(response, len(queries))

    async def reverse_geocode(
        self,
        coordinates: Coordinates,
        fields: FieldNames | None = None,
    ) -> GeocodeReverseResponse:
        """Reverse geocode one coordinate pair into nearby addresses."""
        request = build_single_request(
            self._base_url, GeocodioEndpoint.REVERSE, render_coordinates(coordinates), self._api_key, fields
        )
        return await self._fetch(request, GeocodeReverseResponse)

    async def reverse_geocode_batch(
        self,
        coordinates: Sequence[Coordinates],
        fields: FieldNames | None = None,
    ) -> GeocodeBatchResponse:
        """Reverse geocode many coordinate pairs in one POST.

        Same batch contract as :meth:`geocode_batch`.
        """
        queries = [render_coordinates(pair) for pair in coordinates]
        request = build_batch_request(self._base_url, GeocodioEndpoint.REVERSE, queries, self._api_key, fields)
        response = await self._fetch(request, GeocodeBatchResponse)
        return _check_alignment(response, len(queries))

    async def _fetch(self, request: GeocodioRequest, shape: type[ResponseT]) -> ResponseT:
        """Send one request and decode the response into ``shape``."""
        if self._client is not None:
            response = await send_request(self._client, request)
        else:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await send_request(client, request)
        return decode_response(response, shape)


def _check_alignment(response: GeocodeBatchResponse, expected: int) -> GeocodeBatchResponse:
    """Ensure batch results correspond one-to-one with the submitted inputs."""
    if response.results is not None and len(response.results) != expected:
        logger.warning(f"Geocodio batch returned {len(response.results)} results for {expected} inputs")
        raise DecodeError(f"Batch returned {len(response.results)} results for {expected} inputs")
    return response
