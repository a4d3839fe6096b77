"""Outbound request construction for single and batch lookups.

Single lookups are ``GET <base>/<endpoint>?q=...&fields=...&api_key=...``.
Batch lookups are ``POST <base>/<endpoint>?api_key=...`` with a JSON array
of strings as the body.  The API key always travels as the last query
parameter, never in a header or the body.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

import httpx
from loguru import logger

from geocodio_client.lib.geocoder.base import GeocodeField, GeocodioEndpoint, TransportError

# A list of names, or a single name
FieldNames = Sequence[GeocodeField | str] | GeocodeField | str


@dataclass(frozen=True)
class GeocodioRequest:
    """Immutable description of one HTTP exchange with the service."""

    method: str
    url: str
    params: list[tuple[str, str]] = field(default_factory=list)
    body: list[str] | None = None

    @property
    def redacted_url(self) -> str:
        """Full URL with the API key masked, safe for logging."""
        params = [(k, "REDACTED" if k == "api_key" else v) for k, v in self.params]
        return str(httpx.URL(self.url, params=params))


def join_fields(fields: FieldNames) -> str:
    """Comma-join extended field names (enum members or raw strings).

    A single name is treated as a one-item list.
    """
    if isinstance(fields, str):
        fields = [fields]
    return ",".join(str(f) for f in fields)


def endpoint_url(base_url: str, endpoint: GeocodioEndpoint | str) -> str:
    """Resolve an endpoint name against the versioned base URL."""
    return str(httpx.URL(base_url).join(str(endpoint)))


def build_single_request(
    base_url: str,
    endpoint: GeocodioEndpoint | str,
    query: str,
    api_key: str,
    fields: FieldNames | None = None,
) -> GeocodioRequest:
    """Build a GET request for one address or coordinate lookup.

    Args:
        base_url: Versioned API base URL (with trailing slash).
        endpoint: ``geocode`` or ``reverse``.
        query: Rendered address or ``"lat,lng"`` string.
        api_key: Geocodio API key.
        fields: Optional extended field names.

    Returns:
        The request description.
    """
    params = [("q", query)]
    if fields:
        params.append(("fields", join_fields(fields)))
    params.append(("api_key", api_key))
    return GeocodioRequest(method="GET", url=endpoint_url(base_url, endpoint), params=params)


def build_batch_request(
    base_url: str,
    endpoint: GeocodioEndpoint | str,
    queries: Sequence[str],
    api_key: str,
    fields: FieldNames | None = None,
) -> GeocodioRequest:
    """Build a POST request whose body is the JSON array of rendered queries.

    The list is sent as-is and in order; it is not chunked, so the service's
    own batch limit surfaces as a remote error.
    """
    params: list[tuple[str, str]] = []
    if fields:
        params.append(("fields", join_fields(fields)))
    params.append(("api_key", api_key))
    return GeocodioRequest(
        method="POST",
        url=endpoint_url(base_url, endpoint),
        params=params,
        body=list(queries),
    )


async def send_request(client: httpx.AsyncClient, request: GeocodioRequest) -> httpx.Response:
    """Execute a request through the given client.

    Does not retry and does not inspect the status code.

    Raises:
        TransportError: On timeout, connection or protocol failure.
    """
    logger.debug(f"Geocodio {request.method} {request.redacted_url}")
    try:
        return await client.request(
            request.method,
            request.url,
            params=request.params,
            json=request.body,
        )
    except httpx.TimeoutException as e:
        logger.warning(f"Geocodio {request.method} request timed out")
        raise TransportError("Request timed out") from e
    except httpx.ConnectError as e:
        logger.warning("Geocodio connection error")
        raise TransportError("Connection to Geocodio failed") from e
    except httpx.RequestError as e:
        logger.warning(f"Geocodio transport error: {type(e).__name__}")
        raise TransportError(f"Request failed: {type(e).__name__}") from e
