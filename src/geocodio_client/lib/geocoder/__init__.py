"""Geocoder library: Geocodio request construction and response decoding.

Public API:
    - StructuredAddress / AddressInput: Address lookup inputs
    - Coordinates: Latitude/longitude pair for reverse lookups
    - render_address / render_coordinates: Wire rendering of inputs
    - build_single_request / build_batch_request: Outbound request builders
    - decode / decode_response: Typed response decoding
    - GeocodioProxy: Facade exposing geocode, geocode_batch, reverse_geocode
      and reverse_geocode_batch
    - GeocodioError and subclasses: ConfigError, TransportError, RemoteError,
      DecodeError
"""

from geocodio_client.lib.geocoder.address import (
    AddressInput,
    Coordinates,
    StructuredAddress,
    normalize_country,
    render_address,
    render_coordinates,
)
from geocodio_client.lib.geocoder.base import (
    ConfigError,
    DecodeError,
    GeocodeField,
    GeocodioEndpoint,
    GeocodioError,
    RemoteError,
    TransportError,
)
from geocodio_client.lib.geocoder.decoder import decode, decode_response
from geocodio_client.lib.geocoder.geocodio import GeocodioProxy
from geocodio_client.lib.geocoder.request import (
    GeocodioRequest,
    build_batch_request,
    build_single_request,
    send_request,
)

__all__ = [
    "AddressInput",
    "ConfigError",
    "Coordinates",
    "DecodeError",
    "GeocodeField",
    "GeocodioEndpoint",
    "GeocodioError",
    "GeocodioProxy",
    "GeocodioRequest",
    "RemoteError",
    "StructuredAddress",
    "TransportError",
    "build_batch_request",
    "build_single_request",
    "decode",
    "decode_response",
    "normalize_country",
    "render_address",
    "render_coordinates",
    "send_request",
]
