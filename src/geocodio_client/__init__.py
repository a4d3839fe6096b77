"""Async client for the Geocodio geocoding API."""

from geocodio_client.lib.geocoder import (
    AddressInput,
    ConfigError,
    Coordinates,
    DecodeError,
    GeocodeField,
    GeocodioError,
    GeocodioProxy,
    RemoteError,
    StructuredAddress,
    TransportError,
)
from geocodio_client.schemas import (
    GeocodeBatchResponse,
    GeocodeResponse,
    GeocodeReverseResponse,
)

__version__ = "0.1.0"

__all__ = [
    "AddressInput",
    "ConfigError",
    "Coordinates",
    "DecodeError",
    "GeocodeBatchResponse",
    "GeocodeField",
    "GeocodeResponse",
    "GeocodeReverseResponse",
    "GeocodioError",
    "GeocodioProxy",
    "RemoteError",
    "StructuredAddress",
    "TransportError",
]
