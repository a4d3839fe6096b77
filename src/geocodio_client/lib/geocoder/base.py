"""Shared error types, endpoint names, and extended field names."""

from enum import StrEnum


class GeocodioEndpoint(StrEnum):
    """Path segments of the Geocodio API relative to the versioned base URL."""

    GEOCODE = "geocode"
    REVERSE = "reverse"


class GeocodeField(StrEnum):
    """Extended data fields that can be appended to a lookup via ``fields``."""

    CONGRESSIONAL_DISTRICT = "cd"
    STATE_LEGISLATIVE_DISTRICTS = "stateleg"
    SCHOOL_DISTRICTS = "school"
    CENSUS = "census"
    ACS_DEMOGRAPHICS = "acs-demographics"
    ACS_ECONOMICS = "acs-economics"
    ACS_FAMILIES = "acs-families"
    ACS_HOUSING = "acs-housing"
    ACS_SOCIAL = "acs-social"
    TIMEZONE = "timezone"
    ZIP4 = "zip4"


class GeocodioError(Exception):
    """Base class for every failure raised by the Geocodio client.

    Args:
        message: Human-readable error description.
        status_code: Optional HTTP status code from the service.
    """

    provider_name = "geocodio"

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(f"{self.provider_name}: {message}")


class ConfigError(GeocodioError):
    """Raised when the API key or base URL is missing or invalid."""


class TransportError(GeocodioError):
    """Raised when the HTTP exchange cannot complete (timeout, connection, protocol)."""


class RemoteError(TransportError):
    """Raised when the service answers with a non-success HTTP status.

    Surfaced before any decoding is attempted, so it is never confused
    with a :class:`DecodeError`.
    """


class DecodeError(GeocodioError):
    """Raised when a response body does not match the expected schema.

    Args:
        message: Human-readable error description.
        cause: The underlying structural error (usually a pydantic
            ``ValidationError``).
    """

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        self.cause = cause
        super().__init__(message)
