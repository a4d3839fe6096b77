"""Typed response schemas for the Geocodio API."""

from geocodio_client.schemas.fields import (
    CarrierRoute,
    CongressionalDistrict,
    FacilityCode,
    Fields,
    RecordType,
    SchoolDistrict,
    SchoolDistricts,
    StateLegislativeDistrict,
    StateLegislativeDistricts,
    Timezone,
    Zip4,
)
from geocodio_client.schemas.geocoding import (
    Address,
    AddressComponents,
    BatchResult,
    GeocodeBatchResponse,
    GeocodeResponse,
    GeocodeReverseResponse,
    Input,
    Location,
    Response,
    ResponseResult,
)

__all__ = [
    "Address",
    "AddressComponents",
    "BatchResult",
    "CarrierRoute",
    "CongressionalDistrict",
    "FacilityCode",
    "Fields",
    "GeocodeBatchResponse",
    "GeocodeResponse",
    "GeocodeReverseResponse",
    "Input",
    "Location",
    "RecordType",
    "Response",
    "ResponseResult",
    "SchoolDistrict",
    "SchoolDistricts",
    "StateLegislativeDistrict",
    "StateLegislativeDistricts",
    "Timezone",
    "Zip4",
]
