"""Pydantic v2 schemas mirroring Geocodio's geocode, reverse and batch responses.

Every field the service may omit is ``X | None`` with a ``None`` default;
an absent value is never replaced by ``0`` or ``""``.  Unknown keys are
ignored so new service fields do not break decoding.
"""

from pydantic import BaseModel, ConfigDict, Field

from geocodio_client.schemas.fields import Fields

_RECORD_CONFIG = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class AddressComponents(BaseModel):
    """Parsed components of an address as understood by the service."""

    model_config = _RECORD_CONFIG

    number: str | None = None
    predirectional: str | None = None
    prefix: str | None = None
    street: str | None = None
    suffix: str | None = None
    postdirectional: str | None = None
    secondaryunit: str | None = None
    secondarynumber: str | None = None
    formatted_street: str | None = None
    city: str | None = None
    county: str | None = None
    state: str | None = None
    zip: str | None = None
    country: str | None = None


class Location(BaseModel):
    """Resolved point.  Each axis is independently optional."""

    model_config = _RECORD_CONFIG

    latitude: float | None = Field(default=None, alias="lat")
    longitude: float | None = Field(default=None, alias="lng")


class Input(BaseModel):
    """Echo of the submitted address as parsed by the service."""

    model_config = _RECORD_CONFIG

    address_components: AddressComponents
    formatted_address: str


class _Candidate(BaseModel):
    model_config = _RECORD_CONFIG

    address_components: AddressComponents | None = None
    formatted_address: str | None = None
    location: Location | None = None
    accuracy: float | None = None
    accuracy_type: str | None = None
    source: str | None = None
    fields: Fields | None = None


class Address(_Candidate):
    """A candidate match from a single geocode or reverse geocode lookup."""


class ResponseResult(_Candidate):
    """A candidate match inside one batch item's response envelope."""


class Response(BaseModel):
    """Per-item envelope of a batch lookup.

    ``error`` carries the service's message when this one input failed
    while the batch as a whole succeeded.
    """

    model_config = _RECORD_CONFIG

    input: Input | None = None
    results: list[ResponseResult] | None = None
    error: str | None = None


class BatchResult(BaseModel):
    """One batch item: the echoed query and its response envelope."""

    model_config = _RECORD_CONFIG

    query: str | None = None
    response: Response | None = None


class GeocodeResponse(BaseModel):
    """Result of a single forward geocode.

    ``results`` is ordered by decreasing accuracy.
    """

    model_config = _RECORD_CONFIG

    input: Input
    results: list[Address]


class GeocodeReverseResponse(BaseModel):
    """Result of a single reverse geocode."""

    model_config = _RECORD_CONFIG

    results: list[Address] | None = None


class GeocodeBatchResponse(BaseModel):
    """Result of a batch geocode or batch reverse geocode.

    ``results`` is index-aligned with the submitted inputs.
    """

    model_config = _RECORD_CONFIG

    results: list[BatchResult] | None = None
