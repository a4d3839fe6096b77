"""Pydantic v2 schemas for opt-in extended data fields.

These records only appear on a candidate when the matching name was passed
in the ``fields`` parameter of a lookup.  Census and ACS payloads are kept
as opaque JSON values.
"""

from pydantic import BaseModel, ConfigDict, JsonValue

_RECORD_CONFIG = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class Timezone(BaseModel):
    """Timezone of the matched location."""

    model_config = _RECORD_CONFIG

    name: str
    abbreviation: str
    utc_offset: int
    observes_dst: bool
    source: str


class RecordType(BaseModel):
    """USPS ZIP+4 record type."""

    model_config = _RECORD_CONFIG

    code: str
    description: str


class CarrierRoute(BaseModel):
    """USPS carrier route serving the address."""

    model_config = _RECORD_CONFIG

    id: str
    description: str


class FacilityCode(BaseModel):
    """USPS facility code of the delivery point."""

    model_config = _RECORD_CONFIG

    code: str
    description: str


class Zip4(BaseModel):
    """USPS ZIP+4 postal routing detail."""

    model_config = _RECORD_CONFIG

    record_type: RecordType
    carrier_route: CarrierRoute
    building_or_firm_name: str | None = None
    plus4: list[str]
    zip9: list[str]
    government_building: str | None = None
    facility_code: FacilityCode
    city_delivery: bool
    valid_delivery_area: bool
    exact_match: bool


class CongressionalDistrict(BaseModel):
    """A US congressional district and, optionally, its current legislators."""

    model_config = _RECORD_CONFIG

    name: str
    district_number: int
    congress_number: str
    congress_years: str
    proportion: float | None = None
    ocd_id: str | None = None
    current_legislators: list[JsonValue] | None = None


class StateLegislativeDistrict(BaseModel):
    """One state house or senate district."""

    model_config = _RECORD_CONFIG

    name: str
    district_number: str
    ocd_id: str | None = None
    is_upcoming_state_legislative_district: bool | None = None
    proportion: float | None = None


class StateLegislativeDistricts(BaseModel):
    """State legislative districts, split by chamber."""

    model_config = _RECORD_CONFIG

    house: list[StateLegislativeDistrict] | None = None
    senate: list[StateLegislativeDistrict] | None = None


class SchoolDistrict(BaseModel):
    """A school district with its NCES LEA code and grade range."""

    model_config = _RECORD_CONFIG

    name: str
    lea_code: str
    grade_low: str
    grade_high: str


class SchoolDistricts(BaseModel):
    """Unified, elementary and secondary school districts."""

    model_config = _RECORD_CONFIG

    unified: SchoolDistrict | None = None
    elementary: SchoolDistrict | None = None
    secondary: SchoolDistrict | None = None


class Fields(BaseModel):
    """Container for every extended field returned on a candidate."""

    model_config = _RECORD_CONFIG

    timezone: Timezone | None = None
    zip4: Zip4 | None = None
    congressional_district: CongressionalDistrict | None = None
    congressional_districts: list[CongressionalDistrict] | None = None
    state_legislative_districts: StateLegislativeDistricts | None = None
    school_districts: SchoolDistricts | None = None
    census: JsonValue = None
    acs: JsonValue = None
