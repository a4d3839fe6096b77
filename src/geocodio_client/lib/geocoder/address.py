"""Lookup inputs and their wire rendering.

An address is either a free-form string or a :class:`StructuredAddress`;
both render to the single comma-separated string sent as ``q`` (or as one
element of a batch body).  Coordinates render to ``"lat,lng"``.
"""

from dataclasses import dataclass
from decimal import Decimal

# Free-text country spellings -> ISO 3166-1 alpha-2 token accepted by Geocodio
COUNTRY_MAP: dict[str, str] = {
    "US": "US",
    "USA": "US",
    "U.S.": "US",
    "U.S.A.": "US",
    "UNITED STATES": "US",
    "UNITED STATES OF AMERICA": "US",
    "CA": "CA",
    "CANADA": "CA",
}


def normalize_country(country: str) -> str:
    """Map a free-text country name to its wire token.

    Args:
        country: Country text (e.g., "United States", "usa", "Canada").

    Returns:
        ``US`` or ``CA`` for recognised spellings, otherwise the stripped input.
    """
    stripped = country.strip()
    return COUNTRY_MAP.get(stripped.upper(), stripped)


@dataclass(frozen=True)
class StructuredAddress:
    """Address given as independently optional components.

    Nothing is required: an all-empty address renders to ``""`` and is sent
    as-is, leaving validation to the service.
    """

    line_1: str | None = None
    line_2: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    postal_code: str | None = None

    def render(self) -> str:
        """Join the present components as ``line_1, line_2, city, state, postal_code, country``."""
        country = normalize_country(self.country) if self.country else None
        ordered = (self.line_1, self.line_2, self.city, self.state, self.postal_code, country)
        return ", ".join(part.strip() for part in ordered if part and part.strip())


# Free-form string or structured components
AddressInput = str | StructuredAddress


@dataclass(frozen=True)
class Coordinates:
    """A latitude/longitude pair.  No range validation is performed."""

    latitude: float
    longitude: float

    def render(self) -> str:
        """Format as ``"lat,lng"`` in plain decimal notation without rounding."""
        return f"{_plain_decimal(self.latitude)},{_plain_decimal(self.longitude)}"


def _plain_decimal(value: float) -> str:
    # Shortest round-trip digits, never exponent notation
    return format(Decimal(repr(float(value))), "f")


def render_address(address: AddressInput) -> str:
    """Render an address input to the string the service expects.

    Args:
        address: Free-form address string or :class:`StructuredAddress`.

    Returns:
        The free-form string unchanged, or the joined structured components.

    Raises:
        TypeError: If ``address`` is neither variant.
    """
    match address:
        case str():
            return address
        case StructuredAddress():
            return address.render()
        case _:
            msg = f"Unsupported address input: {type(address).__name__}"
            raise TypeError(msg)


def render_coordinates(coordinates: Coordinates) -> str:
    """Render a coordinate pair as ``"lat,lng"``."""
    return coordinates.render()
