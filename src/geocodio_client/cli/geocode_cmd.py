"""Geocoding CLI commands for single and batch lookups."""

import asyncio
from collections.abc import Callable, Coroutine
from pathlib import Path
from typing import Any

import typer
from pydantic import BaseModel

from geocodio_client.lib.geocoder import Coordinates, GeocodioError, GeocodioProxy


def geocode(
    address: str = typer.Argument(..., help="Free-form address"),
    field: list[str] | None = typer.Option(None, "--field", "-f", help="Extended field (repeatable)"),  # noqa: B008
) -> None:
    """Geocode a single address."""
    _run(lambda proxy: proxy.geocode(address, fields=field))


def reverse(
    lat: float = typer.Argument(..., help="Latitude"),
    lng: float = typer.Argument(..., help="Longitude"),
    field: list[str] | None = typer.Option(None, "--field", "-f", help="Extended field (repeatable)"),  # noqa: B008
) -> None:
    """Reverse geocode a coordinate pair."""
    _run(lambda proxy: proxy.reverse_geocode(Coordinates(lat, lng), fields=field))


def batch(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, help="File with one address per line"),  # noqa: B008
    field: list[str] | None = typer.Option(None, "--field", "-f", help="Extended field (repeatable)"),  # noqa: B008
) -> None:
    """Geocode every address in a file with one batch request."""
    addresses = _read_lines(file)
    _run(lambda proxy: proxy.geocode_batch(addresses, fields=field))


def reverse_batch(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, help="One lat,lng per line"),  # noqa: B008
    field: list[str] | None = typer.Option(None, "--field", "-f", help="Extended field (repeatable)"),  # noqa: B008
) -> None:
    """Reverse geocode every coordinate pair in a file with one batch request."""
    coordinates = [_parse_coordinates(line) for line in _read_lines(file)]
    _run(lambda proxy: proxy.reverse_geocode_batch(coordinates, fields=field))


def _read_lines(file: Path) -> list[str]:
    return [line.strip() for line in file.read_text(encoding="utf-8").splitlines() if line.strip()]


def _parse_coordinates(line: str) -> Coordinates:
    """Parse ``"lat,lng"`` into Coordinates, rejecting malformed lines."""
    try:
        lat, lng = (float(part) for part in line.split(","))
    except ValueError as e:
        raise typer.BadParameter(f"Expected 'lat,lng', got {line!r}") from e
    return Coordinates(lat, lng)


def _run(call: Callable[[GeocodioProxy], Coroutine[Any, Any, BaseModel]]) -> None:
    """Build a proxy from settings, await the call and print the JSON result."""
    try:
        proxy = GeocodioProxy.from_env()
        result = asyncio.run(call(proxy))
    except GeocodioError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e
    typer.echo(result.model_dump_json(by_alias=True, exclude_none=True, indent=2))

