"""Typer CLI root application."""

import typer

from geocodio_client.core.config import get_settings
from geocodio_client.core.logging import setup_logging

app = typer.Typer(name="geocodio", help="Geocodio geocoding CLI")


@app.callback()
def _main_callback() -> None:
    """Initialize logging for all CLI commands."""
    settings = get_settings()
    setup_logging(settings.log_level, log_dir=settings.log_dir)


def _register_commands() -> None:
    """Register all CLI commands."""
    from geocodio_client.cli.geocode_cmd import batch, geocode, reverse, reverse_batch

    app.command("geocode")(geocode)
    app.command("reverse")(reverse)
    app.command("batch")(batch)
    app.command("reverse-batch")(reverse_batch)


_register_commands()
