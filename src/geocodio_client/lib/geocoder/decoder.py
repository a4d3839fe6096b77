"""Decode raw Geocodio payloads into typed response models."""

from typing import TypeVar

import httpx
from loguru import logger
from pydantic import BaseModel, ValidationError

from geocodio_client.lib.geocoder.base import DecodeError, RemoteError

ResponseT = TypeVar("ResponseT", bound=BaseModel)


def decode(payload: bytes | str, shape: type[ResponseT]) -> ResponseT:
    """Validate a JSON payload against a response model.

    Unknown keys are ignored and missing optional keys become ``None``.
    Validation is strict: a quoted number or boolean is a type mismatch,
    not something to coerce.

    Args:
        payload: Raw JSON document.
        shape: Target model, e.g. ``GeocodeResponse``.

    Returns:
        The decoded, immutable model instance.

    Raises:
        DecodeError: If the payload is not valid JSON or does not conform
            to ``shape``.
    """
    try:
        return shape.model_validate_json(payload, strict=True)
    except ValidationError as e:
        logger.warning(f"Failed to decode Geocodio {shape.__name__}: {e.error_count()} error(s)")
        raise DecodeError(f"Response does not match {shape.__name__}: {e}", cause=e) from e


def _error_message(response: httpx.Response) -> str:
    """Extract the service's ``error`` message, falling back to the status line."""
    try:
        data = response.json()
    except ValueError:
        data = None
    if isinstance(data, dict) and isinstance(data.get("error"), str):
        return data["error"]
    return f"Geocodio returned HTTP {response.status_code}"


def decode_response(response: httpx.Response, shape: type[ResponseT]) -> ResponseT:
    """Check the HTTP status, then decode the body.

    Raises:
        RemoteError: On a non-2xx status, before any decoding.
        DecodeError: If the body does not conform to ``shape``.
    """
    if not response.is_success:
        message = _error_message(response)
        logger.warning(f"Geocodio HTTP error {response.status_code}")
        raise RemoteError(message, status_code=response.status_code)
    return decode(response.content, shape)
