"""Codec — converts structured, image and locator values to storable text.

The primitive store only understands strings for anything non-scalar, so
every richer value goes through here on its way in and out:

* objects and lists are written as JSON (no embedded type tag; the reader
  names the target type),
* images are compressed with Pillow and base64-encoded,
* locators are stored in their string form.
"""

from __future__ import annotations

import base64
import binascii
import io
import logging
from collections.abc import Iterable
from functools import lru_cache
from typing import Any, TypeVar

import httpx
from PIL import Image
from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_json

from tinyprefs.exceptions import DecodeError, EncodeError

logger = logging.getLogger(__name__)

T = TypeVar("T")

EMPTY_LOCATOR = httpx.URL("")

_LIST_ADAPTER: TypeAdapter[list[Any]] = TypeAdapter(list[Any])


@lru_cache(maxsize=128)
def _cached_adapter(target_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target_type)


def _adapter(target_type: Any) -> TypeAdapter[Any]:
    try:
        return _cached_adapter(target_type)
    except TypeError:
        # Unhashable type expressions (e.g. Annotated with dict metadata)
        return TypeAdapter(target_type)


# ── Objects and lists ────────────────────────────────────────


def encode_object(value: Any) -> str:
    """Serialize *value* to JSON text.

    Supports primitives, nested containers, dataclasses and pydantic models.

    Raises:
        EncodeError: If *value* (or something nested in it) has no JSON form.
    """
    try:
        return to_json(value).decode("utf-8")
    except PydanticSerializationError as exc:
        raise EncodeError(f"Cannot serialize {type(value).__name__}: {exc}") from exc


def decode_object(text: str, target_type: type[T] | Any) -> T:
    """Deserialize JSON *text* into *target_type*.

    The text carries no type information, so the caller must name the exact
    type that was stored.  Passing a different type is unchecked beyond what
    validation happens to catch.

    Raises:
        DecodeError: If *text* is empty, malformed, or does not fit
            *target_type*.
    """
    if not text:
        raise DecodeError("Cannot decode an empty string")
    try:
        result: T = _adapter(target_type).validate_json(text)
    except ValidationError as exc:
        raise DecodeError(f"Cannot decode value as {_type_name(target_type)}: {exc}") from exc
    return result


def encode_list(values: Iterable[Any]) -> str:
    """Serialize an ordered sequence as a JSON array."""
    return encode_object(list(values))


def decode_list(text: str) -> list[Any]:
    """Deserialize a JSON array into a list of plain values.

    Elements come back as dicts, lists and primitives; their type is never
    enforced.

    Raises:
        DecodeError: If *text* is empty, malformed, or not a JSON array.
    """
    if not text:
        raise DecodeError("Cannot decode an empty string")
    try:
        return _LIST_ADAPTER.validate_json(text)
    except ValidationError as exc:
        raise DecodeError(f"Cannot decode value as list: {exc}") from exc


# ── Images ───────────────────────────────────────────────────


def encode_image(image: Image.Image, format: str = "PNG") -> str:
    """Compress *image* into *format* and return the base64 text."""
    buffer = io.BytesIO()
    try:
        image.save(buffer, format=format)
    except (KeyError, ValueError, OSError) as exc:
        raise EncodeError(f"Cannot encode image as {format}: {exc}") from exc
    return base64.b64encode(buffer.getvalue()).decode("ascii")


def decode_image(text: str) -> Image.Image | None:
    """Decode base64 *text* back into a fully loaded image.

    Returns ``None`` for malformed base64 or a corrupt image payload; a
    broken image reads the same as one that was never stored.
    """
    try:
        raw = base64.b64decode("".join(text.split()), validate=True)
        image = Image.open(io.BytesIO(raw))
        image.load()
    except (binascii.Error, ValueError, OSError, SyntaxError, Image.DecompressionBombError) as exc:
        logger.warning("Discarding undecodable image payload: %s", exc)
        return None
    return image


# ── Locators ─────────────────────────────────────────────────


def encode_locator(locator: httpx.URL | str) -> str:
    return str(locator)


def decode_locator(text: str) -> httpx.URL:
    """Parse *text* into a URL; empty or invalid text yields ``EMPTY_LOCATOR``."""
    if not text:
        return EMPTY_LOCATOR
    try:
        return httpx.URL(text)
    except httpx.InvalidURL:
        logger.debug("Stored locator %r is not a valid URL", text)
        return EMPTY_LOCATOR


def _type_name(target_type: Any) -> str:
    return getattr(target_type, "__name__", repr(target_type))
