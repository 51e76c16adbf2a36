"""Texture loading.

``load_texture`` resolves any supported texture source locator into a fully
decoded RGBA Pillow image:

* ``data:`` URLs (base64 or percent-encoded payloads).
* ``http://`` / ``https://`` URLs, fetched with ``requests``.
* ``file://`` URLs and filesystem paths.
* Raw ``bytes`` or binary file-like objects holding an encoded image.
* Already decoded Pillow images and NumPy ``uint8`` pixel arrays.

Every fetch or decode failure is re-raised as :class:`LoadError` carrying the
underlying error's message, with the original exception chained.
"""

import base64
import binascii
import io
import logging
import os
from typing import IO, Union
from urllib.parse import unquote, unquote_to_bytes, urlparse

import numpy as np
import requests
from PIL import Image

from skin_viewer.errors import FormatError, LoadError
from skin_viewer.formats import classify
from skin_viewer.types import SkinFormat, TextureSource

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0

LOAD_FAILURES = (
    OSError,
    binascii.Error,
    requests.RequestException,
    Image.DecompressionBombError,
)


def decode_data_url(url: str) -> bytes:
    """Return the payload of a ``data:`` URL."""
    header, sep, payload = url.partition(",")
    if not sep:
        raise LoadError("Malformed data URL: missing ',' separator")
    if header.endswith(";base64"):
        return base64.b64decode(payload, validate=True)
    return unquote_to_bytes(payload)


def fetch_bytes(url: str, timeout: float = DEFAULT_TIMEOUT) -> bytes:
    response = requests.get(url, timeout=timeout)
    response.raise_for_status()
    return response.content


def decode_image(data: Union[bytes, str, os.PathLike, IO[bytes]]) -> Image.Image:
    """Decode encoded image bytes, a path or a binary stream into RGBA.

    The header is read first; images whose size is not a skin format are
    rejected with FormatError before any pixel data is decoded.
    """
    stream = io.BytesIO(data) if isinstance(data, (bytes, bytearray)) else data
    with Image.open(stream) as image:
        if classify(image.size) == SkinFormat.UNKNOWN:
            raise FormatError()
        return image.convert("RGBA")


def _read_source(source: TextureSource, timeout: float) -> Image.Image:
    if isinstance(source, Image.Image):
        return source.convert("RGBA")
    if isinstance(source, np.ndarray):
        pixels = np.ascontiguousarray(source, dtype=np.uint8)
        try:
            return Image.fromarray(pixels).convert("RGBA")
        except TypeError as exc:
            raise LoadError(str(exc)) from exc
    if isinstance(source, (bytes, bytearray)):
        return decode_image(bytes(source))
    if isinstance(source, os.PathLike):
        return decode_image(source)
    if isinstance(source, str):
        parsed = urlparse(source)
        scheme = parsed.scheme.lower()
        if scheme == "data":
            logger.debug("Decoding data URL texture (%d chars)", len(source))
            return decode_image(decode_data_url(source))
        if scheme in ("http", "https"):
            logger.debug("Fetching texture from %s", source)
            return decode_image(fetch_bytes(source, timeout))
        if scheme == "file":
            return decode_image(unquote(parsed.path))
        logger.debug("Reading texture file %s", source)
        return decode_image(source)
    if hasattr(source, "read"):
        return decode_image(source)
    raise LoadError(f"Unsupported texture source: {type(source).__name__}")


def load_texture(
    source: TextureSource, timeout: float = DEFAULT_TIMEOUT
) -> Image.Image:
    """
    Load and fully decode a texture. Raises LoadError on any fetch/decode failure
    and FormatError for encoded images whose size is not a skin format.
    """
    try:
        return _read_source(source, timeout)
    except LOAD_FAILURES as exc:
        raise LoadError(str(exc)) from exc
