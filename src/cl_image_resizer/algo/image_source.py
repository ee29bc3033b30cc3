"""Decoding of request payloads into raster images."""

import base64
import binascii
import re
from io import BytesIO
from pathlib import Path

from loguru import logger
from PIL import Image, UnidentifiedImageError

from ..common.errors import DecodeError, NotFoundError, PathError
from ..common.schemas import PayloadKind
from ..utils.profiling import timed
from .paths import normalize_uri

RasterImage = Image.Image

_DATA_URI_PREFIX = re.compile(r"^data:[\w/+.-]*(;[\w=.-]+)*;base64,", re.IGNORECASE)


def decode_base64_payload(payload: str | bytes) -> bytes:
    """Decode base64 text, tolerating line breaks and a ``data:`` URI prefix."""
    text = payload.decode("ascii", errors="replace") if isinstance(payload, bytes) else payload
    text = _DATA_URI_PREFIX.sub("", text.strip(), count=1)
    compact = "".join(text.split())
    if not compact:
        raise DecodeError("Image payload is empty")
    try:
        return base64.b64decode(compact, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise DecodeError(f"Image payload is not valid base64: {exc}") from exc


def _load(source: BytesIO | Path) -> RasterImage:
    """Open and fully load an image so no file handle outlives this call."""
    with Image.open(source) as img:
        img.load()
        # copy() detaches the pixel data from the lazily-opened container
        return img.copy()


@timed
def decode(
    payload: str | bytes,
    kind: PayloadKind,
    *,
    root: str | Path | None = None,
) -> RasterImage:
    """
    Decode a request payload into a raster image.

    Args:
        payload: base64 text for ``base64Image``, file URI or absolute
                 path for ``urlImage``
        kind: Which of the two the payload is
        root: Optional directory file references must resolve inside

    Returns:
        Loaded PIL image

    Raises:
        DecodeError: If the bytes are not a recognizable raster image
        NotFoundError: If a file reference has no readable file
        PathError: If a file reference cannot be normalized
    """
    if kind is PayloadKind.embedded_encoded:
        blob = decode_base64_payload(payload)
        try:
            return _load(BytesIO(blob))
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as exc:
            raise DecodeError(f"Image data could not be decoded: {exc}") from exc

    if isinstance(payload, bytes):
        try:
            payload = payload.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise PathError("File reference is not valid UTF-8 text") from exc
    path = normalize_uri(payload, root=root)
    if not path.is_file():
        raise NotFoundError(f"The image file could not be opened: {path}")

    logger.debug(f"Decoding image file {path}")
    try:
        return _load(path)
    except (UnidentifiedImageError, Image.DecompressionBombError) as exc:
        raise DecodeError(f"Image file could not be decoded: {path}") from exc
    except PermissionError as exc:
        raise NotFoundError(f"The image file is not readable: {path}") from exc
    except OSError as exc:
        raise DecodeError(f"Image file could not be decoded: {path}: {exc}") from exc
