"""Re-encoding of raster images and persistence of encoded bytes."""

import base64
from io import BytesIO
from pathlib import Path

from loguru import logger

from ..common.errors import ImageIOError, PathError
from ..common.schemas import ImageFormat
from ..utils.profiling import timed
from .image_source import RasterImage
from .paths import normalize_directory, validate_filename

# JPEG has no alpha channel and no palette
_JPEG_MODES = ("L", "RGB", "CMYK")


def get_pil_format(format: ImageFormat) -> str:
    """Convert an output format to the PIL format name."""
    return {ImageFormat.jpg: "JPEG", ImageFormat.png: "PNG"}[format]


def _prepare(image: RasterImage, format: ImageFormat) -> RasterImage:
    if format is ImageFormat.jpg and image.mode not in _JPEG_MODES:
        return image.convert("RGB")
    if format is ImageFormat.png and image.mode == "CMYK":
        return image.convert("RGB")
    return image


@timed
def encode(image: RasterImage, format: ImageFormat, quality: int) -> bytes:
    """
    Encode an image to JPEG or PNG bytes.

    Args:
        image: Image to encode; it is not modified
        format: Output codec
        quality: 0-100. Used for JPEG; PNG is lossless and ignores it

    Returns:
        Encoded image bytes

    Raises:
        ImageIOError: If Pillow fails to encode the image
    """
    save_kwargs: dict[str, object] = {}
    if format is ImageFormat.jpg:
        save_kwargs["quality"] = quality
    else:
        save_kwargs["optimize"] = True

    buffer = BytesIO()
    try:
        _prepare(image, format).save(buffer, format=get_pil_format(format), **save_kwargs)
    except (OSError, ValueError) as exc:
        raise ImageIOError(f"Image could not be encoded as {format.value}: {exc}") from exc
    return buffer.getvalue()


def to_base64(data: bytes) -> str:
    """Portable text form of encoded image bytes."""
    return base64.b64encode(data).decode("ascii")


@timed
def store(
    data: bytes,
    directory: str,
    filename: str,
    *,
    root: str | Path | None = None,
) -> Path:
    """
    Write encoded bytes to ``directory/filename``.

    The directory tree is created when missing and an existing file of the
    same name is truncated. The write is not atomic.

    Args:
        data: Encoded image bytes
        directory: Destination directory as file URI or absolute path
        filename: Bare filename
        root: Optional directory the destination must resolve inside

    Returns:
        Path of the written file

    Raises:
        PathError: If the destination cannot be resolved to a valid location
        ImageIOError: If creating the directory or writing the file fails
    """
    folder = normalize_directory(directory, root=root)
    name = validate_filename(filename)

    try:
        folder.mkdir(parents=True, exist_ok=True)
    except FileExistsError as exc:
        raise PathError(f"A file is in the way of destination directory {folder}") from exc
    except OSError as exc:
        raise ImageIOError(f"Could not create directory {folder}: {exc}") from exc

    target = folder / name
    if target.is_dir():
        raise PathError(f"Destination is a directory: {target}")

    try:
        _ = target.write_bytes(data)
    except OSError as exc:
        raise ImageIOError(f"Could not write {target}: {exc}") from exc

    logger.info(f"Stored {len(data)} bytes at {target}")
    return target
