"""Independent-axis rescaling of raster images."""

import math

from PIL import Image

from ..common.errors import InvalidDimensionError
from ..utils.profiling import timed
from .image_source import RasterImage

RESAMPLE = Image.Resampling.LANCZOS

# Absorbs float error in products such as 44 * (30 / 44) landing just below 30
SIZE_EPSILON = 1e-9

# Pillow stores dimensions as signed 32-bit integers
MAX_SIDE = 2**31 - 1


def max_output_pixels() -> int | None:
    """Largest output Pillow would open without a DecompressionBombError."""
    limit = Image.MAX_IMAGE_PIXELS
    return None if limit is None else 2 * limit


def scaled_size(size: tuple[int, int], width_factor: float, height_factor: float) -> tuple[int, int]:
    """Output size for the given factors: floor(w * wf) x floor(h * hf)."""
    width, height = size
    scaled_width = width * width_factor + SIZE_EPSILON
    scaled_height = height * height_factor + SIZE_EPSILON
    if not (math.isfinite(scaled_width) and math.isfinite(scaled_height)):
        raise InvalidDimensionError(
            f"Scaling {width}x{height} by {width_factor}x{height_factor} overflows"
        )
    return math.floor(scaled_width), math.floor(scaled_height)


@timed
def scale(image: RasterImage, width_factor: float, height_factor: float) -> RasterImage:
    """
    Scale an image by independent width and height factors.

    Args:
        image: Source image; it is read, never modified
        width_factor: Horizontal factor (>1 enlarges, <1 shrinks)
        height_factor: Vertical factor

    Returns:
        New image of ``scaled_size(image.size, width_factor, height_factor)``

    Raises:
        InvalidDimensionError: If either output dimension would be below 1, or
            the output is too large to allocate
    """
    if not (math.isfinite(width_factor) and math.isfinite(height_factor)):
        raise InvalidDimensionError(
            f"Scale factors must be finite, got {width_factor}x{height_factor}"
        )

    new_width, new_height = scaled_size(image.size, width_factor, height_factor)
    if new_width < 1 or new_height < 1:
        raise InvalidDimensionError(
            f"Scaling {image.width}x{image.height} by {width_factor}x{height_factor} "
            + f"gives an empty image ({new_width}x{new_height})"
        )

    pixel_limit = max_output_pixels()
    if (
        new_width > MAX_SIDE
        or new_height > MAX_SIDE
        or (pixel_limit is not None and new_width * new_height > pixel_limit)
    ):
        raise InvalidDimensionError(
            f"Scaling {image.width}x{image.height} by {width_factor}x{height_factor} "
            + f"gives an image too large to allocate ({new_width}x{new_height})"
        )

    if (new_width, new_height) == image.size:
        return image.copy()
    try:
        return image.resize((new_width, new_height), resample=RESAMPLE)
    except (OverflowError, MemoryError, ValueError) as exc:
        raise InvalidDimensionError(
            f"Could not scale {image.width}x{image.height} to {new_width}x{new_height}: {exc}"
        ) from exc
