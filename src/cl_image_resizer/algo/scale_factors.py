"""Scale factor computation for the three resize modes.

The resolver only does arithmetic on dimensions; it never touches pixels.
Its output is fed to :func:`cl_image_resizer.algo.rescale.scale`.

Modes:
    factorResize:   targets are the factors themselves
    minPixelResize: shrink until the binding dimension reaches its target,
                    keeping the aspect ratio and never enlarging
    maxPixelResize: fit inside the target box, keeping the aspect ratio;
                    a zero target leaves that dimension unconstrained
"""

import math

from loguru import logger

from ..common.errors import InvalidDimensionError
from ..common.schemas import ResizeMode, ScaleFactors


def _uniform(factor: float) -> tuple[float, float]:
    return factor, factor


def min_pixel_factors(
    original: tuple[int, int], target_width: float, target_height: float
) -> tuple[float, float]:
    width, height = original
    wf = target_width / width
    hf = target_height / height

    if wf > hf and wf <= 1.0:
        return _uniform(wf)
    if hf <= 1.0:
        return _uniform(hf)
    # Already smaller than both targets
    return _uniform(1.0)


def max_pixel_factors(
    original: tuple[int, int], target_width: float, target_height: float
) -> tuple[float, float]:
    width, height = original
    wf = target_width / width
    hf = target_height / height

    if wf == 0.0:
        return _uniform(hf)
    if hf == 0.0:
        return _uniform(wf)
    if wf > hf:
        # scale to fit height
        return _uniform(hf)
    # scale to fit width
    return _uniform(wf)


def compensate_density(
    width_factor: float, height_factor: float, device_density: float
) -> tuple[float, float]:
    """Scale factors up for a high-density display without ever enlarging.

    The product is checked before it is applied: if either compensated
    factor would reach 1.0 the image is kept at its original size instead.
    """
    if device_density <= 1:
        return width_factor, height_factor

    if width_factor * device_density < 1.0 and height_factor * device_density < 1.0:
        return width_factor * device_density, height_factor * device_density
    return 1.0, 1.0


def resolve(
    original: tuple[int, int],
    resize_mode: ResizeMode,
    target_width: float,
    target_height: float,
    compensate: bool = False,
    device_density: float = 1.0,
) -> ScaleFactors:
    """
    Compute the width and height factors for a resize request.

    Args:
        original: (width, height) of the decoded image in pixels
        resize_mode: How the targets are interpreted
        target_width: Factor or pixel target for the width
        target_height: Factor or pixel target for the height
        compensate: Apply density compensation
        device_density: Display density (ignored unless > 1)

    Returns:
        ScaleFactors to hand to the rescaler

    Raises:
        InvalidDimensionError: Non-positive original size, negative or
            non-finite targets, non-positive factors in factor mode, or a
            computation that does not yield finite factors
    """
    width, height = original
    if width <= 0 or height <= 0:
        raise InvalidDimensionError(f"Original image has invalid size {width}x{height}")
    if not (math.isfinite(target_width) and math.isfinite(target_height)):
        raise InvalidDimensionError(
            f"Target size must be finite, got {target_width}x{target_height}"
        )

    if resize_mode is ResizeMode.scale_factor:
        if target_width <= 0 or target_height <= 0:
            raise InvalidDimensionError(
                f"Scale factors must be positive, got {target_width}x{target_height}"
            )
        wf, hf = target_width, target_height
    else:
        if target_width < 0 or target_height < 0:
            raise InvalidDimensionError(
                f"Pixel targets must not be negative, got {target_width}x{target_height}"
            )
        if resize_mode is ResizeMode.min_pixel:
            wf, hf = min_pixel_factors(original, target_width, target_height)
        else:
            wf, hf = max_pixel_factors(original, target_width, target_height)

    if compensate:
        wf, hf = compensate_density(wf, hf, device_density)

    if not (math.isfinite(wf) and math.isfinite(hf)):
        raise InvalidDimensionError(f"Computed scale factors are not finite: {wf}x{hf}")

    logger.debug(
        f"{resize_mode.value}: {width}x{height} -> factors {wf:.4f}x{hf:.4f}"
    )
    return ScaleFactors(width_factor=wf, height_factor=hf)
