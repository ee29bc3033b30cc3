"""Unit tests for the rescaler."""

import pytest
from PIL import Image

from cl_image_resizer.algo.rescale import scale, scaled_size
from cl_image_resizer.common.errors import InvalidDimensionError
from image_helpers import make_image


def test_scaled_size_floors() -> None:
    assert scaled_size((101, 51), 0.5, 0.5) == (50, 25)
    assert scaled_size((200, 100), 1.5, 1.0) == (300, 100)


def test_scale_uniform(image_200x100: Image.Image) -> None:
    result = scale(image_200x100, 0.5, 0.5)

    assert result.size == (100, 50)


def test_scale_independent_axes(image_200x100: Image.Image) -> None:
    result = scale(image_200x100, 0.5, 2.0)

    assert result.size == (100, 200)


def test_scale_upscale(image_200x100: Image.Image) -> None:
    result = scale(image_200x100, 2.0, 2.0)

    assert result.size == (400, 200)


def test_scale_does_not_modify_source(image_200x100: Image.Image) -> None:
    before = image_200x100.tobytes()

    _ = scale(image_200x100, 0.25, 0.25)

    assert image_200x100.size == (200, 100)
    assert image_200x100.tobytes() == before


def test_scale_identity_returns_new_image(image_200x100: Image.Image) -> None:
    result = scale(image_200x100, 1.0, 1.0)

    assert result is not image_200x100
    assert result.size == image_200x100.size


def test_scale_keeps_alpha() -> None:
    result = scale(make_image(64, 64, mode="RGBA"), 0.5, 0.5)

    assert result.mode == "RGBA"
    assert result.size == (32, 32)


@pytest.mark.parametrize("wf,hf", [(0.001, 1.0), (1.0, 0.001), (0.0, 0.0)])
def test_scale_to_empty_image_rejected(image_200x100: Image.Image, wf: float, hf: float) -> None:
    with pytest.raises(InvalidDimensionError):
        _ = scale(image_200x100, wf, hf)


def test_scale_non_finite_rejected(image_200x100: Image.Image) -> None:
    with pytest.raises(InvalidDimensionError):
        _ = scale(image_200x100, float("nan"), 1.0)


def test_scaled_size_absorbs_float_error() -> None:
    assert scaled_size((44, 22), 30 / 44, 30 / 44) == (30, 15)
    assert scaled_size((22, 10), 15 / 22, 15 / 22) == (15, 6)


@pytest.mark.parametrize("factor", [1e10, 1e6, 1e308])
def test_scale_too_large_rejected(factor: float) -> None:
    with pytest.raises(InvalidDimensionError):
        _ = scale(make_image(10, 10), factor, factor)


def test_scale_over_pixel_limit_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 1000)

    with pytest.raises(InvalidDimensionError):
        _ = scale(make_image(10, 10), 10.0, 10.0)


def test_scale_resize_failure_is_reported(
    image_200x100: Image.Image, monkeypatch: pytest.MonkeyPatch
) -> None:
    def fail(*args: object, **kwargs: object) -> Image.Image:
        raise MemoryError("out of memory")

    monkeypatch.setattr(Image.Image, "resize", fail)

    with pytest.raises(InvalidDimensionError):
        _ = scale(image_200x100, 2.0, 2.0)
