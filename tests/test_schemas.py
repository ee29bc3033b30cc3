"""Schema validation tests."""

import pytest
from pydantic import ValidationError

from cl_image_resizer.common.config import DEFAULT_RESIZER_DEFAULTS, ResizerDefaults
from cl_image_resizer.common.errors import ErrorKind, ImageResizerError, PathError
from cl_image_resizer.common.schemas import (
    Action,
    Destination,
    ImageDimensions,
    ImageFormat,
    ImageRequest,
    PayloadKind,
    RequestBundle,
    ResizeMode,
    ResizeParams,
    ResizeResult,
)


def test_request_bundle_wire_names() -> None:
    bundle = RequestBundle.model_validate(
        {
            "data": "abc",
            "imageDataType": "urlImage",
            "format": "png",
            "resizeType": "minPixelResize",
            "width": 10,
            "height": 20.5,
            "pixelDensity": True,
            "quality": 70,
            "storeImage": True,
            "filename": "a.png",
            "directory": "/tmp",
        }
    )

    assert bundle.image_data_type is PayloadKind.file_reference
    assert bundle.format is ImageFormat.png
    assert bundle.resize_type is ResizeMode.min_pixel
    assert bundle.width == 10.0
    assert bundle.pixel_density is True
    assert bundle.store_image is True


def test_request_bundle_ignores_unknown_fields() -> None:
    bundle = RequestBundle.model_validate({"data": "abc", "returnType": "returnBase64"})

    assert bundle.data == "abc"
    assert bundle.image_data_type is None


def test_request_bundle_requires_data() -> None:
    with pytest.raises(ValidationError):
        _ = RequestBundle.model_validate({"width": 1})


def test_image_request_is_frozen() -> None:
    request = ImageRequest(payload="abc", operation=Action.measure)

    with pytest.raises(ValidationError):
        request.payload = "other"  # type: ignore[misc]


def test_resize_params_defaults() -> None:
    params = ResizeParams()

    assert params.resize_mode is ResizeMode.scale_factor
    assert params.quality == 85
    assert params.persist is False


def test_resize_params_persist_requires_destination() -> None:
    with pytest.raises(ValidationError):
        _ = ResizeParams(persist=True)

    params = ResizeParams(persist=True, destination=Destination(directory="/tmp", filename="a.jpg"))
    assert params.destination is not None


@pytest.mark.parametrize("quality", [-1, 101])
def test_resize_params_quality_range(quality: int) -> None:
    with pytest.raises(ValidationError):
        _ = ResizeParams(quality=quality)


def test_resize_result_exactly_one_output() -> None:
    with pytest.raises(ValidationError):
        _ = ResizeResult(width=1, height=1)
    with pytest.raises(ValidationError):
        _ = ResizeResult(width=1, height=1, image_data="abc", filename="a.jpg")

    result = ResizeResult(width=3, height=4, imageData="abc")
    assert result.to_payload() == {"width": 3, "height": 4, "imageData": "abc"}


def test_image_dimensions_payload() -> None:
    assert ImageDimensions(width=5, height=6).to_payload() == {"width": 5, "height": 6}


def test_defaults_are_immutable() -> None:
    assert DEFAULT_RESIZER_DEFAULTS.format is ImageFormat.jpg
    assert DEFAULT_RESIZER_DEFAULTS.image_data_type is PayloadKind.embedded_encoded

    with pytest.raises(ValidationError):
        DEFAULT_RESIZER_DEFAULTS.quality = 10  # type: ignore[misc]


def test_defaults_reject_unknown_settings() -> None:
    with pytest.raises(ValidationError):
        _ = ResizerDefaults(colour_profile="srgb")  # type: ignore[call-arg]


def test_error_kinds() -> None:
    error = PathError("bad path")

    assert isinstance(error, ImageResizerError)
    assert error.kind is ErrorKind.path
    assert str(error) == "bad path"
