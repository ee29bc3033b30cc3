"""Pydantic schemas for resize requests, parameters and results."""

from enum import Enum
from typing import Annotated, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field, JsonValue, model_validator

from .errors import ErrorKind

# ─────────────────────────────────────────────────────────────
# Enumerations (values are the wire names)
# ─────────────────────────────────────────────────────────────


class PayloadKind(str, Enum):
    embedded_encoded = "base64Image"
    file_reference = "urlImage"


class ImageFormat(str, Enum):
    jpg = "jpg"
    png = "png"


class ResizeMode(str, Enum):
    scale_factor = "factorResize"
    min_pixel = "minPixelResize"
    max_pixel = "maxPixelResize"


class Action(str, Enum):
    resize = "resizeImage"
    measure = "imageSize"
    store = "storeImage"


# ─────────────────────────────────────────────────────────────
# Wire bundle
# ─────────────────────────────────────────────────────────────


class RequestBundle(BaseModel):
    """Raw request bundle as sent by the host.

    Only types are checked here. Defaults and per-action requirements are
    applied by the dispatcher.
    """

    data: str = Field(..., min_length=1, description="base64 payload or file URI")
    image_data_type: PayloadKind | None = Field(default=None, alias="imageDataType")
    format: ImageFormat | None = None
    resize_type: ResizeMode | None = Field(default=None, alias="resizeType")
    width: float | None = None
    height: float | None = None
    pixel_density: bool = Field(default=False, alias="pixelDensity")
    device_density: float | None = Field(default=None, gt=0, alias="deviceDensity")
    quality: int | None = Field(default=None, ge=0, le=100)
    store_image: bool = Field(default=False, alias="storeImage")
    filename: str | None = None
    directory: str | None = None

    model_config: ClassVar[ConfigDict] = ConfigDict(populate_by_name=True, extra="ignore")


# ─────────────────────────────────────────────────────────────
# Normalized request and parameters
# ─────────────────────────────────────────────────────────────


class ImageRequest(BaseModel):
    payload: str | bytes
    payload_kind: PayloadKind = PayloadKind.embedded_encoded
    target_format: ImageFormat = ImageFormat.jpg
    operation: Action

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)


class Destination(BaseModel):
    directory: str = Field(..., min_length=1)
    filename: str = Field(..., min_length=1)

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)


class ResizeParams(BaseModel):
    """Parameters for the resize and store operations.

    Under ``scale_factor`` mode the targets are multiplicative factors;
    under the pixel modes they are pixel sizes.
    """

    resize_mode: ResizeMode = ResizeMode.scale_factor
    target_width: float = 1.0
    target_height: float = 1.0
    compensate_density: bool = False
    device_density: float = Field(default=1.0, gt=0)
    quality: int = Field(default=85, ge=0, le=100)
    persist: bool = False
    destination: Destination | None = None

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_destination(self) -> "ResizeParams":
        if self.persist and self.destination is None:
            raise ValueError("A destination is required when persisting")
        return self


class ScaleFactors(BaseModel):
    width_factor: float
    height_factor: float

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)


# ─────────────────────────────────────────────────────────────
# Results
# ─────────────────────────────────────────────────────────────


class ImageDimensions(BaseModel):
    """Pixel size of an image; the whole result of ``imageSize``."""

    width: int = Field(..., ge=1)
    height: int = Field(..., ge=1)

    model_config: ClassVar[ConfigDict] = ConfigDict(populate_by_name=True, frozen=True)

    def to_payload(self) -> dict[str, JsonValue]:
        """Render the wire object returned to the host."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ResizeResult(ImageDimensions):
    """Dimensions plus either inline image data or a stored filename."""

    image_data: str | None = Field(default=None, alias="imageData")
    filename: str | None = None

    @model_validator(mode="after")
    def validate_single_output(self) -> "ResizeResult":
        if (self.image_data is None) == (self.filename is None):
            raise ValueError("Exactly one of image_data or filename must be set")
        return self


class ActionOk(BaseModel):
    status: Literal["ok"] = "ok"
    result: ResizeResult | ImageDimensions

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)


class ActionError(BaseModel):
    status: Literal["error"] = "error"
    kind: ErrorKind
    message: str

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)


ActionResult = Annotated[ActionOk | ActionError, Field(discriminator="status")]
