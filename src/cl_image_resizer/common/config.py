"""Request defaults for the dispatcher."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from .schemas import ImageFormat, PayloadKind, ResizeMode


class ResizerDefaults(BaseModel):
    """Immutable defaults applied to fields a request bundle omits.

    Attributes:
        image_data_type: Source kind when ``imageDataType`` is absent
        format: Output codec when ``format`` is absent
        resize_type: Resize mode when ``resizeType`` is absent
        quality: Encode quality when ``quality`` is absent
        device_density: Display density used by density compensation
        storage_root: If set, every file reference and destination must
                      resolve inside this directory
    """

    image_data_type: PayloadKind = PayloadKind.embedded_encoded
    format: ImageFormat = ImageFormat.jpg
    resize_type: ResizeMode = ResizeMode.scale_factor
    quality: int = Field(default=85, ge=0, le=100)
    device_density: float = Field(default=1.0, gt=0)
    storage_root: str | None = None

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")


DEFAULT_RESIZER_DEFAULTS = ResizerDefaults()
