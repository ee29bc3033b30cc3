"""Common module - errors, schemas and request defaults."""

from .config import DEFAULT_RESIZER_DEFAULTS, ResizerDefaults
from .errors import (
    DecodeError,
    ErrorKind,
    ImageIOError,
    ImageResizerError,
    InvalidDimensionError,
    NotFoundError,
    PathError,
    UnknownActionError,
    ValidationError,
)
from .schemas import (
    Action,
    ActionError,
    ActionOk,
    ActionResult,
    Destination,
    ImageDimensions,
    ImageFormat,
    ImageRequest,
    PayloadKind,
    RequestBundle,
    ResizeMode,
    ResizeParams,
    ResizeResult,
    ScaleFactors,
)

__all__ = [
    "Action",
    "ActionError",
    "ActionOk",
    "ActionResult",
    "DEFAULT_RESIZER_DEFAULTS",
    "DecodeError",
    "Destination",
    "ErrorKind",
    "ImageDimensions",
    "ImageFormat",
    "ImageIOError",
    "ImageRequest",
    "ImageResizerError",
    "InvalidDimensionError",
    "NotFoundError",
    "PathError",
    "PayloadKind",
    "RequestBundle",
    "ResizeMode",
    "ResizeParams",
    "ResizeResult",
    "ResizerDefaults",
    "ScaleFactors",
    "UnknownActionError",
    "ValidationError",
]
