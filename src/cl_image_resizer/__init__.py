"""cl_image_resizer - Resize and re-encode raster images."""

from .bridge import CallbackContext, execute
from .common.config import DEFAULT_RESIZER_DEFAULTS, ResizerDefaults
from .common.errors import ErrorKind, ImageResizerError
from .common.schemas import (
    Action,
    ActionError,
    ActionOk,
    ActionResult,
    ImageDimensions,
    ImageFormat,
    ImageRequest,
    PayloadKind,
    ResizeMode,
    ResizeParams,
    ResizeResult,
    ScaleFactors,
)
from .dispatcher import ResizeDispatcher
from .routes import create_router

__version__ = "0.1.0"

__all__ = [
    "Action",
    "ActionError",
    "ActionOk",
    "ActionResult",
    "CallbackContext",
    "DEFAULT_RESIZER_DEFAULTS",
    "ErrorKind",
    "ImageDimensions",
    "ImageFormat",
    "ImageRequest",
    "ImageResizerError",
    "PayloadKind",
    "ResizeDispatcher",
    "ResizeMode",
    "ResizeParams",
    "ResizeResult",
    "ResizerDefaults",
    "ScaleFactors",
    "__version__",
    "create_router",
    "execute",
]
