"""Error taxonomy for image resize requests.

Every failure a request can hit is one of these classes. Each carries a
stable ``kind`` so host adapters can map it without string matching.
"""

from enum import Enum
from typing import ClassVar, override


class ErrorKind(str, Enum):
    validation = "validation"
    decode = "decode"
    not_found = "not_found"
    invalid_dimension = "invalid_dimension"
    io = "io"
    path = "path"
    unknown_action = "unknown_action"


class ImageResizerError(Exception):
    """Base class for all request-level errors."""

    kind: ClassVar[ErrorKind]

    def __init__(self, message: str):
        self.message: str = message
        super().__init__(message)

    @override
    def __str__(self) -> str:
        return self.message


class ValidationError(ImageResizerError):
    """Request bundle field is missing or malformed."""

    kind: ClassVar[ErrorKind] = ErrorKind.validation


class DecodeError(ImageResizerError):
    """Payload bytes are not a recognizable raster image."""

    kind: ClassVar[ErrorKind] = ErrorKind.decode


class NotFoundError(ImageResizerError):
    """File reference does not point to a readable file."""

    kind: ClassVar[ErrorKind] = ErrorKind.not_found


class InvalidDimensionError(ImageResizerError):
    """Original or target dimension cannot produce a valid image."""

    kind: ClassVar[ErrorKind] = ErrorKind.invalid_dimension


class ImageIOError(ImageResizerError):
    """Writing the encoded image failed."""

    kind: ClassVar[ErrorKind] = ErrorKind.io


class PathError(ImageResizerError):
    """URI, directory or filename cannot be resolved to a valid location."""

    kind: ClassVar[ErrorKind] = ErrorKind.path


class UnknownActionError(ImageResizerError):
    kind: ClassVar[ErrorKind] = ErrorKind.unknown_action

    def __init__(self, action: str):
        self.action: str = action
        super().__init__(f"Unknown action: {action!r}")
