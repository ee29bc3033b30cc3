"""Pipeline stages: decode, resolve factors, rescale, encode and store."""

from .encode import encode, get_pil_format, store, to_base64
from .image_source import RasterImage, decode, decode_base64_payload
from .paths import normalize_directory, normalize_uri, validate_filename
from .rescale import scale, scaled_size
from .scale_factors import compensate_density, resolve

__all__ = [
    "RasterImage",
    "compensate_density",
    "decode",
    "decode_base64_payload",
    "encode",
    "get_pil_format",
    "normalize_directory",
    "normalize_uri",
    "resolve",
    "scale",
    "scaled_size",
    "store",
    "to_base64",
    "validate_filename",
]
