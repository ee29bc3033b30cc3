"""Normalization of file URIs, destination directories and filenames.

Host payloads name files either as ``file://`` URIs or as absolute
paths. Both are turned into a :class:`~pathlib.Path` here, once, before
anything touches the filesystem.
"""

from pathlib import Path
from urllib.parse import unquote, urlsplit

from loguru import logger

from ..common.errors import PathError

_LOCAL_HOSTS = ("", "localhost")


def normalize_uri(value: str, *, root: str | Path | None = None) -> Path:
    """Convert a file URI or absolute path into a filesystem path.

    Args:
        value: ``file:///abs/path`` URI or ``/abs/path``
        root: Optional directory the result must resolve inside

    Returns:
        Absolute path (not resolved, not checked for existence)

    Raises:
        PathError: Unsupported scheme, remote host, relative path,
                   ``..`` segments, NUL bytes, or escape from ``root``
    """
    if not value or "\x00" in value:
        raise PathError(f"Invalid path: {value!r}")

    parsed = urlsplit(value)
    if parsed.scheme == "file":
        if parsed.netloc not in _LOCAL_HOSTS:
            raise PathError(f"Remote file URIs are not supported: {value}")
        if parsed.query or parsed.fragment:
            raise PathError(f"File URI must not carry a query or fragment: {value}")
        raw_path = unquote(parsed.path)
    elif parsed.scheme == "":
        raw_path = value
    else:
        raise PathError(f"Unsupported URI scheme '{parsed.scheme}': {value}")

    if not raw_path or "\x00" in raw_path:
        raise PathError(f"Invalid path: {value!r}")

    path = Path(raw_path)
    if not path.is_absolute():
        raise PathError(f"Path must be absolute: {value}")
    if ".." in path.parts:
        raise PathError(f"Path traversal is not allowed: {value}")

    if root is not None:
        root_path = Path(root).resolve()
        if not path.resolve().is_relative_to(root_path):
            raise PathError(f"Path escapes storage root {root_path}: {value}")

    logger.debug(f"Normalized {value!r} to {path}")
    return path


def normalize_directory(value: str, *, root: str | Path | None = None) -> Path:
    """Normalize a destination directory; it may not exist yet."""
    path = normalize_uri(value, root=root)
    if path.exists() and not path.is_dir():
        raise PathError(f"Destination is not a directory: {path}")
    return path


def validate_filename(name: str) -> str:
    """Ensure ``name`` is a bare filename with no directory component."""
    if not name or name in (".", ".."):
        raise PathError(f"Invalid filename: {name!r}")
    if "/" in name or "\\" in name or "\x00" in name:
        raise PathError(f"Filename must not contain path separators: {name!r}")
    return name
