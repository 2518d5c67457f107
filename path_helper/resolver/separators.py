"""
Separators
==========
Separator normalisation, style conversion and root detection.

Every other operation starts here so that downstream logic only ever
compares against one separator character.

Rules:
    - Both "/" and "\\" are treated as separators on input, regardless of host.
    - Conversion never resolves or validates; "." and ".." pass through.
    - A root is either the separator itself (UNIX) or "<letter>:<separator>"
      (Windows drive). Anything else is relative.
"""
import os
import re
import logging
from typing import Any, Optional

from path_helper.core import config
from path_helper.core.constants import UNIX_SEPARATOR, WINDOWS_SEPARATOR

logger = logging.getLogger(__name__)

_SEPARATOR_RE = re.compile(r"[/\\]")


def coerce_path(path: Any) -> str:
    """
    Turn arbitrary input into a path string.

    str is kept, os.PathLike is unwrapped, bytes are decoded with the
    filesystem encoding. None and anything else become "".
    """
    if isinstance(path, os.PathLike):
        path = os.fspath(path)
    if isinstance(path, str):
        return path
    if isinstance(path, bytes):
        return os.fsdecode(path)
    if path is not None:
        logger.debug(f"Coercing unsupported path type {type(path).__name__} to empty path")
    return ""


def resolve_separator(separator: Any = None) -> str:
    """Return `separator` if usable, otherwise the configured default."""
    if isinstance(separator, str) and separator:
        return separator
    return config.DEFAULT_SEPARATOR


def normalize(path: Any, separator: Optional[str] = None) -> str:
    """
    Replace every "/" and "\\" in `path` with `separator`.

    Parameters
    ----------
    path : str
        Path in any separator convention.
    separator : str, optional
        Target separator. Empty or missing means the default separator.

    Returns
    -------
    str
        The path with unified separators.
    """
    separator = resolve_separator(separator)
    path = coerce_path(path)
    if not path:
        return path
    return _SEPARATOR_RE.sub(lambda _match: separator, path)


def to_windows_style(path: Any) -> str:
    return coerce_path(path).replace(UNIX_SEPARATOR, WINDOWS_SEPARATOR)


def to_unix_style(path: Any) -> str:
    return coerce_path(path).replace(WINDOWS_SEPARATOR, UNIX_SEPARATOR)


def to_os_style(path: Any) -> str:
    """Normalise to the host separator."""
    return normalize(path, os.sep)


def split_root(path: str, separator: str) -> tuple[Optional[str], str]:
    """
    Detect and strip the root marker of an already-normalised path.

    Returns
    -------
    tuple[str | None, str]
        (root, remainder). root is None for relative paths. For a drive root
        only the two drive characters are stripped; the leading separator of
        the remainder is an empty component and collapses on split.
    """
    if path.startswith(separator):
        return separator, path[len(separator):]

    match = re.match(r"^[a-z]:" + re.escape(separator), path, re.IGNORECASE)
    if match:
        return match.group(0), path[2:]

    return None, path
