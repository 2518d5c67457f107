"""
Path Helpers
============
Free-function aliases for every path operation, named in the `*_path`
style for call sites that prefer a flat import:

    from path_helper.helpers import absolute_path, relative_path

Each helper forwards to path_helper.resolver; none adds behaviour.
"""
from typing import Any, Optional

from path_helper.resolver.absolute import absolute
from path_helper.resolver.classifier import is_absolute, is_ancestor, is_descendant, is_relative
from path_helper.resolver.relative import relative
from path_helper.resolver.separators import normalize, to_os_style, to_unix_style, to_windows_style


def absolute_path(path: Any, separator: Optional[str] = None) -> str:
    """Absolute form of `path`; an alternative to realpath for non-existent paths."""
    return absolute(path, separator)


def relative_path(from_path: Any, to_path: Any, separator: Optional[str] = None) -> str:
    """Relative path from `from_path` to `to_path`."""
    return relative(from_path, to_path, separator)


def winstyle_path(path: Any) -> str:
    return to_windows_style(path)


def unixstyle_path(path: Any) -> str:
    return to_unix_style(path)


def osstyle_path(path: Any) -> str:
    return to_os_style(path)


def normalize_path(path: Any, separator: Optional[str] = None) -> str:
    return normalize(path, separator)


def is_absolute_path(path: Any) -> bool:
    return is_absolute(path)


def is_relative_path(path: Any) -> bool:
    return is_relative(path)


def is_descendant_path(path: Any, comparison: Any) -> bool:
    """True if `path` is a descendant of `comparison`."""
    return is_descendant(path, comparison)


def is_ancestor_path(path: Any, comparison: Any) -> bool:
    """True if `path` is an ancestor of `comparison`."""
    return is_ancestor(path, comparison)
