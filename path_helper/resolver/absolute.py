"""
Absolute Path Resolver
======================
Converts any path (absolute or relative) into its canonical absolute form
without requiring the path to exist. An alternative to os.path.realpath for
paths that are not on disk.

Algorithm:
    1. Normalise separators to the target separator.
    2. Detect the root (separator or drive letter). A relative path is
       anchored by prepending the working directory, then re-checked.
    3. Split the remainder on the separator, dropping empty components.
    4. Walk a segment stack: "." is skipped, ".." pops (or is absorbed at
       the root), anything else is pushed.
    5. Join root + stack.

The working directory is read through a provider (default: os.getcwd),
only when the input is relative, and never cached.
"""
import os
import logging
from typing import Any, Callable, Optional

from path_helper.core.constants import CURRENT_DIR, PARENT_DIR
from path_helper.core.errors import WorkingDirectoryError
from path_helper.resolver.separators import normalize, resolve_separator, split_root

logger = logging.getLogger(__name__)

CwdProvider = Callable[[], str]


def current_directory(cwd: Optional[CwdProvider] = None) -> str:
    """
    Read the working directory from `cwd` (default: os.getcwd).

    Raises
    ------
    WorkingDirectoryError
        If the provider fails or returns nothing usable.
    """
    provider = cwd or os.getcwd
    try:
        directory = provider()
    except OSError as e:
        logger.error(f"Unable to determine working directory: {e}")
        raise WorkingDirectoryError(f"Unable to determine working directory: {e}", cause=e) from e

    if isinstance(directory, os.PathLike):
        directory = os.fspath(directory)
    if isinstance(directory, bytes):
        directory = os.fsdecode(directory)
    if not isinstance(directory, str) or not directory:
        logger.error(f"Working directory provider returned {directory!r}")
        raise WorkingDirectoryError(f"Working directory provider returned {directory!r}")
    return directory


def collapse_segments(remainder: str, separator: str) -> list[str]:
    """Apply the segment stack walk to the part of a path after its root."""
    stack: list[str] = []
    for segment in remainder.split(separator):
        if not segment or segment == CURRENT_DIR:
            continue
        if segment == PARENT_DIR:
            # ".." above the root is absorbed
            if stack:
                stack.pop()
            continue
        stack.append(segment)
    return stack


def absolute(path: Any, separator: Optional[str] = None, *, cwd: Optional[CwdProvider] = None) -> str:
    """
    Return the absolute form of `path`.

    Parameters
    ----------
    path : str
        Path to resolve; relative paths are anchored to the working directory.
    separator : str, optional
        Separator for both interpretation and output (default: host separator).
    cwd : callable, optional
        Working-directory provider, consulted only for relative input.

    Returns
    -------
    str
        Root marker followed by the collapsed segments, e.g. "/c" for
        "/a/b/../../c" or "C:\\foo" for "C:\\bar\\..\\foo".

    Raises
    ------
    WorkingDirectoryError
        If `path` is relative and the working directory cannot be read.
    """
    separator = resolve_separator(separator)
    path = normalize(path, separator)

    root, remainder = split_root(path, separator)
    if root is None:
        directory = normalize(current_directory(cwd), separator)
        anchored = directory + separator + path
        root, remainder = split_root(anchored, separator)
        if root is None:
            raise WorkingDirectoryError(f"Working directory {directory!r} is not absolute")
        logger.debug(f"Anchored relative path {path!r} to {anchored!r}")

    return root + separator.join(collapse_segments(remainder, separator))
