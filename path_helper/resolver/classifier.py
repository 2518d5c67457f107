"""
Path Classifier
===============
Absolute/relative and ancestor/descendant predicates.

is_relative / is_absolute are purely lexical: a path is relative when it
contains "." or ".." anywhere, or when its first component is neither empty
(UNIX root) nor a bare drive ("C:"). The empty string therefore counts as
absolute.

is_descendant / is_ancestor resolve both paths first. The default check is
a literal string prefix, so "/home/user2" is a descendant of "/home/user".
Pass component_aware=True to compare whole segments instead.
"""
from typing import Any, Callable, Optional

from path_helper.core.constants import CURRENT_DIR, DRIVE_COMPONENT_RE, PARENT_DIR
from path_helper.resolver.absolute import absolute
from path_helper.resolver.relative import split_components
from path_helper.resolver.separators import normalize, resolve_separator


def is_relative(path: Any, separator: Optional[str] = None) -> bool:
    separator = resolve_separator(separator)
    parts = normalize(path, separator).split(separator)

    if CURRENT_DIR in parts or PARENT_DIR in parts:
        return True

    return parts[0] != "" and not DRIVE_COMPONENT_RE.match(parts[0])


def is_absolute(path: Any, separator: Optional[str] = None) -> bool:
    return not is_relative(path, separator)


def _contains(
    ancestor: str,
    descendant: str,
    separator: str,
    component_aware: bool,
) -> bool:
    if not component_aware:
        return descendant.startswith(ancestor)

    ancestor_parts = split_components(ancestor, separator)
    descendant_parts = split_components(descendant, separator)
    return descendant_parts[:len(ancestor_parts)] == ancestor_parts


def is_descendant(
    path: Any,
    ancestor: Any,
    separator: Optional[str] = None,
    *,
    component_aware: bool = False,
    cwd: Optional[Callable[[], str]] = None,
) -> bool:
    """
    Check whether `path` lies under `ancestor`.

    A path is its own descendant. With component_aware=False the absolute
    strings are compared as a plain prefix.
    """
    separator = resolve_separator(separator)
    return _contains(
        absolute(ancestor, separator, cwd=cwd),
        absolute(path, separator, cwd=cwd),
        separator,
        component_aware,
    )


def is_ancestor(
    path: Any,
    descendant: Any,
    separator: Optional[str] = None,
    *,
    component_aware: bool = False,
    cwd: Optional[Callable[[], str]] = None,
) -> bool:
    """Check whether `path` contains `descendant`. Mirror of is_descendant."""
    return is_descendant(
        descendant, path, separator, component_aware=component_aware, cwd=cwd
    )
