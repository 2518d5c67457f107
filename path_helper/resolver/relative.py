"""
Relative Path Resolver
======================
Computes the relative path from a departure location to a destination.

Both locations are resolved to absolute form first, then compared
component by component.

Strategies:
    common_prefix (default)
        Longest common prefix of the two component sequences; one ".."
        per remaining departure component, then the remaining destination
        components. Re-resolving departure + result always yields the
        absolute destination.
    positional
        Index-by-index comparison of the raw split strings. A component
        shared at the same index after the paths have already diverged is
        dropped from both sides. Output is identical to common_prefix unless
        the paths re-converge.

When the paths share no root (different drive), no relative expression
exists and the absolute destination is returned.
"""
import logging
from typing import Any, Callable, Optional

from path_helper.core import config
from path_helper.core.constants import PARENT_DIR, RELATIVE_STRATEGIES, STRATEGY_POSITIONAL
from path_helper.resolver.absolute import absolute
from path_helper.resolver.separators import resolve_separator

logger = logging.getLogger(__name__)


def resolve_strategy(strategy: Optional[str] = None) -> str:
    """Return a validated strategy name, defaulting to the configured one."""
    if strategy is None:
        return config.RELATIVE_STRATEGY
    name = str(strategy).strip().lower()
    if name not in RELATIVE_STRATEGIES:
        raise ValueError(
            f"Unknown relative path strategy {strategy!r}. "
            f"Expected one of: {sorted(RELATIVE_STRATEGIES)}"
        )
    return name


def split_components(absolute_path: str, separator: str) -> list[str]:
    """
    Split an absolute path into root token + segments.

    The UNIX root becomes "" and a drive root becomes "C:". The trailing
    empty component of a bare root ("/" or "C:\\") is dropped.
    """
    components = absolute_path.split(separator)
    if len(components) > 1 and components[-1] == "":
        components.pop()
    return components


def _positional_diff(from_parts: list[str], to_parts: list[str]) -> tuple[list[str], list[str], bool]:
    only_in_from = [
        part for index, part in enumerate(from_parts)
        if index >= len(to_parts) or to_parts[index] != part
    ]
    only_in_to = [
        part for index, part in enumerate(to_parts)
        if index >= len(from_parts) or from_parts[index] != part
    ]
    # Every destination index differs: nothing in common
    disjoint = len(only_in_to) == len(to_parts)
    return only_in_from, only_in_to, disjoint


def _common_prefix_diff(from_parts: list[str], to_parts: list[str]) -> tuple[list[str], list[str], bool]:
    shared = 0
    for from_part, to_part in zip(from_parts, to_parts):
        if from_part != to_part:
            break
        shared += 1
    return from_parts[shared:], to_parts[shared:], shared == 0


def relative(
    from_path: Any,
    to_path: Any,
    separator: Optional[str] = None,
    *,
    strategy: Optional[str] = None,
    cwd: Optional[Callable[[], str]] = None,
) -> str:
    """
    Return the relative path from `from_path` to `to_path`.

    Parameters
    ----------
    from_path : str
        Departure file or directory.
    to_path : str
        Destination file or directory.
    separator : str, optional
        Separator for interpretation and output (default: host separator).
    strategy : str, optional
        "common_prefix" or "positional" (default: PATH_HELPER_RELATIVE_STRATEGY).
    cwd : callable, optional
        Working-directory provider for relative inputs.

    Returns
    -------
    str
        e.g. "../c/d" for ("/a/b", "/a/c/d"). Ascending-only results keep a
        trailing separator ("../" for ("/a/b", "/a")); identical paths give "".
        Paths on different roots give the absolute destination.

    Raises
    ------
    ValueError
        If `strategy` is not a known strategy name.
    """
    separator = resolve_separator(separator)
    strategy = resolve_strategy(strategy)

    from_absolute = absolute(from_path, separator, cwd=cwd)
    to_absolute = absolute(to_path, separator, cwd=cwd)

    if strategy == STRATEGY_POSITIONAL:
        only_in_from, only_in_to, disjoint = _positional_diff(
            from_absolute.split(separator), to_absolute.split(separator)
        )
    else:
        only_in_from, only_in_to, disjoint = _common_prefix_diff(
            split_components(from_absolute, separator), split_components(to_absolute, separator)
        )

    if disjoint:
        logger.debug(f"No common root between {from_absolute!r} and {to_absolute!r}")
        return to_absolute

    return (PARENT_DIR + separator) * len(only_in_from) + separator.join(only_in_to)
