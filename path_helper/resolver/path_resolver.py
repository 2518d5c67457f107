"""
Path Resolver
=============
Configured facade over the resolver functions, plus a bound-path adapter.

PathResolver holds per-instance defaults (separator, working-directory
provider, relative strategy) and forwards every call to the pure functions
in this package. BoundPath pins one path to a resolver for chained calls.

Neither class reimplements any algorithm.

Usage:
    resolver = PathResolver(separator="/", cwd=lambda: "/srv/app")
    resolver.absolute("static/../media")          # "/srv/app/media"

    BoundPath("a\\b", resolver).to_unix_style().absolute()   # BoundPath("/srv/app/a/b")
"""
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from path_helper.resolver import absolute as absolute_module
from path_helper.resolver import classifier, relative as relative_module, separators


class PathResolver:
    """
    Bundle of defaults for path operations.

    Parameters
    ----------
    separator : str, optional
        Default separator for every call (None: configured default).
    cwd : callable, optional
        Working-directory provider (None: os.getcwd).
    strategy : str, optional
        Default relative-path strategy (None: configured default).
    """

    def __init__(
        self,
        separator: Optional[str] = None,
        cwd: Optional[Callable[[], str]] = None,
        strategy: Optional[str] = None,
    ) -> None:
        self.separator = separator
        self.cwd = cwd
        self.strategy = relative_module.resolve_strategy(strategy) if strategy is not None else None

    def _separator(self, separator: Optional[str]) -> Optional[str]:
        return separator if separator else self.separator

    def absolute(self, path: Any, separator: Optional[str] = None) -> str:
        return absolute_module.absolute(path, self._separator(separator), cwd=self.cwd)

    def relative(
        self,
        from_path: Any,
        to_path: Any,
        separator: Optional[str] = None,
        strategy: Optional[str] = None,
    ) -> str:
        return relative_module.relative(
            from_path,
            to_path,
            self._separator(separator),
            strategy=strategy or self.strategy,
            cwd=self.cwd,
        )

    def normalize(self, path: Any, separator: Optional[str] = None) -> str:
        return separators.normalize(path, self._separator(separator))

    def is_absolute(self, path: Any) -> bool:
        return classifier.is_absolute(path)

    def is_relative(self, path: Any) -> bool:
        return classifier.is_relative(path)

    def is_descendant(self, path: Any, ancestor: Any, component_aware: bool = False) -> bool:
        return classifier.is_descendant(
            path, ancestor, self.separator, component_aware=component_aware, cwd=self.cwd
        )

    def is_ancestor(self, path: Any, descendant: Any, component_aware: bool = False) -> bool:
        return classifier.is_ancestor(
            path, descendant, self.separator, component_aware=component_aware, cwd=self.cwd
        )

    def to_windows_style(self, path: Any) -> str:
        return separators.to_windows_style(path)

    def to_unix_style(self, path: Any) -> str:
        return separators.to_unix_style(path)

    def to_os_style(self, path: Any) -> str:
        return separators.to_os_style(path)

    def bind(self, path: Any) -> "BoundPath":
        """Pin `path` to this resolver."""
        return BoundPath(path, self)


@dataclass(frozen=True, eq=False)
class BoundPath:
    """
    Immutable path value bound to a PathResolver.

    Transforming methods return a new BoundPath; predicates return bool.
    Compares equal to its string value.
    """
    path: str
    resolver: PathResolver = field(default_factory=PathResolver, compare=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", separators.coerce_path(self.path))

    def __str__(self) -> str:
        return self.path

    def __fspath__(self) -> str:
        return self.path

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BoundPath):
            return self.path == other.path
        if isinstance(other, str):
            return self.path == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.path)

    def _with(self, path: str) -> "BoundPath":
        return BoundPath(path, self.resolver)

    def absolute(self, separator: Optional[str] = None) -> "BoundPath":
        return self._with(self.resolver.absolute(self.path, separator))

    def relative(self, to_path: Any, separator: Optional[str] = None, strategy: Optional[str] = None) -> "BoundPath":
        """Relative path from this path to `to_path`."""
        return self._with(self.resolver.relative(self.path, to_path, separator, strategy))

    def normalize(self, separator: Optional[str] = None) -> "BoundPath":
        return self._with(self.resolver.normalize(self.path, separator))

    def to_windows_style(self) -> "BoundPath":
        return self._with(self.resolver.to_windows_style(self.path))

    def to_unix_style(self) -> "BoundPath":
        return self._with(self.resolver.to_unix_style(self.path))

    def to_os_style(self) -> "BoundPath":
        return self._with(self.resolver.to_os_style(self.path))

    def is_absolute(self) -> bool:
        return self.resolver.is_absolute(self.path)

    def is_relative(self) -> bool:
        return self.resolver.is_relative(self.path)

    def is_descendant(self, ancestor: Any, component_aware: bool = False) -> bool:
        return self.resolver.is_descendant(self.path, ancestor, component_aware)

    def is_ancestor(self, descendant: Any, component_aware: bool = False) -> bool:
        return self.resolver.is_ancestor(self.path, descendant, component_aware)
