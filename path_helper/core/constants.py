"""
Constants
Centralised storage for separators, root patterns, and relative-path strategies.
"""
import re

UNIX_SEPARATOR = "/"
WINDOWS_SEPARATOR = "\\"

CURRENT_DIR = "."
PARENT_DIR = ".."

# Bare drive component, e.g. "C:" after splitting "C:\foo"
DRIVE_COMPONENT_RE = re.compile(r"^[a-z]:$", re.IGNORECASE)

# Relative path strategies
STRATEGY_POSITIONAL = "positional"
STRATEGY_COMMON_PREFIX = "common_prefix"
RELATIVE_STRATEGIES = frozenset({STRATEGY_POSITIONAL, STRATEGY_COMMON_PREFIX})

# Style names accepted by the convert endpoint
STYLE_WINDOWS = "windows"
STYLE_UNIX = "unix"
