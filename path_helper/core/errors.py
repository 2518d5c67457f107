"""
Errors
======
The single fatal condition of path resolution.

Every other input is answered with a string or a boolean; only a missing
working directory stops a relative path from being anchored.
"""
from typing import Optional


class WorkingDirectoryError(RuntimeError):
    """Raised when the working directory needed to anchor a relative path is unavailable."""

    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.cause = cause
