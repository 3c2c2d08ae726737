"""
relpath - relative and joined path computation by pure string manipulation.

The module-level functions use a RelPath built once at import time from the
environment-derived Config. Construct RelPath(Config.posix()) or
RelPath(Config.for_windows()) to pick a convention explicitly.
"""

from typing import List, Optional

from .core import (
    Config,
    Invalid,
    InvalidPathError,
    InvalidReason,
    PathResult,
    RelPath,
    Resolved,
)

__version__ = "1.0.0"

default = RelPath()


def is_absolute_path(path: str) -> bool:
    """Check whether *path* is absolute for the host platform convention."""
    return default.is_absolute_path(path)


def split_path(path: str) -> List[str]:
    """Split *path* into normalized components."""
    return default.split_path(path)


def get_relative_path(path: str, start: Optional[str] = None) -> PathResult:
    """Return a relative path to *path* from *start* (default: cwd)."""
    return default.get_relative_path(path, start)


def join_path(base: str, path: str) -> PathResult:
    """Join *path* onto the absolute *base*."""
    return default.join_path(base, path)


__all__ = [
    "Config",
    "Invalid",
    "InvalidPathError",
    "InvalidReason",
    "PathResult",
    "RelPath",
    "Resolved",
    "default",
    "get_relative_path",
    "is_absolute_path",
    "join_path",
    "split_path",
]
