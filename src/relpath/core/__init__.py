"""Core components for relpath."""

from .models import Config, InvalidReason, InvalidPathError, Resolved, Invalid, PathResult
from .classifier import is_absolute_path
from .normalizer import split_path
from .resolver import RelPath

__all__ = [
    "Config",
    "InvalidReason",
    "InvalidPathError",
    "Resolved",
    "Invalid",
    "PathResult",
    "is_absolute_path",
    "split_path",
    "RelPath",
]
