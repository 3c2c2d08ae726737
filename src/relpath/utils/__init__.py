"""Utility modules for relpath."""

from .path_utils import PathUtils

__all__ = ["PathUtils"]
