"""
Relative path computation and path joining.

RelPath expresses one absolute path in terms of another, and expands a
relative path against an absolute base. Both work on strings alone and
never touch the filesystem; the only environment read is the current
directory when get_relative_path() is called without a start.

Example:
    >>> rel = RelPath(Config.posix())
    >>> rel.join_path('/srv//foo', '../baz').unwrap()
    '/srv/baz'
    >>> rel.get_relative_path('/foo/bar.txt', '/foo/baz/').unwrap()
    '../bar.txt'
"""

import logging
from typing import List, Optional

from .classifier import drive_letter, is_absolute_path, is_drive_component
from .models import Config, Invalid, InvalidReason, PathResult, Resolved
from .normalizer import split_path
from ..utils.path_utils import PathUtils

logger = logging.getLogger(__name__)


class RelPath:
    """
    Path algebra bound to a single platform convention.

    Instances hold no mutable state and are safe to share between threads.
    """

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize the path algebra.

        Args:
            config: Platform mode and cwd provider. If None, the mode is
                derived from the environment.
        """
        self.config = config or Config()

    @property
    def windows(self) -> bool:
        return self.config.windows

    def __repr__(self) -> str:
        return f"RelPath(platform={self.config.platform_name!r})"

    def is_absolute_path(self, path: str) -> bool:
        """Check whether *path* is absolute in this platform mode."""
        return is_absolute_path(path, self.windows)

    def split_path(self, path: str) -> List[str]:
        """Split *path* into normalized components."""
        return split_path(path, self.windows)

    def _invalid(self, reason: InvalidReason, operation: str, *paths: str) -> Invalid:
        logger.debug(f"{operation} rejected {paths!r}: {reason.value}")
        return Invalid(reason)

    def _same_component(self, left: str, right: str) -> bool:
        if self.windows:
            return left.casefold() == right.casefold()
        return left == right

    def get_relative_path(self, path: str, start: Optional[str] = None) -> PathResult:
        """
        Return a relative path to *path* from the *start* directory.

        Both paths must be absolute. Unrelated paths still succeed by going
        through their common root.

        Args:
            path: Target path.
            start: Start directory. If None, the current working directory
                is used.

        Returns:
            Resolved with the relative path ("." when both are the same), or
            Invalid when either input is relative or, in Windows mode, the
            two paths sit on different drives.
        """
        if start is None:
            start = self.config.cwd_provider()

        if not self.is_absolute_path(path):
            return self._invalid(InvalidReason.RELATIVE_PATH, 'get_relative_path', path, start)
        if not self.is_absolute_path(start):
            return self._invalid(InvalidReason.RELATIVE_START, 'get_relative_path', path, start)

        if self.windows:
            path = PathUtils.normalize_separators(path, True)
            start = PathUtils.normalize_separators(start, True)
            # Drive-relative "/x" and drive-anchored "C:/x" never mix
            if drive_letter(path) != drive_letter(start):
                return self._invalid(InvalidReason.DRIVE_MISMATCH, 'get_relative_path', path, start)

        path_parts = self.split_path(path)
        start_parts = self.split_path(start)

        common = 0
        for path_part, start_part in zip(path_parts, start_parts):
            if not self._same_component(path_part, start_part):
                break
            common += 1

        rel_parts = ['..'] * (len(start_parts) - common) + path_parts[common:]
        return Resolved(PathUtils.join_components(rel_parts) or '.')

    def join_path(self, base: str, path: str) -> PathResult:
        """
        Join two paths, expanding *path* relative to *base*.

        An absolute *path* is returned unchanged. Otherwise the result is
        normalized: repeated separators collapse, "." segments vanish and
        ".." segments past the root are discarded.

        Example:
            join_path('/srv/foo', 'bar')         # '/srv/foo/bar'
            join_path('/srv/foo', './bar')       # '/srv/foo/bar'
            join_path('/srv//foo', '../baz')     # '/srv/baz'
            join_path('/srv/foo', '/var/quux/')  # '/var/quux/'

        Args:
            base: Absolute base path.
            path: Path to join to the base.

        Returns:
            Resolved with the joined absolute path, or Invalid when *base*
            is relative.
        """
        if self.is_absolute_path(path):
            return Resolved(path)

        if not self.is_absolute_path(base):
            return self._invalid(InvalidReason.RELATIVE_BASE, 'join_path', base, path)

        parts = self.split_path(base + '/' + path)

        if self.windows and parts and is_drive_component(parts[0]):
            if len(parts) == 1:
                return Resolved(parts[0] + '/')
            return Resolved(PathUtils.join_components(parts))

        return Resolved('/' + PathUtils.join_components(parts))
