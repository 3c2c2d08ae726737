"""Path separator utilities shared by the path algebra."""

import re
from typing import List, Optional

# Drive-letter prefix such as "C:"
DRIVE_PATTERN = re.compile(r'^([A-Za-z]):')


class PathUtils:
    """Utilities for consistent separator handling across platform modes."""

    @staticmethod
    def normalize_separators(path: str, windows: bool) -> str:
        """
        Normalize path separators to forward slashes.

        Backslashes are only separators in Windows mode; on POSIX they are
        ordinary filename characters and are preserved.

        Args:
            path: File path with potentially mixed separators
            windows: Whether Windows conventions apply

        Returns:
            Path with forward slashes only (Windows mode) or unchanged
        """
        if windows:
            return path.replace('\\', '/')
        return path

    @staticmethod
    def split_segments(path: str, windows: bool) -> List[str]:
        """
        Normalize separators and split into raw segments.

        Args:
            path: File path to split

        Returns:
            List of segments, including empty and dot segments
        """
        return PathUtils.normalize_separators(path, windows).split('/')

    @staticmethod
    def join_components(components: List[str]) -> str:
        """
        Join path components with forward slashes.

        Args:
            components: List of path components

        Returns:
            Joined path with forward slashes
        """
        return '/'.join(components)

    @staticmethod
    def drive_prefix(path: str) -> Optional[str]:
        """Return the "X:" drive prefix of *path*, or None."""
        match = DRIVE_PATTERN.match(path)
        return match.group(0) if match else None
