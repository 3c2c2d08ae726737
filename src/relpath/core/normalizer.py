"""
Path component splitting.

split_path() turns a path string into the ordered list of its real
components: empty and "." segments are dropped and ".." removes the
component before it. A ".." with nothing left to remove is discarded, so
the root is a hard boundary and the result never contains "." or "..".
"""

from typing import List

from .classifier import is_drive_component
from ..utils.path_utils import PathUtils


def split_path(path: str, windows: bool = False) -> List[str]:
    """
    Split a path into normalized components.

    In Windows mode backslashes are separators, and the drive of a
    drive-anchored path ("C:/...") is kept as the first component where
    ".." segments cannot remove it.

    Args:
        path: Path string, absolute or relative.
        windows: Whether Windows conventions apply.

    Returns:
        List of components in left-to-right order.
    """
    segments = PathUtils.split_segments(path, windows)

    root: List[str] = []
    if windows and len(segments) > 1 and is_drive_component(segments[0]):
        root.append(segments.pop(0))

    stack: List[str] = []
    for segment in segments:
        if segment == '..':
            if stack:
                stack.pop()
        elif segment and segment != '.':
            stack.append(segment)

    return root + stack
