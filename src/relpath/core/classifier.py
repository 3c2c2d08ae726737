"""
Absolute-path classification.

A path is absolute when it starts with "/". In Windows mode a drive letter
followed by either separator ("C:\\", "c:/") is absolute too.
"""

import re
from typing import Optional

from ..utils.path_utils import PathUtils

# Drive-anchored absolute path: letter, colon, separator
WINDOWS_ABSOLUTE_PATTERN = re.compile(r'^[A-Za-z]:[\\/]')

# A component that is nothing but a drive letter
DRIVE_COMPONENT_PATTERN = re.compile(r'^[A-Za-z]:$')


def is_absolute_path(path: str, windows: bool = False) -> bool:
    """
    Check whether *path* is absolute for the given platform mode.

    Args:
        path: Path string to classify.
        windows: Whether drive-letter paths count as absolute.

    Returns:
        True if the path is anchored independent of any current directory.
    """
    if path.startswith('/'):
        return True
    return windows and WINDOWS_ABSOLUTE_PATTERN.match(path) is not None


def is_drive_component(component: str) -> bool:
    """Check whether a single component is a bare drive letter such as "C:"."""
    return DRIVE_COMPONENT_PATTERN.match(component) is not None


def drive_letter(path: str) -> Optional[str]:
    """
    Return the upper-cased drive letter anchoring *path*, if any.

    The path should already use forward slashes.
    """
    prefix = PathUtils.drive_prefix(path)
    if prefix is None:
        return None
    return prefix[0].upper()
