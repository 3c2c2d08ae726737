"""
Core data models for relpath.

This module contains the configuration object that selects the platform
convention, and the tagged result types returned by every path operation.
"""

import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, Union

logger = logging.getLogger(__name__)

# Environment variable that forces the platform convention
PLATFORM_ENV_VAR = 'RELPATH_PLATFORM'

WINDOWS_NAMES = {'windows', 'nt', 'win32', 'win'}
POSIX_NAMES = {'posix', 'unix', 'linux', 'darwin'}


def detect_windows() -> bool:
    """
    Derive the platform mode from the execution environment.

    ``RELPATH_PLATFORM`` takes precedence when set to a known value;
    otherwise the host's directory separator decides.

    Returns:
        True for Windows-style paths, False for POSIX-style paths.
    """
    override = os.environ.get(PLATFORM_ENV_VAR, '').strip().lower()
    if override in WINDOWS_NAMES:
        logger.debug(f"Platform mode forced to windows by {PLATFORM_ENV_VAR}")
        return True
    if override in POSIX_NAMES:
        logger.debug(f"Platform mode forced to posix by {PLATFORM_ENV_VAR}")
        return False
    if override:
        logger.warning(f"Ignoring unknown {PLATFORM_ENV_VAR} value: {override!r}")

    return os.sep == '\\'


@dataclass(frozen=True)
class Config:
    """Configuration settings for relpath."""

    # Windows mode: backslash separators, drive letters, case-insensitive compare
    windows: bool = field(default_factory=detect_windows)

    # Supplies the start directory when get_relative_path() is called without one
    cwd_provider: Callable[[], str] = os.getcwd

    @classmethod
    def posix(cls, cwd_provider: Optional[Callable[[], str]] = None) -> 'Config':
        """Build a POSIX-mode configuration."""
        if cwd_provider is None:
            return cls(windows=False)
        return cls(windows=False, cwd_provider=cwd_provider)

    @classmethod
    def for_windows(cls, cwd_provider: Optional[Callable[[], str]] = None) -> 'Config':
        """Build a Windows-mode configuration."""
        if cwd_provider is None:
            return cls(windows=True)
        return cls(windows=True, cwd_provider=cwd_provider)

    @property
    def platform_name(self) -> str:
        return 'windows' if self.windows else 'posix'


class InvalidReason(Enum):
    """Why an operation could not produce a path."""
    RELATIVE_PATH = "path is not absolute"
    RELATIVE_START = "start directory is not absolute"
    RELATIVE_BASE = "base path is not absolute"
    DRIVE_MISMATCH = "paths are on different drives or differently anchored"


class InvalidPathError(ValueError):
    """Raised when an Invalid result is unwrapped."""

    def __init__(self, reason: InvalidReason, message: str):
        super().__init__(message)
        self.reason = reason


@dataclass(frozen=True)
class Resolved:
    """Successful result holding the computed path."""

    path: str

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> str:
        """Return the computed path."""
        return self.path

    def unwrap_or(self, default: Optional[str] = None) -> Optional[str]:
        return self.path


@dataclass(frozen=True)
class Invalid:
    """Failed result: the inputs violated an absoluteness precondition."""

    reason: InvalidReason
    message: str = ''

    def __post_init__(self):
        """Fall back to the reason's description when no message is given."""
        if not self.message:
            object.__setattr__(self, 'message', self.reason.value)

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> str:
        """
        Raise, since there is no path to return.

        Raises:
            InvalidPathError: Always, carrying this result's reason.
        """
        raise InvalidPathError(self.reason, self.message)

    def unwrap_or(self, default: Optional[str] = None) -> Optional[str]:
        return default


PathResult = Union[Resolved, Invalid]
