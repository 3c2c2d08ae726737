import pytest

from relpath import Config, RelPath


@pytest.fixture
def posix():
    """Path algebra using POSIX conventions."""
    return RelPath(Config.posix())


@pytest.fixture
def windows():
    """Path algebra using Windows conventions."""
    return RelPath(Config.for_windows())
