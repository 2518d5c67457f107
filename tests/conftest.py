"""
Shared fixtures — deterministic separator and working directory.
"""
from unittest.mock import patch

import pytest


@pytest.fixture
def unix_default():
    """Force "/" as the default separator regardless of host."""
    with patch("path_helper.core.config.DEFAULT_SEPARATOR", "/"):
        yield "/"


@pytest.fixture
def home_cwd():
    """Working-directory provider pinned to /home/user."""
    return lambda: "/home/user"


@pytest.fixture
def windows_cwd():
    return lambda: "C:\\Users\\me"
