"""Shared test fixtures."""

import sys
from types import SimpleNamespace

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from screepsmock.config import get_settings

pytest_plugins = ["screepsmock.pytest_plugin"]


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Re-read SCREEPSMOCK_* variables for every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def namespace():
    """Isolated global namespace, so tests do not touch builtins."""
    return SimpleNamespace()
