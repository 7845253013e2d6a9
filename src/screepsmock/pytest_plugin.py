"""Pytest fixtures for screepsmock.

Enable in a conftest.py:
    pytest_plugins = ["screepsmock.pytest_plugin"]

Then:
    def test_spawns_creep(mock_env):
        mock_env.mock_global("Game", {"time": 100})
        spawn = mock_env.mock_structure(StructureType.SPAWN)
"""

from collections.abc import Iterator

import pytest

from screepsmock.config import get_settings
from screepsmock.environment import MockEnvironment, StructureCounters, get_counters


@pytest.fixture
def mock_env() -> Iterator[MockEnvironment]:
    """MockEnvironment bound to builtins, restored at teardown."""
    with MockEnvironment() as env:
        yield env


@pytest.fixture
def structure_counters() -> StructureCounters:
    """Fresh StructureCounters, independent of the process-wide default."""
    return StructureCounters()


@pytest.fixture(autouse=True)
def _reset_structure_counters() -> None:
    """Restart default structure IDs at 1 for every test."""
    if get_settings().reset_counters_between_tests:
        get_counters().reset()
