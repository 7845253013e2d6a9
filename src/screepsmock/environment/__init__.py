"""Stateful mock services: counters, global bindings and test environments.

Architecture Note:
    environment/ mutates process state (counters, builtins bindings). Unlike
    core/ (stateless builders), everything here outlives a single call.
"""

from screepsmock.environment.builders import (
    GLOBAL_NAMESPACE,
    mock_global,
    mock_room_position,
    mock_room_position_constructor,
    mock_structure,
)
from screepsmock.environment.counters import StructureCounters, get_counters
from screepsmock.environment.environment import MockEnvironment

__all__ = [
    "GLOBAL_NAMESPACE",
    "StructureCounters",
    "get_counters",
    "mock_global",
    "mock_room_position",
    "mock_room_position_constructor",
    "mock_structure",
    "MockEnvironment",
]
