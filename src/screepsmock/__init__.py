"""screepsmock: strict, introspectable test doubles for the Screeps object model.

Usage:
    from screepsmock import StructureType, mock_global, mock_instance_of, mock_structure

    mock_global("Game", {"time": 100, "creeps": {}})

    creep = mock_instance_of({
        "name": "Harvester1",
        "pos": {"x": 10, "y": 20, "room_name": "W1N1"},
        "harvest": lambda target: 0,
    })
    spawn = mock_structure(StructureType.SPAWN, {"spawning": None})

    creep.pos.x        # 10
    creep.memory       # raises UnmockedAccessError: ... "memory"
"""

__version__ = "0.1.0"

# Configuration
from screepsmock.config import MockSettings, get_settings

# Core primitives
from screepsmock.core import (
    DeepPartial,
    MockedObject,
    StructureType,
    UnmockedAccessError,
    concrete_type_name,
    mock_instance_of,
    unwrap_mock,
)

# Counters, globals and environments
from screepsmock.environment import (
    MockEnvironment,
    StructureCounters,
    get_counters,
    mock_global,
    mock_room_position,
    mock_room_position_constructor,
    mock_structure,
)

__all__ = [
    # Version
    "__version__",
    # Config
    "MockSettings",
    "get_settings",
    # Core
    "DeepPartial",
    "MockedObject",
    "UnmockedAccessError",
    "StructureType",
    "concrete_type_name",
    "mock_instance_of",
    "unwrap_mock",
    # Environment
    "MockEnvironment",
    "StructureCounters",
    "get_counters",
    "mock_global",
    "mock_room_position",
    "mock_room_position_constructor",
    "mock_structure",
]
