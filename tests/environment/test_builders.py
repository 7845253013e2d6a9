"""Tests for structure, room position and global mock builders.

Critical Invariants:
- Structure mocks of the same type get distinct IDs and are not equal
- Overrides are applied on top of the structure baseline
- Global mocks always carry a callable reset_mock()
- Every RoomPosition construction returns an independent mock
"""

import builtins
import warnings
from unittest.mock import Mock

import pytest

from screepsmock import (
    MockEnvironment,
    StructureType,
    UnmockedAccessError,
    get_settings,
    mock_global,
    mock_instance_of,
    mock_room_position,
    mock_room_position_constructor,
    mock_structure,
)
from screepsmock.environment import get_counters

# Structure mocks


def test_structure_ids_are_unique_per_type(structure_counters):
    """CRITICAL: Two mocks of the same type must not compare equal.

    Why: Deep equality assertions could not tell them apart otherwise.
    """
    first = mock_structure("spawn", counters=structure_counters)
    second = mock_structure("spawn", counters=structure_counters)

    assert first.id == "spawn1"
    assert second.id == "spawn2"
    assert first != second


def test_structure_ids_use_default_counters():
    """Default counters restart for every test through the pytest plugin."""
    spawn = mock_structure(StructureType.SPAWN)

    assert spawn.id == "spawn1"
    assert get_counters().peek("spawn") == 1


def test_structure_baseline_shape(structure_counters):
    tower = mock_structure(StructureType.TOWER, counters=structure_counters)

    assert tower.structure_type == StructureType.TOWER
    assert tower.to_json() == {"id": "tower1", "structure_type": "tower"}
    tower.to_json.assert_called_once_with()


def test_structure_overrides_are_mocked_and_strict(structure_counters):
    tower = mock_structure(
        StructureType.TOWER,
        {"store": {"energy": 10}, "attack": lambda target: 0},
        counters=structure_counters,
    )

    assert tower.store.energy == 10
    assert tower.attack("creep") == 0
    with pytest.raises(UnmockedAccessError) as exc_info:
        _ = tower.store.capacity
    assert exc_info.value.path == "store.capacity"
    with pytest.raises(UnmockedAccessError):
        _ = tower.hits


def test_structure_overrides_replace_baseline(structure_counters):
    spawn = mock_structure(
        StructureType.SPAWN,
        {"id": "Spawn1", "structure_type": "fake"},
        counters=structure_counters,
    )

    assert spawn.id == "Spawn1"
    assert spawn.to_json() == {"id": "Spawn1", "structure_type": "fake"}


def test_structure_to_json_can_be_replaced(structure_counters):
    lab = mock_structure("lab", {"to_json": lambda: "custom"}, counters=structure_counters)

    assert lab.to_json() == "custom"


def test_structure_repr_names_concrete_type(structure_counters):
    wall = mock_structure(StructureType.WALL, counters=structure_counters)

    assert repr(wall).startswith("<StructureWall ")
    assert wall.id == "constructedWall1"


# Global mocks


def test_mock_global_installs_into_namespace(namespace):
    mock_global("Game", {"time": 100}, namespace=namespace)

    assert namespace.Game.time == 100
    namespace.Game.reset_mock()
    namespace.Game.reset_mock.assert_called_once_with()


def test_mock_global_path_starts_with_global_name(namespace):
    mock_global("Game", {"cpu": {"limit": 20}}, namespace=namespace)

    with pytest.raises(UnmockedAccessError) as exc_info:
        _ = namespace.Game.cpu.bucket
    assert exc_info.value.path == "Game.cpu.bucket"


def test_mock_global_allow_undefined_access(namespace):
    mock_global("Memory", {}, allow_undefined_access=True, namespace=namespace)

    assert namespace.Memory.creeps is None


def test_mock_global_into_mapping_namespace():
    module_globals: dict = {}

    mocked = mock_global("Memory", {"creeps": {}}, namespace=module_globals)

    assert module_globals["Memory"] is mocked
    assert len(module_globals["Memory"].creeps) == 0


def test_injected_reset_mock_wins_over_override(namespace):
    mock_global("Game", {"reset_mock": lambda: "override"}, namespace=namespace)

    assert namespace.Game.reset_mock() is None


def test_mock_global_into_guarded_mock_namespace():
    env_object = mock_instance_of({})

    mock_global("Game", {"time": 1}, namespace=env_object)

    assert env_object.Game.time == 1


def test_environment_restores_guarded_mock_namespace():
    env_object = mock_instance_of({})

    with MockEnvironment(env_object) as env:
        env.mock_global("Game", {"time": 1})
        env.mock_room_position_constructor()
        assert "Game" in env_object

    assert "Game" not in env_object
    assert "RoomPosition" not in env_object


def test_mock_global_defaults_to_builtins():
    try:
        mock_global("Game", {"time": 100})

        assert builtins.Game.time == 100
        # Free names resolve through builtins in any module
        assert eval("Game.time") == 100
        builtins.Game.reset_mock()
    finally:
        del builtins.Game


def test_replacing_real_global_warns(namespace):
    namespace.Game = "real game"

    with pytest.warns(UserWarning, match="replacing existing global 'Game'"):
        mock_global("Game", {"time": 1}, namespace=namespace)


def test_replacing_mocked_global_is_silent(namespace):
    mock_global("Game", {"time": 1}, namespace=namespace)

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        mock_global("Game", {"time": 2}, namespace=namespace)

    assert namespace.Game.time == 2


def test_overwrite_warning_can_be_disabled(namespace, monkeypatch):
    monkeypatch.setenv("SCREEPSMOCK_WARN_ON_GLOBAL_OVERWRITE", "false")
    get_settings.cache_clear()
    namespace.Memory = {}
    assert not get_settings().warn_on_global_overwrite

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        mock_global("Memory", {}, namespace=namespace)


# RoomPosition mocks


def test_mock_room_position_shape():
    pos = mock_room_position(10, 20, "W1N1")

    assert (pos.x, pos.y, pos.room_name) == (10, 20, "W1N1")
    assert pos.to_json() == {"x": 10, "y": 20, "room_name": "W1N1"}
    with pytest.raises(UnmockedAccessError):
        _ = pos.look()


def test_room_position_constructor_spy(namespace):
    constructor = mock_room_position_constructor(namespace)

    pos = namespace.RoomPosition(1, 2, "E3S4")

    assert namespace.RoomPosition is constructor
    assert isinstance(constructor, Mock)
    assert pos.room_name == "E3S4"
    constructor.assert_called_once_with(1, 2, "E3S4")


def test_room_position_constructor_returns_independent_mocks(namespace):
    mock_room_position_constructor(namespace)

    first = namespace.RoomPosition(1, 1, "W1N1")
    second = namespace.RoomPosition(1, 1, "W1N1")

    assert first is not second
    assert first.to_json is not second.to_json
    assert namespace.RoomPosition.call_count == 2
