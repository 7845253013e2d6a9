"""Specialized mock builders: structures, room positions and globals.

Usage:
    spawn = mock_structure(StructureType.SPAWN, {"spawning": None})
    spawn.id                 # "spawn1"
    spawn.to_json()          # {"id": "spawn1", "structure_type": "spawn"}

    mock_global("Game", {"time": 100})
    Game.time                # 100, resolved through builtins
    Game.reset_mock()        # no-op, always present

    mock_room_position_constructor()
    pos = RoomPosition(10, 20, "W1N1")
    RoomPosition.assert_called_once_with(10, 20, "W1N1")
"""

from __future__ import annotations

import builtins
import warnings
from collections.abc import MutableMapping
from typing import Any
from unittest.mock import Mock

from screepsmock.config import get_settings
from screepsmock.core.identity import concrete_type_name
from screepsmock.core.mock import (
    MockedObject,
    create_mock,
    mock_instance_of,
    resolve_allow_undefined_access,
    spy,
)
from screepsmock.core.types import DeepPartial
from screepsmock.environment.counters import StructureCounters, get_counters

GLOBAL_NAMESPACE: Any = builtins
"""Process-wide namespace: names bound here resolve as free names in every module."""

MISSING: Any = object()


def lookup(namespace: Any, name: str, default: Any = MISSING) -> Any:
    """Read a binding from a module/object, a mutable mapping or a guarded mock."""
    if isinstance(namespace, MockedObject):
        return namespace[name] if name in namespace else default
    if isinstance(namespace, MutableMapping):
        return namespace.get(name, default)
    return getattr(namespace, name, default)


def bind(namespace: Any, name: str, value: Any) -> None:
    """Bind value under name in a module/object or a mutable mapping."""
    if isinstance(namespace, MutableMapping):
        namespace[name] = value
    else:
        setattr(namespace, name, value)


def unbind(namespace: Any, name: str) -> None:
    """Remove a binding if present."""
    if isinstance(namespace, MockedObject):
        if name in namespace:
            del namespace[name]
    elif isinstance(namespace, MutableMapping):
        namespace.pop(name, None)
    elif hasattr(namespace, name):
        delattr(namespace, name)


def mock_structure(
    structure_type: str,
    mocked_props: DeepPartial[Any] | None = None,
    *,
    counters: StructureCounters | None = None,
) -> Any:
    """Create a mock structure with a unique ID, structure type and to_json().

    The unique IDs keep two otherwise identical structure mocks unequal.
    mocked_props are applied on top of the baseline, so a test may replace
    the ID, the type or to_json() itself.

    Args:
        structure_type: Category tag, e.g. StructureType.SPAWN.
        mocked_props: Additional properties the test needs.
        counters: Counter registry for IDs (defaults to the process-wide one).

    Returns:
        Guarded mock of the concrete structure type.
    """
    if counters is None:
        counters = get_counters()
    count = counters.next(structure_type)

    def to_json() -> dict[str, Any]:
        return {"id": mocked.id, "structure_type": mocked.structure_type}

    mocked = mock_instance_of(
        {
            "id": f"{structure_type}{count}",
            "structure_type": structure_type,
            "to_json": to_json,
            **(mocked_props or {}),
        },
        type_name=concrete_type_name(structure_type),
    )
    return mocked


def mock_room_position(x: int, y: int, room_name: str) -> Any:
    """Create a mock RoomPosition exposing exactly x, y, room_name and to_json()."""
    return mock_instance_of(
        {
            "x": x,
            "y": y,
            "room_name": room_name,
            "to_json": lambda: {"x": x, "y": y, "room_name": room_name},
        },
        type_name="RoomPosition",
    )


def mock_room_position_constructor(namespace: Any = None) -> Mock:
    """Replace the RoomPosition constructor with a spy building mock positions.

    Call this once before running code that creates RoomPosition instances.
    Every call returns a new, independent mock.

    Args:
        namespace: Where to bind RoomPosition (defaults to builtins).

    Returns:
        The installed constructor spy.
    """
    constructor = spy(mock_room_position, name="RoomPosition")
    bind(GLOBAL_NAMESPACE if namespace is None else namespace, "RoomPosition", constructor)
    return constructor


def _reset_mock() -> None:
    pass


def mock_global(
    name: str,
    mocked_props: DeepPartial[Any] | None = None,
    allow_undefined_access: bool | None = None,
    *,
    namespace: Any = None,
) -> Any:
    """Mock a global object instance, like Game or Memory.

    A no-op reset_mock() is always added so teardown code that resets every
    global does not trip the strict guard (reset_mock is the unittest.mock
    spelling of the mockClear hook). The binding persists until it is
    overwritten or removed; use MockEnvironment for automatic restore.

    Args:
        name: The name of the global.
        mocked_props: The properties the test needs.
        allow_undefined_access: If False, reading a property missing from
            mocked_props raises UnmockedAccessError. None uses the configured default.
        namespace: Where to bind the global (defaults to builtins). A guarded
            mock works too, as an explicit environment object.

    Returns:
        The installed guarded mock.
    """
    if namespace is None:
        namespace = GLOBAL_NAMESPACE

    existing = lookup(namespace, name)
    if (
        existing is not MISSING
        and not isinstance(existing, MockedObject)
        and get_settings().warn_on_global_overwrite
    ):
        warnings.warn(
            f"mock_global() is replacing existing global {name!r} "
            f"({type(existing).__name__}). It will not be restored automatically.",
            stacklevel=2,
        )

    final_props = {**(mocked_props or {}), "reset_mock": _reset_mock}
    mocked = create_mock(
        final_props, resolve_allow_undefined_access(allow_undefined_access), name
    )
    bind(namespace, name, mocked)
    return mocked
