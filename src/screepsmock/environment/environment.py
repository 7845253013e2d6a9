"""Explicit test environment that owns its global bindings and counters.

Usage:
    with MockEnvironment() as env:
        env.mock_global("Memory", {"creeps": {}})
        spawn = env.mock_structure(StructureType.SPAWN)   # "spawn1" in every test
        run_tick()
    # Memory is restored (or removed) here
"""

from __future__ import annotations

from typing import Any, Self
from unittest.mock import Mock

from screepsmock.core.mock import mock_instance_of
from screepsmock.core.types import DeepPartial
from screepsmock.environment import builders
from screepsmock.environment.counters import StructureCounters


class MockEnvironment:
    """Scoped install target for global mocks.

    Records the previous value of every binding it installs so restore() can
    undo them, and owns a private StructureCounters so structure IDs do not
    leak between tests.

    Args:
        namespace: Module/object or mutable mapping to bind into (defaults to builtins).
        counters: Counter registry for structure IDs (defaults to a fresh one).
    """

    def __init__(
        self,
        namespace: Any = None,
        counters: StructureCounters | None = None,
    ) -> None:
        self._namespace = builders.GLOBAL_NAMESPACE if namespace is None else namespace
        self._counters = StructureCounters() if counters is None else counters
        self._saved: list[tuple[str, Any]] = []

    @property
    def namespace(self) -> Any:
        """The namespace globals are bound into."""
        return self._namespace

    @property
    def counters(self) -> StructureCounters:
        """The counters used by mock_structure()."""
        return self._counters

    def _remember(self, name: str) -> None:
        self._saved.append((name, builders.lookup(self._namespace, name)))

    def mock_global(
        self,
        name: str,
        mocked_props: DeepPartial[Any] | None = None,
        allow_undefined_access: bool | None = None,
    ) -> Any:
        """Bind a guarded mock under name, see builders.mock_global()."""
        self._remember(name)
        return builders.mock_global(
            name, mocked_props, allow_undefined_access, namespace=self._namespace
        )

    def mock_room_position_constructor(self) -> Mock:
        """Bind the RoomPosition constructor spy, see builders.mock_room_position_constructor()."""
        self._remember("RoomPosition")
        return builders.mock_room_position_constructor(self._namespace)

    def mock_structure(
        self, structure_type: str, mocked_props: DeepPartial[Any] | None = None
    ) -> Any:
        """Create a structure mock numbered by this environment's counters."""
        return builders.mock_structure(structure_type, mocked_props, counters=self._counters)

    def mock_instance_of(
        self,
        mocked_props: DeepPartial[Any] | None = None,
        allow_undefined_access: bool | None = None,
    ) -> Any:
        """Create a standalone guarded mock (nothing is bound)."""
        return mock_instance_of(mocked_props, allow_undefined_access)

    def restore(self) -> None:
        """Put back every binding installed through this environment, newest first."""
        while self._saved:
            name, previous = self._saved.pop()
            if previous is builders.MISSING:
                builders.unbind(self._namespace, name)
            else:
                builders.bind(self._namespace, name, previous)

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.restore()
