"""Partial mock builder: turns a sparse override tree into a guarded mock.

Usage:
    creep = mock_instance_of({
        "name": "Harvester1",
        "pos": {"x": 10, "y": 20},
        "body": [{"type": "work"}, {"type": "move"}],
        "move_to": lambda target: 0,
    })

    creep.pos.x              # 10
    creep.body[1].type       # "move"
    creep.move_to(target)    # 0, and the call is recorded
    creep.move_to.assert_called_once_with(target)
    creep.memory             # raises UnmockedAccessError: ... "memory"
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any
from unittest.mock import Mock, NonCallableMock

from screepsmock.config import get_settings
from screepsmock.core.mock.models import MockedObject
from screepsmock.core.path import concatenate_path, index_path
from screepsmock.core.types import DeepPartial


def should_mock_object(value: Any) -> bool:
    """Check if value is plain data that should be expanded into a nested mock.

    Only exact dicts qualify. Dict subclasses, dataclasses, pydantic models,
    already-built MockedObjects and every other class instance are terminal,
    so pre-built mocks passed as overrides are never wrapped twice.

    Args:
        value: Override value to classify.

    Returns:
        True if value should be recursively mocked, False otherwise.
    """
    return value is not None and type(value) is dict


def _is_function(value: Any) -> bool:
    return callable(value) and not isinstance(value, (type, NonCallableMock))


def spy(fn: Callable[..., Any], name: str | None = None) -> Mock:
    """Wrap fn so calls are recorded while still running fn by default.

    Setting ``return_value`` or ``side_effect`` on the spy replaces fn's logic.

    Args:
        fn: Function supplying the default behavior.
        name: Optional name shown in the spy's repr.

    Returns:
        A unittest.mock.Mock wrapping fn.
    """
    return Mock(wraps=fn, name=name or None)


def _mock_value(value: Any, allow_undefined_access: bool, path: str) -> Any:
    if _is_function(value):
        return spy(value, name=path)
    if type(value) in (list, tuple):
        return type(value)(
            _mock_value(element, allow_undefined_access, index_path(path, index))
            for index, element in enumerate(value)
        )
    if should_mock_object(value):
        return create_mock(value, allow_undefined_access, path)
    return value


def create_mock(
    mocked_props: DeepPartial[Any],
    allow_undefined_access: bool,
    path: str,
    type_name: str | None = None,
) -> MockedObject:
    """Build the backing dict for an override tree and guard it.

    Functions become spies, lists and tuples are mapped element-wise, plain
    dicts become nested guarded mocks, and everything else is kept as-is.
    No key is added beyond the ones supplied.

    Args:
        mocked_props: Sparse override tree.
        allow_undefined_access: Policy for unmocked reads, inherited by nested mocks.
        path: Diagnostic path of the mock being built.
        type_name: Optional mocked type name, used in repr().

    Returns:
        Guarded mock over the built backing dict.

    Raises:
        TypeError: If mocked_props is not a mapping.
    """
    if not isinstance(mocked_props, Mapping):
        raise TypeError(
            f"Mocked props at {path or '<root>'!r} must be a mapping, "
            f"got {type(mocked_props).__name__}"
        )

    target = {
        prop: _mock_value(value, allow_undefined_access, concatenate_path(path, prop))
        for prop, value in mocked_props.items()
    }
    return MockedObject(target, allow_undefined_access, path, type_name)


def resolve_allow_undefined_access(allow_undefined_access: bool | None) -> bool:
    """Fall back to the configured default when no explicit policy is given."""
    if allow_undefined_access is None:
        return get_settings().allow_undefined_access
    return allow_undefined_access


def mock_instance_of(
    mocked_props: DeepPartial[Any] | None = None,
    allow_undefined_access: bool | None = None,
    *,
    type_name: str | None = None,
) -> Any:
    """Create a strict mock instance of a class or interface.

    Args:
        mocked_props: The properties the test needs.
        allow_undefined_access: If False, reading a property missing from
            mocked_props raises UnmockedAccessError. None uses the configured
            default (False unless SCREEPSMOCK_ALLOW_UNDEFINED_ACCESS is set).
        type_name: Optional name of the mocked type, shown in repr().

    Returns:
        The guarded mock, typed loosely so it can stand in for the real type.
    """
    return create_mock(
        {} if mocked_props is None else mocked_props,
        resolve_allow_undefined_access(allow_undefined_access),
        "",
        type_name,
    )
