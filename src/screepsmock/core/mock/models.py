"""Guarded mock model and the unmocked-access error.

Usage:
    mocked = MockedObject({"x": 1}, allow_undefined_access=False, path="pos")
    mocked.x        # 1
    mocked["x"]     # 1
    mocked.y        # raises UnmockedAccessError: ... "pos.y"
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from screepsmock.core.path import concatenate_path

# Non-dunder attributes looked up by pytest, copy, inspect, asyncio, IPython and
# unittest.mock while comparing or rendering objects. Dunder names are always
# treated as introspection lookups, see is_introspection_key().
INTROSPECTION_KEYS: frozenset[str] = frozenset(
    {
        "_fields",
        "_is_coroutine",
        "_is_coroutine_marker",
        "_asdict",
        "_repr_html_",
        "_ipython_display_",
        "_ipython_canary_method_should_not_exist_",
        "_mock_methods",
        "_spec_class",
        "reset_mock",
    }
)

_MISSING = object()


class UnmockedAccessError(Exception):
    """Raised when a test reads a property that was never mocked.

    Attributes:
        path: Dotted/bracketed path to the offending property.
    """

    def __init__(self, path: str) -> None:
        super().__init__(
            f'Unexpected access to unmocked property "{path}".\n'
            "Did you forget to mock it?\n"
            "If you intended for it to be undefined, you can explicitly set it to None "
            '(recommended) or set "allow_undefined_access" argument to True.'
        )
        self.path = path


def is_introspection_key(key: Any) -> bool:
    """Check if key is a framework lookup that must never raise UnmockedAccessError.

    Args:
        key: Attribute or item key being read.

    Returns:
        True for dunder names and for names in INTROSPECTION_KEYS.
    """
    if not isinstance(key, str):
        return False
    return (key.startswith("__") and key.endswith("__")) or key in INTROSPECTION_KEYS


class MockedObject:
    """Strict, read-policed stand-in built around a backing dict.

    Reads resolve in order: backing key, introspection key, then either None
    (allow_undefined_access) or UnmockedAccessError. Attribute and item syntax
    share the same policy; writes and deletes pass through to the backing dict.

    Args:
        target: Backing dict, owned by this mock.
        allow_undefined_access: Return None for unmocked reads instead of raising.
        path: Diagnostic path of this mock ("" for a root mock).
        type_name: Optional name of the mocked type, used in repr().
    """

    __slots__ = ("_mock_target", "_mock_allow_undefined_access", "_mock_path", "_mock_type_name")

    def __init__(
        self,
        target: dict[Any, Any],
        allow_undefined_access: bool = False,
        path: str = "",
        type_name: str | None = None,
    ) -> None:
        object.__setattr__(self, "_mock_target", target)
        object.__setattr__(self, "_mock_allow_undefined_access", allow_undefined_access)
        object.__setattr__(self, "_mock_path", path)
        object.__setattr__(self, "_mock_type_name", type_name)

    def _mock_read(self, key: Any) -> Any:
        target = self._mock_target
        if key in target:
            return target[key]
        if is_introspection_key(key):
            return _MISSING
        if self._mock_allow_undefined_access:
            return None
        raise UnmockedAccessError(concatenate_path(self._mock_path, key))

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails, including unset slots
        # while copy/pickle rebuild an instance.
        if name in MockedObject.__slots__:
            raise AttributeError(name)
        value = self._mock_read(name)
        if value is _MISSING:
            raise AttributeError(name)
        return value

    def __getitem__(self, key: Any) -> Any:
        value = self._mock_read(key)
        if value is _MISSING:
            raise KeyError(key)
        return value

    def __setattr__(self, name: str, value: Any) -> None:
        if name in MockedObject.__slots__:
            object.__setattr__(self, name, value)
            return
        self._mock_target[name] = value

    def __setitem__(self, key: Any, value: Any) -> None:
        self._mock_target[key] = value

    def __delattr__(self, name: str) -> None:
        self.__delitem__(name)

    def __delitem__(self, key: Any) -> None:
        if key not in self._mock_target:
            raise UnmockedAccessError(concatenate_path(self._mock_path, key))
        del self._mock_target[key]

    def __contains__(self, key: Any) -> bool:
        return key in self._mock_target

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._mock_target))

    def keys(self) -> list[Any]:
        """Mocked keys, so dict(mock) and {**mock} copy the backing dict.

        A property mocked under the name "keys" stays reachable as mock["keys"].
        """
        return list(self._mock_target)

    def __len__(self) -> int:
        return len(self._mock_target)

    def __bool__(self) -> bool:
        # Mocks stand in for objects, which are truthy even when empty.
        return True

    def __dir__(self) -> list[str]:
        keys = [key for key in self._mock_target if isinstance(key, str)]
        return sorted(set(object.__dir__(self)) | set(keys))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, MockedObject):
            return self._mock_target == other._mock_target
        if isinstance(other, dict):
            return self._mock_target == other
        return NotImplemented

    def __hash__(self) -> int:
        try:
            return hash(self._mock_target.get("id"))
        except TypeError:
            # Unhashable id: equal mocks must still hash alike.
            return hash(None)

    def __repr__(self) -> str:
        name = self._mock_type_name or type(self).__name__
        location = f" at {self._mock_path!r}" if self._mock_path else ""
        return f"<{name}{location} {self._mock_target!r}>"


def unwrap_mock(mocked: MockedObject) -> dict[Any, Any]:
    """Return a shallow copy of the mock's backing dict (for diagnostics).

    Args:
        mocked: Guarded mock to inspect.

    Returns:
        New dict with the mock's current keys and values.
    """
    return dict(mocked._mock_target)
