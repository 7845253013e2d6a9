"""Mock construction: override-tree builder, strict access guard, and error."""

from screepsmock.core.mock.core import (
    create_mock,
    mock_instance_of,
    resolve_allow_undefined_access,
    should_mock_object,
    spy,
)
from screepsmock.core.mock.models import (
    INTROSPECTION_KEYS,
    MockedObject,
    UnmockedAccessError,
    is_introspection_key,
    unwrap_mock,
)

__all__ = [
    # Models
    "MockedObject",
    "UnmockedAccessError",
    "INTROSPECTION_KEYS",
    "is_introspection_key",
    "unwrap_mock",
    # Core
    "create_mock",
    "mock_instance_of",
    "resolve_allow_undefined_access",
    "should_mock_object",
    "spy",
]
