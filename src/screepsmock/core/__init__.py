"""Core functionalities: stateless mock construction primitives.

Architecture Note:
    core/ contains the pure building blocks: path composition, the override
    tree builder, the strict access guard and structure identity constants.
    For stateful services (counters, global bindings), see environment/.
"""

from screepsmock.core.identity import CONCRETE_STRUCTURE, StructureType, concrete_type_name
from screepsmock.core.mock import (
    INTROSPECTION_KEYS,
    MockedObject,
    UnmockedAccessError,
    create_mock,
    is_introspection_key,
    mock_instance_of,
    resolve_allow_undefined_access,
    should_mock_object,
    spy,
    unwrap_mock,
)
from screepsmock.core.path import concatenate_path, index_path
from screepsmock.core.types import DeepPartial

__all__ = [
    # Types
    "DeepPartial",
    # Path
    "concatenate_path",
    "index_path",
    # Identity
    "StructureType",
    "CONCRETE_STRUCTURE",
    "concrete_type_name",
    # Mock
    "MockedObject",
    "UnmockedAccessError",
    "INTROSPECTION_KEYS",
    "is_introspection_key",
    "unwrap_mock",
    "create_mock",
    "mock_instance_of",
    "resolve_allow_undefined_access",
    "should_mock_object",
    "spy",
]
