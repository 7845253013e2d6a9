"""Structure identity: category constants and their concrete type names."""

from screepsmock.core.identity.models import (
    CONCRETE_STRUCTURE,
    StructureType,
    concrete_type_name,
)

__all__ = [
    "StructureType",
    "CONCRETE_STRUCTURE",
    "concrete_type_name",
]
