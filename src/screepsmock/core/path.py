"""Diagnostic property paths.

Usage:
    concatenate_path("", "room")          # "room"
    concatenate_path("room", "memory")    # "room.memory"
    index_path("creeps", 2)               # "creeps[2]"
"""

from __future__ import annotations

from typing import Any


def concatenate_path(parent_path: str, prop: Any) -> str:
    """Append a property name to a dotted path.

    Args:
        parent_path: Path of the owning object ("" for a root mock).
        prop: Property name; non-string keys are rendered with str().

    Returns:
        The combined path, without a leading dot for root properties.
    """
    return f"{parent_path}.{prop}" if parent_path else str(prop)


def index_path(parent_path: str, index: int) -> str:
    """Append a sequence index to a path: items -> items[0]."""
    return f"{parent_path}[{index}]"
