"""Core type definitions for screepsmock."""

from collections.abc import Mapping
from typing import Any

type DeepPartial[T] = Mapping[str, Any]
"""Type alias for a sparse override tree describing a mock of T.

Every key is optional. Nested mappings are themselves override trees, and
lists hold override trees for their element type. The type parameter only
documents the intended target; the mock builders are shape-agnostic.
"""
