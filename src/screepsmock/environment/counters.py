"""Structure counter service.

StructureCounters is a stateful service that hands out per-category sequence
numbers used to build unique structure IDs ("spawn1", "spawn2", ...).
"""

from __future__ import annotations


class StructureCounters:
    """Monotonic per-category counters, starting at 1.

    Numbers are never reused unless reset() is called explicitly. The module
    default returned by get_counters() lives for the whole process, so tests
    that depend on exact IDs should reset it or use their own instance.
    """

    def __init__(self) -> None:
        self._counts: dict[str, int] = {}

    def next(self, category: str) -> int:
        """Issue the next number for a category.

        Args:
            category: Category tag, e.g. a StructureType.

        Returns:
            1 for the first call per category, then 2, 3, ...
        """
        key = str(category)
        count = self._counts.get(key, 0) + 1
        self._counts[key] = count
        return count

    def peek(self, category: str) -> int:
        """Return the last number issued for a category (0 if none)."""
        return self._counts.get(str(category), 0)

    def reset(self, category: str | None = None) -> None:
        """Forget issued numbers for one category, or for all when None."""
        if category is None:
            self._counts.clear()
        else:
            self._counts.pop(str(category), None)


# Module-level counters instance
_counters = StructureCounters()


def get_counters() -> StructureCounters:
    """Access the process-wide structure counters.

    Returns:
        The default StructureCounters instance used by mock_structure().
    """
    return _counters
