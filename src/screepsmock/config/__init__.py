"""Configuration module using Pydantic Settings.

Usage:
    from screepsmock.config import MockSettings, get_settings

    settings = get_settings()
    strict = MockSettings(allow_undefined_access=False)
"""

from screepsmock.config.settings import MockSettings, get_settings

__all__ = [
    "MockSettings",
    "get_settings",
]
