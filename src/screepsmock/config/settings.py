"""Configuration settings using Pydantic Settings.

Provides typed defaults for the mock builders with environment variable support.

Usage:
    from screepsmock.config import MockSettings, get_settings

    # Load from environment variables (SCREEPSMOCK_*)
    settings = get_settings()

    # Or override with explicit values
    settings = MockSettings(allow_undefined_access=True)
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class MockSettings(BaseSettings):  # type: ignore[misc]
    """Defaults for mock construction and the pytest plugin.

    Attributes:
        allow_undefined_access: Default read policy when a builder is called
            with allow_undefined_access=None.
        warn_on_global_overwrite: Warn when mock_global() replaces a binding
            that is not itself a mock.
        reset_counters_between_tests: Reset the default structure counters
            before every test (pytest plugin only).

    Environment Variables:
        SCREEPSMOCK_ALLOW_UNDEFINED_ACCESS
        SCREEPSMOCK_WARN_ON_GLOBAL_OVERWRITE
        SCREEPSMOCK_RESET_COUNTERS_BETWEEN_TESTS
    """

    model_config = SettingsConfigDict(
        env_prefix="SCREEPSMOCK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    allow_undefined_access: bool = False
    warn_on_global_overwrite: bool = True
    reset_counters_between_tests: bool = True


@lru_cache(maxsize=1)
def get_settings() -> MockSettings:
    """Load settings once; call get_settings.cache_clear() to re-read the environment."""
    return MockSettings()
