"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for wrappers.

Usage:
    from tracked.config import get_settings

    # Load from environment variables (TRACKED_*)
    settings = get_settings()

    # Reload after changing the environment
    get_settings.cache_clear()
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install tracked"
    ) from e


class TrackedSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for tracked wrappers.

    Attributes:
        copy_mode: How `Tracked` duplicates values (deep or shallow).
        warn_identity_equality: Warn when `set()` compares values whose type
            only has identity equality.

    Environment Variables:
        TRACKED_COPY_MODE
        TRACKED_WARN_IDENTITY_EQUALITY
    """

    model_config = SettingsConfigDict(
        env_prefix="TRACKED_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    copy_mode: Literal["deep", "shallow"] = "deep"
    warn_identity_equality: bool = False


@lru_cache(maxsize=1)
def get_settings() -> TrackedSettings:
    """Return the process-wide settings, loaded once from the environment."""
    return TrackedSettings()
