"""Configuration module using Pydantic Settings.

Provides typed configuration for wrappers with environment variable support.

Usage:
    from tracked.config import TrackedSettings, get_settings

    settings = TrackedSettings(copy_mode="shallow")
"""

from tracked.config.settings import TrackedSettings, get_settings

__all__ = [
    "TrackedSettings",
    "get_settings",
]
