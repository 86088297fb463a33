"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from dataclasses import dataclass

from tracked import get_settings


@pytest.fixture(autouse=True, scope="session")
def default_settings():
    """Run the suite with default settings regardless of the caller's TRACKED_* variables."""
    with pytest.MonkeyPatch.context() as mp:
        mp.delenv("TRACKED_COPY_MODE", raising=False)
        mp.delenv("TRACKED_WARN_IDENTITY_EQUALITY", raising=False)
        get_settings.cache_clear()
        yield
    get_settings.cache_clear()


@pytest.fixture
def reset_settings():
    """Drop cached settings before and after a test that changes TRACKED_* variables."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@dataclass
class FixtureWrapper:
    value: int


@dataclass
class FixtureInventory:
    items: list[str]


@pytest.fixture
def wrapper_cls():
    return FixtureWrapper


@pytest.fixture
def inventory_cls():
    return FixtureInventory
