"""Tracked wrappers: copy-semantics and reference-semantics variants."""

from tracked.wrappers.base import FreshnessTracker
from tracked.wrappers.reference import TrackedRef
from tracked.wrappers.value import Tracked

__all__ = [
    "FreshnessTracker",
    "Tracked",
    "TrackedRef",
]
