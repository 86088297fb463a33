"""Shared freshness state machine for tracked wrappers.

Both public wrappers derive from `FreshnessTracker`, so the transitions between
fresh and stale are defined exactly once:

    construct                    -> fresh
    compare-and-set, unequal     -> fresh
    compare-and-set, equal       -> unchanged
    consuming read               -> stale
    mutable grant / replace      -> fresh
    peek, is_fresh, clone        -> unchanged
"""

from __future__ import annotations

import warnings
from typing import Self

from tracked.config import get_settings
from tracked.core.operations import has_value_equality, values_differ


class FreshnessTracker[T]:
    """Base class holding a value and a flag telling whether it changed since last read."""

    __slots__ = ("_val", "_fresh")

    def __init__(self, val: T) -> None:
        self._val = val
        self._fresh = True

    @classmethod
    def _from_state(cls, val: T, fresh: bool) -> Self:
        """Build a wrapper with explicit state, bypassing subclass ingestion."""
        instance = cls.__new__(cls)
        instance._val = val
        instance._fresh = fresh
        return instance

    def is_fresh(self) -> bool:
        """Check whether the value changed since the last consuming read."""
        return self._fresh

    def _consume(self) -> T:
        """Mark stale and return the stored value."""
        self._fresh = False
        return self._val

    def _grant(self) -> T:
        """Mark fresh and return the stored value."""
        self._fresh = True
        return self._val

    def _store(self, val: T) -> None:
        self._val = val
        self._fresh = True

    def _differs(self, val: T) -> bool:
        """Compare a candidate against the stored value.

        Raises:
            UncomparableValueError: If the values cannot be compared.
        """
        if get_settings().warn_identity_equality and not has_value_equality(val):
            warnings.warn(
                f"{type(self).__name__}.set() received {type(val).__name__}, which only has "
                f"identity equality. Every distinct object will be marked fresh.",
                stacklevel=3,
            )
        return values_differ(self._val, val)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._val!r}, fresh={self._fresh})"
