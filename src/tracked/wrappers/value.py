"""Copy-semantics tracked value.

Usage:
    position = Tracked((0, 0))
    position.set((1, 0))

    # Only re-send when it actually changed
    latest = position.get_if_fresh()
    if latest is not None:
        send(latest)
"""

from __future__ import annotations

from collections.abc import Callable

from tracked.config import get_settings
from tracked.core.operations import duplicate
from tracked.core.types import Copy
from tracked.wrappers.base import FreshnessTracker


def _duplicate[T](value: T) -> T:
    return duplicate(value, get_settings().copy_mode)


class Tracked[T](FreshnessTracker[T]):
    """Tracked value for types that can be duplicated.

    The wrapper keeps its own duplicate of every value it stores, and every read
    returns another duplicate. Mutating a returned value never affects the
    wrapper; write it back with `set()`.
    """

    __slots__ = ()

    def __init__(self, val: T) -> None:
        super().__init__(_duplicate(val))

    @classmethod
    def default(cls, factory: Callable[[], T]) -> Tracked[T]:
        """Construct a fresh wrapper around the type's default value.

        Args:
            factory: Value type or zero-argument callable, e.g. `int` or `list`.
        """
        return cls(factory())

    def set(self, val: T) -> None:
        """Set a new value, marked as fresh if not equal to the existing value.

        Raises:
            UncomparableValueError: If `val` cannot be compared with the current value.
        """
        if self._differs(val):
            self._store(_duplicate(val))

    def get(self) -> Copy[T]:
        """Get a copy of the current value, marking it as stale."""
        return _duplicate(self._consume())

    def get_if_fresh[D](self, default: D = None) -> Copy[T] | D:  # type: ignore[assignment]
        """Get a copy of the value if it changed since last checked, marking it as stale.

        Args:
            default: Returned when the value is stale. Pass a sentinel when the
                wrapped value itself may be None.
        """
        if self._fresh:
            return self.get()
        return default

    def peek(self) -> Copy[T]:
        """Get a copy of the current value without marking it."""
        return _duplicate(self._val)

    def clone(self) -> Tracked[T]:
        """Duplicate the wrapper, keeping its freshness flag."""
        return self._from_state(_duplicate(self._val), self._fresh)

    def __copy__(self) -> Tracked[T]:
        return self.clone()
