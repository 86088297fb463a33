"""Reference-semantics tracked value.

Usage:
    scene = TrackedRef(Scene(layers=[]))

    # Mutate in place; the grant marks the value fresh
    scene.get_mut().layers.append(layer)

    if scene.is_fresh():
        render(scene.get())
"""

from __future__ import annotations

import copy

from tracked.core.types import Ref, RefMut
from tracked.wrappers.base import FreshnessTracker


class TrackedRef[T](FreshnessTracker[T]):
    """Tracked value for types modified by reference.

    Reads hand out the wrapped object itself. The wrapper cannot see writes made
    through a view, so `get_mut()` marks the value fresh whenever it is called,
    whether or not the caller then changes anything.
    """

    __slots__ = ()

    def set(self, val: T) -> None:
        """Set a new value, marked as fresh if not equal to the existing value.

        Only usable when `T` has working equality; otherwise use `replace()`.

        Raises:
            UncomparableValueError: If `val` cannot be compared with the current value.
        """
        if self._differs(val):
            self._store(val)

    def replace(self, val: T) -> None:
        """Set a new value without comparing, always marking it as fresh."""
        self._store(val)

    def get(self) -> Ref[T]:
        """Get a reference to the current value, marking it as stale."""
        return self._consume()

    def get_mut(self) -> RefMut[T]:
        """Get a mutable reference to the current value, marking it as fresh."""
        return self._grant()

    def get_if_fresh[D](self, default: D = None) -> Ref[T] | D:  # type: ignore[assignment]
        """Get the current value if it changed since last checked, marking it as stale."""
        if self._fresh:
            return self.get()
        return default

    def peek(self) -> Ref[T]:
        """Get a reference to the current value without marking it."""
        return self._val

    def clone(self) -> TrackedRef[T]:
        """Duplicate the wrapper and its value, keeping the freshness flag."""
        return self._from_state(copy.deepcopy(self._val), self._fresh)

    def __copy__(self) -> TrackedRef[T]:
        return self.clone()
