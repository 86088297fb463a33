"""Core models: the shared freshness protocol and error types."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


class UncomparableValueError(TypeError):
    """Raised when compare-and-set cannot decide whether two values are equal."""

    pass


@runtime_checkable
class Freshness[T](Protocol):
    """Read surface shared by every tracked wrapper.

    Lets surrounding code accept either wrapper when it only needs to decide
    whether to act on a changed value.

    Usage:
        def sync(source: Freshness[Config]) -> None:
            config = source.get_if_fresh()
            if config is not None:
                push(config)
    """

    def is_fresh(self) -> bool:
        """Check whether the value changed since the last consuming read."""
        ...

    def peek(self) -> T:
        """Return the value without consuming freshness."""
        ...

    def get(self) -> T:
        """Return the value, marking it stale."""
        ...

    def get_if_fresh[D](self, default: D = None) -> T | D:  # type: ignore[assignment]
        """Return the value if fresh (marking it stale), otherwise `default`."""
        ...

    def set(self, val: T) -> None:
        """Store `val`, marking fresh only if it differs from the current value."""
        ...
