"""Core type definitions for Tracked."""

type Copy[T] = T
"""Type alias indicating a value is a copy detached from the wrapper.

When you see `Copy[T]` in a return type, the returned value is a duplicate.
Mutations to this copy do NOT affect the wrapped value. To change it,
explicitly write back via `tracked.set(value)`.
"""

type Ref[T] = T
"""Type alias indicating a borrowed, read-only view of the wrapped value.

The returned object IS the wrapped value. Do not mutate it and do not keep it
across a later `set()`, `replace()` or `get_mut()` on the same wrapper.
"""

type RefMut[T] = T
"""Type alias indicating an exclusive, mutable view of the wrapped value.

Granting this view marks the wrapper fresh. Writes made through a view kept
after later calls are not tracked.
"""
