"""Pure functions for value comparison and duplication.

These are stateless helpers used by the wrappers to implement compare-and-set
and copy semantics. They never touch freshness state.
"""

from __future__ import annotations

import copy
from typing import Any, Literal, TypeVar

from tracked.core.models import UncomparableValueError

T = TypeVar("T")

CopyMode = Literal["deep", "shallow"]


def has_value_equality(value: Any) -> bool:
    """Check whether a value's type defines equality beyond object identity.

    Args:
        value: Value to inspect.

    Returns:
        False if `==` on this value falls back to `object.__eq__`, True otherwise.
        None is treated as having value equality (it is a singleton).
    """
    if value is None:
        return True
    return type(value).__eq__ is not object.__eq__


def values_differ(current: Any, new: Any) -> bool:
    """Decide whether `new` differs from `current` under `==`.

    Args:
        current: Currently stored value.
        new: Candidate replacement value.

    Returns:
        True if the values compare unequal.

    Raises:
        UncomparableValueError: If the comparison raises or yields something
            without a truth value (e.g. element-wise array comparison).
    """
    try:
        return bool(current != new)
    except (TypeError, ValueError) as exc:
        raise UncomparableValueError(
            f"Cannot compare {type(current).__name__} with {type(new).__name__}: {exc}"
        ) from exc


def duplicate(value: T, mode: CopyMode = "deep") -> T:
    """Return an independent duplicate of a value.

    Args:
        value: Value to duplicate.
        mode: "deep" for `copy.deepcopy`, "shallow" for `copy.copy`.

    Returns:
        The duplicate. Immutable atoms may come back as the same object.

    Raises:
        ValueError: If mode is not a known copy mode.
    """
    if mode == "deep":
        return copy.deepcopy(value)
    if mode == "shallow":
        return copy.copy(value)
    raise ValueError(f"Unknown copy mode: {mode!r}")
