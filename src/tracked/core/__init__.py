"""Core functionalities: stateless protocols, types and operations.

Architecture Note:
    core/ contains pure, stateless building blocks with no freshness state.
    For the stateful wrappers, see wrappers/.
"""

from tracked.core.models import Freshness, UncomparableValueError
from tracked.core.operations import CopyMode, duplicate, has_value_equality, values_differ
from tracked.core.types import Copy, Ref, RefMut

__all__ = [
    # Types
    "Copy",
    "Ref",
    "RefMut",
    # Models
    "Freshness",
    "UncomparableValueError",
    # Operations
    "CopyMode",
    "duplicate",
    "has_value_equality",
    "values_differ",
]
