"""Tracked: dirty-flag value wrappers.

Usage:
    from tracked import Tracked, TrackedRef

    volume = Tracked(5)
    volume.get()            # 5, now stale
    volume.set(5)           # equal, still stale
    volume.set(6)           # changed, fresh again
    volume.get_if_fresh()   # 6, now stale
    volume.get_if_fresh()   # None

    @dataclass
    class Counter:
        value: int

    counter = TrackedRef(Counter(777))
    counter.get_mut().value = 888   # mutable access marks fresh
"""

__version__ = "0.1.0"

# Core primitives
from tracked.core import (
    Copy,
    Freshness,
    Ref,
    RefMut,
    UncomparableValueError,
)

# Configuration
from tracked.config import (
    TrackedSettings,
    get_settings,
)

# Wrappers
from tracked.wrappers import (
    Tracked,
    TrackedRef,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "Copy",
    "Ref",
    "RefMut",
    "Freshness",
    "UncomparableValueError",
    # Config
    "TrackedSettings",
    "get_settings",
    # Wrappers
    "Tracked",
    "TrackedRef",
]
