"""setmap: a container keyed by unordered combinations of items.

A ``SetMap`` stores values under sets of items rather than scalar keys, so
``["a", "b"]`` and ``("b", "a")`` address the same entry.

Primary API:
    SetMap - The container (set, get, has, delete, delete_all)
    make_set() - Default path normalizer
    sets_equal() - Default order-independent comparator
    SetMapConfig, SETMAP_CONFIG - Behavior switches

Example:
    from setmap import SetMap

    sm = SetMap().set(["a", "b", "c"], "x")
    assert sm.get(["c", "a", "b"]) == "x"
    assert sm.delete_all("a")
"""

from __future__ import annotations

from setmap import logging
from setmap._version import __version__
from setmap.config import SETMAP_CONFIG, SetMapConfig
from setmap.set_map import SetMap
from setmap.sets import make_set, sets_equal

__all__ = [
    # Version
    "__version__",
    # Container
    "SetMap",
    # Collaborators
    "make_set",
    "sets_equal",
    # Configuration
    "SetMapConfig",
    "SETMAP_CONFIG",
    # Utilities
    "logging",
]
