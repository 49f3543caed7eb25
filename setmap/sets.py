"""Set normalization and order-independent equality.

These are the two collaborators a ``SetMap`` is built on. ``make_set`` turns a
path into the key that gets stored, and ``sets_equal`` decides whether a stored
key and an incoming path name the same member combination. Both are pure and
can be replaced per container.
"""

from __future__ import annotations

from collections.abc import Set as AbstractSet
from typing import Any, Iterable

from setmap.types import Item, Path, SetKey


def make_set(path: Path) -> SetKey:
    """Normalize a path into an immutable set-key.

    A ``frozenset`` is returned as-is. Anything else, including a mutable
    ``set``, is copied so that later changes by the caller cannot alter a key
    that is already stored.

    Args:
        path: Iterable of hashable items. Duplicates collapse.

    Returns:
        The members of ``path`` as a ``frozenset``.

    Raises:
        TypeError: If ``path`` is not iterable or holds an unhashable item.
    """
    if isinstance(path, frozenset):
        return path
    return frozenset(path)


def _as_set(collection: Iterable[Any]) -> AbstractSet:
    if isinstance(collection, AbstractSet):
        return collection
    return set(collection)


def sets_equal(a: Iterable[Any], b: Iterable[Any]) -> bool:
    """Return True if ``a`` and ``b`` contain exactly the same members.

    Order, duplicates and the concrete container type are ignored, so
    ``sets_equal([1, 2], {2, 1})`` is True. The cardinalities must match
    and every member of ``a`` must be in ``b``.

    Args:
        a: First collection.
        b: Second collection.

    Returns:
        True if both collections have identical membership.
    """
    left = _as_set(a)
    right = _as_set(b)
    if len(left) != len(right):
        return False
    return all(member in right for member in left)


def contains(key: Iterable[Any], item: Item) -> bool:
    """Return True if ``item`` is a member of ``key``."""
    return item in key
