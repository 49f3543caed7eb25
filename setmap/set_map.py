"""Associative container keyed by unordered combinations of items.

``SetMap`` stores a value under a combination of items so that the same value
comes back no matter what order the items are supplied in::

    sm = SetMap()
    sm.set(["a", "b", "c"], "x")
    sm.get(("c", "a", "b"))  # -> "x"
    sm.delete({"b", "c", "a"})  # -> True

Lookups scan the stored keys and test each with the configured comparator.
The keys are never indexed by hash, since a custom comparator may treat two
different ``frozenset`` objects as the same combination.
"""

from __future__ import annotations

from typing import Any, Callable, List, Optional, Tuple

from setmap.config import SETMAP_CONFIG, SetMapConfig
from setmap.logging import get_logger
from setmap.sets import contains, make_set, sets_equal
from setmap.types import Comparator, Item, Normalizer, Path, SetKey

logger = get_logger(__name__)


class SetMap:
    """Map from unordered, deduplicated item combinations to values.

    At most one entry exists per member combination: ``set`` overwrites the
    value of an existing set-equal key instead of adding a second one.
    Values are stored and returned by identity.

    Not thread-safe. Callers sharing an instance across threads must
    serialize access themselves.

    Attributes:
        config: Behavior switches read at construction time.
    """

    def __init__(
        self,
        normalize: Optional[Normalizer] = None,
        equal: Optional[Comparator] = None,
        config: Optional[SetMapConfig] = None,
    ) -> None:
        """Create an empty container.

        Args:
            normalize: Converts a path into a stored set-key. Defaults to
                ``make_set``.
            equal: Decides whether two collections hold the same members.
                Defaults to ``sets_equal``.
            config: Defaults to the global ``SETMAP_CONFIG``.
        """
        self._normalize: Normalizer = normalize or make_set
        self._equal: Comparator = equal or sets_equal
        self.config: SetMapConfig = config or SETMAP_CONFIG
        # (set-key, value) pairs; keys are never hashed
        self._entries: List[Tuple[SetKey, Any]] = []

    def _index(self, candidate: SetKey) -> Optional[int]:
        for i, (key, _) in enumerate(self._entries):
            if self._equal(key, candidate):
                return i
        return None

    def _remove_where(self, predicate: Callable[[SetKey], bool]) -> int:
        kept = [entry for entry in self._entries if not predicate(entry[0])]
        removed = len(self._entries) - len(kept)
        self._entries = kept
        return removed

    def set(self, path: Path, value: Any = None) -> SetMap:
        """Set or update the value stored at ``path``.

        If a stored key is set-equal to ``path`` its value is replaced and the
        key object is kept. Otherwise ``path`` is normalized into a new key.
        When ``config.check_invariants`` is on and the new key collides with a
        stored one, the insert is undone before the error propagates.

        Args:
            path: Iterable of hashable items, in any order.
            value: Object to store. Defaults to None.

        Returns:
            SetMap: This instance, for chaining.

        Raises:
            ValueError: If invariant checking is enabled and the new key is
                set-equal to a stored key.
        """
        candidate = self._normalize(path)
        i = self._index(candidate)
        if i is not None:
            key = self._entries[i][0]
            self._entries[i] = (key, value)
            if self.config.log_operations:
                logger.debug(f"Overwrote value at {sorted(map(repr, key))}")
            return self

        self._entries.append((candidate, value))
        if self.config.check_invariants:
            try:
                self.check_invariants()
            except ValueError:
                self._entries.pop()
                raise
        if self.config.log_operations:
            logger.debug(
                f"Inserted value at {sorted(map(repr, candidate))} "
                f"({len(self._entries)} entries)"
            )
        return self

    def get(self, path: Path, default: Any = None) -> Any:
        """Return the value stored at ``path``.

        Args:
            path: Iterable of hashable items, in any order.
            default: Returned when nothing is stored at ``path``.

        Returns:
            The stored object itself, or ``default``.
        """
        i = self._index(self._normalize(path))
        if i is None:
            return default
        return self._entries[i][1]

    def has(self, path: Path) -> bool:
        """Return True if a value is stored at ``path``.

        The empty path only matches a previously set empty path.
        """
        return self._index(self._normalize(path)) is not None

    def delete(self, path: Path) -> bool:
        """Delete the value stored at ``path``.

        Args:
            path: Iterable of hashable items, in any order.

        Returns:
            True if a value was deleted, False otherwise.
        """
        candidate = self._normalize(path)
        removed = self._remove_where(lambda key: self._equal(key, candidate))
        if removed and self.config.log_operations:
            logger.debug(f"Deleted {removed} entry at exact path")
        return removed > 0

    def delete_all(self, item: Item) -> bool:
        """Delete every entry whose path contains ``item``.

        Several distinct combinations can share ``item``, so this may remove
        more than one entry.

        Args:
            item: One member of each path to delete.

        Returns:
            True if anything was deleted, False otherwise.
        """
        removed = self._remove_where(lambda key: contains(key, item))
        if removed and self.config.log_operations:
            logger.debug(f"Deleted {removed} entries containing {item!r}")
        return removed > 0

    def clear(self) -> None:
        """Remove every entry."""
        self._entries.clear()

    def check_invariants(self) -> None:
        """Verify that no two stored keys are set-equal.

        ``set`` only guards against duplicates through its own scan, so a
        comparator that is not an equivalence relation can let one slip in.

        Raises:
            ValueError: If two stored keys name the same combination.
        """
        keys = [key for key, _ in self._entries]
        for i, left in enumerate(keys):
            for right in keys[i + 1 :]:
                if self._equal(left, right) or self._equal(right, left):
                    logger.warning(
                        f"Duplicate set-keys detected among {len(keys)} entries"
                    )
                    raise ValueError(
                        f"Keys {sorted(map(repr, left))} and "
                        f"{sorted(map(repr, right))} are set-equal."
                    )

    def __contains__(self, path: Path) -> bool:
        return self.has(path)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(entries={len(self._entries)})"
