"""Type aliases shared across setmap."""

from __future__ import annotations

from typing import Any, Callable, Collection, Hashable, Iterable

Item = Hashable
Path = Iterable[Item]

# Whatever the normalizer produces. Stored keys are compared only through the
# comparator, so they need not be hashable.
SetKey = Collection[Item]

Normalizer = Callable[[Path], SetKey]
Comparator = Callable[[Iterable[Any], Iterable[Any]], bool]
