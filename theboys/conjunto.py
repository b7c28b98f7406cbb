"""Sets of small non-negative integers with a fixed capacity."""

from __future__ import annotations

import random as _random
from typing import Iterable, Iterator


class BoundedSet:
    """A set holding integers in the range ``0 .. capacity - 1``.

    Values outside that range are silently ignored on insertion and removal.
    """

    __slots__ = ("capacity", "_items")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, capacity: int, items: Iterable[int] = ()) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative: {capacity}")
        self.capacity = capacity
        self._items: set[int] = set()
        for item in items:
            self.add(item)

    @classmethod
    def random(
        cls, count: int, capacity: int, rng: _random.Random | None = None
    ) -> "BoundedSet":
        """Build a set of ``count`` distinct random values below ``capacity``."""
        if count < 0 or count > capacity:
            raise ValueError(
                f"cannot pick {count} distinct values below {capacity}"
            )
        rng = rng if rng is not None else _random.Random()
        return cls(capacity, rng.sample(range(capacity), count))

    def _in_range(self, item: int) -> bool:
        return 0 <= item < self.capacity

    def add(self, item: int) -> int:
        """Insert ``item`` if it is in range; return the new cardinality."""
        if self._in_range(item):
            self._items.add(item)
        return len(self._items)

    def discard(self, item: int) -> int:
        """Remove ``item`` if present; return the new cardinality."""
        if self._in_range(item):
            self._items.discard(item)
        return len(self._items)

    def copy(self) -> "BoundedSet":
        return BoundedSet(self.capacity, self._items)

    def union(self, other: "BoundedSet") -> "BoundedSet":
        return BoundedSet(
            max(self.capacity, other.capacity), self._items | other._items
        )

    def intersection(self, other: "BoundedSet") -> "BoundedSet":
        return BoundedSet(
            min(self.capacity, other.capacity), self._items & other._items
        )

    def difference(self, other: "BoundedSet") -> "BoundedSet":
        return BoundedSet(self.capacity, self._items - other._items)

    def issuperset(self, other: "BoundedSet") -> bool:
        """True when every item of ``other`` is in this set."""
        return self._items >= other._items

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._items))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoundedSet):
            return NotImplemented
        return self._items == other._items

    def __str__(self) -> str:
        return " ".join(str(item) for item in self)

    def __repr__(self) -> str:
        return f"BoundedSet({self.capacity}, [{', '.join(map(str, self))}])"