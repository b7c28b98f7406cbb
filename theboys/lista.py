"""Ordered list of integers with position-based access."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator


class IntList:
    """A sequence of integers; position ``-1`` always means the end."""

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[int] = ()) -> None:
        self._items: deque[int] = deque(items)

    def insert(self, item: int, pos: int = -1) -> int:
        """Insert ``item`` at ``pos``; ``-1`` or beyond the end appends.

        Returns the new length.
        """
        if pos < -1:
            raise IndexError(f"invalid position: {pos}")
        if pos == -1 or pos >= len(self._items):
            self._items.append(item)
        elif pos == 0:
            self._items.appendleft(item)
        else:
            self._items.insert(pos, item)
        return len(self._items)

    def _check(self, pos: int) -> None:
        if not self._items:
            raise IndexError("list is empty")
        if pos < -1 or pos >= len(self._items):
            raise IndexError(f"invalid position: {pos}")

    def remove(self, pos: int = -1) -> int:
        """Remove and return the item at ``pos`` (``-1`` is the last)."""
        self._check(pos)
        if pos == -1 or pos == len(self._items) - 1:
            return self._items.pop()
        if pos == 0:
            return self._items.popleft()
        value = self._items[pos]
        del self._items[pos]
        return value

    def get(self, pos: int = -1) -> int:
        """Return the item at ``pos`` without removing it."""
        self._check(pos)
        return self._items[pos]

    def find(self, value: int) -> int:
        """Position of the first occurrence of ``value``, or ``-1``."""
        for index, item in enumerate(self._items):
            if item == value:
                return index
        return -1

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __str__(self) -> str:
        return " ".join(str(item) for item in self._items)

    def __repr__(self) -> str:
        return f"IntList({list(self._items)!r})"