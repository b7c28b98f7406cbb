"""Priority queue ordered by ascending priority, FIFO among equals."""

from __future__ import annotations

import heapq
import itertools
from typing import Any


class PriorityQueue:
    """Stable min-priority queue of ``(item, kind, prio)`` entries.

    Pushing the same object twice while it is still queued is an error.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, int, Any]] = []
        self._counter = itertools.count()
        self._queued: set[int] = set()

    def push(self, item: Any, kind: int, prio: int) -> int:
        """Queue ``item``; return the number of queued items."""
        if item is None:
            raise ValueError("cannot queue None")
        if id(item) in self._queued:
            raise ValueError("item is already queued")
        heapq.heappush(self._heap, (prio, next(self._counter), kind, item))
        self._queued.add(id(item))
        return len(self._heap)

    def pop(self) -> tuple[Any, int, int]:
        """Remove the first entry and return ``(item, kind, prio)``."""
        if not self._heap:
            raise IndexError("pop from an empty priority queue")
        prio, _, kind, item = heapq.heappop(self._heap)
        self._queued.discard(id(item))
        return item, kind, prio

    def __len__(self) -> int:
        return len(self._heap)

    def __str__(self) -> str:
        return " ".join(
            f"({kind} {prio})" for prio, _, kind, _ in sorted(
                self._heap, key=lambda entry: entry[:2]
            )
        )