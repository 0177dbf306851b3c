"""Open set for A* with in-place cost relaxation."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from ..core.position import Position
from ..errors import EmptyFrontierError
from .node import Node


def _priority(node: Node) -> Tuple[int, int, Position]:
    """Ordering key: lowest ``f``, then lowest ``g``, then smallest position."""

    return (node.f, node.g, node.position)


class Frontier:
    """Binary min-heap of :class:`Node` keyed by :func:`_priority`.

    A side table maps each position to its slot in the heap so an existing
    candidate can be found in O(1) and re-ordered in O(log n) after its cost is
    lowered. At most one node per position is ever stored.
    """

    def __init__(self) -> None:
        self._heap: List[Node] = []
        self._index: Dict[Position, int] = {}

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def insert_or_relax(self, candidate: Node) -> bool:
        """Insert ``candidate`` or lower the cost of the node already queued.

        Returns ``True`` if the frontier changed. A candidate that is not
        strictly cheaper than the queued node for its position is discarded.
        """

        slot = self._index.get(candidate.position)
        if slot is None:
            self._heap.append(candidate)
            self._index[candidate.position] = len(self._heap) - 1
            self._sift_up(len(self._heap) - 1)
            return True

        existing = self._heap[slot]
        if candidate.g >= existing.g:
            return False
        existing.g = candidate.g
        existing.f = candidate.f
        existing.predecessor = candidate.predecessor
        self._sift_up(slot)
        return True

    def pop_min(self) -> Node:
        if not self._heap:
            raise EmptyFrontierError("pop from an empty frontier")
        top = self._heap[0]
        last = self._heap.pop()
        del self._index[top.position]
        if self._heap:
            self._heap[0] = last
            self._index[last.position] = 0
            self._sift_down(0)
        return top

    def is_empty(self) -> bool:
        return not self._heap

    def get(self, position: Position) -> Optional[Node]:
        slot = self._index.get(position)
        return None if slot is None else self._heap[slot]

    def clear(self) -> None:
        self._heap.clear()
        self._index.clear()

    def __contains__(self, position: object) -> bool:
        return position in self._index

    def __len__(self) -> int:
        return len(self._heap)

    # ------------------------------------------------------------------
    # Heap maintenance
    # ------------------------------------------------------------------
    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._index[heap[i].position] = i
        self._index[heap[j].position] = j

    def _sift_up(self, slot: int) -> None:
        heap = self._heap
        while slot > 0:
            parent = (slot - 1) // 2
            if _priority(heap[slot]) >= _priority(heap[parent]):
                break
            self._swap(slot, parent)
            slot = parent

    def _sift_down(self, slot: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            smallest = slot
            for child in (2 * slot + 1, 2 * slot + 2):
                if child < size and _priority(heap[child]) < _priority(heap[smallest]):
                    smallest = child
            if smallest == slot:
                return
            self._swap(slot, smallest)
            slot = smallest


__all__ = ["Frontier"]
