"""Search node record."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.position import Position


@dataclass
class Node:
    """One discovered cell together with its path costs.

    ``g`` is the cheapest known cost from the start and ``f`` is ``g`` plus the
    heuristic estimate to the goal. ``predecessor`` is ``None`` only for the
    start node. Nodes are updated in place while they sit in the frontier and
    are left untouched once finalized into the closed set.
    """

    position: Position
    predecessor: Optional[Position] = None
    g: int = 0
    f: int = 0

    @property
    def h(self) -> int:
        return self.f - self.g

    @property
    def is_start(self) -> bool:
        return self.predecessor is None


__all__ = ["Node"]
