"""Closed set of finalized nodes."""

from __future__ import annotations

from typing import Dict, List

from ..core.position import Position
from ..errors import PathReconstructionError
from .node import Node


class ClosedSet:
    """Mapping from position to its finalized :class:`Node`."""

    def __init__(self) -> None:
        self._nodes: Dict[Position, Node] = {}

    def contains(self, position: Position) -> bool:
        return position in self._nodes

    __contains__ = contains

    def finalize(self, node: Node) -> None:
        self._nodes[node.position] = node

    def get(self, position: Position) -> Node:
        """Return the node closed at ``position``; ``KeyError`` if absent."""
        return self._nodes[position]

    def clear(self) -> None:
        self._nodes.clear()

    def __len__(self) -> int:
        return len(self._nodes)

    def walk_back(self, goal: Position) -> List[Position]:
        """Return the start-to-``goal`` path by following predecessor links."""

        path: List[Position] = []
        node = self._lookup(goal)
        while True:
            path.append(node.position)
            if node.predecessor is None:
                break
            # a valid chain visits each closed position at most once
            if len(path) > len(self._nodes):
                raise PathReconstructionError(
                    f"predecessor chain from {goal} does not terminate"
                )
            node = self._lookup(node.predecessor)
        path.reverse()
        return path

    def _lookup(self, position: Position) -> Node:
        node = self._nodes.get(position)
        if node is None:
            raise PathReconstructionError(f"{position} is not in the closed set")
        return node


__all__ = ["ClosedSet"]
