"""Distance estimates used to guide the search."""

from __future__ import annotations

from typing import Callable

from ..core.position import Position


Heuristic = Callable[[Position, Position], int]


def manhattan(a: Position, b: Position) -> int:
    """Return the Manhattan distance between ``a`` and ``b``.

    Exact lower bound for 4-directional unit-cost movement.
    """

    return abs(a.x - b.x) + abs(a.y - b.y)


def chebyshev(a: Position, b: Position) -> int:
    """Return the Chebyshev distance between ``a`` and ``b``.

    Exact lower bound when diagonal steps cost the same as orthogonal ones.
    Manhattan distance can be up to twice the true remaining cost in that
    case.
    """

    return max(abs(a.x - b.x), abs(a.y - b.y))


__all__ = ["Heuristic", "manhattan", "chebyshev"]
