"""Neighbor expansion policy for 4- and 8-directional movement."""

from __future__ import annotations

from enum import Enum
from typing import Iterator, Tuple

from ..core.grid import GridAdapter
from ..core.position import Position
from .heuristics import Heuristic, chebyshev, manhattan


Step = Tuple[int, int]

# Every move costs the same, diagonals included.
STEP_COST = 1

ORTHOGONAL_STEPS: Tuple[Step, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
DIAGONAL_STEPS: Tuple[Step, ...] = ((-1, -1), (1, -1), (-1, 1), (1, 1))


class MovementMode(Enum):
    """Which moves the solver may take from a cell."""

    ORTHOGONAL = "orthogonal"
    DIAGONAL = "diagonal"

    @property
    def steps(self) -> Tuple[Step, ...]:
        if self is MovementMode.DIAGONAL:
            return ORTHOGONAL_STEPS + DIAGONAL_STEPS
        return ORTHOGONAL_STEPS

    @property
    def heuristic(self) -> Heuristic:
        """Tightest admissible distance estimate for this mode."""
        if self is MovementMode.DIAGONAL:
            return chebyshev
        return manhattan

    @classmethod
    def from_flag(cls, allow_diagonal: bool) -> MovementMode:
        return cls.DIAGONAL if allow_diagonal else cls.ORTHOGONAL


def is_unit_step(a: Position, b: Position, mode: MovementMode) -> bool:
    """Return ``True`` if ``b`` is one legal move away from ``a``."""

    return (b.x - a.x, b.y - a.y) in mode.steps


def neighbors(
    position: Position, grid: GridAdapter, mode: MovementMode
) -> Iterator[Position]:
    """Yield the traversable cells one move away from ``position``.

    Diagonal moves are not restricted by the two orthogonal cells they pass
    between, so a diagonal step may cut across an obstacle corner.
    """

    for dx, dy in mode.steps:
        candidate = position.offset(dx, dy)
        if grid.is_traversable(candidate.x, candidate.y):
            yield candidate


__all__ = [
    "STEP_COST",
    "ORTHOGONAL_STEPS",
    "DIAGONAL_STEPS",
    "MovementMode",
    "is_unit_step",
    "neighbors",
]
