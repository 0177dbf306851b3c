"""search package."""

from .closed_set import ClosedSet
from .frontier import Frontier
from .neighbors import MovementMode
from .node import Node
from .solver import AStarSolver, SolveStats, SolverState, find_path

__all__ = [
    "AStarSolver",
    "ClosedSet",
    "Frontier",
    "MovementMode",
    "Node",
    "SolveStats",
    "SolverState",
    "find_path",
]
