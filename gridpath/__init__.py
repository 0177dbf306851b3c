"""A* shortest-path search over 2D grids."""

from .core.cell_type import CellType
from .core.position import Position
from .search.neighbors import MovementMode
from .search.solver import AStarSolver, find_path

__all__ = ["AStarSolver", "CellType", "MovementMode", "Position", "find_path"]
