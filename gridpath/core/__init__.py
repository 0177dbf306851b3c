"""core package."""

from .cell_type import CellType
from .position import Position

__all__ = ["CellType", "Position"]
