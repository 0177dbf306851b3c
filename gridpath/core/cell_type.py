"""Cell classification reported by grids."""

from __future__ import annotations

from enum import Enum


class CellType(Enum):
    """What occupies a grid cell."""

    # Out of bounds or unmapped; handled exactly like an obstacle.
    UNKNOWN = "unknown"
    EMPTY = "empty"
    OBSTACLE = "obstacle"

    @property
    def is_traversable(self) -> bool:
        return self is CellType.EMPTY


__all__ = ["CellType"]
