"""Grid whose cells are tile objects carrying their own classification."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from ..core.cell_type import CellType
from ..core.position import Position
from .text_grid import TextGrid


@dataclass(frozen=True)
class Tile:
    """Single map tile."""

    kind: CellType
    glyph: str = " "

    def cell_type(self) -> CellType:
        return self.kind


UNKNOWN_TILE = Tile(CellType.UNKNOWN, "?")


class TileMap:
    """Row-major map of :class:`Tile` objects with fixed endpoints."""

    def __init__(self, tiles: Sequence[Sequence[Tile]], start: Position, end: Position) -> None:
        self.tiles: List[List[Tile]] = [list(row) for row in tiles]
        self._start = start
        self._end = end

    @classmethod
    def from_text_grid(cls, grid: TextGrid) -> TileMap:
        tiles = [
            [Tile(cell, "#" if cell is CellType.OBSTACLE else " ") for cell in row]
            for row in grid.rows
        ]
        return cls(tiles, grid.start(), grid.end())

    @property
    def width(self) -> int:
        return max((len(row) for row in self.tiles), default=0)

    @property
    def height(self) -> int:
        return len(self.tiles)

    def tile(self, x: int, y: int) -> Tile:
        if 0 <= y < len(self.tiles) and 0 <= x < len(self.tiles[y]):
            return self.tiles[y][x]
        return UNKNOWN_TILE

    def start(self) -> Position:
        return self._start

    def end(self) -> Position:
        return self._end


__all__ = ["Tile", "TileMap", "UNKNOWN_TILE"]
