"""Grid parsed from a textual layout.

Layout characters::

    O   start (traversable)
    X   end (traversable)
    ' ' empty floor
    #   obstacle

Rows are separated by newlines; row 0 is the top of the map and ``x`` grows to
the right. Rows may differ in length, cells past the end of a short row are
unmapped.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Tuple
import logging

from ..core.cell_type import CellType
from ..core.position import Position
from ..errors import MapParseError

logger = logging.getLogger(__name__)

START_GLYPH = "O"
END_GLYPH = "X"
EMPTY_GLYPH = " "
OBSTACLE_GLYPH = "#"

_GLYPH_TYPES = {
    START_GLYPH: CellType.EMPTY,
    END_GLYPH: CellType.EMPTY,
    EMPTY_GLYPH: CellType.EMPTY,
    OBSTACLE_GLYPH: CellType.OBSTACLE,
}


class TextGrid:
    """Grid of :class:`CellType` values built from a layout string."""

    def __init__(self, layout: str) -> None:
        self.rows: List[List[CellType]] = []
        self._start, self._end = self._parse(layout)
        self.width = max(len(row) for row in self.rows)
        self.height = len(self.rows)
        logger.debug("Parsed %dx%d map", self.width, self.height)

    @classmethod
    def from_file(cls, path: str | Path) -> TextGrid:
        return cls(Path(path).read_text(encoding="utf-8"))

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------
    def _parse(self, layout: str) -> Tuple[Position, Position]:
        """Fill ``self.rows`` and return the start and end markers."""

        lines = layout.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        if not lines:
            raise MapParseError("map layout is empty")

        start: Optional[Position] = None
        end: Optional[Position] = None
        for y, line in enumerate(lines):
            row: List[CellType] = []
            for x, glyph in enumerate(line.rstrip("\r")):
                cell = _GLYPH_TYPES.get(glyph)
                if cell is None:
                    raise MapParseError(f"invalid map character {glyph!r}", y, x)
                if glyph == START_GLYPH:
                    start = self._place_marker(start, "start", y, x)
                elif glyph == END_GLYPH:
                    end = self._place_marker(end, "end", y, x)
                row.append(cell)
            self.rows.append(row)

        if start is None:
            raise MapParseError(f"map has no start marker {START_GLYPH!r}")
        if end is None:
            raise MapParseError(f"map has no end marker {END_GLYPH!r}")
        return start, end

    @staticmethod
    def _place_marker(current: Optional[Position], name: str, y: int, x: int) -> Position:
        if current is not None:
            raise MapParseError(f"duplicate {name} marker", y, x)
        return Position(x, y)

    # ------------------------------------------------------------------
    # Grid capability
    # ------------------------------------------------------------------
    def classify(self, x: int, y: int) -> CellType:
        if y < 0 or y >= len(self.rows) or x < 0:
            return CellType.UNKNOWN
        row = self.rows[y]
        if x >= len(row):
            return CellType.UNKNOWN
        return row[x]

    def start(self) -> Position:
        return self._start

    def end(self) -> Position:
        return self._end


__all__ = [
    "TextGrid",
    "START_GLYPH",
    "END_GLYPH",
    "EMPTY_GLYPH",
    "OBSTACLE_GLYPH",
]
