"""Plain-text and ANSI rendering of grids and found paths."""

from __future__ import annotations

import sys
from typing import Any, Iterable, Optional, TextIO

from ..core.grid import GridAdapter
from ..core.position import Position
from ..errors import GridCapabilityError


# Basic ANSI colour codes used when colour output is enabled
_COLOURS = {
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "white": "\x1b[37m",
    "reset": "\x1b[0m",
}

_GLYPH_COLOURS = {
    "O": "green",
    "X": "red",
    "#": "blue",
}


def render_grid(
    grid: Any,
    path: Iterable[Position] = (),
    colour: bool = False,
    path_glyph: str = "W",
    width: Optional[int] = None,
    height: Optional[int] = None,
) -> str:
    """Return ``grid`` drawn as text, one line per row.

    ``O`` marks the start, ``X`` the end and ``path_glyph`` every other cell on
    ``path``. Cells that are not traversable are drawn as ``#``. The size is
    taken from ``width``/``height`` or, when those are not given, from the
    grid's own attributes of the same name.
    """

    view = GridAdapter(grid)
    width = _dimension(grid, "width", width)
    height = _dimension(grid, "height", height)
    on_path = set(path)
    start, end = view.start(), view.end()
    path_colour = "yellow"

    lines: list[str] = []
    for y in range(height):
        row: list[str] = []
        for x in range(width):
            pos = Position(x, y)
            if not view.is_traversable(x, y):
                glyph = "#"
            elif pos == start:
                glyph = "O"
            elif pos == end:
                glyph = "X"
            elif pos in on_path:
                glyph = path_glyph
            else:
                glyph = " "
            if colour:
                name = path_colour if glyph == path_glyph else _GLYPH_COLOURS.get(glyph, "white")
                row.append(f"{_COLOURS[name]}{glyph}")
            else:
                row.append(glyph)
        if colour:
            row.append(_COLOURS["reset"])
        lines.append("".join(row))
    return "\n".join(lines) + "\n" if lines else ""


def _dimension(grid: Any, name: str, value: Optional[int]) -> int:
    if value is None:
        value = getattr(grid, name, None)
    if value is None:
        raise GridCapabilityError(
            f"cannot render {type(grid).__name__}: pass {name}= or give the grid a {name}"
        )
    return int(value)


class TextView:
    """Writes rendered grids to a text stream."""

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        colour: bool = False,
        path_glyph: str = "W",
        width: Optional[int] = None,
        height: Optional[int] = None,
    ) -> None:
        self.stream = stream
        self.colour = colour
        self.path_glyph = path_glyph
        self.width = width
        self.height = height

    def render(self, grid: Any, path: Iterable[Position] = ()) -> None:
        """Draw ``grid`` and ``path`` to the configured stream (``stdout`` by default)."""

        out = self.stream if self.stream is not None else sys.stdout
        out.write(
            render_grid(
                grid,
                path,
                colour=self.colour,
                path_glyph=self.path_glyph,
                width=self.width,
                height=self.height,
            )
        )
        out.flush()


__all__ = ["TextView", "render_grid"]
