"""Grid capability contract consumed by the solver.

Two grid shapes are accepted:

* a *classifying* grid answering ``classify(x, y)`` directly, and
* a *tile* grid whose ``tile(x, y)`` returns an object exposing
  ``cell_type()``.

Both must also report ``start()`` and ``end()``. :class:`GridAdapter` folds the
two shapes into a single ``classify`` call so the search code only ever sees
one interface.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, runtime_checkable

from .cell_type import CellType
from .position import Position
from ..errors import GridCapabilityError


@runtime_checkable
class ClassifyingGrid(Protocol):
    """Grid that classifies cells itself."""

    def classify(self, x: int, y: int) -> CellType: ...
    def start(self) -> Position: ...
    def end(self) -> Position: ...


@runtime_checkable
class Tile(Protocol):
    """Cell object that knows its own classification."""

    def cell_type(self) -> CellType: ...


@runtime_checkable
class TileGrid(Protocol):
    """Grid whose cells are :class:`Tile` objects."""

    def tile(self, x: int, y: int) -> Tile: ...
    def start(self) -> Position: ...
    def end(self) -> Position: ...


class GridAdapter:
    """Uniform read-only view over either supported grid shape."""

    def __init__(self, grid: Any) -> None:
        for name in ("start", "end"):
            if not callable(getattr(grid, name, None)):
                raise GridCapabilityError(
                    f"{type(grid).__name__} does not provide {name}()"
                )
        self.grid = grid
        self._classify = self._resolve_classifier(grid)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _resolve_classifier(grid: Any) -> Callable[[int, int], CellType]:
        classify = getattr(grid, "classify", None)
        if callable(classify):
            return classify

        tile = getattr(grid, "tile", None)
        if callable(tile):
            def classify_tile(x: int, y: int) -> CellType:
                return tile(x, y).cell_type()

            return classify_tile

        raise GridCapabilityError(
            f"{type(grid).__name__} provides neither classify(x, y) nor tile(x, y)"
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def classify(self, x: int, y: int) -> CellType:
        return self._classify(x, y)

    def is_traversable(self, x: int, y: int) -> bool:
        return self._classify(x, y).is_traversable

    def start(self) -> Position:
        return _as_position(self.grid.start())

    def end(self) -> Position:
        return _as_position(self.grid.end())


def _as_position(value: Any) -> Position:
    """Accept a :class:`Position` or any ``(x, y)`` pair."""

    if isinstance(value, Position):
        return value
    x, y = value
    return Position(int(x), int(y))


__all__ = ["ClassifyingGrid", "Tile", "TileGrid", "GridAdapter"]
