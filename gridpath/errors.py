"""Exception types raised by gridpath."""

from __future__ import annotations


class GridpathError(Exception):
    """Base class for all gridpath errors."""


class MapParseError(GridpathError, ValueError):
    """A textual map layout could not be parsed."""

    def __init__(self, message: str, row: int | None = None, column: int | None = None) -> None:
        if row is not None and column is not None:
            message = f"{message} (row {row}, column {column})"
        super().__init__(message)
        self.row = row
        self.column = column


class GridCapabilityError(GridpathError, TypeError):
    """Object handed to the solver cannot classify cells or report endpoints."""


class EmptyFrontierError(GridpathError, IndexError):
    """``pop_min`` was called on an empty frontier."""


class PathReconstructionError(GridpathError, RuntimeError):
    """Predecessor links in the closed set do not lead back to the start."""


__all__ = [
    "GridpathError",
    "MapParseError",
    "GridCapabilityError",
    "EmptyFrontierError",
    "PathReconstructionError",
]
