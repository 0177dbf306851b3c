"""maps package."""

from .text_grid import TextGrid
from .tile_grid import Tile, TileMap

__all__ = ["TextGrid", "Tile", "TileMap"]
