import pytest

from gridpath.core.cell_type import CellType
from gridpath.core.grid import ClassifyingGrid, GridAdapter, TileGrid
from gridpath.core.position import Position
from gridpath.errors import GridCapabilityError
from gridpath.maps.tile_grid import Tile, TileMap

from conftest import SetGrid


def test_adapter_uses_classify_directly():
    grid = SetGrid(2, 1, (0, 0), (1, 0), {(1, 0)})
    adapter = GridAdapter(grid)
    assert isinstance(grid, ClassifyingGrid)
    assert adapter.classify(0, 0) is CellType.EMPTY
    assert adapter.classify(1, 0) is CellType.OBSTACLE
    assert adapter.classify(5, 5) is CellType.UNKNOWN
    assert adapter.is_traversable(0, 0)
    assert not adapter.is_traversable(1, 0)


def test_adapter_reads_tile_classification():
    tiles = [[Tile(CellType.EMPTY), Tile(CellType.OBSTACLE, "#")]]
    grid = TileMap(tiles, Position(0, 0), Position(0, 0))
    adapter = GridAdapter(grid)
    assert isinstance(grid, TileGrid)
    assert adapter.classify(0, 0) is CellType.EMPTY
    assert adapter.classify(1, 0) is CellType.OBSTACLE
    assert adapter.classify(-1, 0) is CellType.UNKNOWN


def test_adapter_accepts_tuple_endpoints():
    class TupleGrid:
        def classify(self, x, y):
            return CellType.EMPTY

        def start(self):
            return (1, 2)

        def end(self):
            return [3, 4]

    adapter = GridAdapter(TupleGrid())
    assert adapter.start() == Position(1, 2)
    assert adapter.end() == Position(3, 4)


def test_adapter_rejects_grid_without_cells():
    class NoCells:
        def start(self):
            return Position(0, 0)

        def end(self):
            return Position(0, 0)

    with pytest.raises(GridCapabilityError):
        GridAdapter(NoCells())


def test_adapter_rejects_grid_without_endpoints():
    class NoEnd:
        def classify(self, x, y):
            return CellType.EMPTY

        def start(self):
            return Position(0, 0)

    with pytest.raises(GridCapabilityError, match="end"):
        GridAdapter(NoEnd())
    # also a TypeError for callers that do not know the gridpath hierarchy
    with pytest.raises(TypeError):
        GridAdapter(object())
