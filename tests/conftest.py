# tests/conftest.py
"""Shared grid fixtures and a breadth-first oracle for path checks."""

from collections import deque
from typing import Dict, Iterable, List, Optional, Set, Tuple
import random

import pytest

from gridpath.core.cell_type import CellType
from gridpath.core.position import Position
from gridpath.search.neighbors import MovementMode


class SetGrid:
    """Rectangular grid described by its obstacle set; accepts any origin."""

    def __init__(
        self,
        width: int,
        height: int,
        start: Tuple[int, int],
        end: Tuple[int, int],
        obstacles: Iterable[Tuple[int, int]] = (),
        origin: Tuple[int, int] = (0, 0),
    ) -> None:
        self.width = width
        self.height = height
        self.origin = origin
        self._start = Position(*start)
        self._end = Position(*end)
        self.obstacles: Set[Tuple[int, int]] = set(obstacles)
        self.calls = 0

    def classify(self, x: int, y: int) -> CellType:
        self.calls += 1
        ox, oy = self.origin
        if not (ox <= x < ox + self.width and oy <= y < oy + self.height):
            return CellType.UNKNOWN
        if (x, y) in self.obstacles:
            return CellType.OBSTACLE
        return CellType.EMPTY

    def start(self) -> Position:
        return self._start

    def end(self) -> Position:
        return self._end


def bfs_distance(grid, mode: MovementMode) -> Optional[int]:
    """Return the number of steps on a shortest path, or ``None``."""

    start, end = grid.start(), grid.end()
    if grid.classify(start.x, start.y) is not CellType.EMPTY:
        return None
    if grid.classify(end.x, end.y) is not CellType.EMPTY:
        return None
    dist: Dict[Position, int] = {start: 0}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        if current == end:
            return dist[current]
        for dx, dy in mode.steps:
            nxt = current.offset(dx, dy)
            if nxt in dist or grid.classify(nxt.x, nxt.y) is not CellType.EMPTY:
                continue
            dist[nxt] = dist[current] + 1
            queue.append(nxt)
    return None


def random_grid(seed: int, width: int = 7, height: int = 6, density: float = 0.3) -> SetGrid:
    rng = random.Random(seed)
    cells = [(x, y) for x in range(width) for y in range(height)]
    start, end = rng.sample(cells, 2)
    obstacles = {
        c for c in cells if c not in (start, end) and rng.random() < density
    }
    return SetGrid(width, height, start, end, obstacles)


def assert_valid_path(grid, path: List[Position], mode: MovementMode) -> None:
    assert path[0] == grid.start()
    assert path[-1] == grid.end()
    assert len(set(path)) == len(path)
    for pos in path:
        assert grid.classify(pos.x, pos.y) is CellType.EMPTY
    for a, b in zip(path, path[1:]):
        assert (b.x - a.x, b.y - a.y) in mode.steps


@pytest.fixture
def open_grid() -> SetGrid:
    return SetGrid(5, 5, (0, 0), (4, 4))


@pytest.fixture
def walled_grid() -> SetGrid:
    # vertical wall at x=2 with a single gap at the bottom
    return SetGrid(5, 5, (0, 0), (4, 0), {(2, 0), (2, 1), (2, 2), (2, 3)})
