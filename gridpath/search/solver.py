"""A* solver control loop."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional
import logging

from ..core.grid import GridAdapter
from ..core.position import Position
from .closed_set import ClosedSet
from .frontier import Frontier
from .heuristics import Heuristic
from .neighbors import STEP_COST, MovementMode, neighbors
from .node import Node

logger = logging.getLogger(__name__)


class SolverState(Enum):
    """Phase of the most recent :meth:`AStarSolver.solve` call."""

    VALIDATING = "validating"
    INITIALIZED = "initialized"
    EXPANDING = "expanding"
    GOAL_FOUND = "goal_found"
    EXHAUSTED = "exhausted"


@dataclass
class SolveStats:
    """Counters collected during one solve."""

    expanded: int = 0
    relaxed: int = 0
    frontier_peak: int = 0
    path_length: int = 0


class AStarSolver:
    """Shortest-path search between a grid's start and end cells.

    The movement mode is fixed when the solver is built. Every call to
    :meth:`solve` starts from an empty frontier and closed set, so one instance
    can be reused any number of times against the same grid.
    """

    def __init__(
        self,
        grid: Any,
        allow_diagonal: bool = False,
        heuristic: Optional[Heuristic] = None,
    ) -> None:
        self.grid = GridAdapter(grid)
        self.mode = MovementMode.from_flag(allow_diagonal)
        self.heuristic = heuristic or self.mode.heuristic
        self.state = SolverState.VALIDATING
        self.stats = SolveStats()
        self._frontier = Frontier()
        self._closed = ClosedSet()

    @classmethod
    def from_mode(
        cls, grid: Any, mode: MovementMode, heuristic: Optional[Heuristic] = None
    ) -> AStarSolver:
        return cls(grid, allow_diagonal=mode is MovementMode.DIAGONAL, heuristic=heuristic)

    @property
    def allow_diagonal(self) -> bool:
        return self.mode is MovementMode.DIAGONAL

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def endpoints_valid(self) -> bool:
        """Return ``True`` if both the start and end cells are traversable."""

        start = self.grid.start()
        end = self.grid.end()
        return self.grid.is_traversable(start.x, start.y) and self.grid.is_traversable(
            end.x, end.y
        )

    def estimate(self, position: Position) -> int:
        return self.heuristic(position, self.grid.end())

    def solve(self) -> List[Position]:
        """Return the positions from start to end inclusive.

        An empty list means there is no path, either because an endpoint is
        not traversable or because the end cannot be reached.
        """

        self._reset()
        if not self.endpoints_valid():
            logger.info(
                "Start %s or end %s is not traversable; no path",
                self.grid.start(),
                self.grid.end(),
            )
            self.state = SolverState.EXHAUSTED
            return []

        start = self.grid.start()
        goal = self.grid.end()
        self._frontier.insert_or_relax(Node(start, None, 0, self.estimate(start)))
        self.state = SolverState.INITIALIZED
        self.stats.frontier_peak = 1

        self.state = SolverState.EXPANDING
        while not self._frontier.is_empty():
            current = self._frontier.pop_min()
            self._closed.finalize(current)

            if current.position == goal:
                self.state = SolverState.GOAL_FOUND
                path = self._closed.walk_back(goal)
                self.stats.path_length = len(path)
                logger.debug(
                    "Path of %d cells found after %d expansions (%d relaxations)",
                    len(path),
                    self.stats.expanded,
                    self.stats.relaxed,
                )
                return path

            self._expand(current)

        self.state = SolverState.EXHAUSTED
        logger.debug(
            "Frontier exhausted after %d expansions; %s unreachable from %s",
            self.stats.expanded,
            goal,
            start,
        )
        return []

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _reset(self) -> None:
        self._frontier.clear()
        self._closed.clear()
        self.stats = SolveStats()
        self.state = SolverState.VALIDATING

    def _expand(self, node: Node) -> None:
        self.stats.expanded += 1
        logger.debug("Expanding %s (g=%d, f=%d)", node.position, node.g, node.f)
        tentative_g = node.g + STEP_COST
        for position in neighbors(node.position, self.grid, self.mode):
            if position in self._closed:
                continue
            already_queued = position in self._frontier
            candidate = Node(
                position, node.position, tentative_g, tentative_g + self.estimate(position)
            )
            if self._frontier.insert_or_relax(candidate) and already_queued:
                self.stats.relaxed += 1
                logger.debug(
                    "Relaxed %s to g=%d via %s", position, tentative_g, node.position
                )
        self.stats.frontier_peak = max(self.stats.frontier_peak, len(self._frontier))


def find_path(grid: Any, allow_diagonal: bool = False) -> List[Position]:
    """Solve ``grid`` once and return the path (empty when there is none)."""

    return AStarSolver(grid, allow_diagonal=allow_diagonal).solve()


__all__ = ["AStarSolver", "SolveStats", "SolverState", "find_path"]
