import pytest

from gridpath.core.position import Position
from gridpath.errors import PathReconstructionError
from gridpath.search.closed_set import ClosedSet
from gridpath.search.node import Node


def test_walk_back_returns_start_to_goal():
    closed = ClosedSet()
    closed.finalize(Node(Position(0, 0), None, 0, 2))
    closed.finalize(Node(Position(1, 0), Position(0, 0), 1, 2))
    closed.finalize(Node(Position(1, 1), Position(1, 0), 2, 2))
    # a closed node that is not on the path
    closed.finalize(Node(Position(0, 1), Position(0, 0), 1, 2))

    assert closed.walk_back(Position(1, 1)) == [
        Position(0, 0),
        Position(1, 0),
        Position(1, 1),
    ]


def test_walk_back_from_start_is_single_cell():
    closed = ClosedSet()
    closed.finalize(Node(Position(3, 3), None, 0, 0))
    assert closed.walk_back(Position(3, 3)) == [Position(3, 3)]


def test_contains_get_and_overwrite():
    closed = ClosedSet()
    pos = Position(2, 2)
    assert not closed.contains(pos)
    closed.finalize(Node(pos, None, 5, 5))
    closed.finalize(Node(pos, None, 3, 3))
    assert pos in closed
    assert closed.get(pos).g == 3
    assert len(closed) == 1
    with pytest.raises(KeyError):
        closed.get(Position(0, 0))


def test_broken_chain_is_reported():
    closed = ClosedSet()
    closed.finalize(Node(Position(1, 0), Position(0, 0), 1, 1))
    with pytest.raises(PathReconstructionError):
        closed.walk_back(Position(1, 0))
    with pytest.raises(PathReconstructionError):
        closed.walk_back(Position(7, 7))


def test_cyclic_chain_is_reported():
    closed = ClosedSet()
    closed.finalize(Node(Position(0, 0), Position(1, 0), 1, 1))
    closed.finalize(Node(Position(1, 0), Position(0, 0), 1, 1))
    with pytest.raises(PathReconstructionError, match="does not terminate"):
        closed.walk_back(Position(0, 0))
