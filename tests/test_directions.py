import pytest

from mazesolver.solver.directions import (
    Direction,
    follow_directions,
    format_directions,
    parse_directions,
    to_directions,
)
from mazesolver.solver.errors import InvalidPathError
from mazesolver.solver.grid import Coordinate


def test_to_directions_maps_each_step() -> None:
    path = [(1, 1), (1, 2), (2, 2), (2, 1), (1, 1)]

    directions = to_directions(path)

    assert directions == [Direction.E, Direction.S, Direction.W, Direction.N]
    assert format_directions(directions) == "ESWN"


def test_single_coordinate_path_has_no_directions() -> None:
    assert to_directions([(3, 3)]) == []
    assert to_directions([]) == []


def test_non_unit_step_is_rejected() -> None:
    with pytest.raises(InvalidPathError):
        to_directions([(0, 0), (1, 1)])
    with pytest.raises(InvalidPathError):
        to_directions([(0, 0), (0, 2)])
    with pytest.raises(InvalidPathError):
        to_directions([(0, 0), (0, 0)])


def test_parse_directions() -> None:
    assert parse_directions("NSEW") == [
        Direction.N,
        Direction.S,
        Direction.E,
        Direction.W,
    ]
    with pytest.raises(InvalidPathError):
        parse_directions("NQ")


def test_follow_directions_replays_path() -> None:
    path = follow_directions((2, 2), parse_directions("NNWS"))

    assert path == [
        Coordinate(2, 2),
        Coordinate(1, 2),
        Coordinate(0, 2),
        Coordinate(0, 1),
        Coordinate(1, 1),
    ]
    assert to_directions(path) == parse_directions("NNWS")
