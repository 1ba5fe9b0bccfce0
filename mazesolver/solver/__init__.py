"""Grid maze pathfinding core."""

from mazesolver.solver.astar import (
    SearchLedger,
    Solution,
    find_path,
    manhattan,
    solve,
)
from mazesolver.solver.directions import (
    Direction,
    follow_directions,
    format_directions,
    parse_directions,
    to_directions,
)
from mazesolver.solver.errors import (
    InvalidPathError,
    InvalidShapeError,
    MazeError,
    OutOfBoundsError,
    Unreachable,
    WallStartOrGoalError,
)
from mazesolver.solver.grid import CellState, Coordinate, Grid
from mazesolver.solver.pairing_heap import PairingHeap

__all__ = [
    "CellState",
    "Coordinate",
    "Direction",
    "Grid",
    "InvalidPathError",
    "InvalidShapeError",
    "MazeError",
    "OutOfBoundsError",
    "PairingHeap",
    "SearchLedger",
    "Solution",
    "Unreachable",
    "WallStartOrGoalError",
    "find_path",
    "follow_directions",
    "format_directions",
    "manhattan",
    "parse_directions",
    "solve",
    "to_directions",
]
