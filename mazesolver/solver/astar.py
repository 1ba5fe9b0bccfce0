"""A* search over a maze grid."""

from __future__ import annotations

from dataclasses import dataclass, field

from mazesolver.solver.directions import Direction, format_directions, to_directions
from mazesolver.solver.errors import (
    OutOfBoundsError,
    Unreachable,
    WallStartOrGoalError,
)
from mazesolver.solver.grid import Coordinate, Grid
from mazesolver.solver.pairing_heap import PairingHeap


@dataclass
class SearchLedger:
    g_score: dict[Coordinate, int] = field(default_factory=dict)
    f_score: dict[Coordinate, int] = field(default_factory=dict)
    came_from: dict[Coordinate, Coordinate] = field(default_factory=dict)
    closed: set[Coordinate] = field(default_factory=set)

    def record(
        self,
        node: Coordinate,
        *,
        g: int,
        goal: Coordinate,
        parent: Coordinate | None = None,
    ) -> None:
        self.g_score[node] = g
        self.f_score[node] = g + manhattan(node, goal)
        if parent is not None:
            self.came_from[node] = parent


@dataclass(frozen=True)
class Solution:
    start: Coordinate
    goal: Coordinate
    path: list[Coordinate]
    directions: list[Direction]
    expanded: int = 0

    @property
    def length(self) -> int:
        return len(self.directions)

    @property
    def direction_string(self) -> str:
        return format_directions(self.directions)


def manhattan(node: tuple[int, int], goal: tuple[int, int]) -> int:
    return abs(goal[0] - node[0]) + abs(goal[1] - node[1])


def validate_endpoints(grid: Grid, start: Coordinate, goal: Coordinate) -> None:
    for label, coord in (("start", start), ("goal", goal)):
        if not grid.in_bounds(coord):
            size = f"{grid.height}x{grid.width}"
            raise OutOfBoundsError(
                f"{label} {tuple(coord)} is outside the {size} grid."
            )
        if not grid.is_open(coord):
            raise WallStartOrGoalError(f"{label} {tuple(coord)} is a wall.")


def find_path(
    grid: Grid,
    start: tuple[int, int],
    goal: tuple[int, int],
    *,
    prune_with_hint: bool = False,
) -> list[Coordinate]:
    """Return the shortest path from `start` to `goal`, both inclusive.

    Raises `Unreachable` when the goal lies in a different open region.
    """
    path, _ = _search(grid, Coordinate(*start), Coordinate(*goal), prune_with_hint)
    return path


def solve(
    grid: Grid,
    start: tuple[int, int],
    goal: tuple[int, int],
    *,
    prune_with_hint: bool = False,
) -> Solution:
    start, goal = Coordinate(*start), Coordinate(*goal)
    path, ledger = _search(grid, start, goal, prune_with_hint)
    return Solution(
        start=start,
        goal=goal,
        path=path,
        directions=to_directions(path),
        expanded=len(ledger.closed),
    )


def reconstruct_path(
    came_from: dict[Coordinate, Coordinate], current: Coordinate
) -> list[Coordinate]:
    path = [current]
    while current in came_from:
        current = came_from[current]
        path.append(current)
    path.reverse()
    return path


def _search(
    grid: Grid, start: Coordinate, goal: Coordinate, prune_with_hint: bool
) -> tuple[list[Coordinate], SearchLedger]:
    validate_endpoints(grid, start, goal)

    ledger = SearchLedger()
    ledger.record(start, g=0, goal=goal)
    open_queue = PairingHeap(prune_with_hint=prune_with_hint)
    open_queue.insert(start, ledger.f_score[start])

    while not open_queue.is_empty():
        current = open_queue.pop_min()
        if current == goal:
            return reconstruct_path(ledger.came_from, current), ledger

        ledger.closed.add(current)
        # Every move costs one step.
        tentative = ledger.g_score[current] + 1

        for neighbor in grid.neighbors(current):
            if neighbor in ledger.closed:
                continue
            if not open_queue.has(neighbor):
                ledger.record(neighbor, g=tentative, goal=goal, parent=current)
                open_queue.insert(neighbor, ledger.f_score[neighbor])
                continue
            if tentative >= ledger.g_score[neighbor]:
                continue
            previous = ledger.f_score[neighbor]
            ledger.record(neighbor, g=tentative, goal=goal, parent=current)
            open_queue.decrease_key(
                neighbor, ledger.f_score[neighbor], previous=previous
            )

    raise Unreachable(f"No path from {tuple(start)} to {tuple(goal)}.")
