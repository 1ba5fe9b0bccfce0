"""Compass-direction encoding for grid paths."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Sequence

from mazesolver.solver.errors import InvalidPathError
from mazesolver.solver.grid import Coordinate


class Direction(str, Enum):
    N = "N"
    S = "S"
    E = "E"
    W = "W"

    @property
    def offset(self) -> tuple[int, int]:
        return OFFSETS[self]


OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.N: (-1, 0),
    Direction.S: (1, 0),
    Direction.E: (0, 1),
    Direction.W: (0, -1),
}
_BY_OFFSET = {offset: direction for direction, offset in OFFSETS.items()}


def to_directions(path: Sequence[tuple[int, int]]) -> list[Direction]:
    directions: list[Direction] = []
    for here, there in zip(path, path[1:]):
        delta = (there[0] - here[0], there[1] - here[1])
        direction = _BY_OFFSET.get(delta)
        if direction is None:
            raise InvalidPathError(
                f"Step {tuple(here)} -> {tuple(there)} is not a single move."
            )
        directions.append(direction)
    return directions


def format_directions(directions: Iterable[Direction]) -> str:
    return "".join(direction.value for direction in directions)


def parse_directions(text: str) -> list[Direction]:
    try:
        return [Direction(char) for char in text]
    except ValueError as exc:
        raise InvalidPathError(f"Unknown direction in {text!r}.") from exc


def follow_directions(
    start: tuple[int, int], directions: Iterable[Direction]
) -> list[Coordinate]:
    """Replay `directions` from `start`, returning every visited coordinate."""
    current = Coordinate(*start)
    path = [current]
    for direction in directions:
        d_row, d_col = direction.offset
        current = Coordinate(current.row + d_row, current.col + d_col)
        path.append(current)
    return path
