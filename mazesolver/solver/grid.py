"""Read-only maze grid."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, NamedTuple, Sequence

from mazesolver.solver.errors import InvalidShapeError

WALL_MARKER = "X"


class Coordinate(NamedTuple):
    row: int
    col: int


class CellState(str, Enum):
    OPEN = "open"
    WALL = "wall"


# East, West, South, North.
NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = ((0, 1), (0, -1), (1, 0), (-1, 0))


@dataclass(frozen=True)
class Grid:
    cells: tuple[tuple[CellState, ...], ...]

    def __post_init__(self) -> None:
        widths = {len(row) for row in self.cells}
        if len(widths) > 1:
            raise InvalidShapeError(
                f"Grid rows must have equal length, got widths {sorted(widths)}."
            )

    @classmethod
    def from_markers(
        cls, rows: Iterable[Sequence[str]], *, wall: str = WALL_MARKER
    ) -> "Grid":
        cells = tuple(
            tuple(_cell_state(marker, wall) for marker in row) for row in rows
        )
        return cls(cells)

    @property
    def height(self) -> int:
        return len(self.cells)

    @property
    def width(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    def in_bounds(self, coord: Coordinate) -> bool:
        row, col = coord
        return 0 <= row < self.height and 0 <= col < self.width

    def is_open(self, coord: Coordinate) -> bool:
        if not self.in_bounds(coord):
            return False
        return self.cells[coord[0]][coord[1]] is CellState.OPEN

    def neighbors(self, coord: Coordinate) -> list[Coordinate]:
        row, col = coord
        candidates = (Coordinate(row + dr, col + dc) for dr, dc in NEIGHBOR_OFFSETS)
        return [pos for pos in candidates if self.is_open(pos)]

    def open_cells(self) -> Iterator[Coordinate]:
        for row, line in enumerate(self.cells):
            for col, state in enumerate(line):
                if state is CellState.OPEN:
                    yield Coordinate(row, col)


def _cell_state(marker: str, wall: str) -> CellState:
    return CellState.WALL if marker == wall else CellState.OPEN
