"""Mazebot API payloads."""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field

from mazesolver.solver.grid import Coordinate, Grid

_MAZE_NUMBER = re.compile(r"#(\d+)")


class MazeSpec(BaseModel):
    """A maze as served by Mazebot and cached on disk.

    Positions arrive as `[x, y]`; `start` and `goal` swap them into the
    `(row, col)` order the solver uses. Unknown fields are kept so a cached
    maze round-trips to the JSON it was fetched as.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: str
    maze_path: str | None = Field(default=None, alias="mazePath")
    maze_map: list[list[str]] = Field(alias="map")
    starting_position: tuple[int, int] = Field(alias="startingPosition")
    ending_position: tuple[int, int] = Field(alias="endingPosition")

    @property
    def number(self) -> int | None:
        match = _MAZE_NUMBER.search(self.name)
        if match is None:
            return None
        return int(match.group(1))

    @property
    def start(self) -> Coordinate:
        x, y = self.starting_position
        return Coordinate(row=y, col=x)

    @property
    def goal(self) -> Coordinate:
        x, y = self.ending_position
        return Coordinate(row=y, col=x)

    def grid(self) -> Grid:
        return Grid.from_markers(self.maze_map)


class SolutionResult(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    result: str
    message: str = ""
    shortest_solution_length: int | None = Field(
        default=None, alias="shortestSolutionLength"
    )
    your_solution_length: int | None = Field(default=None, alias="yourSolutionLength")
    elapsed: int | float | None = None
    next_maze: str | None = Field(default=None, alias="nextMaze")
    certificate: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.result == "success"

    @property
    def finished(self) -> bool:
        return self.result == "finished"


class RaceStart(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    message: str = ""
    next_maze: str = Field(alias="nextMaze")


class Certificate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    message: str = ""
    elapsed: int | float | None = None
    completed: str | None = None
