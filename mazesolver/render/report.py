"""Rich renderables for solver run output."""

from __future__ import annotations

from typing import Iterable

from rich.console import RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from mazesolver.api.contracts import MazeSpec, SolutionResult
from mazesolver.results import RaceEntry
from mazesolver.solver.astar import Solution
from mazesolver.timing import Timing


def render_maze_heading(maze: MazeSpec, *, racing: bool = False) -> RenderableType:
    label = f"Solving {maze.name}" if racing else maze.name
    return Text(label, style="bold")


def render_solution(solution: Solution) -> RenderableType:
    table = Table(show_header=False)
    table.add_column("Field")
    table.add_column("Value")
    table.add_row("Start", _format_coord(solution.start))
    table.add_row("Goal", _format_coord(solution.goal))
    table.add_row("Length", str(solution.length))
    table.add_row("Expanded", str(solution.expanded))
    return table


def render_unreachable(maze: MazeSpec, reason: Exception) -> RenderableType:
    return Text(f"{maze.name}: unreachable ({reason})", style="bold red")


def render_elapsed(timing: Timing) -> RenderableType:
    return Text(f"Elapsed: {timing.elapsed_ns}ns => {timing.seconds}s")


def render_submission(result: SolutionResult) -> RenderableType:
    if not result.succeeded:
        return Text(result.message or f"Result: {result.result}", style="yellow")
    text = Text(result.message, style="green")
    text.append(
        f"\nShortest: {result.shortest_solution_length}, "
        f"Yours: {result.your_solution_length}"
    )
    return text


def render_certificate(message: str, url: str) -> RenderableType:
    return Panel(Text(f"{message}\n{url}"), title="Race Complete")


def render_race_summary(entries: Iterable[RaceEntry]) -> RenderableType:
    table = Table(title="Race", show_header=True, header_style="bold")
    table.add_column("Maze")
    table.add_column("Length", justify="right")
    table.add_column("Result")
    rows = list(entries)
    for entry in rows:
        table.add_row(entry.name, str(entry.length), entry.result)
    if not rows:
        table.add_row("-", "-", "None")
    return table


def _format_coord(coord: tuple[int, int]) -> str:
    return f"({coord[0]}, {coord[1]})"
