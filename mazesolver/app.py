"""Application entry for solving Mazebot mazes."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console

from mazesolver.api.client import DEFAULT_BASE_URL, MazebotApiError, MazebotClient
from mazesolver.api.contracts import MazeSpec
from mazesolver.db.certificate_log import CERTIFICATE_LOG_NAME, append_certificate
from mazesolver.db.maze_store import DEFAULT_MAZE_DIR, MazeStore
from mazesolver.render.report import (
    render_certificate,
    render_elapsed,
    render_maze_heading,
    render_race_summary,
    render_solution,
    render_submission,
    render_unreachable,
)
from mazesolver.results import RaceEntry, RaceResult, SingleRunResult
from mazesolver.solver.astar import Solution, solve
from mazesolver.solver.errors import Unreachable
from mazesolver.timing import measure

DEFAULT_MODE = "single"
DEFAULT_SIZE = 200


@dataclass(frozen=True)
class RunConfig:
    mode: str = DEFAULT_MODE
    online: bool = True
    min_size: int | None = DEFAULT_SIZE
    max_size: int | None = DEFAULT_SIZE
    save_maze: bool = True
    send_solution: bool = True
    local_number: int | None = None
    login: str | None = None
    maze_dir: Path = DEFAULT_MAZE_DIR
    base_url: str = DEFAULT_BASE_URL
    certificate_log: Path = Path(CERTIFICATE_LOG_NAME)
    prune_with_hint: bool = False


def resolve_config(
    *,
    mode: str | None = None,
    offline: bool = False,
    local_number: int | None = None,
    min_size: int | None = None,
    max_size: int | None = None,
    no_save: bool = False,
    no_submit: bool = False,
    login: str | None = None,
    maze_dir: Path | None = None,
    base_url: str | None = None,
    certificate_log: Path | None = None,
    prune_with_hint: bool = False,
) -> RunConfig:
    """Merge CLI values over `MAZEBOT_*` environment variables and defaults."""
    local = local_number if local_number is not None else _env_int("MAZEBOT_LOCAL")
    return RunConfig(
        mode=(mode or os.getenv("MAZEBOT_MODE") or DEFAULT_MODE).lower(),
        online=not (offline or local is not None),
        min_size=_size_setting(min_size, "MAZEBOT_MIN_SIZE"),
        max_size=_size_setting(max_size, "MAZEBOT_MAX_SIZE"),
        save_maze=not no_save,
        send_solution=not no_submit,
        local_number=local,
        login=login or os.getenv("MAZEBOT_LOGIN"),
        maze_dir=maze_dir or Path(os.getenv("MAZEBOT_MAZE_DIR") or DEFAULT_MAZE_DIR),
        base_url=base_url or os.getenv("MAZEBOT_BASE_URL") or DEFAULT_BASE_URL,
        certificate_log=certificate_log or Path(CERTIFICATE_LOG_NAME),
        prune_with_hint=prune_with_hint,
    )


def run_single(
    config: RunConfig,
    *,
    client: MazebotClient | None = None,
    store: MazeStore | None = None,
    console: Console | None = None,
) -> SingleRunResult:
    console = console or Console()
    store = store or MazeStore(config.maze_dir)
    save_maze = config.save_maze and config.online
    send_solution = config.send_solution and config.online
    if config.online:
        client = client or MazebotClient(config.base_url)

    with measure() as timing:
        maze = _load_maze(config, client=client, store=store)
        console.print(render_maze_heading(maze))
        solution = _solve_or_report(maze, config=config, console=console)
    console.print(render_elapsed(timing))

    if save_maze and maze.number is not None:
        store.save(maze)

    submission = None
    if solution is not None:
        console.print(render_solution(solution))
        if send_solution and client is not None and maze.maze_path:
            submission = client.submit_solution(
                maze.maze_path, solution.direction_string
            )
            console.print(render_submission(submission))

    return SingleRunResult(
        maze=maze,
        solution=solution,
        elapsed_ns=timing.elapsed_ns,
        submission=submission,
    )


def run_race(
    config: RunConfig,
    *,
    client: MazebotClient | None = None,
    console: Console | None = None,
) -> RaceResult:
    if not config.login:
        raise ValueError("Race mode needs a login (--login or MAZEBOT_LOGIN).")
    console = console or Console()
    client = client or MazebotClient(config.base_url)

    race = RaceResult()
    next_maze: str | None = client.start_race(config.login).next_maze
    while next_maze:
        maze = client.fetch_maze(next_maze)
        console.print(render_maze_heading(maze, racing=True))
        solution = solve(
            maze.grid(), maze.start, maze.goal, prune_with_hint=config.prune_with_hint
        )
        submit_path = maze.maze_path or next_maze
        outcome = client.submit_solution(submit_path, solution.directions)
        race.entries.append(
            RaceEntry(name=maze.name, length=solution.length, result=outcome.result)
        )
        race.outcome = outcome
        next_maze = outcome.next_maze if outcome.succeeded else None

    console.print(render_race_summary(race.entries))
    if race.outcome is None or not race.outcome.finished:
        console.print("Race ended without a certificate.", style="bold red")
        if race.outcome is not None:
            console.print(render_submission(race.outcome))
        return race

    if race.outcome.certificate:
        url = client.certificate_url(race.outcome.certificate)
        race.certificate_url = url
        console.print(render_certificate(race.outcome.message, url))
        _record_certificate(client, race.outcome.certificate, url, config, console)
    return race


def _load_maze(
    config: RunConfig, *, client: MazebotClient | None, store: MazeStore
) -> MazeSpec:
    if config.online and client is not None:
        return client.random_maze(min_size=config.min_size, max_size=config.max_size)
    if config.local_number is None:
        raise ValueError("Offline runs need a local maze number (--local).")
    return store.load(config.local_number)


def _solve_or_report(
    maze: MazeSpec, *, config: RunConfig, console: Console
) -> Solution | None:
    try:
        return solve(
            maze.grid(), maze.start, maze.goal, prune_with_hint=config.prune_with_hint
        )
    except Unreachable as exc:
        console.print(render_unreachable(maze, exc))
        return None


def _record_certificate(
    client: MazebotClient,
    path: str,
    url: str,
    config: RunConfig,
    console: Console,
) -> None:
    try:
        certificate = client.fetch_certificate(path)
    except MazebotApiError as exc:
        console.print(f"Failed to get certificate: {exc}", style="red")
        return
    append_certificate(config.certificate_log, certificate, url)


def _size_setting(value: int | None, env_name: str) -> int | None:
    if value is not None:
        return value
    from_env = _env_int(env_name)
    return from_env if from_env is not None else DEFAULT_SIZE


def _env_int(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}.") from exc
