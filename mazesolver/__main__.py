"""Module entry point for `python -m mazesolver`."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console

from mazesolver.api.client import MazebotApiError
from mazesolver.app import resolve_config, run_race, run_single


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Solve Mazebot mazes with A*.")
    parser.add_argument(
        "--race",
        action="store_true",
        help="Run the Mazebot race instead of a single maze.",
    )
    parser.add_argument(
        "--login",
        default=None,
        help="GitHub login used to start a race.",
    )
    parser.add_argument(
        "--offline",
        action="store_true",
        help="Solve a cached maze instead of fetching one.",
    )
    parser.add_argument(
        "--local",
        type=int,
        default=None,
        help="Number of a cached maze to solve (implies --offline).",
    )
    parser.add_argument(
        "--min-size",
        type=int,
        default=None,
        help="Smallest random maze to request.",
    )
    parser.add_argument(
        "--max-size",
        type=int,
        default=None,
        help="Largest random maze to request.",
    )
    parser.add_argument(
        "--no-save",
        action="store_true",
        help="Do not cache fetched mazes on disk.",
    )
    parser.add_argument(
        "--no-submit",
        action="store_true",
        help="Do not post the solution back to Mazebot.",
    )
    parser.add_argument(
        "--maze-dir",
        type=Path,
        default=None,
        help="Directory holding cached maze JSON files.",
    )
    parser.add_argument(
        "--base-url",
        default=None,
        help="Mazebot API base URL.",
    )
    parser.add_argument(
        "--certificate-log",
        type=Path,
        default=None,
        help="File that race certificates are appended to.",
    )
    parser.add_argument(
        "--prune-hint",
        action="store_true",
        help="Let decrease-key prune its search with the previous priority.",
    )
    args = parser.parse_args(argv)

    console = Console()
    try:
        config = resolve_config(
            mode="race" if args.race else None,
            offline=args.offline,
            local_number=args.local,
            min_size=args.min_size,
            max_size=args.max_size,
            no_save=args.no_save,
            no_submit=args.no_submit,
            login=args.login,
            maze_dir=args.maze_dir,
            base_url=args.base_url,
            certificate_log=args.certificate_log,
            prune_with_hint=args.prune_hint,
        )
        if config.mode == "race":
            run_race(config, console=console)
        else:
            run_single(config, console=console)
    except (MazebotApiError, FileNotFoundError, ValueError) as exc:
        raise SystemExit(str(exc)) from exc


if __name__ == "__main__":
    main()
