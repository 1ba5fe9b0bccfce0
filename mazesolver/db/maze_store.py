"""On-disk cache of fetched mazes, one JSON file per maze number."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from mazesolver.api.contracts import MazeSpec

DEFAULT_MAZE_DIR = Path("mazes")


@dataclass(frozen=True)
class MazeStore:
    base_dir: Path = DEFAULT_MAZE_DIR

    def path_for(self, number: int) -> Path:
        return self.base_dir / f"{number}.json"

    def save(self, maze: MazeSpec) -> Path:
        number = maze.number
        if number is None:
            raise ValueError(f"Maze {maze.name!r} has no number to file it under.")
        path = self.path_for(number)
        path.parent.mkdir(parents=True, exist_ok=True)
        record = maze.model_dump(mode="json", by_alias=True, exclude_none=True)
        path.write_text(json.dumps(record), encoding="utf-8")
        return path

    def load(self, number: int) -> MazeSpec:
        path = self.path_for(number)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise FileNotFoundError(f"Missing cached maze file: {path}") from exc
        return MazeSpec.model_validate(json.loads(text))

    def available(self) -> list[int]:
        if not self.base_dir.exists():
            return []
        stems = (path.stem for path in self.base_dir.glob("*.json"))
        return sorted(int(stem) for stem in stems if stem.isdigit())
