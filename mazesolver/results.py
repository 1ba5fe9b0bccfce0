"""Outcomes of the top-level run modes."""

from __future__ import annotations

from dataclasses import dataclass, field

from mazesolver.api.contracts import MazeSpec, SolutionResult
from mazesolver.solver.astar import Solution


@dataclass(frozen=True)
class SingleRunResult:
    maze: MazeSpec
    solution: Solution | None
    elapsed_ns: int
    submission: SolutionResult | None = None

    @property
    def reachable(self) -> bool:
        return self.solution is not None


@dataclass(frozen=True)
class RaceEntry:
    name: str
    length: int
    result: str


@dataclass
class RaceResult:
    entries: list[RaceEntry] = field(default_factory=list)
    outcome: SolutionResult | None = None
    certificate_url: str | None = None

    @property
    def finished(self) -> bool:
        return self.outcome is not None and self.outcome.finished
