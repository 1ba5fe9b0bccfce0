"""Mazebot API contracts and client."""

from mazesolver.api.client import DEFAULT_BASE_URL, MazebotApiError, MazebotClient
from mazesolver.api.contracts import Certificate, MazeSpec, RaceStart, SolutionResult

__all__ = [
    "Certificate",
    "DEFAULT_BASE_URL",
    "MazeSpec",
    "MazebotApiError",
    "MazebotClient",
    "RaceStart",
    "SolutionResult",
]
