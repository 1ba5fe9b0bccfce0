"""Errors raised by the maze solver core."""

from __future__ import annotations


class MazeError(ValueError):
    """Base class for invalid maze input and failed searches."""


class InvalidShapeError(MazeError):
    """Grid rows do not all have the same length."""


class OutOfBoundsError(MazeError):
    """Start or goal lies outside the grid."""


class WallStartOrGoalError(MazeError):
    """Start or goal is a wall cell."""


class Unreachable(MazeError):
    """The goal cannot be reached from the start."""


class InvalidPathError(MazeError):
    """Consecutive path coordinates are not a single grid step apart."""
