# maze_lab/core/errors.py
from __future__ import annotations
from typing import Optional


class MazeError(Exception):
    """Base class for every maze_lab failure."""


class MalformedMazeError(MazeError, ValueError):
    """Maze text that cannot be turned into a Grid."""
    def __init__(self, message: str, line: Optional[int] = None):
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class UnreachableGoalError(MazeError, LookupError):
    """No sequence of transitions leads from start to end."""
    def __init__(self, start, end):
        self.start = start
        self.end = end
        super().__init__(f"end {end} is unreachable from start {start}")


class SearchLimitError(MazeError, RuntimeError):
    """The search gave up after its expansion cap, before deciding reachability."""
    def __init__(self, limit: int, algo: Optional[str] = None):
        self.limit = limit
        self.algo = algo
        prefix = f"{algo}: " if algo else ""
        super().__init__(f"{prefix}expansion cap {limit} reached")
