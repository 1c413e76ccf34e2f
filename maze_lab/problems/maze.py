# maze_lab/problems/maze.py
# Grid maze where the walker has a facing: moving costs 1 per step plus a fixed
# penalty for every quarter turn made before the step.
from __future__ import annotations
import os
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator, NamedTuple, Optional, Tuple, Union

import numpy as np

from ..core.errors import MalformedMazeError
from ..core.problem import Problem, ReverseProblem

Coord = Tuple[int, int]  # (col, row), row 0 at the top

WALL = "#"
START = "S"
END = "E"
TILE = "O"


class Direction(Enum):
    """Facing of the walker; the value is the unit (dx, dy) displacement."""
    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return Direction((-self.dx, -self.dy))

    def step(self, pos: Coord) -> Coord:
        return (pos[0] + self.dx, pos[1] + self.dy)

    def quarter_turns(self, other: "Direction") -> int:
        """Number of 90 degree turns needed to face `other` (0, 1 or 2)."""
        diff = abs(_CLOCKWISE.index(self) - _CLOCKWISE.index(other))
        return min(diff, 4 - diff)

    @classmethod
    def parse(cls, name: Union[str, "Direction"]) -> "Direction":
        if isinstance(name, cls):
            return name
        try:
            return cls[str(name).strip().upper()]
        except KeyError:
            raise ValueError(f"unknown direction {name!r}; expected one of "
                             f"{', '.join(d.name for d in cls)}") from None


_CLOCKWISE = (Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT)


class State(NamedTuple):
    """Standing at `pos`, facing `facing`."""
    pos: Coord
    facing: Direction


class Grid:
    """
    Immutable maze: boolean obstacle map (indexed [row, col]) plus start/end.
    Built once by the loader; solvers only ever read it.
    """
    __slots__ = ("walls", "start", "end")

    def __init__(self, walls: np.ndarray, start: Coord, end: Coord):
        walls = np.array(walls, dtype=bool)
        if walls.ndim != 2 or walls.size == 0:
            raise MalformedMazeError("obstacle map must be a non-empty 2D array")
        walls.setflags(write=False)
        object.__setattr__(self, "walls", walls)
        object.__setattr__(self, "start", tuple(start))
        object.__setattr__(self, "end", tuple(end))
        for name, pos in (("start", self.start), ("end", self.end)):
            if not self.is_open(pos):
                raise MalformedMazeError(f"{name} {pos} is not an open cell")

    def __setattr__(self, name, value):
        raise AttributeError("Grid is immutable")

    @property
    def width(self) -> int:
        return self.walls.shape[1]

    @property
    def height(self) -> int:
        return self.walls.shape[0]

    def in_bounds(self, c: Coord) -> bool:
        x, y = c
        return 0 <= x < self.width and 0 <= y < self.height

    def is_open(self, c: Coord) -> bool:
        # bounds first: negative indices would wrap around in numpy
        return self.in_bounds(c) and not self.walls[c[1], c[0]]

    def open_cells(self) -> int:
        return int(self.walls.size - np.count_nonzero(self.walls))

    def render(self, tiles: Iterable[Coord] = ()) -> str:
        canvas = np.where(self.walls, WALL, ".").astype("<U1")
        for x, y in tiles:
            canvas[y, x] = TILE
        canvas[self.start[1], self.start[0]] = START
        canvas[self.end[1], self.end[0]] = END
        return "\n".join("".join(row) for row in canvas)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (self.start == other.start and self.end == other.end
                and np.array_equal(self.walls, other.walls))

    __hash__ = None

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height}, start={self.start}, end={self.end})"


# --- Loader -------------------------------------------------------------------

def load_grid(text: str, wall: str = WALL, start: str = START, end: str = END) -> Grid:
    """Parse maze text: one line per row, one character per cell.

    `wall` marks an obstacle, `start`/`end` mark the two endpoints, anything else is floor.
    Trailing blank lines are ignored. Raises MalformedMazeError on empty input, ragged rows,
    or a missing/duplicated start or end marker.
    """
    rows = text.splitlines()
    while rows and not rows[-1].strip():
        rows.pop()
    if not rows:
        raise MalformedMazeError("maze is empty")

    width = len(rows[0])
    if width == 0:
        raise MalformedMazeError("row is empty", line=1)
    walls = np.zeros((len(rows), width), dtype=bool)
    start_at: Optional[Coord] = None
    end_at: Optional[Coord] = None

    for y, line in enumerate(rows):
        if len(line) != width:
            raise MalformedMazeError(f"row has {len(line)} cells, expected {width}", line=y + 1)
        for x, ch in enumerate(line):
            if ch == wall:
                walls[y, x] = True
            elif ch == start:
                if start_at is not None:
                    raise MalformedMazeError(f"second start marker {start!r}", line=y + 1)
                start_at = (x, y)
            elif ch == end:
                if end_at is not None:
                    raise MalformedMazeError(f"second end marker {end!r}", line=y + 1)
                end_at = (x, y)

    if start_at is None:
        raise MalformedMazeError(f"no start marker {start!r}")
    if end_at is None:
        raise MalformedMazeError(f"no end marker {end!r}")
    return Grid(walls, start_at, end_at)


def load_grid_file(path: Union[str, os.PathLike], encoding: str = "utf-8") -> Grid:
    return load_grid(Path(path).read_text(encoding=encoding))


GridSource = Union[Grid, str, os.PathLike]


def as_grid(source: GridSource) -> Grid:
    """Grid passes through, PathLike is read from disk, str is maze text if multi-line else a path."""
    if isinstance(source, Grid):
        return source
    if isinstance(source, os.PathLike):
        return load_grid_file(source)
    if isinstance(source, str):
        if "\n" in source:
            return load_grid(source)
        return load_grid_file(source)
    raise TypeError(f"cannot build a Grid from {type(source).__name__}")


# --- Search problems ------------------------------------------------------------

class MazeProblem(Problem):
    """
    Oriented maze search.

    - State: State(pos, facing)
    - ACTIONS(s): headings the walker may step along (every heading whose target
      cell is open; the reverse heading only when allow_reversal is set)
    - RESULT(s,a): State(a.step(pos), a)
    - IS-GOAL(s): pos == end, whatever the facing
    - c(s,a,s'): 1 + turn_penalty * quarter turns from s.facing to s'.facing
    """
    def __init__(self, grid: Grid, turn_penalty: int = 1000,
                 start_facing: Direction = Direction.RIGHT, allow_reversal: bool = True):
        self.grid = grid
        self.turn_penalty = turn_penalty
        self.start_facing = start_facing
        self.allow_reversal = allow_reversal

    @classmethod
    def from_config(cls, grid: Grid, config) -> "MazeProblem":
        return cls(grid, turn_penalty=config.turn_penalty,
                   start_facing=config.start_facing, allow_reversal=config.allow_reversal)

    def initial_state(self) -> State:
        return State(self.grid.start, self.start_facing)

    def goal_states(self) -> Tuple[State, ...]:
        return tuple(State(self.grid.end, d) for d in Direction)

    def is_goal(self, s: State) -> bool:
        return s.pos == self.grid.end

    def headings(self, facing: Direction) -> Iterator[Direction]:
        for d in Direction:
            if self.allow_reversal or d is not facing.opposite:
                yield d

    def actions(self, s: State) -> Iterator[Direction]:
        for d in self.headings(s.facing):
            if self.grid.is_open(d.step(s.pos)):
                yield d

    def result(self, s: State, a: Direction) -> State:
        return State(a.step(s.pos), a)

    def step_cost(self, s: State, a, s2: State) -> int:
        return 1 + self.turn_penalty * s.facing.quarter_turns(s2.facing)

    def state_bound(self) -> int:
        return self.grid.width * self.grid.height * len(Direction)


class ReverseMazeProblem(ReverseProblem):
    """Walks MazeProblem edges backwards, seeded from every facing at the end cell.

    A backward action is the facing the walker had *before* the step that produced s.
    """
    def __init__(self, problem: MazeProblem):
        super().__init__(problem, problem.goal_states())

    def actions(self, s: State) -> Iterator[Direction]:
        if not self.p.grid.is_open(s.facing.opposite.step(s.pos)):
            return
        for before in Direction:
            if s.facing in self.p.headings(before):
                yield before

    def result(self, s: State, a: Direction) -> State:
        return State(s.facing.opposite.step(s.pos), a)
