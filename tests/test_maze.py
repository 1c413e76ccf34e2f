from pathlib import Path

import numpy as np
import pytest

from maze_lab.core.errors import MalformedMazeError
from maze_lab.problems.checks import sanity_check_problem
from maze_lab.problems.maze import (
    Direction, Grid, MazeProblem, ReverseMazeProblem, State, as_grid, load_grid,
)

LIGHT = "#..E\n#S.#\n"


def test_load_grid_positions_are_col_row():
    grid = load_grid(LIGHT)
    assert grid.start == (1, 1)
    assert grid.end == (3, 0)
    assert (grid.width, grid.height) == (4, 2)
    walls = {(x, y) for y, x in zip(*np.nonzero(grid.walls))}
    assert walls == {(0, 0), (0, 1), (3, 1)}


def test_unknown_characters_are_floor():
    grid = load_grid("S x~E")
    assert grid.open_cells() == 5


def test_crlf_and_trailing_blank_lines():
    assert load_grid("#S.E#\r\n\r\n\n") == load_grid("#S.E#")


@pytest.mark.parametrize("text, message", [
    ("", "empty"),
    ("\n\n", "empty"),
    ("#....#\n#S.E#", "row has 5 cells"),
    ("#..E#", "no start"),
    ("#S..#", "no end"),
    ("#S.S.E#", "second start"),
    ("#E.S.E#", "second end"),
])
def test_malformed_input(text, message):
    with pytest.raises(MalformedMazeError, match=message):
        load_grid(text)


def test_ragged_row_reports_line_number():
    with pytest.raises(MalformedMazeError) as err:
        load_grid("#S.E#\n#...#\n#..#")
    assert err.value.line == 3
    assert isinstance(err.value, ValueError)


def test_grid_is_immutable():
    grid = load_grid(LIGHT)
    with pytest.raises(AttributeError):
        grid.start = (0, 0)
    with pytest.raises(ValueError):
        grid.walls[0, 1] = True


def test_grid_rejects_endpoint_on_wall():
    with pytest.raises(MalformedMazeError, match="not an open cell"):
        Grid(np.array([[True, False]]), start=(0, 0), end=(1, 0))


def test_out_of_bounds_is_never_open():
    grid = load_grid("S.E")
    assert not grid.is_open((-1, 0))
    assert not grid.is_open((3, 0))
    assert not grid.is_open((0, 1))
    assert grid.is_open((1, 0))


def test_render_marks_tiles():
    grid = load_grid("#S.E#")
    assert grid.render({(1, 0), (2, 0), (3, 0)}) == "#SOE#"


def test_as_grid_sources(resource):
    path = resource("straight_corridor.txt")
    from_path = as_grid(path)
    assert as_grid(str(path)) == from_path
    assert as_grid(path.read_text()) == from_path
    assert as_grid(from_path) is from_path
    with pytest.raises(TypeError):
        as_grid(42)


def test_as_grid_missing_file(tmp_path):
    with pytest.raises(OSError):
        as_grid(Path(tmp_path) / "nope.txt")


def test_direction_geometry():
    assert Direction.UP.step((2, 2)) == (2, 1)
    assert Direction.RIGHT.opposite is Direction.LEFT
    assert Direction.UP.quarter_turns(Direction.UP) == 0
    assert Direction.UP.quarter_turns(Direction.LEFT) == 1
    assert Direction.LEFT.quarter_turns(Direction.UP) == 1
    assert Direction.DOWN.quarter_turns(Direction.UP) == 2
    assert Direction.parse("left") is Direction.LEFT
    with pytest.raises(ValueError):
        Direction.parse("north")


def test_step_cost_counts_quarter_turns():
    problem = MazeProblem(load_grid("..S..\n..E.."), turn_penalty=1000)
    s = State((2, 0), Direction.RIGHT)
    assert problem.step_cost(s, Direction.RIGHT, State((3, 0), Direction.RIGHT)) == 1
    assert problem.step_cost(s, Direction.DOWN, State((2, 1), Direction.DOWN)) == 1001
    assert problem.step_cost(s, Direction.LEFT, State((1, 0), Direction.LEFT)) == 2001


def test_actions_respect_walls_and_reversal():
    grid = load_grid("#####\n#.S.#\n###E#")
    s = State(grid.start, Direction.RIGHT)
    assert set(MazeProblem(grid).actions(s)) == {Direction.RIGHT, Direction.LEFT}
    assert set(MazeProblem(grid, allow_reversal=False).actions(s)) == {Direction.RIGHT}


def test_reverse_problem_inverts_edges(maze):
    problem = MazeProblem(maze("two_routes.txt"))
    back = ReverseMazeProblem(problem)
    assert set(back.initial_states()) == set(problem.goal_states())
    s = State((2, 1), Direction.UP)
    for a in back.actions(s):
        before = back.result(s, a)
        assert s in {problem.result(before, f) for f in problem.actions(before)}
        assert back.step_cost(s, a, before) == problem.step_cost(before, s.facing, s)


def test_state_space_is_bounded(maze):
    problem = MazeProblem(maze("puzzle.txt"))
    assert sanity_check_problem(problem).startswith("OK")
