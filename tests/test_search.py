import numpy as np
import pytest

from maze_lab.algorithms.ucs import cost_map, uniform_cost_search
from maze_lab.api import solve
from maze_lab.core.config import SolverConfig
from maze_lab.core.errors import UnreachableGoalError
from maze_lab.problems.maze import Direction, Grid, MazeProblem, ReverseMazeProblem


def test_reference_puzzles(resource):
    assert solve(resource("puzzle.txt")) == 7036
    assert solve(resource("second_puzzle.txt")) == 11048


def test_straight_corridor_has_no_turn_penalty(resource):
    assert solve(resource("straight_corridor.txt")) == 4


def test_single_turn(resource):
    assert solve(resource("one_turn.txt")) == 1003


def test_reversal_costs_two_penalties(resource):
    assert solve(resource("reversal.txt")) == 2003
    assert solve(resource("reversal.txt"), SolverConfig(turn_penalty=7)) == 3 + 2 * 7


def test_reversal_forbidden_leaves_no_way_round(resource):
    with pytest.raises(UnreachableGoalError):
        solve(resource("reversal.txt"), SolverConfig(allow_reversal=False))


def test_forbidding_reversal_keeps_cost_when_unused(resource):
    config = SolverConfig(allow_reversal=False)
    assert solve(resource("puzzle.txt"), config) == 7036


@pytest.mark.parametrize("penalty, expected", [(0, 6), (1, 9), (1000, 3006)])
def test_turn_penalty_is_a_parameter(resource, penalty, expected):
    assert solve(resource("two_routes.txt"), SolverConfig(turn_penalty=penalty)) == expected


def test_start_facing_changes_cost(resource):
    assert solve(resource("one_turn.txt"), SolverConfig(start_facing=Direction.UP)) == 2003


def test_start_equals_end_costs_nothing():
    grid = Grid(np.zeros((1, 3), dtype=bool), start=(1, 0), end=(1, 0))
    assert solve(grid) == 0


def test_unreachable_goal_raises(resource):
    with pytest.raises(UnreachableGoalError) as err:
        solve(resource("walled_off.txt"))
    assert err.value.start == (1, 1)
    assert err.value.end == (5, 1)


def test_solve_is_idempotent(maze):
    grid = maze("puzzle.txt")
    walls = grid.walls.copy()
    assert solve(grid) == solve(grid) == 7036
    assert np.array_equal(grid.walls, walls)


def test_ucs_reports_failure_without_a_cost(maze):
    result = uniform_cost_search(MazeProblem(maze("walled_off.txt")))
    assert not result.success
    assert result.cost is None
    assert result.error == "goal unreachable"


def test_ucs_returns_the_path_it_found(maze):
    result = uniform_cost_search(MazeProblem(maze("one_turn.txt")))
    assert result.actions == ["RIGHT", "RIGHT", "UP"]
    assert result.cost == 1003 and result.tiles == frozenset()


def test_expansion_cap(maze):
    result = uniform_cost_search(MazeProblem(maze("puzzle.txt")), max_expansions=5)
    assert not result.success
    assert result.nodes_expanded == 5 and result.capped
    with pytest.raises(RuntimeError, match="expansion cap"):
        solve(maze("puzzle.txt"), SolverConfig(max_expansions=5))


def test_backward_costs_agree_with_forward(maze):
    problem = MazeProblem(maze("second_puzzle.txt"))
    reverse = ReverseMazeProblem(problem)
    backward = cost_map(reverse, seeds=reverse.initial_states())
    assert backward[problem.initial_state()] == 11048


def test_cost_map_stays_within_state_bound(maze):
    problem = MazeProblem(maze("puzzle.txt"))
    forward = cost_map(problem)
    assert len(forward) <= problem.state_bound()
    assert min(forward[s] for s in problem.goal_states() if s in forward) == 7036
