# maze_lab/api.py
"""
Entry points used by the CLI and by callers embedding the solver.

Every call loads (or reuses) an immutable Grid and builds fresh search state, so
repeated calls on the same Grid give identical answers. `config.max_expansions`
caps every operation; hitting it raises SearchLimitError, never UnreachableGoalError.
"""
from __future__ import annotations
import logging
from typing import FrozenSet, List, Optional

from .algorithms.bidirectional import best_path_tiles
from .algorithms.branch_bound import branch_and_bound_tiles, enumerate_best_paths
from .algorithms.ucs import uniform_cost_search
from .core.config import SolverConfig
from .core.errors import SearchLimitError, UnreachableGoalError
from .core.metrics import SearchResult
from .problems.maze import Coord, GridSource, MazeProblem, as_grid

logger = logging.getLogger(__name__)

STRATEGIES = {
    "bidirectional": best_path_tiles,
    "branch_bound": branch_and_bound_tiles,
}


def _setup(grid_source: GridSource, config: Optional[SolverConfig]):
    config = config or SolverConfig()
    return MazeProblem.from_config(as_grid(grid_source), config), config.max_expansions


def _require(result: SearchResult, problem: MazeProblem, cap: Optional[int]) -> SearchResult:
    if result.capped:
        raise SearchLimitError(cap, result.algo)
    if not result.success:
        raise UnreachableGoalError(problem.grid.start, problem.grid.end)
    return result


def solve(grid_source: GridSource, config: Optional[SolverConfig] = None) -> int:
    """Minimum total cost from start (facing config.start_facing) to end."""
    problem, cap = _setup(grid_source, config)
    result = _require(uniform_cost_search(problem, max_expansions=cap), problem, cap)
    logger.debug("solve: cost %d, %d expansions", result.cost, result.nodes_expanded)
    return result.cost


def best_tiles(grid_source: GridSource, config: Optional[SolverConfig] = None,
               strategy: str = "bidirectional") -> FrozenSet[Coord]:
    """Every cell lying on at least one minimum-cost path."""
    try:
        search = STRATEGIES[strategy]
    except KeyError:
        raise ValueError(f"unknown strategy {strategy!r}; expected one of {sorted(STRATEGIES)}") from None
    problem, cap = _setup(grid_source, config)
    return _require(search(problem, max_expansions=cap), problem, cap).tiles


def count_tiles(grid_source: GridSource, config: Optional[SolverConfig] = None,
                strategy: str = "bidirectional") -> int:
    return len(best_tiles(grid_source, config, strategy))


def best_paths(grid_source: GridSource, config: Optional[SolverConfig] = None,
               limit: Optional[int] = None) -> List[List[Coord]]:
    """All minimum-cost paths as cell sequences (at most `limit` of them)."""
    problem, cap = _setup(grid_source, config)
    first = _require(uniform_cost_search(problem, max_expansions=cap), problem, cap)
    remaining = None if cap is None else cap - first.nodes_expanded
    return list(enumerate_best_paths(problem, bound=first.cost, limit=limit, max_expansions=remaining))
