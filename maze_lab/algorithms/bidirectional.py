# maze_lab/algorithms/bidirectional.py
# Finds every cell lying on at least one cheapest path by running uniform-cost search
# forward from the start and backward from the end over the same oriented state graph,
# then keeping the states whose two costs add up to the optimum.
from __future__ import annotations
import logging
from typing import Optional
from ..core.errors import SearchLimitError
from ..core.metrics import SearchResult, MeasuredRun
from ..problems.maze import MazeProblem, ReverseMazeProblem
from .ucs import cost_map

logger = logging.getLogger(__name__)


def best_path_tiles(problem: MazeProblem, max_expansions: Optional[int] = None) -> SearchResult:
    """
    Forward costs g(s) from the start state, backward costs h(s) to any end state.
    A state lies on an optimal path iff g(s) + h(s) equals the optimum; the answer is
    the set of positions of those states. Start and end always qualify.

    `max_expansions` is shared by both passes.
    """
    name = "Bidirectional UCS"

    with MeasuredRun() as meter:
        try:
            forward = cost_map(problem, max_expansions=max_expansions)
        except SearchLimitError as e:
            return SearchResult(name, False, [], None, max_expansions, meter.elapsed, meter.peak_kb,
                                error=str(e), capped=True)
        reached_goals = [forward[s] for s in problem.goal_states() if s in forward]
        if not reached_goals:
            return SearchResult(name, False, [], None, len(forward), meter.elapsed, meter.peak_kb,
                                error="goal unreachable")
        optimum = min(reached_goals)

        remaining = None if max_expansions is None else max_expansions - len(forward)
        try:
            reverse = ReverseMazeProblem(problem)
            backward = cost_map(reverse, seeds=reverse.initial_states(), max_expansions=remaining)
        except SearchLimitError as e:
            return SearchResult(name, False, [], None, max_expansions, meter.elapsed, meter.peak_kb,
                                error=str(e), capped=True)
        tiles = frozenset(
            s.pos for s, g in forward.items()
            if s in backward and g + backward[s] == optimum
        )
        expanded = len(forward) + len(backward)

    logger.debug("%s: optimum %d, %d tiles, %d forward / %d backward states",
                 name, optimum, len(tiles), len(forward), len(backward))
    return SearchResult(name, True, [], optimum, expanded, meter.elapsed, meter.peak_kb, tiles=tiles)
