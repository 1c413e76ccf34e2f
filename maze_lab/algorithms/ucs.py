# Uniform Cost Search (Dijkstra) on top of the generic best-first search, plus an
# exhaustive variant that keeps the whole cost map instead of stopping at a goal.
# maze_lab/algorithms/ucs.py
from __future__ import annotations
import heapq
import logging
from itertools import count
from typing import Dict, Iterable, Optional
from .best_first import best_first_search
from ..core.errors import SearchLimitError
from ..core.problem import State

logger = logging.getLogger(__name__)


def uniform_cost_search(problem, max_expansions: Optional[int] = None):
    return best_first_search(problem, f=lambda n: n.path_cost, name="UCS", max_expansions=max_expansions)


def cost_map(problem, seeds: Optional[Iterable[State]] = None,
             max_expansions: Optional[int] = None) -> Dict[State, int]:
    """Cheapest cost from any seed state to every reachable state.

    Seeds default to the problem's initial state and all start at cost 0. Only costs
    are kept (no parent pointers), so memory stays proportional to the state count.
    Every reachable state is settled exactly once, so len(result) is the expansion count.
    Raises SearchLimitError when more than `max_expansions` states would be settled.
    """
    if seeds is None:
        seeds = (problem.initial_state(),)

    best: Dict[State, int] = {}
    tie = count()
    heap = []
    for s in seeds:
        best[s] = 0
        heap.append((0, next(tie), s))
    heapq.heapify(heap)

    settled = 0
    while heap:
        g, _, s = heapq.heappop(heap)
        if g > best[s]:
            continue  # stale entry
        if max_expansions is not None and settled >= max_expansions:
            raise SearchLimitError(max_expansions, "cost_map")
        settled += 1
        for a in problem.actions(s):
            s2 = problem.result(s, a)
            g2 = g + problem.step_cost(s, a, s2)
            if g2 < best.get(s2, g2 + 1):
                best[s2] = g2
                heapq.heappush(heap, (g2, next(tie), s2))

    logger.debug("cost_map: settled %d states", settled)
    return best
