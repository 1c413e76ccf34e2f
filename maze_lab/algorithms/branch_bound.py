# maze_lab/algorithms/branch_bound.py
# Depth-first enumeration of every cheapest path, bounded by the optimum that
# uniform-cost search reports first.
from __future__ import annotations
import logging
from typing import Dict, Generator, List, Optional
from ..core.errors import SearchLimitError
from ..core.node import Node
from ..core.metrics import SearchResult, MeasuredRun
from ..core.problem import Problem
from ..core.utils import path_states
from .ucs import uniform_cost_search

logger = logging.getLogger(__name__)


def enumerate_best_paths(problem: Problem, bound: Optional[int] = None,
                         limit: Optional[int] = None,
                         max_expansions: Optional[int] = None) -> Generator[List, None, int]:
    """Yield the position sequence of each path whose cost equals `bound`.

    A branch is cut when its cost exceeds the bound, or exceeds the cheapest cost
    already seen for the same state: an optimal path has an optimal prefix at every
    state it visits, so neither cut can drop one. Yields nothing when the goal is
    unreachable. The generator's return value is the number of nodes expanded; expanding
    more than `max_expansions` raises SearchLimitError.
    """
    if bound is None:
        r = uniform_cost_search(problem, max_expansions=max_expansions)
        if r.capped:
            raise SearchLimitError(max_expansions, r.algo)
        if not r.success:
            return 0
        bound = r.cost

    root = Node(problem.initial_state())
    stack = [root]
    best_seen: Dict[object, int] = {root.state: 0}
    found = 0
    popped = 0

    while stack:
        node = stack.pop()
        if node.path_cost > best_seen[node.state]:
            continue
        if problem.is_goal(node.state):
            if node.path_cost == bound:
                yield [s.pos for s in path_states(node)]
                found += 1
                if limit is not None and found >= limit:
                    return popped
            continue
        if max_expansions is not None and popped >= max_expansions:
            raise SearchLimitError(max_expansions, "Branch&Bound")
        popped += 1
        for child in node.expand(problem):
            if child.path_cost > bound:
                continue
            prev = best_seen.get(child.state)
            if prev is not None and child.path_cost > prev:
                continue
            best_seen[child.state] = child.path_cost
            stack.append(child)
    return popped


def branch_and_bound_tiles(problem: Problem, max_expansions: Optional[int] = None) -> SearchResult:
    """Union of every optimal path; `max_expansions` is shared by the UCS bound and the enumeration."""
    name = "Branch&Bound"

    with MeasuredRun() as meter:
        first = uniform_cost_search(problem, max_expansions=max_expansions)
        if not first.success:
            return SearchResult(name, False, [], None, first.nodes_expanded, meter.elapsed,
                                meter.peak_kb, error=first.error, capped=first.capped)
        remaining = None if max_expansions is None else max_expansions - first.nodes_expanded
        tiles = set()
        paths = 0
        walk = enumerate_best_paths(problem, bound=first.cost, max_expansions=remaining)
        try:
            while True:
                tiles.update(next(walk))
                paths += 1
        except StopIteration as done:
            popped = done.value
        except SearchLimitError as e:
            return SearchResult(name, False, [], None, max_expansions, meter.elapsed,
                                meter.peak_kb, error=str(e), capped=True)
        expanded = first.nodes_expanded + popped

    logger.debug("%s: %d optimal paths cover %d tiles, %d nodes expanded", name, paths, len(tiles), popped)
    return SearchResult(name, True, [], first.cost, expanded, meter.elapsed,
                        meter.peak_kb, tiles=frozenset(tiles))
