from __future__ import annotations
import heapq
import logging
from itertools import count
from typing import Callable, Dict, Optional
from ..core.node import Node
from ..core.metrics import SearchResult, MeasuredRun
from ..core.utils import reconstruct_path
from ..core.problem import Problem

logger = logging.getLogger(__name__)


def best_first_search(
    problem: Problem,
    f: Callable[[Node], int],
    name: str = "BestFirst",
    max_expansions: Optional[int] = None,
) -> SearchResult:
    """Expand the frontier node with the lowest f until a goal is popped.

    A popped node whose state was since reached more cheaply is stale and skipped, so
    every state is expanded at most once with its final cost. With f = path cost and
    non-negative step costs the first goal popped is optimal.
    """
    root = Node(problem.initial_state())
    tie = count()  # tie-breaker for stability
    frontier = [(f(root), next(tie), root)]

    reached: Dict[object, Node] = {root.state: root}
    expanded = 0

    with MeasuredRun() as meter:
        while frontier:
            node = heapq.heappop(frontier)[2]
            if node.path_cost > reached[node.state].path_cost:
                continue  # stale entry
            if problem.is_goal(node.state):
                logger.debug("%s: goal %r at cost %d after %d expansions",
                             name, node.state, node.path_cost, expanded)
                actions, cost = reconstruct_path(node)
                return SearchResult(name, True, [getattr(a, "name", str(a)) for a in actions], cost,
                                    expanded, meter.elapsed, meter.peak_kb)

            # expansion cap
            if max_expansions is not None and expanded >= max_expansions:
                logger.debug("%s: hit expansion cap %d", name, max_expansions)
                return SearchResult(name, False, [], None, expanded, meter.elapsed, meter.peak_kb,
                                    error=f"expansion cap {max_expansions} reached", capped=True)

            expanded += 1
            for child in node.expand(problem):
                prev = reached.get(child.state)
                if prev is None or child.path_cost < prev.path_cost:
                    reached[child.state] = child
                    heapq.heappush(frontier, (f(child), next(tie), child))

    logger.debug("%s: frontier exhausted after %d expansions", name, expanded)
    return SearchResult(name, False, [], None, expanded, meter.elapsed, meter.peak_kb,
                        error="goal unreachable")
