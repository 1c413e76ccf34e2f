# maze_lab/core/node.py
# Search-tree node: a state plus the bookkeeping needed to rebuild the path that reached it.
from __future__ import annotations
from typing import Iterator, Optional
from .problem import Action, Problem, State


class Node:
    __slots__ = ("state", "parent", "action", "path_cost", "depth")

    def __init__(self, state: State, parent: Optional["Node"] = None, action: Action = None,
                 path_cost: int = 0, depth: int = 0):
        self.state = state
        self.parent = parent
        self.action = action
        self.path_cost = int(path_cost)
        self.depth = depth

    def expand(self, problem: Problem) -> Iterator["Node"]:
        """Generate child Nodes by applying ACTIONS(s), using RESULT and step_cost."""
        s = self.state
        for a in problem.actions(s):
            s2 = problem.result(s, a)
            cost = problem.step_cost(s, a, s2)
            if cost is None or cost < 0:
                raise ValueError(
                    f"step_cost returned {cost!r} for (s={s!r}, a={a!r}, s'={s2!r}). "
                    "Costs must be non-negative integers."
                )
            yield Node(
                state=s2,
                parent=self,
                action=a,
                path_cost=self.path_cost + cost,
                depth=self.depth + 1,
            )

    def __repr__(self) -> str:
        return f"Node({self.state!r}, cost={self.path_cost})"
