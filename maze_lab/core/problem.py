# Defines the interface every searchable maze problem exposes (states, actions, goals, costs).
# maze_lab/core/problem.py
from __future__ import annotations
from typing import Hashable, Iterable, Protocol, Tuple

Action = Hashable
State = Hashable


class Problem(Protocol):
    """Canonical search problem interface (atomic state-space view)."""
    def initial_state(self) -> State: ...
    def is_goal(self, s: State) -> bool: ...
    def actions(self, s: State) -> Iterable[Action]: ...
    def result(self, s: State, a: Action) -> State: ...
    def step_cost(self, s: State, a: Action, s2: State) -> int: ...


# Helper for bidirectional: reverse problem wrapper
class ReverseProblem:
    """Wraps a problem to run the search backward from its goal state(s).

    Subclasses provide the inverse ACTIONS/RESULT; step costs are read from the
    forward problem so both directions price an edge identically.
    """
    def __init__(self, problem: Problem, goal_states: Iterable[State]):
        self.p = problem
        self._initials: Tuple[State, ...] = tuple(goal_states)

    def initial_states(self) -> Tuple[State, ...]:
        return self._initials

    def is_goal(self, s: State) -> bool:
        return s == self.p.initial_state()

    def actions(self, s: State) -> Iterable[Action]:
        raise NotImplementedError

    def result(self, s: State, a: Action) -> State:
        raise NotImplementedError

    def step_cost(self, s: State, a: Action, s2: State) -> int:
        # backward edge s -> s2 is the forward edge s2 -> s
        return self.p.step_cost(s2, a, s)
