from collections import deque


def sanity_check_problem(problem, max_states: int = 100_000):
    """Walks states breadth-first and checks every step cost is a non-negative int.

    When the problem knows its state bound (width x height x facings) the walk also
    asserts the reachable state space never exceeds it.
    """
    seen = set()
    q = deque([problem.initial_state()])
    while q and len(seen) < max_states:
        s = q.popleft()
        if s in seen:
            continue
        seen.add(s)
        for a in problem.actions(s):
            s2 = problem.result(s, a)
            cost = problem.step_cost(s, a, s2)
            if not isinstance(cost, int) or cost < 0:
                raise AssertionError(f"bad step_cost {cost!r} for (s={s}, a={a}, s'={s2})")
            q.append(s2)
    bound = getattr(problem, "state_bound", None)
    if bound is not None and len(seen) > bound():
        raise AssertionError(f"visited {len(seen)} states, more than the bound {bound()}")
    return f"OK: visited {len(seen)} states; costs are non-negative ints."
