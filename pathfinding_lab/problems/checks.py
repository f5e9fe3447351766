# pathfinding_lab/problems/checks.py
# Opt-in audits for the preconditions the engine assumes but never checks:
# non-negative edge costs and an admissible heuristic. Meant for tests and small graphs.
from __future__ import annotations
from collections import deque
from dataclasses import replace
from typing import List, NamedTuple

from ..algorithms.dijkstra import dijkstra
from ..core.problem import Cost, Key, SearchOptions


def sanity_check_options(options: SearchOptions, max_states: int = 10_000) -> str:
    """Walks states breadth-first and checks every edge cost is a non-negative number."""
    seen = set()
    q = deque([options.start])
    steps = 0
    while q and steps < max_states:
        s = q.popleft()
        k = options.key(s)
        if k in seen:
            continue
        seen.add(k)
        for s2, cost in options.successors(s):
            if cost is None:
                raise ValueError(f"edge cost is None for {k!r} -> {options.key(s2)!r}")
            if cost < 0:
                raise ValueError(f"edge cost {cost!r} is negative for {k!r} -> {options.key(s2)!r}")
            q.append(s2)
        steps += 1
    return f"OK: visited {len(seen)} states; all edge costs non-negative."


class Overestimate(NamedTuple):
    key: Key
    estimate: Cost
    true_cost: Cost


def check_heuristic(options: SearchOptions, max_states: int = 2_000) -> List[Overestimate]:
    """
    Compares heuristic(s) with the true remaining cost for every reachable state.

    Returns the states where the heuristic overestimates (empty list = admissible on
    what was explored). States that cannot reach success are skipped.
    """
    bad: List[Overestimate] = []
    seen = set()
    q = deque([options.start])
    while q and len(seen) < max_states:
        s = q.popleft()
        k = options.key(s)
        if k in seen:
            continue
        seen.add(k)
        found = dijkstra(replace(options, start=s))
        if found is not None:
            estimate = options.estimate(s)
            if estimate > found[1]:
                bad.append(Overestimate(k, estimate, found[1]))
        q.extend(s2 for s2, _ in options.successors(s))
    return bad
