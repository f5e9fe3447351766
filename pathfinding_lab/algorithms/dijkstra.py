# pathfinding_lab/algorithms/dijkstra.py
# Dijkstra / uniform-cost search: the best-first loop with the heuristic pinned to zero.
from __future__ import annotations
from dataclasses import replace
from typing import Dict, List, NamedTuple, Optional, Tuple

from .best_first import SearchOutcome, best_first_search
from ..core.problem import Cost, Key, SearchOptions, State, require_options
from ..core.reconstruct import reconstruct_path


class Reached(NamedTuple):
    node: State
    parent: Optional[Key]  # predecessor key; None for the start
    cost: Cost


def _uninformed(options: SearchOptions, mode: str) -> SearchOptions:
    options = require_options(options, mode)
    return replace(options, heuristic=None) if options.heuristic is not None else options


def _reached(outcome: SearchOutcome) -> Dict[Key, Reached]:
    return {
        key: Reached(record.node, record.parents[0] if record.parents else None, record.cost)
        for key, record in outcome.records.items()
    }


def dijkstra(options: SearchOptions, max_expansions: Optional[int] = None) -> Optional[Tuple[List[State], Cost]]:
    """Cheapest path to a success node, ignoring any heuristic. Returns (path, cost) or None."""
    outcome = best_first_search(_uninformed(options, "Dijkstra"), name="Dijkstra", max_expansions=max_expansions)
    if not outcome.found:
        return None
    return reconstruct_path(outcome.records, outcome.sinks[0]), outcome.cost


def dijkstra_all(options: SearchOptions, max_expansions: Optional[int] = None) -> Dict[Key, Reached]:
    """
    Cheapest cost from options.start to every reachable key.

    `success` is never consulted. The start key maps to (start, None, 0);
    unreachable keys are simply absent.
    """
    outcome = best_first_search(
        _uninformed(options, "Dijkstra all"),
        check_success=False,
        name="Dijkstra all",
        max_expansions=max_expansions,
    )
    return _reached(outcome)


def dijkstra_partial(
    options: SearchOptions, max_expansions: Optional[int] = None
) -> Tuple[Dict[Key, Reached], Optional[Key]]:
    """Dijkstra that stops at the first success; returns everything reached so far and the success key."""
    outcome = best_first_search(_uninformed(options, "Dijkstra partial"), name="Dijkstra partial", max_expansions=max_expansions)
    return _reached(outcome), (outcome.sinks[0] if outcome.found else None)


def build_path(target: Key, reached: Dict[Key, Reached]) -> List[State]:
    """Rebuild start..target from a dijkstra_all / dijkstra_partial map. KeyError if target is absent."""
    path = []
    cur: Optional[Key] = target
    while cur is not None:
        entry = reached[cur]
        path.append(entry.node)
        cur = entry.parent
    path.reverse()
    return path
