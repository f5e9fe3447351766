# pathfinding_lab/algorithms/astar.py
from __future__ import annotations
from typing import List, Optional, Tuple

from .best_first import best_first_search
from ..core.problem import Cost, SearchOptions, State, require_options
from ..core.reconstruct import PathBag, reconstruct_path


def astar(options: SearchOptions, max_expansions: Optional[int] = None) -> Optional[Tuple[List[State], Cost]]:
    """
    A*: one cheapest path from options.start to a node satisfying options.success.

    Returns (path, cost) with the path running start..goal, or None when the
    frontier empties without a success. Optimal for non-negative edge costs and an
    admissible heuristic; neither is checked.
    """
    options = require_options(options, "A*")
    outcome = best_first_search(options, name="A*", max_expansions=max_expansions)
    if not outcome.found:
        return None
    return reconstruct_path(outcome.records, outcome.sinks[0]), outcome.cost


def astar_bag(options: SearchOptions, max_expansions: Optional[int] = None) -> Optional[Tuple[PathBag, Cost]]:
    """
    A* that keeps every path of minimal cost.

    Returns (bag, cost) or None. The bag is iterated lazily and len(bag) is the
    number of distinct minimal paths, to every success node reached at that cost.
    """
    options = require_options(options, "A* bag")
    outcome = best_first_search(options, keep_ties=True, name="A* bag", max_expansions=max_expansions)
    if not outcome.found:
        return None
    return PathBag(outcome.records, outcome.start_key, outcome.sinks, outcome.cost), outcome.cost


def astar_bag_collect(
    options: SearchOptions, max_expansions: Optional[int] = None
) -> Optional[Tuple[List[List[State]], Cost]]:
    """Same as astar_bag, with the paths materialised into a list."""
    result = astar_bag(options, max_expansions=max_expansions)
    if result is None:
        return None
    bag, cost = result
    return bag.collect(), cost
