# pathfinding_lab/algorithms/count_paths.py
# Counts minimal-cost paths by propagating multiplicities over the predecessor DAG,
# without ever building the paths themselves.
from __future__ import annotations
from typing import Optional

from .best_first import best_first_search
from ..core.problem import SearchOptions, require_options
from ..core.reconstruct import count_paths_to


def count_paths(options: SearchOptions, max_expansions: Optional[int] = None) -> int:
    """
    Number of minimal-cost paths from options.start to any success node.
    Costlier paths are not counted. Returns 0 when no success node is reachable.
    """
    options = require_options(options, "count paths")
    outcome = best_first_search(options, keep_ties=True, name="count paths", max_expansions=max_expansions)
    if not outcome.found:
        return 0
    return count_paths_to(outcome.records, outcome.start_key, outcome.sinks)
