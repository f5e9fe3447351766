# pathfinding_lab/algorithms/best_first.py
# The expansion loop shared by every access pattern (A*, A* bag, path counting, Dijkstra).
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from ..core.errors import ExpansionLimitReached
from ..core.frontiers import PriorityQueue
from ..core.node import SearchNode, SearchRecord
from ..core.problem import Cost, Key, SearchOptions

logger = logging.getLogger(__name__)


@dataclass
class SearchOutcome:
    start_key: Key
    records: Dict[Key, SearchRecord]
    sinks: List[Key]        # success keys reached at the minimal cost, in pop order
    cost: Optional[Cost]    # minimal success cost, None when no success was popped
    expanded: int

    @property
    def found(self) -> bool:
        return self.cost is not None


def best_first_search(
    options: SearchOptions,
    *,
    keep_ties: bool = False,
    check_success: bool = True,
    max_expansions: Optional[int] = None,
    name: str = "BestFirst",
) -> SearchOutcome:
    """
    Pop entries by cost + heuristic until the search is decided.

    keep_ties=False: stop at the first success pop, one predecessor per key.
    keep_ties=True:  keep every equal-cost predecessor and keep popping until the
                     frontier's best priority exceeds the best success cost.
    check_success=False: never test `success`; run until the frontier is empty.
    """
    success = options.require_success(name) if check_success else None
    start = options.start
    start_key = options.key(start)

    records: Dict[Key, SearchRecord] = {start_key: SearchRecord(start, 0)}
    frontier = PriorityQueue(key=lambda n: n.priority)
    frontier.push(SearchNode(start, start_key, 0, options.estimate(start)))

    sinks: List[Key] = []
    best: Optional[Cost] = None
    expanded = 0

    while True:
        node = frontier.pop()
        if node is None:
            break
        if best is not None and node.priority > best:
            break

        record = records[node.key]
        if node.cost > record.cost:
            continue  # stale: a cheaper entry for this key was pushed later

        if success is not None and success(node.state):
            if best is None:
                best = node.cost
            sinks.append(node.key)
            if not keep_ties:
                break
            continue

        if max_expansions is not None and expanded >= max_expansions:
            logger.debug("%s: giving up after %d expansions", name, expanded)
            raise ExpansionLimitReached(name, max_expansions)
        expanded += 1

        for state, key, new_cost in node.expand(options):
            prev = records.get(key)
            if prev is None or new_cost < prev.cost:
                records[key] = SearchRecord(state, new_cost, [node.key])
                frontier.push(SearchNode(state, key, new_cost, new_cost + options.estimate(state)))
            elif (keep_ties and new_cost == prev.cost and key != start_key and key != node.key
                  and node.key not in prev.parents):
                prev.parents.append(node.key)

    logger.debug(
        "%s: expanded=%d reached=%d sinks=%d cost=%r",
        name, expanded, len(records), len(sinks), best,
    )
    return SearchOutcome(start_key, records, sinks, best, expanded)
