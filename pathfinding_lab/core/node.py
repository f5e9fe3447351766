# pathfinding_lab/core/node.py
# Frontier entries (SearchNode) and the per-key settled records (SearchRecord) the engine keeps.
from __future__ import annotations
from typing import Iterator, List, Tuple

from .problem import Cost, Key, SearchOptions, State


class SearchNode:
    __slots__ = ("state", "key", "cost", "priority")

    def __init__(self, state: State, key: Key, cost: Cost = 0, priority: Cost = 0):
        self.state = state
        self.key = key
        self.cost = cost
        self.priority = priority

    def expand(self, options: SearchOptions) -> Iterator[Tuple[State, Key, Cost]]:
        """Yield (successor, successor key, accumulated cost) for every edge leaving this node."""
        s = self.state
        for s2, cost in options.successors(s):
            if cost is None:
                raise ValueError(
                    f"successors returned a None cost for the edge {s!r} -> {s2!r}. "
                    "Check your successor function."
                )
            yield s2, options.key(s2), self.cost + cost

    def __repr__(self) -> str:
        return f"SearchNode(key={self.key!r}, cost={self.cost!r}, priority={self.priority!r})"


class SearchRecord:
    """Lowest cost seen for a key and the predecessor keys achieving it (first one wins for single paths)."""
    __slots__ = ("node", "cost", "parents")

    def __init__(self, node: State, cost: Cost, parents: List[Key] | None = None):
        self.node = node
        self.cost = cost
        self.parents = parents if parents is not None else []

    def __repr__(self) -> str:
        return f"SearchRecord(cost={self.cost!r}, parents={self.parents!r})"
