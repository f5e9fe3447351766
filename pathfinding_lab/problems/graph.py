# pathfinding_lab/problems/graph.py
# Weighted graphs given as adjacency mappings, plus the Romania road map (AIMA Fig. 3.1)
# as a ready-made sample.
from __future__ import annotations
from typing import Dict, Hashable, Iterator, Mapping, Optional, Tuple

from ..core.problem import SearchOptions


class GraphProblem:
    """
    States are vertex names; successors(s) yields (neighbour, edge weight).
    The heuristic table, when given, must not overestimate the distance to goal.
    """

    def __init__(self, graph: Mapping[Hashable, Mapping[Hashable, float]], start: Hashable, goal: Hashable,
                 heuristic_table: Optional[Mapping[Hashable, float]] = None):
        self.graph = graph
        self.start = start
        self.goal = goal
        self.heuristic_table = heuristic_table or {}

    @classmethod
    def undirected(cls, edges, start, goal, heuristic_table=None) -> "GraphProblem":
        """Build from (u, v, weight) triples, adding both directions."""
        graph: Dict[Hashable, Dict[Hashable, float]] = {}
        for u, v, w in edges:
            graph.setdefault(u, {})[v] = w
            graph.setdefault(v, {})[u] = w
        return cls(graph, start, goal, heuristic_table)

    def initial_state(self):
        return self.start

    def is_goal(self, state) -> bool:
        return state == self.goal

    def successors(self, state) -> Iterator[Tuple[Hashable, float]]:
        return iter(self.graph.get(state, {}).items())

    def key(self, state) -> Hashable:
        return state

    def heuristic(self, state) -> float:
        return self.heuristic_table.get(state, 0)

    def options(self) -> SearchOptions:
        return SearchOptions.from_problem(self)


ROMANIA_ROADS = [
    ("Arad", "Zerind", 75), ("Arad", "Sibiu", 140), ("Arad", "Timisoara", 118),
    ("Zerind", "Oradea", 71), ("Oradea", "Sibiu", 151),
    ("Timisoara", "Lugoj", 111), ("Lugoj", "Mehadia", 70), ("Mehadia", "Drobeta", 75),
    ("Drobeta", "Craiova", 120), ("Craiova", "Rimnicu Vilcea", 146), ("Craiova", "Pitesti", 138),
    ("Sibiu", "Fagaras", 99), ("Sibiu", "Rimnicu Vilcea", 80), ("Rimnicu Vilcea", "Pitesti", 97),
    ("Fagaras", "Bucharest", 211), ("Pitesti", "Bucharest", 101),
    ("Bucharest", "Giurgiu", 90), ("Bucharest", "Urziceni", 85),
    ("Urziceni", "Hirsova", 98), ("Hirsova", "Eforie", 86),
    ("Urziceni", "Vaslui", 142), ("Vaslui", "Iasi", 92), ("Iasi", "Neamt", 87),
]

# Straight-line distance to Bucharest (AIMA Fig. 3.16)
SLD_TO_BUCHAREST = {
    "Arad": 366, "Zerind": 374, "Oradea": 380, "Sibiu": 253, "Timisoara": 329,
    "Lugoj": 244, "Mehadia": 241, "Drobeta": 242, "Craiova": 160, "Rimnicu Vilcea": 193,
    "Fagaras": 176, "Pitesti": 100, "Bucharest": 0, "Giurgiu": 77, "Urziceni": 80,
    "Hirsova": 151, "Eforie": 161, "Vaslui": 199, "Iasi": 226, "Neamt": 234,
}


def romania_problem(start: str = "Arad", goal: str = "Bucharest") -> GraphProblem:
    # the straight-line table only bounds distances to Bucharest
    table = SLD_TO_BUCHAREST if goal == "Bucharest" else None
    return GraphProblem.undirected(ROMANIA_ROADS, start, goal, table)
