# tests/conftest.py
import pytest

from pathfinding_lab.core.problem import SearchOptions


def weighted_graph_options(edges, start, goal, heuristic=None):
    """SearchOptions over a directed graph given as (u, v, cost) triples."""
    adjacency = {}
    for u, v, w in edges:
        adjacency.setdefault(u, []).append((v, w))
    return SearchOptions(
        start=start,
        successors=lambda n: iter(adjacency.get(n, [])),
        key=lambda n: n,
        success=lambda n: n == goal,
        heuristic=heuristic,
    )


@pytest.fixture
def graph_options():
    return weighted_graph_options


@pytest.fixture
def two_routes():
    # S -> A1 -> A2 -> G and S -> B1 -> B2 -> G, both cost 3, plus a dearer detour
    edges = [
        ("S", "A1", 1), ("A1", "A2", 1), ("A2", "G", 1),
        ("S", "B1", 1), ("B1", "B2", 1), ("B2", "G", 1),
        ("S", "C", 2), ("C", "G", 5),
    ]
    return weighted_graph_options(edges, "S", "G")


MAZE = """\
###############
#.......#....E#
#.#.###.#.###.#
#.....#.#...#.#
#.###.#####.#.#
#.#.#.......#.#
#.#.#####.###.#
#...........#.#
###.#.#####.#.#
#...#.....#.#.#
#.#.#.###.#.#.#
#.....#...#.#.#
#.###.#.#.#.#.#
#S..#.....#...#
###############
"""

MAZE_2 = """\
#################
#...#...#...#..E#
#.#.#.#.#.#.#.#.#
#.#.#.#...#...#.#
#.#.#.#.###.#.#.#
#...#.#.#.....#.#
#.#.#.#.#.#####.#
#.#...#.#.#.....#
#.#.#####.#.###.#
#.#.#.......#...#
#.#.###.#####.###
#.#.#...#.....#.#
#.#.#.#####.###.#
#.#.#.........#.#
#.#.#.#########.#
#S#.............#
#################
"""


@pytest.fixture
def maze_text():
    return MAZE


@pytest.fixture
def maze_text_2():
    return MAZE_2
