# pathfinding_lab/problems/grid.py
from __future__ import annotations
import random
from typing import Iterable, Iterator, Set, Tuple

from ..core.problem import SearchOptions
from ..grid.coords import Location, Vector, orthogonal_neighbors
from ..grid.grids import ArrayGrid, CharacterGrid

WALL = "#"


class GridProblem:
    """
    4-neighbour grid pathfinding with unit costs.

    - State: Location
    - successors(s): in-bounds, non-wall orthogonal neighbours, cost 1 each
    - is_goal(s): s == goal
    - key(s): "row,column"
    - heuristic(s): Manhattan distance (admissible on a 4-neighbour grid)
    """
    def __init__(self, rows: int, cols: int, start: Location, goal: Location, walls: Iterable[Location] = ()):
        self.walls = ArrayGrid.create_with_initial_value(Vector(rows, cols), False)
        for wall in walls:
            self.walls.set(wall, True)
        self.start = start
        self.goal = goal

    @classmethod
    def from_text(cls, text: str) -> "GridProblem":
        """Read a map with S (start), E (goal) and # (wall); anything else is open floor."""
        grid = CharacterGrid.from_string(text)
        start, goal = grid.find("S"), grid.find("E")
        if start is None or goal is None:
            raise ValueError("Map needs both an S and an E")
        walls = [loc for loc, value in grid.values_with_locations() if value == WALL]
        return cls(grid.dimensions.rows, grid.dimensions.columns, start, goal, walls)

    @classmethod
    def random(cls, rows: int, cols: int, wall_density: float = 0.2, seed: int | None = None) -> "GridProblem":
        """Corner-to-corner grid with walls sprinkled at the given density (path not guaranteed)."""
        rng = random.Random(seed)
        start, goal = Location(0, 0), Location(rows - 1, cols - 1)
        walls = [
            Location(r, c)
            for r in range(rows) for c in range(cols)
            if rng.random() < wall_density and Location(r, c) not in (start, goal)
        ]
        return cls(rows, cols, start, goal, walls)

    @property
    def rows(self) -> int: return self.walls.dimensions.rows
    @property
    def cols(self) -> int: return self.walls.dimensions.columns

    def is_open(self, location: Location) -> bool:
        return self.walls.get(location) is False

    def initial_state(self) -> Location:
        return self.start

    def is_goal(self, state: Location) -> bool:
        return state == self.goal

    def successors(self, state: Location) -> Iterator[Tuple[Location, int]]:
        for step in orthogonal_neighbors():
            nxt = state.add(step)
            if self.is_open(nxt):
                yield nxt, 1

    def key(self, state: Location) -> str:
        return str(state)

    def heuristic(self, state: Location) -> int:
        return state.manhattan_distance(self.goal)

    def options(self) -> SearchOptions:
        return SearchOptions.from_problem(self)

    def open_cells(self) -> Set[Location]:
        return {loc for loc, wall in self.walls.values_with_locations() if not wall}


def make_grid_problem() -> GridProblem:
    # Example: 5x7 grid, a few walls
    walls = [Location(1, 3), Location(2, 3), Location(3, 3), Location(3, 4)]
    return GridProblem(rows=5, cols=7, start=Location(0, 0), goal=Location(4, 6), walls=walls)
