# pathfinding_lab/problems/maze.py
# An oriented maze: the walker faces a direction, stepping forward is cheap and turning is
# expensive, so many routes tie on cost. Handy for exercising the bag and count modes.
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Set, Tuple

from ..core.problem import SearchOptions
from ..grid.coords import Direction, Location
from ..grid.grids import CharacterGrid


@dataclass(frozen=True)
class Pose:
    location: Location
    facing: Direction


class MazeProblem:
    def __init__(self, grid: CharacterGrid, start: Location, end: Location,
                 facing: Direction = Direction.RIGHT, step_cost: int = 1, turn_cost: int = 1000):
        self.grid = grid
        self.start = Pose(start, facing)
        self.end = end
        self.step_cost = step_cost
        self.turn_cost = turn_cost

    @classmethod
    def from_text(cls, text: str, **kwargs) -> "MazeProblem":
        grid = CharacterGrid.from_string(text)
        start, end = grid.find("S"), grid.find("E")
        if start is None or end is None:
            raise ValueError("Maze needs both an S and an E")
        return cls(grid, start, end, **kwargs)

    def initial_state(self) -> Pose:
        return self.start

    def is_goal(self, pose: Pose) -> bool:
        return pose.location == self.end

    def successors(self, pose: Pose) -> Iterator[Tuple[Pose, int]]:
        ahead = pose.location.relative(pose.facing)
        cell = self.grid.get(ahead)
        if cell is not None and cell != "#":
            yield Pose(ahead, pose.facing), self.step_cost
        yield Pose(pose.location, pose.facing.clockwise()), self.turn_cost
        yield Pose(pose.location, pose.facing.counterclockwise()), self.turn_cost

    def key(self, pose: Pose) -> str:
        return f"{pose.location}:{pose.facing}"

    def heuristic(self, pose: Pose) -> int:
        # ignores facing, so it never overestimates
        return pose.location.manhattan_distance(self.end) * self.step_cost

    def options(self) -> SearchOptions:
        return SearchOptions.from_problem(self)


def tiles_on_best_paths(paths) -> Set[Location]:
    return {pose.location for path in paths for pose in path}
