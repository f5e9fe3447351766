# pathfinding_lab/grid/grids.py
# Fixed-size, bounds-checked grids that successor functions read from.
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Generic, Iterator, List, Optional, Sequence, Tuple, TypeVar

from .coords import Location, Vector

T = TypeVar("T")


class Grid(ABC, Generic[T]):
    def __init__(self, dimensions: Vector):
        self.dimensions = dimensions

    @abstractmethod
    def _at(self, location: Location) -> T: ...

    def get(self, location: Location) -> Optional[T]:
        """Value at location, or None when it is off the grid."""
        if not self.is_in_bounds(location):
            return None
        return self._at(location)

    def is_in_bounds(self, location: Location) -> bool:
        return 0 <= location.row < self.dimensions.rows and 0 <= location.column < self.dimensions.columns

    def bounds_check(self, location: Location) -> None:
        if not self.is_in_bounds(location):
            raise IndexError(f"Location {location} out of bounds for a {self.dimensions.rows}x{self.dimensions.columns} grid")

    def values_with_locations(self) -> Iterator[Tuple[Location, T]]:
        for row in range(self.dimensions.rows):
            for column in range(self.dimensions.columns):
                location = Location(row, column)
                yield location, self._at(location)

    def find(self, value: T) -> Optional[Location]:
        """First location (row-major) holding value."""
        for location, v in self.values_with_locations():
            if v == value:
                return location
        return None


class CharacterGrid(Grid[str]):
    def __init__(self, dimensions: Vector, lines: Sequence[str]):
        super().__init__(dimensions)
        self._lines = list(lines)

    @classmethod
    def from_string(cls, text: str) -> "CharacterGrid":
        lines = text.rstrip().split("\n")
        dimensions = Vector(len(lines), len(lines[0]))
        if any(len(line) != dimensions.columns for line in lines):
            raise ValueError("All rows must have the same length")
        return cls(dimensions, lines)

    def _at(self, location: Location) -> str:
        return self._lines[location.row][location.column]

    def __str__(self) -> str:
        return "\n".join(self._lines)


class ArrayGrid(Grid[T]):
    def __init__(self, dimensions: Vector, values: List[List[T]]):
        super().__init__(dimensions)
        self._values = values

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[T]]) -> "ArrayGrid[T]":
        values = [list(row) for row in rows]
        dimensions = Vector(len(values), len(values[0]) if values else 0)
        if any(len(row) != dimensions.columns for row in values):
            raise ValueError("All rows must have the same length")
        return cls(dimensions, values)

    @classmethod
    def create_with_initial_value(cls, dimensions: Vector, initial: T) -> "ArrayGrid[T]":
        return cls(dimensions, [[initial] * dimensions.columns for _ in range(dimensions.rows)])

    def _at(self, location: Location) -> T:
        return self._values[location.row][location.column]

    def set(self, location: Location, value: T) -> None:
        self.bounds_check(location)
        self._values[location.row][location.column] = value
