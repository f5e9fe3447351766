# pathfinding_lab/grid/coords.py
# Coordinates for 2D grids: rotations, compass directions, row/column vectors and locations.
# Rows grow downward, columns grow to the right.
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, IntEnum
from functools import cache
from typing import Iterator, Tuple


class Rotation(IntEnum):
    NONE = 0
    CLOCKWISE = 1
    FLIP = 2
    COUNTERCLOCKWISE = 3


def reverse_rotation(rotation: Rotation) -> Rotation:
    return Rotation(-rotation % 4)

def add_rotations(a: Rotation, b: Rotation) -> Rotation:
    return Rotation((a + b) % 4)

def subtract_rotations(a: Rotation, b: Rotation) -> Rotation:
    return Rotation((a - b) % 4)

def multiply_rotation(rotation: Rotation, factor: int) -> Rotation:
    return Rotation((rotation * factor) % 4)


class Direction(Enum):
    # values are clockwise quarter turns away from UP
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    def rotate(self, rotation: Rotation) -> "Direction":
        return Direction((self.value + rotation) % 4)

    def clockwise(self) -> "Direction":
        return self.rotate(Rotation.CLOCKWISE)

    def counterclockwise(self) -> "Direction":
        return self.rotate(Rotation.COUNTERCLOCKWISE)

    def reverse(self) -> "Direction":
        return self.rotate(Rotation.FLIP)

    def rotation_to(self, other: "Direction") -> Rotation:
        """Rotation that turns self into other."""
        return Rotation((other.value - self.value) % 4)

    def __str__(self) -> str:
        return self.name.lower()


@cache
def all_directions() -> Tuple[Direction, ...]:
    return (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


@dataclass(frozen=True)
class Vector:
    """Distance between two locations, in rows and columns."""
    rows: int
    columns: int

    @staticmethod
    def in_direction(direction: Direction, size: int = 1) -> "Vector":
        return _UNIT[direction].scale(size)

    @staticmethod
    def upward(size: int = 1) -> "Vector": return Vector(-size, 0)
    @staticmethod
    def downward(size: int = 1) -> "Vector": return Vector(size, 0)
    @staticmethod
    def leftward(size: int = 1) -> "Vector": return Vector(0, -size)
    @staticmethod
    def rightward(size: int = 1) -> "Vector": return Vector(0, size)

    def __add__(self, other: "Vector") -> "Vector":
        return Vector(self.rows + other.rows, self.columns + other.columns)

    def __sub__(self, other: "Vector") -> "Vector":
        return Vector(self.rows - other.rows, self.columns - other.columns)

    def scale(self, scalar: int) -> "Vector":
        return Vector(self.rows * scalar, self.columns * scalar)

    def l1_norm(self) -> int:
        return abs(self.rows) + abs(self.columns)


_UNIT = {
    Direction.UP: Vector(-1, 0),
    Direction.DOWN: Vector(1, 0),
    Direction.LEFT: Vector(0, -1),
    Direction.RIGHT: Vector(0, 1),
}


@dataclass(frozen=True)
class Location:
    """A cell on a grid. str() gives the canonical "row,column" key."""
    row: int
    column: int

    @classmethod
    def from_string(cls, text: str) -> "Location":
        row, column = (int(part) for part in text.split(","))
        return cls(row, column)

    def add(self, vector: Vector) -> "Location":
        return Location(self.row + vector.rows, self.column + vector.columns)

    def subtract(self, other: "Location") -> Vector:
        return Vector(self.row - other.row, self.column - other.column)

    def above(self, distance: int = 1) -> "Location": return Location(self.row - distance, self.column)
    def below(self, distance: int = 1) -> "Location": return Location(self.row + distance, self.column)
    def left(self, distance: int = 1) -> "Location": return Location(self.row, self.column - distance)
    def right(self, distance: int = 1) -> "Location": return Location(self.row, self.column + distance)

    def relative(self, direction: Direction, distance: int = 1) -> "Location":
        return self.add(Vector.in_direction(direction, distance))

    def manhattan_distance(self, other: "Location") -> int:
        return self.subtract(other).l1_norm()

    def __str__(self) -> str:
        return f"{self.row},{self.column}"


@cache
def orthogonal_neighbors() -> Tuple[Vector, ...]:
    return (Vector.upward(), Vector.rightward(), Vector.downward(), Vector.leftward())


@cache
def diagonal_neighbors() -> Tuple[Vector, ...]:
    return (
        Vector.upward() + Vector.rightward(),
        Vector.upward() + Vector.leftward(),
        Vector.downward() + Vector.rightward(),
        Vector.downward() + Vector.leftward(),
    )


@cache
def all_neighbors() -> Tuple[Vector, ...]:
    return orthogonal_neighbors() + diagonal_neighbors()


def locations_in_manhattan_distance(center: Location, distance: int) -> Iterator[Location]:
    """Every location whose L1 distance from center is between 1 and distance."""
    for dr in range(-distance, distance + 1):
        span = distance - abs(dr)
        for dc in range(-span, span + 1):
            if dr or dc:
                yield Location(center.row + dr, center.column + dc)
