import pytest

from pathfinding_lab.grid.coords import (
    Direction,
    Location,
    Rotation,
    Vector,
    add_rotations,
    all_directions,
    all_neighbors,
    diagonal_neighbors,
    locations_in_manhattan_distance,
    multiply_rotation,
    orthogonal_neighbors,
    reverse_rotation,
    subtract_rotations,
)
from pathfinding_lab.grid.grids import ArrayGrid, CharacterGrid


def test_location_key_round_trip():
    loc = Location(3, 14)
    assert str(loc) == "3,14"
    assert Location.from_string("3,14") == loc
    assert hash(Location(3, 14)) == hash(loc)


def test_location_arithmetic():
    loc = Location(2, 2)
    assert loc.add(Vector(1, -2)) == Location(3, 0)
    assert loc.subtract(Location(0, 5)) == Vector(2, -3)
    assert loc.manhattan_distance(Location(0, 5)) == 5
    assert (loc.above(), loc.below(2), loc.left(), loc.right(3)) == (
        Location(1, 2), Location(4, 2), Location(2, 1), Location(2, 5))
    assert loc.relative(Direction.LEFT, 2) == Location(2, 0)


def test_vector_helpers():
    assert Vector.in_direction(Direction.DOWN, 3) == Vector(3, 0)
    assert Vector.upward(2) + Vector.rightward() == Vector(-2, 1)
    assert Vector(1, 1) - Vector(2, 0) == Vector(-1, 1)
    assert Vector(2, -3).scale(2) == Vector(4, -6)
    assert Vector(-2, 3).l1_norm() == 5


def test_direction_turns():
    assert Direction.UP.clockwise() is Direction.RIGHT
    assert Direction.UP.counterclockwise() is Direction.LEFT
    assert Direction.LEFT.reverse() is Direction.RIGHT
    assert Direction.DOWN.rotate(Rotation.NONE) is Direction.DOWN
    assert Direction.RIGHT.rotation_to(Direction.UP) is Rotation.COUNTERCLOCKWISE
    for d in all_directions():
        for e in all_directions():
            assert d.rotate(d.rotation_to(e)) is e


def test_rotation_arithmetic():
    assert reverse_rotation(Rotation.CLOCKWISE) is Rotation.COUNTERCLOCKWISE
    assert reverse_rotation(Rotation.FLIP) is Rotation.FLIP
    assert add_rotations(Rotation.COUNTERCLOCKWISE, Rotation.FLIP) is Rotation.CLOCKWISE
    assert subtract_rotations(Rotation.NONE, Rotation.CLOCKWISE) is Rotation.COUNTERCLOCKWISE
    assert multiply_rotation(Rotation.CLOCKWISE, -1) is Rotation.COUNTERCLOCKWISE
    assert multiply_rotation(Rotation.CLOCKWISE, 6) is Rotation.FLIP


def test_neighbour_tables_are_built_once():
    assert orthogonal_neighbors() is orthogonal_neighbors()
    assert len(orthogonal_neighbors()) == 4
    assert all(v.l1_norm() == 2 for v in diagonal_neighbors())
    assert len(set(all_neighbors())) == 8


def test_manhattan_ring():
    around = list(locations_in_manhattan_distance(Location(0, 0), 2))
    assert len(around) == 12
    assert Location(0, 0) not in around
    assert all(1 <= Location(0, 0).manhattan_distance(loc) <= 2 for loc in around)


def test_character_grid():
    grid = CharacterGrid.from_string("ab\ncd\n")
    assert grid.dimensions == Vector(2, 2)
    assert grid.get(Location(1, 0)) == "c"
    assert grid.get(Location(2, 0)) is None
    assert grid.get(Location(0, -1)) is None
    assert grid.find("d") == Location(1, 1)
    assert grid.find("z") is None
    assert [v for _, v in grid.values_with_locations()] == ["a", "b", "c", "d"]


def test_character_grid_rejects_ragged_rows():
    with pytest.raises(ValueError):
        CharacterGrid.from_string("abc\nde")


def test_array_grid():
    grid = ArrayGrid.create_with_initial_value(Vector(2, 3), 0)
    grid.set(Location(1, 2), 7)
    assert grid.get(Location(1, 2)) == 7
    assert grid.get(Location(0, 2)) == 0
    assert grid.is_in_bounds(Location(1, 2))
    assert not grid.is_in_bounds(Location(2, 0))
    with pytest.raises(IndexError):
        grid.set(Location(2, 0), 1)

    rows = ArrayGrid.from_rows([[1, 2], [3, 4]])
    assert rows.get(Location(1, 1)) == 4
    with pytest.raises(ValueError):
        ArrayGrid.from_rows([[1, 2], [3]])
