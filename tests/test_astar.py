import pytest

from pathfinding_lab.algorithms.astar import astar, astar_bag, astar_bag_collect
from pathfinding_lab.algorithms.count_paths import count_paths
from pathfinding_lab.algorithms.dijkstra import dijkstra, dijkstra_all
from pathfinding_lab.core.errors import ExpansionLimitReached, InvalidSearchOptions
from pathfinding_lab.core.problem import SearchOptions
from pathfinding_lab.grid.coords import Location
from pathfinding_lab.problems.graph import romania_problem
from pathfinding_lab.problems.grid import GridProblem, make_grid_problem


def _wall_with_gap():
    # 5x5, row 2 walled except column 4
    walls = [Location(2, c) for c in range(4)]
    return GridProblem(5, 5, Location(0, 0), Location(4, 0), walls)


def _assert_valid_grid_path(problem, path):
    assert path[0] == problem.start
    assert problem.is_goal(path[-1])
    for a, b in zip(path, path[1:]):
        assert a.manhattan_distance(b) == 1
        assert problem.is_open(b)


def test_detour_around_wall_gap():
    problem = _wall_with_gap()
    path, cost = astar(problem.options())

    assert cost == 12  # 4 across to the gap and 4 back, plus 4 rows down
    assert len(path) == 13
    assert Location(2, 4) in path
    _assert_valid_grid_path(problem, path)


def test_sample_grid_matches_manhattan_when_a_clear_route_exists():
    problem = make_grid_problem()
    path, cost = astar(problem.options())
    assert cost == 10
    _assert_valid_grid_path(problem, path)


def test_goal_fully_enclosed_reports_no_path():
    problem = GridProblem(5, 5, Location(0, 0), Location(4, 4), [Location(3, 4), Location(4, 3)])
    options = problem.options()

    assert astar(options) is None
    assert astar_bag(options) is None
    assert astar_bag_collect(options) is None
    assert count_paths(options) == 0
    reached = dijkstra_all(options)
    assert "4,4" not in reached
    assert len(reached) == 22  # 25 cells minus two walls minus the goal


def test_start_already_successful():
    options = SearchOptions(
        start="x",
        successors=lambda n: [(n + "x", 1)],
        key=lambda n: n,
        success=lambda n: n == "x",
    )
    assert astar(options) == (["x"], 0)
    bag, cost = astar_bag(options)
    assert cost == 0
    assert list(bag) == [["x"]]
    assert len(bag) == 1
    assert count_paths(options) == 1


def test_romania_route():
    path, cost = astar(romania_problem().options())
    assert cost == 418
    assert path == ["Arad", "Sibiu", "Rimnicu Vilcea", "Pitesti", "Bucharest"]


def test_astar_agrees_with_dijkstra_on_random_grids():
    for seed in range(5):
        problem = GridProblem.random(12, 12, wall_density=0.25, seed=seed)
        informed = astar(problem.options())
        uninformed = dijkstra(problem.options())
        if uninformed is None:
            assert informed is None
            continue
        assert informed[1] == uninformed[1]
        assert len(informed[0]) == informed[1] + 1
        _assert_valid_grid_path(problem, informed[0])


def test_repeated_calls_give_identical_results():
    options = make_grid_problem().options()
    assert astar(options) == astar(options)
    first, second = astar_bag_collect(options), astar_bag_collect(options)
    assert first == second


def test_options_can_be_reused_while_the_grid_changes():
    problem = GridProblem(3, 3, Location(0, 0), Location(2, 2))
    options = problem.options()
    assert astar(options)[1] == 4

    problem.walls.set(Location(1, 2), True)
    problem.walls.set(Location(2, 1), True)
    assert astar(options) is None


def test_successors_may_be_generators():
    def successors(n):
        if n < 10:
            yield n + 1, 1
            yield n + 2, 3

    options = SearchOptions(start=0, successors=successors, key=lambda n: n,
                            success=lambda n: n == 10, heuristic=lambda n: 10 - n)
    path, cost = astar(options)
    assert cost == 10
    assert path == list(range(11))


def test_heuristic_returning_none_counts_as_zero():
    options = SearchOptions(start=0, successors=lambda n: [(n + 1, 1)], key=lambda n: n,
                            success=lambda n: n == 3, heuristic=lambda n: None)
    assert astar(options) == ([0, 1, 2, 3], 3)


def test_string_states_with_identity_key():
    patterns = ["r", "wr", "b", "g", "bwu", "rb", "gb", "br"]
    designs = ["brwrr", "bggr", "gbbr", "rrbgbr", "ubwu", "bwurrg", "brgr", "bbrgwb"]

    def options_for(design):
        def successors(current):
            for pattern in patterns:
                nxt = current + pattern
                if design.startswith(nxt):
                    yield nxt, len(pattern)
        return SearchOptions(start="", successors=successors, key=lambda s: s,
                             success=lambda s: s == design,
                             heuristic=lambda s: len(design) - len(s))

    assert sum(astar(options_for(d)) is not None for d in designs) == 6
    assert sum(count_paths(options_for(d)) for d in designs) == 16
    assert sum(len(bag) for bag, _ in filter(None, (astar_bag(options_for(d)) for d in designs))) == 16


def test_expansion_budget():
    options = _wall_with_gap().options()
    with pytest.raises(ExpansionLimitReached) as excinfo:
        astar(options, max_expansions=3)
    assert excinfo.value.limit == 3
    assert astar(options, max_expansions=1000) is not None


def test_missing_success_is_rejected_at_the_call():
    options = SearchOptions(start=0, successors=lambda n: [], key=lambda n: n)
    with pytest.raises(InvalidSearchOptions):
        astar(options)
    with pytest.raises(InvalidSearchOptions):
        count_paths(options)


def test_malformed_options():
    with pytest.raises(InvalidSearchOptions):
        SearchOptions(start=0, successors=None, key=lambda n: n)
    with pytest.raises(TypeError):
        SearchOptions(start=0, successors=lambda n: [], key="not callable")
    with pytest.raises(InvalidSearchOptions):
        SearchOptions(start=0, successors=lambda n: [], key=lambda n: n, heuristic=3)
    with pytest.raises(InvalidSearchOptions):
        astar({"start": 0})


def test_none_edge_cost_is_reported():
    options = SearchOptions(start=0, successors=lambda n: [(1, None)], key=lambda n: n,
                            success=lambda n: n == 1)
    with pytest.raises(ValueError, match="None cost"):
        astar(options)
