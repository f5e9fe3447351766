# pathfinding_lab/benchmarks/run_all.py
from __future__ import annotations

import argparse
import json
import logging
import os
import time
from pathlib import Path
from typing import Any, Callable, List, Optional, Tuple

from ..algorithms.astar import astar, astar_bag
from ..algorithms.count_paths import count_paths
from ..algorithms.dijkstra import dijkstra, dijkstra_all
from ..core.errors import SearchError
from ..core.metrics import BenchmarkRow, MeasuredRun
from ..core.problem import SearchOptions
from ..problems.graph import romania_problem
from ..problems.grid import GridProblem
from ..problems.maze import MazeProblem

# ---- Tunables (overridable via environment variables) -----------------------
GRID_SIZE    = int(os.getenv("BENCH_GRID_SIZE", "60"))
WALL_DENSITY = float(os.getenv("BENCH_WALL_DENSITY", "0.25"))
SEED         = int(os.getenv("BENCH_SEED", "7"))
REPEATS      = int(os.getenv("BENCH_REPEATS", "1"))
_max_exp     = os.getenv("BENCH_MAX_EXPANSIONS")
MAX_EXPANSIONS: Optional[int] = int(_max_exp) if _max_exp else None

SAMPLE_MAZE = """\
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

# A mode takes options and returns (success, cost, number of minimal paths or None)
Outcome = Tuple[bool, Optional[float], Optional[int]]
Mode = Callable[[SearchOptions], Outcome]

log = logging.getLogger(__name__)


# ---- Helpers ----------------------------------------------------------------
def _fmt_time(x):
    try:
        return f"{float(x):.4f}"
    except (TypeError, ValueError):
        return "n/a"

def _single(fn) -> Mode:
    def run(options: SearchOptions) -> Outcome:
        found = fn(options, max_expansions=MAX_EXPANSIONS)
        return (False, None, None) if found is None else (True, found[1], 1)
    return run

def _bag(options: SearchOptions) -> Outcome:
    found = astar_bag(options, max_expansions=MAX_EXPANSIONS)
    if found is None:
        return False, None, None
    bag, cost = found
    return True, cost, bag.count

def _count(options: SearchOptions) -> Outcome:
    n = count_paths(options, max_expansions=MAX_EXPANSIONS)
    return n > 0, None, n

def _all(options: SearchOptions) -> Outcome:
    reached = dijkstra_all(options, max_expansions=MAX_EXPANSIONS)
    goal = [r for r in reached.values() if options.success(r.node)]
    if not goal:
        return False, None, None
    return True, min(r.cost for r in goal), None


def load_problems() -> List[Tuple[str, SearchOptions]]:
    grid = GridProblem.random(GRID_SIZE, GRID_SIZE, WALL_DENSITY, seed=SEED)
    return [
        (f"grid {GRID_SIZE}x{GRID_SIZE}", grid.options()),
        ("maze", MazeProblem.from_text(SAMPLE_MAZE).options()),
        ("romania", romania_problem().options()),
    ]

def load_modes() -> List[Tuple[str, Mode]]:
    return [
        ("A*", _single(astar)),
        ("Dijkstra", _single(dijkstra)),
        ("A* bag", _bag),
        ("Count paths", _count),
        ("Dijkstra all", _all),
    ]


def run_benchmarks(problems, modes, repeats: int = 1) -> List[BenchmarkRow]:
    rows = []
    for problem_name, options in problems:
        for name, fn in modes:
            print(f"→ Running {name} on {problem_name} ...")
            meter = MeasuredRun()
            counted = meter.watch(options)
            try:
                with meter:
                    for _ in range(repeats):
                        success, cost, paths = fn(counted)
                row = meter.row(name, problem_name, success, cost, paths, repeats)
            except SearchError as e:
                log.warning("%s on %s failed: %r", name, problem_name, e)
                row = BenchmarkRow(name, problem_name, False, None, None, meter.expansions, 0.0, 0, error=repr(e))
            print(
                f"  {name}: "
                f"{'OK' if row.success else 'FAIL'} "
                f"cost={row.cost} paths={row.paths} "
                f"expanded={row.nodes_expanded}, "
                f"time={_fmt_time(row.time_s)}s"
            )
            rows.append(row)
    return rows


def main(argv: Optional[List[str]] = None) -> Path:
    parser = argparse.ArgumentParser(description="Benchmark every search mode on the sample problems.")
    parser.add_argument("--out", type=Path, default=Path(__file__).with_name("results.json"),
                        help="where to write the JSON results (default: next to this script)")
    parser.add_argument("--verbose", "-v", action="store_true", help="log engine debug output")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    rows = run_benchmarks(load_problems(), load_modes(), repeats=REPEATS)
    out: dict[str, Any] = {"results": [r.to_dict() for r in rows], "ts": time.time()}
    print(json.dumps(out, indent=2))

    args.out.write_text(json.dumps(out, indent=2))
    return args.out

if __name__ == "__main__":
    main()
