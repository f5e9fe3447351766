# pathfinding_lab/core/metrics.py
# Measurement helpers for benchmarks: wall time, peak memory and expansion counts.
from __future__ import annotations
from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Optional
import time, tracemalloc

from .problem import SearchOptions


@dataclass
class BenchmarkRow:
    algo: str
    problem: str
    success: bool
    cost: Optional[float]
    paths: Optional[int]        # number of minimal paths, for bag/count modes
    nodes_expanded: int
    time_s: float
    peak_kb: int
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)




class MeasuredRun:
    """
    Context manager measuring one search run: wall time, peak traced memory and
    node expansions. Expansions are counted on options passed through watch(),
    which wraps options.successors; the engine calls it once per expanded node.
    Safe to query .elapsed, .peak_kb and .expansions inside the with-block.
    """
    def __init__(self) -> None:
        self.t0: Optional[float] = None
        self.t1: Optional[float] = None
        self.expansions: int = 0
        self._peak_kb: int = 0
        self._tracing: bool = False

    def watch(self, options: SearchOptions) -> SearchOptions:
        inner = options.successors

        def successors(state):
            self.expansions += 1
            return inner(state)

        return replace(options, successors=successors)

    def __enter__(self) -> "MeasuredRun":
        self._tracing = True
        tracemalloc.start()
        self.t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.t1 = time.perf_counter()
        _, peak = tracemalloc.get_traced_memory()
        tracemalloc.stop()
        self._tracing = False
        self._peak_kb = max(self._peak_kb, peak // 1024)
        return False

    @property
    def elapsed(self) -> float:
        if self.t0 is None:
            return 0.0
        if self.t1 is None:
            return time.perf_counter() - self.t0
        return self.t1 - self.t0

    @property
    def peak_kb(self) -> int:
        if self._tracing:
            _, peak = tracemalloc.get_traced_memory()
            return max(self._peak_kb, peak // 1024)
        return self._peak_kb

    def row(self, algo: str, problem: str, success: bool, cost, paths, repeats: int = 1) -> BenchmarkRow:
        """Averages time and expansions over `repeats` runs of the same mode."""
        return BenchmarkRow(algo, problem, success, cost, paths,
                            self.expansions // repeats, self.elapsed / repeats, self.peak_kb)
