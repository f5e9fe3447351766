# pathfinding_lab/core/reconstruct.py
# Rebuilds paths from the predecessor records a search leaves behind.
# Single-path searches keep one predecessor per key; bag/count searches keep every
# equal-cost predecessor, which turns the records into a DAG rooted at the start key.
from __future__ import annotations
from typing import Callable, Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple, TypeVar

from .errors import PredecessorCycleError
from .node import SearchRecord
from .problem import Cost, Key, State

T = TypeVar("T")

Records = Mapping[Key, SearchRecord]


def reconstruct_path(records: Records, key: Key) -> List[State]:
    """Follow first predecessors from `key` back to the start; returns start..key."""
    path = []
    cur: Optional[Key] = key
    while cur is not None:
        record = records[cur]
        path.append(record.node)
        cur = record.parents[0] if record.parents else None
    path.reverse()
    return path


def fold_paths(
    records: Records,
    start_key: Key,
    targets: Iterable[Key],
    seed: T,
    combine: Callable[[Key, List[T]], T],
) -> List[T]:
    """
    Post-order walk of the predecessor DAG, memoised per key.

    value(start) = seed; value(k) = combine(k, [value(p) for p in parents(k)]).
    Returns one value per target. Every key is combined exactly once, so
    re-converging routes are not re-walked.
    """
    memo: Dict[Key, T] = {start_key: seed}
    in_progress = set()
    out = []
    for target in targets:
        stack = [target]
        while stack:
            k = stack[-1]
            if k in memo:
                stack.pop()
                continue
            parents = records[k].parents
            pending = [p for p in parents if p not in memo]
            if not pending:
                memo[k] = combine(k, [memo[p] for p in parents])
                in_progress.discard(k)
                stack.pop()
                continue
            for p in pending:
                if p in in_progress:
                    raise PredecessorCycleError(
                        f"predecessor graph loops through {p!r}; zero-cost cycles are not supported"
                    )
            in_progress.add(k)
            stack.extend(pending)
        out.append(memo[target])
    return out


def count_paths_to(records: Records, start_key: Key, sinks: Sequence[Key]) -> int:
    counts = fold_paths(records, start_key, sinks, 1, lambda _k, parent_counts: sum(parent_counts))
    return sum(counts)


def collect_paths(records: Records, start_key: Key, sinks: Sequence[Key]) -> List[List[State]]:
    """Materialise every minimal path; per-key prefix tuples are shared through the memo."""
    def extend(k: Key, prefixes: List[List[Tuple[Key, ...]]]) -> List[Tuple[Key, ...]]:
        return [prefix + (k,) for group in prefixes for prefix in group]

    per_sink = fold_paths(records, start_key, sinks, [(start_key,)], extend)
    return [[records[k].node for k in keys] for group in per_sink for keys in group]


_DONE = object()


def iter_paths(records: Records, start_key: Key, sinks: Sequence[Key]) -> Iterator[List[State]]:
    """Lazily enumerate minimal paths, one DFS per sink over the predecessor DAG."""
    for sink in sinks:
        if sink == start_key:
            yield [records[sink].node]
            continue
        trail = [sink]
        on_trail = {sink}
        stack = [iter(records[sink].parents)]
        while stack:
            parent = next(stack[-1], _DONE)
            if parent is _DONE:
                stack.pop()
                on_trail.discard(trail.pop())
                continue
            if parent == start_key:
                yield [records[start_key].node] + [records[k].node for k in reversed(trail)]
                continue
            if parent in on_trail:
                raise PredecessorCycleError(
                    f"predecessor graph loops through {parent!r}; zero-cost cycles are not supported"
                )
            trail.append(parent)
            on_trail.add(parent)
            stack.append(iter(records[parent].parents))


class PathBag:
    """
    Every minimal-cost path found by an A* bag search.

    Iterating yields paths lazily (lists of nodes, start first). `count` folds path
    multiplicities without enumerating and is an unbounded int; len() returns the
    same number but raises OverflowError past sys.maxsize, so prefer `count` when
    the number of paths can explode.
    """

    def __init__(self, records: Records, start_key: Key, sinks: Sequence[Key], cost: Cost):
        self._records = records
        self._start_key = start_key
        self._sinks = tuple(sinks)
        self.cost = cost
        self._count: Optional[int] = None

    @property
    def sinks(self) -> Tuple[State, ...]:
        """The success nodes reached at the minimal cost."""
        return tuple(self._records[k].node for k in self._sinks)

    def __iter__(self) -> Iterator[List[State]]:
        return iter_paths(self._records, self._start_key, self._sinks)

    @property
    def count(self) -> int:
        if self._count is None:
            self._count = count_paths_to(self._records, self._start_key, self._sinks)
        return self._count

    def __len__(self) -> int:
        return self.count

    def collect(self) -> List[List[State]]:
        return collect_paths(self._records, self._start_key, self._sinks)

    def __repr__(self) -> str:
        return f"PathBag(cost={self.cost!r}, sinks={len(self._sinks)})"
