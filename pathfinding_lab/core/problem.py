# pathfinding_lab/core/problem.py
# Defines the configuration every search takes (start, successors, key, success, heuristic)
# and the problem-object interface that can be turned into one.
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Hashable, Iterable, Optional, Protocol, Tuple

from .errors import InvalidSearchOptions

State = Any
Key = Hashable
Cost = Any  # any non-negative number supporting + and <
Successors = Callable[[State], Iterable[Tuple[State, Cost]]]


class SearchProblem(Protocol):
    """Object-style search problem; see SearchOptions.from_problem."""
    def initial_state(self) -> State: ...
    def is_goal(self, s: State) -> bool: ...
    def successors(self, s: State) -> Iterable[Tuple[State, Cost]]: ...
    def key(self, s: State) -> Key: ...
    # Optional heuristic for informed search; default 0
    def heuristic(self, s: State) -> Cost: return 0


@dataclass(frozen=True)
class SearchOptions:
    """
    Read-only input to every search.

    - start:      initial node
    - successors: node -> iterable of (neighbour, non-negative edge cost), consumed once per expansion
    - key:        node -> hashable identity; nodes with equal keys are the same node
    - success:    node -> bool; required by every mode except dijkstra_all
    - heuristic:  node -> admissible estimate of the remaining cost; defaults to 0 (Dijkstra)
    """
    start: State
    successors: Successors
    key: Callable[[State], Key]
    success: Optional[Callable[[State], bool]] = None
    heuristic: Optional[Callable[[State], Cost]] = None

    def __post_init__(self) -> None:
        for name in ("successors", "key"):
            if not callable(getattr(self, name)):
                raise InvalidSearchOptions(f"`{name}` must be callable, got {getattr(self, name)!r}")
        for name in ("success", "heuristic"):
            value = getattr(self, name)
            if value is not None and not callable(value):
                raise InvalidSearchOptions(f"`{name}` must be callable or None, got {value!r}")

    def estimate(self, state: State) -> Cost:
        if self.heuristic is None:
            return 0
        value = self.heuristic(state)
        return 0 if value is None else value

    def require_success(self, mode: str) -> Callable[[State], bool]:
        if self.success is None:
            raise InvalidSearchOptions(f"{mode} needs a `success` predicate")
        return self.success

    @classmethod
    def from_problem(cls, problem: SearchProblem) -> "SearchOptions":
        return cls(
            start=problem.initial_state(),
            successors=problem.successors,
            key=problem.key,
            success=problem.is_goal,
            heuristic=getattr(problem, "heuristic", None),
        )


def require_options(options: Any, mode: str) -> SearchOptions:
    if not isinstance(options, SearchOptions):
        raise InvalidSearchOptions(f"{mode} expects SearchOptions, got {type(options).__name__}")
    return options
