# pathfinding_lab/core/frontiers.py
from __future__ import annotations
import heapq
from typing import Any, Callable, List, Optional, Tuple


class PriorityQueue:
    """Min-heap by key(x). pop/peek return None once drained."""
    def __init__(self, key: Callable[[Any], Any]):
        self.key = key
        self.h: List[Tuple[Any, int, Any]] = []
        self.counter = 0  # tie-breaker for stability
    def push(self, x) -> None:
        self.counter += 1
        heapq.heappush(self.h, (self.key(x), self.counter, x))
    def pop(self) -> Optional[Any]:
        if not self.h:
            return None
        return heapq.heappop(self.h)[2]
    def peek(self) -> Optional[Any]:
        return self.h[0][2] if self.h else None
    def __len__(self): return len(self.h)
