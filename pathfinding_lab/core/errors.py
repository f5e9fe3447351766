# pathfinding_lab/core/errors.py
# Exceptions raised by the search engine. "No path" is never one of them:
# searches report it through their return value.
from __future__ import annotations


class SearchError(Exception):
    """Base class for every error raised by pathfinding_lab."""


class InvalidSearchOptions(SearchError, TypeError):
    """A search was configured with a missing or non-callable callback."""


class ExpansionLimitReached(SearchError):
    """The caller-imposed expansion budget ran out before the search finished."""

    def __init__(self, name: str, limit: int):
        super().__init__(f"{name}: expansion limit of {limit} reached before the search finished")
        self.name = name
        self.limit = limit


class PredecessorCycleError(SearchError, ValueError):
    """The predecessor graph is not a DAG (only possible with zero-cost cycles)."""
