"""Callable protocols for the ranking engine extension points.

Scoring functions are plain callables: any function, lambda or object with a
conformant ``__call__`` can be registered, no inheritance required.

Example::

    from live_search.protocols import ScoringFunction

    def by_title(book, query: str) -> float:
        return weighted_levenshtein_similarity(query, book.title)

    assert isinstance(by_title, ScoringFunction)  # structural conformance
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

__all__ = ["ScoringFunction", "StateFactory", "StatefulScoringFunction"]


@runtime_checkable
class ScoringFunction(Protocol):
    """Stateless scorer: ``(value, query) -> float``."""

    def __call__(self, value: Any, query: str, /) -> float: ...


@runtime_checkable
class StatefulScoringFunction(Protocol):
    """Scorer reading a private per-item state: ``(state, value, query) -> float``.

    The function may mutate ``state`` (for example to advance an
    ``IncrementalLevenshtein``).  It must not touch any other item's state.
    """

    def __call__(self, state: Any, value: Any, query: str, /) -> float: ...


@runtime_checkable
class StateFactory(Protocol):
    """Builds the per-item state once, when the item is registered."""

    def __call__(self, value: Any, /) -> Any: ...
