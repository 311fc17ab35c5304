"""SearchEngine: ranks owned items against a query with combined scoring.

Architecture:
- Items are stored in insertion order as ``[states, value]`` pairs.  The
  stored list is never reordered; ranking sorts a derived list.
- ``states`` is the tuple built by ``Similarity.state(value)`` at
  registration time.  Adding a scoring entry rebuilds every item's tuple so
  it keeps one slot per entry.
- Scoring a query hands each item's own state tuple to the ``Similarity``.
  Stateful entries (``IncrementalLevenshtein``) advance as a side effect, so
  a query typed one character at a time only recomputes the new matrix rows.
- Parallel scoring submits one task per item to a thread pool.  No two
  tasks share state, so no locking is needed; the sort runs afterwards on the
  calling thread.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING, Any

import numpy as np

from live_search.config import SearchConfig, SortOrder
from live_search.levenshtein.incremental import IncrementalLevenshtein
from live_search.scoring import ScoringEntry, Similarity

if TYPE_CHECKING:
    from live_search.protocols import (
        ScoringFunction,
        StatefulScoringFunction,
        StateFactory,
    )

__all__ = ["SearchEngine"]

logger = logging.getLogger(__name__)


class SearchEngine:
    """In-memory ranking engine with composable, optionally stateful scoring.

    Example::

        from live_search import SearchEngine, weighted_levenshtein_similarity

        engine = SearchEngine(["hell", "world", "welt"]).with_function(
            lambda v, q: weighted_levenshtein_similarity(v, q)
        )
        engine.search("hallo")[-1]   # "hell": ascending, best match last

    Live typing with per-field incremental matrices::

        engine = (
            SearchEngine(books)
            .with_incremental_levenshtein(key=lambda b: b.title)
            .with_incremental_levenshtein(key=lambda b: b.author, weight=0.8)
        )
        for query in ("f", "fi", "fit"):
            engine.rank(query)
    """

    def __init__(
        self,
        values: Iterable[Any] | None = None,
        config: SearchConfig | None = None,
    ) -> None:
        """Initialise the engine.

        Args:
            values: Initial items.  The engine takes ownership of them.
            config: Ranking options.  Defaults to ``SearchConfig()``
                (ascending, sequential).
        """
        self._config = config if config is not None else SearchConfig()
        self._similarity = Similarity()
        self._items: list[list[Any]] = []
        if values is not None:
            self.add_values(values)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return (
            f"SearchEngine(items={len(self._items)}, "
            f"entries={len(self._similarity)}, config={self._config!r})"
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def config(self) -> SearchConfig:
        return self._config

    @property
    def similarity(self) -> Similarity:
        """The scoring chain currently in effect."""
        return self._similarity

    @property
    def values(self) -> list[Any]:
        """Registered items in insertion order."""
        return [value for _, value in self._items]

    def items_with_state(self) -> list[tuple[tuple[Any, ...], Any]]:
        """``(states, value)`` pairs in insertion order.

        The state objects are the live ones; mutating them affects later
        rankings.
        """
        return [(states, value) for states, value in self._items]

    # ------------------------------------------------------------------
    # Item registration
    # ------------------------------------------------------------------

    def add_value(self, value: Any) -> None:
        """Register one item."""
        self._items.append([self._similarity.state(value), value])

    def add_values(self, values: Iterable[Any]) -> None:
        """Register several items, keeping their order."""
        self._items.extend([self._similarity.state(v), v] for v in values)

    def with_value(self, value: Any) -> SearchEngine:
        """Builder form of ``add_value``."""
        self.add_value(value)
        return self

    def with_values(self, values: Iterable[Any]) -> SearchEngine:
        """Builder form of ``add_values``."""
        self.add_values(values)
        return self

    # ------------------------------------------------------------------
    # Scoring configuration
    # ------------------------------------------------------------------

    def with_entry(self, entry: ScoringEntry) -> SearchEngine:
        """Attach a scoring entry and rebuild every item's state tuple.

        All new states are built before anything is replaced, so a raising
        state factory leaves the engine as it was.
        """
        similarity = self._similarity.with_entry(entry)
        if self._items:
            logger.debug(
                "Rebuilding state for %d items after adding scoring entry %d",
                len(self._items),
                len(similarity),
            )
        new_states = [similarity.state(value) for _, value in self._items]
        self._similarity = similarity
        for item, states in zip(self._items, new_states, strict=True):
            item[0] = states
        return self

    def with_function(
        self,
        function: ScoringFunction,
        weight: float = 1.0,
    ) -> SearchEngine:
        """Attach a stateless ``(value, query) -> float`` scorer."""
        return self.with_entry(ScoringEntry(function, weight))

    def with_state(
        self,
        state_factory: StateFactory,
        function: StatefulScoringFunction,
        weight: float = 1.0,
    ) -> SearchEngine:
        """Attach a stateful ``(state, value, query) -> float`` scorer.

        ``state_factory(value)`` runs once per item, now for items already
        registered and at registration for later ones.
        """
        return self.with_entry(ScoringEntry(function, weight, state_factory))

    def with_incremental_levenshtein(
        self,
        key: Callable[[Any], str] | None = None,
        weight: float = 1.0,
        weighted: bool = True,
    ) -> SearchEngine:
        """Attach an ``IncrementalLevenshtein`` scorer over ``key(value)``.

        Args:
            key: Extracts the text to match from an item.  Defaults to
                ``str(value)``.
            weight: Multiplier for this field.
            weighted: Use the run-length weighted similarity (default) rather
                than the plain normalized one.
        """
        extract = key if key is not None else str

        def make_state(value: Any) -> IncrementalLevenshtein:
            return IncrementalLevenshtein.for_data(extract(value))

        if weighted:

            def score(state: IncrementalLevenshtein, value: Any, query: str) -> float:
                return state.weighted_similarity(query)

        else:

            def score(state: IncrementalLevenshtein, value: Any, query: str) -> float:
                return state.similarity(query)

        return self.with_state(make_state, score, weight)

    # ------------------------------------------------------------------
    # Ranking
    # ------------------------------------------------------------------

    def similarities(self, query: str) -> list[tuple[Any, float]]:
        """Score every item and return ``(value, score)`` pairs sorted by score.

        Sorted ascending (least similar first) unless the config asks for
        ``SortOrder.DESCENDING``.  Items stay registered.
        """
        return self._rank(self._items, query)

    def rank(self, query: str) -> list[tuple[Any, float]]:
        """Alias of ``similarities``."""
        return self.similarities(query)

    def search(self, query: str) -> list[Any]:
        """Items ordered like ``similarities(query)``, scores dropped."""
        return [value for value, _ in self.similarities(query)]

    def drain_similarities(self, query: str) -> list[tuple[Any, float]]:
        """Rank like ``similarities`` and hand every item over to the caller.

        The engine is empty afterwards; its scoring chain is kept.  If a
        scorer raises, every item stays registered.
        """
        ranked = self._rank(self._items, query)
        self._items = []
        return ranked

    def drain_search(self, query: str) -> list[Any]:
        """Consuming form of ``search``."""
        return [value for value, _ in self.drain_similarities(query)]

    def _rank(self, items: list[list[Any]], query: str) -> list[tuple[Any, float]]:
        if not items:
            return []

        t0 = time.perf_counter()
        if self._config.parallel:
            scores = self._score_parallel(items, query)
        else:
            scores = [self._score(item, query) for item in items]

        values = np.asarray(scores, dtype=float)
        if self._config.order == SortOrder.DESCENDING:
            values = -values
        order = np.argsort(values, kind="quicksort")

        ranked = [(items[i][1], scores[i]) for i in order.tolist()]
        logger.debug(
            "Ranked %d items for query %r in %.3f ms",
            len(ranked),
            query,
            (time.perf_counter() - t0) * 1000.0,
        )
        return ranked

    def _score(self, item: list[Any], query: str) -> float:
        return self._similarity.similarity(item[0], item[1], query)

    def _score_parallel(self, items: list[list[Any]], query: str) -> list[float]:
        with ThreadPoolExecutor(max_workers=self._config.max_workers) as executor:
            return list(executor.map(lambda item: self._score(item, query), items))
