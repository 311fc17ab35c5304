"""IncrementalLevenshtein: a Levenshtein matrix kept in step with an edited query.

Live-typing search compares a slowly changing query against the same data
string over and over.  Row ``i`` of the matrix depends only on ``query[:i]``
and on the data string, so when a new query shares its first ``k``
characters with the previous one, rows ``0..k`` are still valid and only rows
``k+1..len(new_query)`` need recomputing.  Appending one character therefore
costs O(len(data)) instead of O(len(query) * len(data)).

The object is mutated by every scoring call: ``similarity(q)`` first moves the
stored query to ``q``, then scores.  Do not share one instance between
threads without external locking.
"""

from __future__ import annotations

import numpy as np

from live_search.levenshtein.matrix import (
    fill_rows,
    levenshtein_matrix,
    weighted_edit_similarity,
)

__all__ = ["IncrementalLevenshtein"]


def _common_prefix_length(a: str, b: str) -> int:
    length = 0
    for ch_a, ch_b in zip(a, b):
        if ch_a != ch_b:
            break
        length += 1
    return length


class IncrementalLevenshtein:
    """Levenshtein matrix for a fixed data string and an evolving query.

    After every update the matrix equals ``levenshtein_matrix(query, data)``
    computed from scratch.

    Example::

        from live_search.levenshtein import IncrementalLevenshtein

        state = IncrementalLevenshtein.for_data("hello")
        state.similarity("h")     # 0.2
        state.similarity("he")    # 0.4, only the new row is computed
        state.similarity("help")  # 0.6
    """

    __slots__ = ("_data", "_matrix", "_query")

    def __init__(self, query: str, data: str) -> None:
        """Build the full matrix for ``(query, data)``.

        Args:
            query: Initial query, usually the empty string.
            data:  Reference string.  Fixed for the lifetime of the object.
        """
        self._query = query
        self._data = data
        self._matrix = levenshtein_matrix(query, data)

    @classmethod
    def for_data(cls, data: str) -> IncrementalLevenshtein:
        """Seed a state for ``data`` with an empty query."""
        return cls("", data)

    def __repr__(self) -> str:
        return f"IncrementalLevenshtein(query={self._query!r}, data={self._data!r})"

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def query(self) -> str:
        """The query the matrix currently reflects."""
        return self._query

    @property
    def data(self) -> str:
        """The reference string."""
        return self._data

    @property
    def matrix(self) -> np.ndarray:
        """The current matrix.  Read-only by convention; do not write to it."""
        return self._matrix

    # ------------------------------------------------------------------
    # Maintenance
    # ------------------------------------------------------------------

    def update(self, new_query: str) -> None:
        """Move the matrix from the stored query to ``new_query``.

        Rows past the common prefix are resized and recomputed; rows inside
        it are left untouched.  A query sharing no prefix with the previous
        one is a full recomputation.
        """
        old_len = len(self._query)
        new_len = len(new_query)
        keep = _common_prefix_length(self._query, new_query)

        if new_len > old_len:
            extra = np.zeros((new_len - old_len, len(self._data) + 1), dtype=np.int64)
            self._matrix = np.vstack([self._matrix, extra])
        elif new_len < old_len:
            self._matrix = self._matrix[: new_len + 1].copy()

        self._query = new_query
        self._matrix[new_len, 0] = new_len

        if new_len > keep:
            fill_rows(self._matrix, new_query, self._data, start=keep + 1)

        assert self._matrix.shape == (new_len + 1, len(self._data) + 1), (
            "incremental matrix out of step with its query"
        )

    # ------------------------------------------------------------------
    # Scoring (each call updates first)
    # ------------------------------------------------------------------

    def distance(self, new_query: str) -> int:
        """Update to ``new_query`` and return the edit distance to the data."""
        self.update(new_query)
        return int(self._matrix[len(self._query), len(self._data)])

    def similarity(self, new_query: str) -> float:
        """Update to ``new_query`` and return the normalized similarity.

        Matches ``levenshtein_similarity(new_query, data)``: 0.0 when both
        strings are empty.
        """
        distance = self.distance(new_query)
        max_len = max(len(self._query), len(self._data))
        if max_len == 0:
            return 0.0
        return (max_len - distance) / max_len

    def weighted_similarity(self, new_query: str) -> float:
        """Update to ``new_query`` and return the weighted similarity.

        Matches ``weighted_levenshtein_similarity(new_query, data)``.
        """
        self.update(new_query)
        return weighted_edit_similarity(self._matrix, self._query, self._data)
