"""levenshtein subpackage: edit distance, weighted similarity, incremental state.

Example::

    from live_search.levenshtein import (
        IncrementalLevenshtein,
        levenshtein_similarity,
        weighted_levenshtein_similarity,
    )

    weighted_levenshtein_similarity("hallo", "hell")   # > "welt", > "world"

    state = IncrementalLevenshtein.for_data("hello")
    for query in ("h", "he", "hel"):
        assert state.similarity(query) == levenshtein_similarity(query, "hello")
"""

from __future__ import annotations

from live_search.levenshtein.base import (
    levenshtein_distance,
    levenshtein_similarity,
    weighted_levenshtein_similarity,
)
from live_search.levenshtein.incremental import IncrementalLevenshtein
from live_search.levenshtein.matrix import (
    EditKind,
    EditOperation,
    edit_operations,
    levenshtein_matrix,
    weighted_edit_similarity,
)

__all__ = [
    "EditKind",
    "EditOperation",
    "IncrementalLevenshtein",
    "edit_operations",
    "levenshtein_distance",
    "levenshtein_matrix",
    "levenshtein_similarity",
    "weighted_edit_similarity",
    "weighted_levenshtein_similarity",
]
