"""Live search - incremental edit-distance ranking for in-memory collections."""

from __future__ import annotations

from live_search.api import rank, search
from live_search.config import SearchConfig, SortOrder
from live_search.engine import SearchEngine
from live_search.levenshtein import (
    IncrementalLevenshtein,
    levenshtein_distance,
    levenshtein_similarity,
    weighted_levenshtein_similarity,
)
from live_search.scoring import ScoringEntry, Similarity
from live_search.similarity import sequence_similarity

__version__: str = "0.1.0"
__all__: list[str] = [
    "IncrementalLevenshtein",
    "ScoringEntry",
    "SearchConfig",
    "SearchEngine",
    "Similarity",
    "SortOrder",
    "levenshtein_distance",
    "levenshtein_similarity",
    "rank",
    "search",
    "sequence_similarity",
    "weighted_levenshtein_similarity",
]
