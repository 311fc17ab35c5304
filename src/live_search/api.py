"""One-shot ranking helpers.

Each call builds a fresh ``SearchEngine`` so no state survives between calls.
Use ``SearchEngine`` directly for live typing, where the per-item matrices
are worth keeping.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from live_search.config import SearchConfig
from live_search.engine import SearchEngine
from live_search.levenshtein.base import weighted_levenshtein_similarity
from live_search.protocols import ScoringFunction

__all__ = ["rank", "search"]


def _query_first(value: Any, query: str) -> float:
    return weighted_levenshtein_similarity(query, str(value))


def rank(
    values: Iterable[Any],
    query: str,
    function: ScoringFunction | None = None,
    weight: float = 1.0,
    config: SearchConfig | None = None,
) -> list[tuple[Any, float]]:
    """Rank ``values`` against ``query``.

    Args:
        values:   Items to rank.
        query:    Query string.
        function: ``(value, query) -> float`` scorer.  Defaults to the
                  weighted Levenshtein similarity of ``query`` and
                  ``str(value)``.
        weight:   Multiplier for ``function``.
        config:   Ranking options.  Defaults to ``SearchConfig()``.

    Returns:
        ``(value, score)`` pairs, ascending by score unless ``config`` says
        otherwise.
    """
    engine = SearchEngine(values, config=config)
    engine.with_function(function if function is not None else _query_first, weight)
    return engine.drain_similarities(query)


def search(
    values: Iterable[Any],
    query: str,
    function: ScoringFunction | None = None,
    weight: float = 1.0,
    config: SearchConfig | None = None,
) -> list[Any]:
    """Like ``rank`` but returns the values only."""
    ranked = rank(values, query, function=function, weight=weight, config=config)
    return [value for value, _ in ranked]
