"""Plain and weighted Levenshtein similarity between two whole strings."""

from __future__ import annotations

from live_search.levenshtein.matrix import levenshtein_matrix, weighted_edit_similarity

__all__ = [
    "levenshtein_distance",
    "levenshtein_similarity",
    "weighted_levenshtein_similarity",
]


def levenshtein_distance(a: str, b: str) -> int:
    """Compute the Levenshtein (edit) distance between two strings.

    Args:
        a: First string.
        b: Second string.

    Returns:
        The minimum number of single-character insertions, deletions or
        substitutions turning ``a`` into ``b``.  0 when both are empty.
    """
    matrix = levenshtein_matrix(a, b)
    return int(matrix[len(a), len(b)])


def levenshtein_similarity(a: str, b: str) -> float:
    """Normalized Levenshtein similarity.

    Similarity is defined as::

        (max(len(a), len(b)) - levenshtein(a, b)) / max(len(a), len(b))

    Two empty strings score 0.0, not 1.0: there is nothing to match.

    Returns:
        Float in [0.0, 1.0].
    """
    max_len = max(len(a), len(b))
    if max_len == 0:
        return 0.0
    return (max_len - levenshtein_distance(a, b)) / max_len


def weighted_levenshtein_similarity(a: str, b: str) -> float:
    """Similarity based on run-length weighted edit operations.

    See ``live_search.levenshtein.matrix`` for the cost model.
    """
    matrix = levenshtein_matrix(a, b)
    return weighted_edit_similarity(matrix, a, b)
