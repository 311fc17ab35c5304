"""Sequence-matching similarity, a cheap stateless companion to Levenshtein.

``sequence_similarity`` is the Ratcliff/Obershelp ratio from ``difflib``:
``2 * M / T`` where ``M`` counts characters in matching blocks and ``T`` is
the combined length.  It rewards long shared substrings regardless of where
they sit, which suits description-like fields better than edit distance.
"""

from __future__ import annotations

from difflib import SequenceMatcher

__all__ = ["sequence_similarity"]


def sequence_similarity(a: str, b: str) -> float:
    """Return the Ratcliff/Obershelp similarity of ``a`` and ``b``.

    Returns:
        Float in [0.0, 1.0].  Two empty strings score 0.0, consistent with
        ``levenshtein_similarity``.
    """
    if not a and not b:
        return 0.0
    return SequenceMatcher(None, a, b, autojunk=False).ratio()
