"""Levenshtein matrix construction, edit-operation backtrace, weighted scoring.

The matrix for strings ``a`` and ``b`` has shape ``(len(a) + 1, len(b) + 1)``.
Cell ``[i, j]`` holds the minimum number of insertions, deletions and
substitutions turning ``a[:i]`` into ``b[:j]``.  Row 0 and column 0 are the
identity ramp ``0, 1, 2, ...``.

Strings are compared per code point, so a multi-byte character is a single
edit unit.

Weighted scoring walks the edit operations recovered from the matrix and
charges each run logarithmically::

    cost(INSERT L) = cost(DELETE L) = ln(1 + L)
    cost(SUBSTITUTE)                = ln(2) + ln(2)
    cost(NOOP L)                    = 0

so that one contiguous edit of ``k`` characters is cheaper than ``k``
scattered single-character edits.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum, auto

import numpy as np

__all__ = [
    "EditKind",
    "EditOperation",
    "edit_operations",
    "fill_rows",
    "levenshtein_matrix",
    "weighted_edit_cost",
    "weighted_edit_similarity",
]


class EditKind(StrEnum):
    """Direction of a run of edit steps in the backtrace.

    - INSERT:     take characters from the target only (move left).
    - DELETE:     drop characters of the original only (move up).
    - SUBSTITUTE: replace one character with another (move diagonally).
    - NOOP:       matching characters, no cost (move diagonally).
    """

    INSERT = auto()
    DELETE = auto()
    SUBSTITUTE = auto()
    NOOP = auto()


@dataclass(frozen=True, slots=True)
class EditOperation:
    """A run-length compressed edit step.

    Attributes:
        kind:   Direction of the run.
        length: Number of consecutive steps.  Always 1 for SUBSTITUTE.
    """

    kind: EditKind
    length: int = 1

    @property
    def cost(self) -> float:
        """Logarithmic cost of this run."""
        if self.kind == EditKind.NOOP:
            return 0.0
        if self.kind == EditKind.SUBSTITUTE:
            # one character leaves the original, one enters from the target
            return 2.0 * math.log1p(self.length)
        return math.log1p(self.length)


def fill_rows(matrix: np.ndarray, query: str, data: str, start: int = 1) -> None:
    """Recompute rows ``start..len(query)`` of ``matrix`` in place.

    Row ``start - 1`` must already be correct.  Column 0 of every recomputed
    row is reset to the row index.

    Args:
        matrix: Integer array of shape ``(len(query) + 1, len(data) + 1)``.
        query:  String indexing the rows.
        data:   String indexing the columns.
        start:  First row to recompute (>= 1).
    """
    n = len(data)
    prev_row = matrix[start - 1].tolist()

    for i in range(start, len(query) + 1):
        ch_q = query[i - 1]
        curr_row = [i] + [0] * n
        for j, ch_d in enumerate(data, start=1):
            cost = 0 if ch_q == ch_d else 1
            curr_row[j] = min(
                prev_row[j] + 1,  # up
                curr_row[j - 1] + 1,  # left
                prev_row[j - 1] + cost,  # diagonal
            )
        matrix[i] = curr_row
        prev_row = curr_row


def levenshtein_matrix(a: str, b: str) -> np.ndarray:
    """Build the full Levenshtein matrix for ``a`` (rows) and ``b`` (columns).

    Runs in O(len(a) * len(b)) time and space.
    """
    matrix = np.zeros((len(a) + 1, len(b) + 1), dtype=np.int64)
    matrix[0] = np.arange(len(b) + 1)
    matrix[:, 0] = np.arange(len(a) + 1)
    if a:
        fill_rows(matrix, a, b)
    return matrix


def edit_operations(
    matrix: np.ndarray,
    original: str,
    target: str,
) -> list[EditOperation]:
    """Recover the edit operations turning ``original`` into ``target``.

    Walks from ``(len(original), len(target))`` back to ``(0, 0)``.  A
    matching character pair always moves diagonally; otherwise the first of
    substitution, deletion, insertion whose cost reproduces the current cell
    is taken.  Consecutive steps in the same direction are merged into one
    run.  Runs in O(len(original) + len(target)).

    Args:
        matrix:   Matrix from ``levenshtein_matrix(original, target)``.
        original: Row string.
        target:   Column string.

    Returns:
        Operations in original-to-target order.
    """
    grid = matrix.tolist()
    operations: list[EditOperation] = []
    i = len(original)
    j = len(target)

    while i > 0 and j > 0:
        if original[i - 1] == target[j - 1]:
            run = 0
            while i > 0 and j > 0 and original[i - 1] == target[j - 1]:
                run += 1
                i -= 1
                j -= 1
            operations.append(EditOperation(EditKind.NOOP, run))
            continue

        current = grid[i][j]
        if current == grid[i - 1][j - 1] + 1:
            operations.append(EditOperation(EditKind.SUBSTITUTE, 1))
            i -= 1
            j -= 1
        elif current == grid[i - 1][j] + 1:
            run = 0
            while i > 0 and grid[i][j] == grid[i - 1][j] + 1:
                run += 1
                i -= 1
            operations.append(EditOperation(EditKind.DELETE, run))
        else:
            run = 0
            while j > 0 and grid[i][j] == grid[i][j - 1] + 1:
                run += 1
                j -= 1
            operations.append(EditOperation(EditKind.INSERT, run))

    if i > 0:
        operations.append(EditOperation(EditKind.DELETE, i))
    if j > 0:
        operations.append(EditOperation(EditKind.INSERT, j))

    operations.reverse()
    return operations


def weighted_edit_cost(operations: list[EditOperation]) -> float:
    """Sum the logarithmic costs of ``operations``."""
    return sum((op.cost for op in operations), 0.0)


def weighted_edit_similarity(matrix: np.ndarray, a: str, b: str) -> float:
    """Convert the weighted edit cost encoded in ``matrix`` into a similarity.

    Returns ``(maxlen - cost) / maxlen`` with ``maxlen = max(len(a), len(b))``,
    or 0.0 when both strings are empty.  The value is not clamped and can go
    below zero for strings that share almost nothing.
    """
    max_len = max(len(a), len(b))
    if max_len == 0:
        return 0.0
    cost = weighted_edit_cost(edit_operations(matrix, a, b))
    return (max_len - cost) / max_len
