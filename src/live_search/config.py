"""SearchConfig and SortOrder for ranking-engine configuration.

SearchConfig is a frozen (immutable) dataclass holding the ranking options.
SortOrder selects the direction results are returned in.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

__all__ = ["SearchConfig", "SortOrder"]


class SortOrder(StrEnum):
    """Direction of ranked results.

    - ASCENDING:  least similar first.  This is the default ordering.
    - DESCENDING: most similar first.
    """

    ASCENDING = auto()
    DESCENDING = auto()


@dataclass(frozen=True, slots=True)
class SearchConfig:
    """Immutable configuration for ``SearchEngine``.

    Attributes:
        order: Direction of the returned ranking.  Ties have no defined order.
        parallel: When True, items are scored on a thread pool.  Scores are
            identical to the sequential path; only the sort is shared.
        max_workers: Thread pool size for parallel scoring.  None lets
            ``concurrent.futures`` pick.  Must be >= 1 when given.
    """

    order: SortOrder = SortOrder.ASCENDING
    parallel: bool = False
    max_workers: int | None = None

    def __post_init__(self) -> None:
        if self.max_workers is not None and self.max_workers < 1:
            msg = f"max_workers must be >= 1, got {self.max_workers}"
            raise ValueError(msg)
