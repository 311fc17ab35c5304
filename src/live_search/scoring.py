"""Similarity: max-of-weighted combination of scoring functions.

A ``Similarity`` is an ordered list of ``ScoringEntry`` objects.  For an item
``value`` and a query ``q`` the combined score is::

    max(entry.weight * entry.score(state_i, value, q) for each entry i)

so one strong field match (an exact title hit) is never diluted by weak
matches elsewhere.  Combining with ``max`` makes the result independent of
the order entries were added in.

Stateful entries own one slot in the per-item state tuple built by
``Similarity.state``; stateless entries get ``None`` in their slot so the
tuple always lines up with the entry list.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from live_search.protocols import (
        ScoringFunction,
        StatefulScoringFunction,
        StateFactory,
    )

__all__ = ["ScoringEntry", "Similarity"]


@dataclass(frozen=True, slots=True)
class ScoringEntry:
    """One weighted scoring function.

    Attributes:
        function: ``(value, query) -> float`` when ``state_factory`` is None,
            otherwise ``(state, value, query) -> float``.
        weight: Non-negative finite multiplier applied to the function result.
        state_factory: Builds the per-item state for a stateful function.
    """

    function: ScoringFunction | StatefulScoringFunction
    weight: float = 1.0
    state_factory: StateFactory | None = None

    def __post_init__(self) -> None:
        if not math.isfinite(self.weight) or self.weight < 0.0:
            msg = f"weight must be a finite number >= 0, got {self.weight}"
            raise ValueError(msg)

    @property
    def stateful(self) -> bool:
        """True when the entry keeps per-item state."""
        return self.state_factory is not None

    def state(self, value: Any) -> Any:
        """Build this entry's state slot for ``value`` (None when stateless)."""
        if self.state_factory is None:
            return None
        return self.state_factory(value)

    def score(self, state: Any, value: Any, query: str) -> float:
        """Weighted score of ``value`` against ``query``."""
        if self.state_factory is None:
            raw = self.function(value, query)  # type: ignore[call-arg]
        else:
            raw = self.function(state, value, query)  # type: ignore[call-arg]
        return self.weight * float(raw)


class Similarity:
    """Ordered, immutable chain of scoring entries.

    ``with_entry`` returns a new ``Similarity``; the receiver is unchanged.

    Example::

        from live_search.scoring import ScoringEntry, Similarity

        sim = Similarity().with_entry(ScoringEntry(lambda v, q: 0.5, weight=2.0))
        sim.similarity(sim.state("x"), "x", "q")   # 1.0
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Sequence[ScoringEntry] = ()) -> None:
        self._entries: tuple[ScoringEntry, ...] = tuple(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Similarity(entries={list(self._entries)!r})"

    @property
    def entries(self) -> tuple[ScoringEntry, ...]:
        """Entries in the order they were added."""
        return self._entries

    @property
    def stateful(self) -> bool:
        """True when at least one entry keeps per-item state."""
        return any(entry.stateful for entry in self._entries)

    def with_entry(self, entry: ScoringEntry) -> Similarity:
        """Return a new chain with ``entry`` appended."""
        return Similarity((*self._entries, entry))

    def state(self, value: Any) -> tuple[Any, ...]:
        """Build the per-item state tuple, one slot per entry."""
        return tuple(entry.state(value) for entry in self._entries)

    def similarity(self, states: tuple[Any, ...], value: Any, query: str) -> float:
        """Combined score: the maximum weighted score over all entries.

        Every entry is evaluated exactly once, so stateful entries always see
        the latest query.  Returns 0.0 when there are no entries.

        Args:
            states: Tuple from ``state(value)``.  Slots are handed to their
                entries and may be mutated by them.
            value:  The item being scored.
            query:  The query string.
        """
        assert len(states) == len(self._entries), (
            "per-item state out of step with scoring entries"
        )
        best: float | None = None
        for entry, state in zip(self._entries, states, strict=True):
            score = entry.score(state, value, query)
            if best is None or score > best:
                best = score
        return 0.0 if best is None else best
