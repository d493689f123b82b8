"""
Ranking pipeline over the suggestion pool.

Stages applied to the live pool contents:
1. Filter out labels present in the chosen labels (exact match)
2. Sort by score descending, then text ascending
3. Project to label text: top-K view and unbounded view

Any pool replacement or chosen-labels mutation marks the pipeline dirty and
the next read recomputes both views once. Rapid successive changes are
coalesced into that single recompute.
"""

import operator
from collections.abc import Sequence
from typing import Callable, Tuple

import structlog

from .chosen import ChosenLabels
from .observable import Observable
from .pool import SuggestionPool, ranking_key


logger = structlog.get_logger(__name__)


class RankingPipeline(Observable):
    """
    Derives the top and all suggestion views from a pool and chosen labels.

    Subscribers are notified when the views have been invalidated. The pipeline
    never mutates the pool or the chosen labels.
    """

    def __init__(self, pool: SuggestionPool, chosen_labels: ChosenLabels, top_suggestions_count: int):
        top_suggestions_count = operator.index(top_suggestions_count)
        if top_suggestions_count < 0:
            raise ValueError(f"top_suggestions_count must be >= 0, got {top_suggestions_count}")

        super().__init__(pool.lock)
        self._pool = pool
        self._chosen_labels = chosen_labels
        self._top_suggestions_count = top_suggestions_count

        self._dirty = True
        self._all: Tuple[str, ...] = ()
        self._top: Tuple[str, ...] = ()

        self._unsubscribers = [
            pool.subscribe(self._invalidate),
            chosen_labels.subscribe(self._invalidate),
        ]

    @property
    def top_suggestions_count(self) -> int:
        return self._top_suggestions_count

    def _invalidate(self) -> None:
        with self._lock:
            self._dirty = True
            self._notify()

    def _recompute(self) -> None:
        excluded = set(self._chosen_labels)
        ranked = sorted(
            (entry for entry in self._pool.entries if entry.text not in excluded),
            key=ranking_key,
        )
        self._all = tuple(entry.text for entry in ranked)
        self._top = self._all[: self._top_suggestions_count]
        self._dirty = False

        logger.debug(
            "suggestions_ranked",
            pool_size=len(self._pool),
            excluded=len(excluded),
            all_count=len(self._all),
            top_count=len(self._top),
        )

    def top_suggestions(self) -> Tuple[str, ...]:
        """Current top-K label texts."""
        with self._lock:
            if self._dirty:
                self._recompute()
            return self._top

    def all_suggestions(self) -> Tuple[str, ...]:
        """Current label texts, fully ranked, without chosen labels."""
        with self._lock:
            if self._dirty:
                self._recompute()
            return self._all

    def close(self) -> None:
        """Stop observing the pool and the chosen labels."""
        with self._lock:
            for unsubscribe in self._unsubscribers:
                unsubscribe()
            self._unsubscribers = []


class SuggestionView(Sequence):
    """
    Live read-only sequence of label texts.

    Every access reads the pipeline's current state, so a view held by the
    caller never goes stale.
    """

    def __init__(self, snapshot: Callable[[], Tuple[str, ...]]):
        self._snapshot = snapshot

    def __getitem__(self, index):
        return self._snapshot()[index]

    def __len__(self) -> int:
        return len(self._snapshot())

    def __iter__(self):
        return iter(self._snapshot())

    def __contains__(self, label) -> bool:
        return label in self._snapshot()

    def __eq__(self, other) -> bool:
        if isinstance(other, SuggestionView):
            return self._snapshot() == other._snapshot()
        if isinstance(other, (list, tuple)):
            return list(self._snapshot()) == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"SuggestionView({list(self._snapshot())!r})"
