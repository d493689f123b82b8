"""
Suggestion pool: the scored, deduplicated candidate labels.

Replaced wholesale on every update; observers never see a half-cleared pool.
"""

import threading
from typing import Dict, Mapping, Optional, Tuple

import structlog

from ..models.labels import ScoredLabel
from .observable import Observable


logger = structlog.get_logger(__name__)


def ranking_key(entry: ScoredLabel) -> Tuple[int, str]:
    """Score descending, then text ascending."""
    return (-entry.score, entry.text)


class SuggestionPool(Observable):
    """Live collection of ScoredLabel entries, one per distinct label text."""

    def __init__(self, lock: Optional[threading.RLock] = None):
        super().__init__(lock)
        self._entries: Tuple[ScoredLabel, ...] = ()

    @property
    def entries(self) -> Tuple[ScoredLabel, ...]:
        with self._lock:
            return self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def scores(self) -> Dict[str, int]:
        """Copy of the pool as a label -> score dict."""
        with self._lock:
            return {entry.text: entry.score for entry in self._entries}

    def replace_all(self, entries: Mapping[str, int]) -> None:
        """
        Clear the pool and insert one entry per mapping item, atomically.

        Subscribers are notified once, after the swap.

        Args:
            entries: Mapping from label text to score (every score >= 1)

        Raises:
            pydantic.ValidationError: If a label is empty or a score is below 1
        """
        new_entries = tuple(
            sorted(
                (ScoredLabel(text=text, score=score) for text, score in entries.items()),
                key=ranking_key,
            )
        )

        with self._lock:
            self._entries = new_entries
            self._notify()

        logger.debug("suggestion_pool_replaced", size=len(new_entries))
