"""
Label suggestion engine.

Wires a label source, the score aggregator, the suggestion pool, the chosen
labels and the ranking pipeline together behind one object.

Usage:
    >>> from label_suggestions import Intent, LabelHistory, StaticLabelSource, SuggestionLabels
    >>> source = StaticLabelSource(LabelHistory(receive_key_labels=[["rent"], ["coffee"]]))
    >>> engine = SuggestionLabels(source, Intent.RECEIVE, top_suggestions_count=1)
    >>> list(engine.top_suggestions)
    ['coffee']
    >>> engine.chosen_labels.append("coffee")
    >>> list(engine.all_suggestions)
    ['rent']
"""

import operator
from typing import Iterable, Optional, Union

import structlog

from .config import settings
from .models.labels import Intent, SuggestionSnapshot
from .pipeline.chosen import ChosenLabels
from .pipeline.pool import SuggestionPool
from .pipeline.ranking import RankingPipeline, SuggestionView
from .scoring.aggregator import aggregate_from_source
from .sources.base import LabelSource
from .version import AGGREGATOR_VERSION


logger = structlog.get_logger(__name__)


class SuggestionLabels:
    """
    Proposes labels for a new receive or send from the wallet's label history.

    ``top_suggestions`` and ``all_suggestions`` are live views: they always
    reflect the latest pool and the current ``chosen_labels``.
    """

    def __init__(
        self,
        source: LabelSource,
        intent: Union[Intent, str],
        top_suggestions_count: Optional[int] = None,
        labels: Optional[Iterable[str]] = None,
    ):
        """
        Args:
            source: Read-only provider of the wallet's label groups
            intent: Receive or send, fixed for the engine's lifetime
            top_suggestions_count: Size of the top view (default from settings)
            labels: Labels already chosen. A ChosenLabels instance is observed
                by reference; any other iterable is copied into a new one.

        Raises:
            ValueError: If intent is unknown or top_suggestions_count is negative
            TypeError: If top_suggestions_count is not an integer
        """
        if top_suggestions_count is None:
            top_suggestions_count = settings.default_top_suggestions_count
        top_suggestions_count = operator.index(top_suggestions_count)
        if top_suggestions_count < 0:
            raise ValueError(f"top_suggestions_count must be >= 0, got {top_suggestions_count}")

        self._source = source
        self._intent = Intent(intent)

        if isinstance(labels, ChosenLabels):
            self._chosen_labels = labels
        else:
            self._chosen_labels = ChosenLabels(labels)

        self._pool = SuggestionPool(self._chosen_labels.lock)

        self.update_labels()

        self._pipeline = RankingPipeline(self._pool, self._chosen_labels, top_suggestions_count)
        self._top_suggestions = SuggestionView(self._pipeline.top_suggestions)
        self._all_suggestions = SuggestionView(self._pipeline.all_suggestions)

        logger.info(
            "suggestion_engine_created",
            intent=self._intent.value,
            top_suggestions_count=top_suggestions_count,
            chosen_labels=len(self._chosen_labels),
            pool_size=len(self._pool),
        )

    @property
    def source(self) -> LabelSource:
        return self._source

    @property
    def intent(self) -> Intent:
        return self._intent

    @property
    def top_suggestions_count(self) -> int:
        return self._pipeline.top_suggestions_count

    @property
    def pool(self) -> SuggestionPool:
        return self._pool

    @property
    def top_suggestions(self) -> SuggestionView:
        return self._top_suggestions

    @property
    def all_suggestions(self) -> SuggestionView:
        return self._all_suggestions

    @property
    def chosen_labels(self) -> ChosenLabels:
        return self._chosen_labels

    # Same object as chosen_labels, under the name UI bindings use
    @property
    def labels(self) -> ChosenLabels:
        return self._chosen_labels

    def update_labels(self) -> None:
        """Recompute the suggestion pool from the label source."""
        scores = aggregate_from_source(self._intent, self._source)
        self._pool.replace_all(scores)

        logger.debug("suggestion_labels_updated", intent=self._intent.value, pool_size=len(scores))

    def snapshot(self) -> SuggestionSnapshot:
        """Consistent copy of the current views and chosen labels."""
        with self._pool.lock:
            return SuggestionSnapshot(
                intent=self._intent,
                top_suggestions_count=self.top_suggestions_count,
                top_suggestions=list(self._pipeline.top_suggestions()),
                all_suggestions=list(self._pipeline.all_suggestions()),
                chosen_labels=list(self._chosen_labels),
                aggregator_version=AGGREGATOR_VERSION,
            )

    def close(self) -> None:
        """Stop observing the pool and the chosen labels."""
        self._pipeline.close()
