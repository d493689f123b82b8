"""
Label scoring module.

Public API for aggregating wallet history label groups into relevance scores
and removing labels that should never be suggested.
"""

from .aggregator import (
    CHANGE_ADDRESS_WEIGHT,
    INITIAL_MULTIPLIER,
    INTENT_MATCH_WEIGHT,
    INTENT_MISMATCH_WEIGHT,
    MIN_MULTIPLIER,
    aggregate,
    aggregate_from_source,
)
from .filters import (
    UNWANTED_LABEL_PREFIX,
    UNWANTED_LABELS,
    filter_unwanted_labels,
    is_unwanted_label,
)

__all__ = [
    "aggregate",
    "aggregate_from_source",
    "filter_unwanted_labels",
    "is_unwanted_label",
    "UNWANTED_LABELS",
    "UNWANTED_LABEL_PREFIX",
    "INITIAL_MULTIPLIER",
    "MIN_MULTIPLIER",
    "INTENT_MATCH_WEIGHT",
    "INTENT_MISMATCH_WEIGHT",
    "CHANGE_ADDRESS_WEIGHT",
]
