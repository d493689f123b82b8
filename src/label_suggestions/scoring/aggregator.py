"""
Score aggregation for label suggestions.

Turns the four label-group sequences of a wallet's history into one mapping
from label text to an integer relevance score. Passes, in order:

1. Receive-key labels, newest group first, decaying multiplier 100 -> 1
2. Receive-address labels, flat weight
3. Change-address labels, flat weight 1
4. Transaction labels, newest group first, independent decaying multiplier

Weights are fixed. The intent decides which category gets the x100 boost.
"""

from functools import reduce
from typing import Dict, Iterable, Iterator, Optional, Sequence, Tuple

import structlog

from ..models.labels import Intent
from .filters import filter_unwanted_labels


logger = structlog.get_logger(__name__)


# ============================================================================
# WEIGHTS
# ============================================================================

INITIAL_MULTIPLIER = 100
MIN_MULTIPLIER = 1
INTENT_MATCH_WEIGHT = 100
INTENT_MISMATCH_WEIGHT = 1
CHANGE_ADDRESS_WEIGHT = 1

# Accumulator of a decaying pass: (current multiplier, scores so far)
_DecayState = Tuple[int, Dict[str, int]]

LabelGroupsInput = Optional[Sequence[Optional[Iterable[Optional[str]]]]]


def _intent_weight(intent: Intent, favoured: Intent) -> int:
    return INTENT_MATCH_WEIGHT if intent == favoured else INTENT_MISMATCH_WEIGHT


def _groups(label_groups: LabelGroupsInput) -> Sequence[Optional[Iterable[Optional[str]]]]:
    return list(label_groups) if label_groups else []


def _labels(group: Optional[Iterable[Optional[str]]]) -> Iterator[str]:
    """Flatten a label group; None groups, empty and non-string labels count as nothing."""
    if group is None:
        return iter(())
    return (label for label in group if isinstance(label, str) and label)


def _add(scores: Dict[str, int], labels: Iterable[str], score: int) -> Dict[str, int]:
    for label in labels:
        scores[label] = scores.get(label, 0) + score
    return scores


def _decaying_pass(
    scores: Dict[str, int],
    label_groups: LabelGroupsInput,
    weight: int,
) -> Dict[str, int]:
    """
    Score groups newest first with a multiplier shared across the whole pass.

    The multiplier starts at INITIAL_MULTIPLIER and drops by one after every
    group, never below MIN_MULTIPLIER.
    """

    def step(state: _DecayState, group: Optional[Iterable[Optional[str]]]) -> _DecayState:
        multiplier, acc = state
        acc = _add(acc, _labels(group), multiplier * weight)
        return max(multiplier - 1, MIN_MULTIPLIER), acc

    _, scores = reduce(step, reversed(_groups(label_groups)), (INITIAL_MULTIPLIER, scores))
    return scores


def _flat_pass(scores: Dict[str, int], label_groups: LabelGroupsInput, weight: int) -> Dict[str, int]:
    return reduce(lambda acc, group: _add(acc, _labels(group), weight), _groups(label_groups), scores)


def aggregate(
    intent: Intent,
    receive_key_label_groups: LabelGroupsInput,
    receive_address_label_groups: LabelGroupsInput,
    change_address_label_groups: LabelGroupsInput,
    transaction_label_groups: LabelGroupsInput,
) -> Dict[str, int]:
    """
    Aggregate label scores from the four history sources.

    Scores of the same label text add up across passes and across repeated
    occurrences. Unwanted labels are removed after accumulation.

    Args:
        intent: Current intent, boosts receive labels or transaction labels
        receive_key_label_groups: Receive key label groups, newest last
        receive_address_label_groups: Receive address label groups
        change_address_label_groups: Change address label groups
        transaction_label_groups: Transaction label groups, newest last

    Returns:
        Dict mapping label text to score (every score > 0)

    Examples:
        >>> aggregate(Intent.RECEIVE, [["rent"], ["coffee"]], [], [], [])
        {'coffee': 10000, 'rent': 9900}
    """
    intent = Intent(intent)
    scores: Dict[str, int] = {}

    # Recent receive keys count more, and even more when receiving
    scores = _decaying_pass(scores, receive_key_label_groups, _intent_weight(intent, Intent.RECEIVE))

    # Receive addresses should be dominant when receiving
    scores = _flat_pass(scores, receive_address_label_groups, _intent_weight(intent, Intent.RECEIVE))

    # Change addresses should be present but never dominant
    scores = _flat_pass(scores, change_address_label_groups, CHANGE_ADDRESS_WEIGHT)

    # Recent transactions count more, and even more when sending
    scores = _decaying_pass(scores, transaction_label_groups, _intent_weight(intent, Intent.SEND))

    result = filter_unwanted_labels(scores)

    logger.debug(
        "labels_aggregated",
        intent=intent.value,
        accumulated=len(scores),
        retained=len(result),
        removed=len(scores) - len(result),
    )

    return result


def aggregate_from_source(intent: Intent, source) -> Dict[str, int]:
    """
    Query a label source synchronously and aggregate its label groups.

    Args:
        intent: Current intent
        source: Any object implementing the LabelSource protocol

    Returns:
        Dict mapping label text to score
    """
    return aggregate(
        intent,
        source.get_receive_key_label_groups(),
        source.get_receive_address_label_groups(),
        source.get_change_address_label_groups(),
        source.get_transaction_label_groups(),
    )
