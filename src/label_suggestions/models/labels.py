"""
Data models for label suggestions.

This module defines the intent enum, the scored pool entry, the in-memory
label history used as a label source and the snapshot returned to callers.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# ENUMS
# ============================================================================

class Intent(str, Enum):
    """Whether the current operation receives or sends funds."""
    RECEIVE = "receive"
    SEND = "send"


# ============================================================================
# POOL ENTRIES
# ============================================================================

class ScoredLabel(BaseModel):
    """
    A single label in the suggestion pool with its accumulated score.

    Text is case preserving. The pool holds at most one entry per exact text.
    """

    model_config = ConfigDict(frozen=True)

    text: str = Field(description="Label text as entered by the user", min_length=1)
    score: int = Field(description="Accumulated relevance score", ge=1)


# ============================================================================
# LABEL HISTORY
# ============================================================================

# A label group is the set of labels that co-occurred on one key/address/transaction.
# None is accepted and treated as an empty group.
LabelGroups = List[Optional[List[Optional[str]]]]


class LabelHistory(BaseModel):
    """
    The four label-group sequences read from a wallet's history.

    Receive-key and transaction groups are stored oldest first (newest last).
    """

    receive_key_labels: LabelGroups = Field(
        default_factory=list, description="Labels of receive keys, newest last"
    )
    receive_address_labels: LabelGroups = Field(
        default_factory=list, description="Labels of receive addresses"
    )
    change_address_labels: LabelGroups = Field(
        default_factory=list, description="Labels of change addresses"
    )
    transaction_labels: LabelGroups = Field(
        default_factory=list, description="Labels of transactions, newest last"
    )


# ============================================================================
# SNAPSHOT
# ============================================================================

class SuggestionSnapshot(BaseModel):
    """Point-in-time copy of an engine's suggestion views."""

    intent: Intent
    top_suggestions_count: int = Field(ge=0)
    top_suggestions: List[str] = Field(default_factory=list)
    all_suggestions: List[str] = Field(default_factory=list)
    chosen_labels: List[str] = Field(default_factory=list)
    aggregator_version: str = Field(description="Scoring algorithm version for reproducibility")
