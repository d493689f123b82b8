"""
Label suggestions for wallet receive and send dialogs.

Ranks labels from a wallet's history and proposes the most relevant ones,
excluding labels the user already chose.
"""

from .engine import SuggestionLabels
from .models.labels import Intent, LabelHistory, ScoredLabel, SuggestionSnapshot
from .pipeline import ChosenLabels, RankingPipeline, SuggestionPool, SuggestionView
from .scoring import aggregate
from .sources import LabelSource, StaticLabelSource, load_label_history
from .version import __version__

__all__ = [
    "SuggestionLabels",
    "Intent",
    "LabelHistory",
    "ScoredLabel",
    "SuggestionSnapshot",
    "ChosenLabels",
    "RankingPipeline",
    "SuggestionPool",
    "SuggestionView",
    "aggregate",
    "LabelSource",
    "StaticLabelSource",
    "load_label_history",
    "__version__",
]
