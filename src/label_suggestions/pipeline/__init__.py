"""
Reactive suggestion pipeline.

Suggestion pool and chosen labels feed a ranking pipeline that exposes a
bounded top view and an unbounded view, both always consistent with the
current pool and exclusions.
"""

from .chosen import ChosenLabels
from .observable import Observable
from .pool import SuggestionPool, ranking_key
from .ranking import RankingPipeline, SuggestionView

__all__ = [
    "ChosenLabels",
    "Observable",
    "RankingPipeline",
    "SuggestionPool",
    "SuggestionView",
    "ranking_key",
]
