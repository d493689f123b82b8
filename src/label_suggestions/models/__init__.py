# Data models for label suggestions

from .labels import Intent, LabelGroups, LabelHistory, ScoredLabel, SuggestionSnapshot

__all__ = [
    "Intent",
    "LabelGroups",
    "LabelHistory",
    "ScoredLabel",
    "SuggestionSnapshot",
]
