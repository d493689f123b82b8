"""
Label sources.

The wallet history is an external collaborator; this package defines its
protocol and a static in-memory implementation.
"""

from .base import LabelGroupSequence, LabelSource
from .static import StaticLabelSource, load_label_history

__all__ = [
    "LabelGroupSequence",
    "LabelSource",
    "StaticLabelSource",
    "load_label_history",
]
