"""
Version constants for the label suggestion engine.

Same versions + same label history + same chosen labels = same suggestions.
"""

__version__ = "1.0.0"

# Component versions (update these when implementations change)
AGGREGATOR_VERSION = "label-aggregator-1.0.0"
