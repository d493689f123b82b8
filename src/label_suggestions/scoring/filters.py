"""
Hard filters for obsolete or noise labels.

Removes labels that should never be suggested:
- "test", which people often type while trying the wallet
- Auto-generated labels from old Wasabi 1 versions (zerolink ...)
- The old auto-generated change label pattern "change of (..."
"""

from typing import Dict, Iterable, Mapping


# Compared case-insensitively against the whole label
UNWANTED_LABELS = (
    "test",
    "zerolink mixed coin",
    "zerolink change",
    "zerolink dequeued change",
)

# Compared case-insensitively against the start of the label
UNWANTED_LABEL_PREFIX = "change of ("


def is_unwanted_label(
    label: str,
    unwanted_labels: Iterable[str] = UNWANTED_LABELS,
    unwanted_prefix: str = UNWANTED_LABEL_PREFIX,
) -> bool:
    """
    Check whether a label is on the denylist or carries the legacy prefix.

    Examples:
        >>> is_unwanted_label("TEST")
        True
        >>> is_unwanted_label("Change of (1qv8...)")
        True
        >>> is_unwanted_label("rent")
        False
    """
    folded = label.casefold()
    if any(folded == unwanted.casefold() for unwanted in unwanted_labels):
        return True
    return folded.startswith(unwanted_prefix.casefold())


def filter_unwanted_labels(scores: Mapping[str, int]) -> Dict[str, int]:
    """
    Drop denylisted and legacy-prefixed labels from a score mapping.

    Entries are removed entirely, never zeroed. Insertion order is kept.

    Args:
        scores: Mapping from label text to accumulated score

    Returns:
        New dict without the unwanted labels
    """
    return {label: score for label, score in scores.items() if not is_unwanted_label(label)}
