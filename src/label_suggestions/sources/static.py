"""
In-memory label source backed by a LabelHistory model.

Used by the CLI to feed a JSON export of a wallet's label history to the
engine, and by tests as a deterministic provider.
"""

import json
from pathlib import Path
from typing import Optional, Union

import structlog

from ..models.labels import LabelHistory
from .base import LabelGroupSequence


logger = structlog.get_logger(__name__)


class StaticLabelSource:
    """
    LabelSource over a LabelHistory.

    The history can be swapped with ``set_history`` to simulate new wallet
    activity between two ``update_labels()`` calls.
    """

    def __init__(self, history: Optional[LabelHistory] = None):
        self._history = history if history is not None else LabelHistory()

    @property
    def history(self) -> LabelHistory:
        return self._history

    def set_history(self, history: LabelHistory) -> None:
        self._history = history

    def get_receive_key_label_groups(self) -> LabelGroupSequence:
        return self._history.receive_key_labels

    def get_receive_address_label_groups(self) -> LabelGroupSequence:
        return self._history.receive_address_labels

    def get_change_address_label_groups(self) -> LabelGroupSequence:
        return self._history.change_address_labels

    def get_transaction_label_groups(self) -> LabelGroupSequence:
        return self._history.transaction_labels


def load_label_history(path: Union[str, Path]) -> LabelHistory:
    """
    Load a LabelHistory from a JSON file.

    Expected format:
        {
          "receive_key_labels": [["rent"], ["coffee", "friends"]],
          "receive_address_labels": [["salary"]],
          "change_address_labels": [],
          "transaction_labels": [["exchange"]]
        }

    Missing keys default to empty sequences.

    Args:
        path: Path to the JSON file

    Returns:
        LabelHistory instance

    Raises:
        FileNotFoundError: If the file does not exist
        pydantic.ValidationError: If the content does not match the model
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    history = LabelHistory.model_validate(data)

    logger.debug(
        "label_history_loaded",
        path=str(path),
        receive_key_groups=len(history.receive_key_labels),
        receive_address_groups=len(history.receive_address_labels),
        change_address_groups=len(history.change_address_labels),
        transaction_groups=len(history.transaction_labels),
    )

    return history
