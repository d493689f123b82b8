"""
Label source protocol.

The engine never reaches for global wallet state: the wallet history is
injected as an object implementing these four read-only queries.
"""

from typing import Optional, Protocol, Sequence, runtime_checkable


LabelGroupSequence = Sequence[Optional[Sequence[str]]]


@runtime_checkable
class LabelSource(Protocol):
    """
    Read-only provider of label groups from a wallet's history.

    Queries are invoked synchronously on every ``update_labels()`` and must be
    side-effect free.
    """

    def get_receive_key_label_groups(self) -> LabelGroupSequence:
        """Label groups of receive keys, newest last."""
        ...

    def get_receive_address_label_groups(self) -> LabelGroupSequence:
        """Label groups of receive addresses."""
        ...

    def get_change_address_label_groups(self) -> LabelGroupSequence:
        """Label groups of change addresses."""
        ...

    def get_transaction_label_groups(self) -> LabelGroupSequence:
        """Label groups of transactions, newest last."""
        ...
