"""
Observable list of labels the user already chose for the current operation.
"""

import threading
from collections.abc import MutableSequence
from typing import Any, Iterable, Optional

from .observable import Observable


class ChosenLabels(Observable, MutableSequence):
    """
    Mutable ordered sequence of label strings that notifies on every change.

    The caller owns and mutates it; the ranking pipeline only observes it.
    Bulk operations (extend, clear, reverse, sort, slice assignment) notify once.
    """

    def __init__(self, labels: Optional[Iterable[str]] = None, lock: Optional[threading.RLock] = None):
        super().__init__(lock)
        self._items = list(labels) if labels is not None else []

    def __getitem__(self, index):
        with self._lock:
            return self._items[index]

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __contains__(self, label: Any) -> bool:
        with self._lock:
            return label in self._items

    def __iter__(self):
        with self._lock:
            return iter(list(self._items))

    def __setitem__(self, index, value) -> None:
        with self._lock:
            if isinstance(index, slice):
                self._items[index] = list(value)
            else:
                self._items[index] = value
            self._notify()

    def __delitem__(self, index) -> None:
        with self._lock:
            del self._items[index]
            self._notify()

    def insert(self, index: int, value: str) -> None:
        with self._lock:
            self._items.insert(index, value)
            self._notify()

    def extend(self, values: Iterable[str]) -> None:
        values = list(values)
        with self._lock:
            self._items.extend(values)
            self._notify()

    def clear(self) -> None:
        with self._lock:
            self._items.clear()
            self._notify()

    def reverse(self) -> None:
        with self._lock:
            self._items.reverse()
            self._notify()

    def sort(self, *, key=None, reverse: bool = False) -> None:
        with self._lock:
            self._items.sort(key=key, reverse=reverse)
            self._notify()

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, (ChosenLabels, list, tuple)):
            return list(self) == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"ChosenLabels({list(self)!r})"
