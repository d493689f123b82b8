"""
Minimal observer abstraction for the ranking pipeline.

Every observable in one engine shares the same re-entrant lock, so a pool
swap, a chosen-labels mutation and the invalidation they trigger happen as
one serialized update.
"""

import threading
from typing import Callable, List, Optional


Callback = Callable[[], None]


class Observable:
    """Holds subscribers and notifies them synchronously after a change."""

    def __init__(self, lock: Optional[threading.RLock] = None):
        self._lock = lock if lock is not None else threading.RLock()
        self._subscribers: List[Callback] = []

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    def subscribe(self, callback: Callback) -> Callable[[], None]:
        """
        Register a callback invoked after every change.

        Returns:
            A function that removes the subscription
        """
        with self._lock:
            self._subscribers.append(callback)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self) -> None:
        # Caller holds the lock
        for callback in list(self._subscribers):
            callback()
