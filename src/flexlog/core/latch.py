from __future__ import annotations

"""
Keyed One-Shot Latch.

Thread-safe call-once primitive: for each key, exactly one caller observes
the transition from open to tripped, no matter how many threads race.
"""

import threading
from typing import Hashable, Set


class OneShotLatch:
    """Tracks which keys have already fired."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._tripped: Set[Hashable] = set()

    def trip(self, key: Hashable) -> bool:
        """
        Trip the latch for ``key``.

        Returns:
            bool: True for the first caller with this key, False afterwards.
        """
        with self._lock:
            if key in self._tripped:
                return False
            self._tripped.add(key)
            return True

    def has_tripped(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._tripped

    def reset(self) -> None:
        """Re-arm every key."""
        with self._lock:
            self._tripped.clear()
