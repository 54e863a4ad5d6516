"""Monotonic block number watermark."""

from __future__ import annotations

import threading


class Watermark:
    """Highest block number observed, shared across queries.

    The value never decreases: updates go through ``fetch_max``. A lock guards
    the read-modify-write so concurrent updates from coroutines running on
    different event loops or threads cannot regress it.
    """

    def __init__(self, initial: int = 0) -> None:
        if initial < 0:
            raise ValueError("watermark must be >= 0")
        self._value = initial
        self._lock = threading.Lock()

    def get(self) -> int:
        with self._lock:
            return self._value

    def fetch_max(self, value: int) -> int:
        """Raise the watermark to ``max(current, value)``.

        Returns:
            The watermark after the update
        """
        with self._lock:
            if value > self._value:
                self._value = value
            return self._value

    def __repr__(self) -> str:
        return f"Watermark({self.get()})"
