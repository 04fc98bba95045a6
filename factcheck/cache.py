"""
Latest Result Slot

Single-slot holder for the most recent analysis response, owned by
the service. Each put() overwrites the previous entry; there is no
history and no eviction policy beyond that.

Thread-safe via a lock, so concurrent requests never observe a
half-written entry. Entries are deep-copied in and out, so callers
never share the nested criteria/factChecks lists with the slot.

Usage:
    from factcheck.cache import latest_result
    latest_result.put(response_dict)
    latest = latest_result.get()
"""

from __future__ import annotations

import copy
import threading
import time
from typing import Optional


class LatestResultSlot:
    """One-entry cache with overwrite-on-write semantics."""

    def __init__(self):
        self._value: Optional[dict] = None
        self._stored_at: Optional[float] = None
        self._lock = threading.Lock()
        self._writes = 0

    def put(self, result: dict) -> None:
        """Replace whatever is in the slot."""
        with self._lock:
            self._value = copy.deepcopy(result)
            self._stored_at = time.monotonic()
            self._writes += 1

    def get(self) -> Optional[dict]:
        """Return a copy of the current entry, or None when empty."""
        with self._lock:
            return copy.deepcopy(self._value) if self._value is not None else None

    def clear(self) -> None:
        with self._lock:
            self._value = None
            self._stored_at = None

    @property
    def stats(self) -> dict:
        with self._lock:
            age = (
                round(time.monotonic() - self._stored_at, 3)
                if self._stored_at is not None else None
            )
            return {
                "occupied": self._value is not None,
                "writes": self._writes,
                "age_seconds": age,
            }


# Singleton — shared across the application
latest_result = LatestResultSlot()
