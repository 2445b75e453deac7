from __future__ import annotations

import threading


class SalonLockRegistry:
    """One re-entrant lock per salon id, created on first use."""

    def __init__(self) -> None:
        self._locks: dict[str, threading.RLock] = {}
        self._registry_lock = threading.Lock()

    def get(self, salon_id: str) -> threading.RLock:
        with self._registry_lock:
            if salon_id not in self._locks:
                self._locks[salon_id] = threading.RLock()
            return self._locks[salon_id]
