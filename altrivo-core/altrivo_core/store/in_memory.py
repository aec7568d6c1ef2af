"""
In-Memory Expiring Store
========================
Process-local expiring store for development and testing.
"""

import time
from typing import Callable, Dict, Optional, Tuple


class InMemoryStore:
    """
    Simple in-memory expiring store.

    For development and testing only.
    Use RedisStore in production.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        """
        Args:
            clock: Returns the current time in seconds; tests pass a fake one
        """
        self._clock = clock
        self._entries: Dict[str, Tuple[str, float]] = {}

    async def get(self, key: str) -> Optional[str]:
        entry = self._live_entry(key)
        return entry[0] if entry else None

    async def set(self, key: str, value: str, ttl: int) -> None:
        self._entries[key] = (str(value), self._clock() + ttl)

    async def increment(self, key: str, ttl: int) -> int:
        entry = self._live_entry(key)
        if entry is None:
            value, expires_at = 0, self._clock() + ttl
        else:
            value, expires_at = int(entry[0]), entry[1]

        value += 1
        self._entries[key] = (str(value), expires_at)
        return value

    async def delete(self, *keys: str) -> int:
        removed = 0
        for key in keys:
            if self._live_entry(key) is not None:
                removed += 1
            self._entries.pop(key, None)
        return removed

    async def ping(self) -> bool:
        return True

    def ttl(self, key: str) -> Optional[float]:
        """Seconds left before ``key`` expires, or None if absent."""
        entry = self._live_entry(key)
        if entry is None:
            return None
        return entry[1] - self._clock()

    def _live_entry(self, key: str) -> Optional[Tuple[str, float]]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry[1] <= self._clock():
            del self._entries[key]
            return None
        return entry
