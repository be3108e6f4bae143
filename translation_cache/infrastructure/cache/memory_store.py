"""In-memory key-value store for tests, development, and single-process use.

Honors TTLs (entries expire lazily on read) and copies values on the way
in and out, so a cached payload behaves like one that went through a
serializing store.
"""

from __future__ import annotations

import copy
import logging
import time
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)


class MemoryCacheStore:
    """Dict-backed store implementing CacheStoreProtocol."""

    def __init__(self, clock: Callable[[], float] | None = None) -> None:
        """Initialize an empty store.

        Args:
            clock: Monotonic time source in seconds; injectable for tests.
        """
        self._clock = clock or time.monotonic
        # key -> (value, expires_at or None for no expiry)
        self._entries: dict[str, tuple[Any, float | None]] = {}

    async def get(self, key: str) -> Any | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if expires_at is not None and self._clock() >= expires_at:
            del self._entries[key]
            logger.debug("Memory cache EXPIRED: %s", key)
            return None
        return copy.deepcopy(value)

    async def put(self, key: str, value: Any, ttl_seconds: int) -> None:
        # Non-positive TTL means the entry is already expired
        if ttl_seconds <= 0:
            self._entries.pop(key, None)
            return
        self._entries[key] = (copy.deepcopy(value), self._clock() + ttl_seconds)

    async def forever(self, key: str, value: Any) -> None:
        self._entries[key] = (copy.deepcopy(value), None)

    async def forget(self, key: str) -> None:
        self._entries.pop(key, None)

    def keys(self) -> list[str]:
        """Return every stored key, expired or not. For tests and diagnostics."""
        return list(self._entries)

    def clear(self) -> None:
        """Drop all entries."""
        self._entries.clear()
