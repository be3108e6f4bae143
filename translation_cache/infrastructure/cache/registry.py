"""Key registry: the side-index of every translation key the repository wrote.

The backing store cannot list its own keys, so bulk invalidation walks
this registry instead. The registry is never written with a TTL; it
lives until flush_all removes the last key it read from it. Keys added
while a flush_all is running are kept.

Two implementations:
- StoreKeyRegistry keeps the key list as one plain value in any store.
  Updates are read-modify-write serialized by an asyncio.Lock within one
  process. Processes sharing a store can still lose an update; the lost
  key stays readable and leaks until its TTL expires.
- RedisSetKeyRegistry keeps a Redis set and uses SADD/SREM, which are
  atomic across processes.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Protocol

from translation_cache.infrastructure.cache.redis_store import RedisCacheStore
from translation_cache.infrastructure.cache.store_protocol import CacheStoreProtocol

logger = logging.getLogger(__name__)


class KeyRegistryProtocol(Protocol):
    """Protocol for the set of live translation keys under one prefix."""

    address: str

    async def add(self, key: str) -> None:
        """Record key as live. Adding a present key is a no-op."""
        ...

    async def remove(self, key: str) -> None:
        """Forget key. Removing an absent key is a no-op."""
        ...

    async def keys(self) -> list[str]:
        """Return all recorded keys (empty when the registry is absent)."""
        ...

    async def remove_many(self, keys: list[str]) -> None:
        """Forget exactly these keys; keys added meanwhile stay.

        The registry entry is deleted once no key is left in it.
        """
        ...


def _as_key_list(raw: Any, address: str) -> list[str]:
    """Normalize a stored registry value to a list of unique string keys."""
    if raw is None:
        return []
    if not isinstance(raw, (list, tuple, set)):
        logger.warning(
            "Registry %s holds %s instead of a key list; treating as empty",
            address,
            type(raw).__name__,
        )
        return []
    return list(dict.fromkeys(k for k in raw if isinstance(k, str)))


class StoreKeyRegistry:
    """Registry stored as a no-TTL list value in a generic key-value store."""

    def __init__(self, store: CacheStoreProtocol, address: str) -> None:
        self.store = store
        self.address = address
        self._lock = asyncio.Lock()

    async def _read(self) -> list[str]:
        return _as_key_list(await self.store.get(self.address), self.address)

    async def add(self, key: str) -> None:
        async with self._lock:
            registry = await self._read()
            if key in registry:
                return
            registry.append(key)
            await self.store.forever(self.address, registry)
            logger.debug("Registry ADD: %s -> %s (%s keys)", key, self.address, len(registry))

    async def remove(self, key: str) -> None:
        async with self._lock:
            registry = await self._read()
            if key not in registry:
                return
            registry = [k for k in registry if k != key]
            await self.store.forever(self.address, registry)
            logger.debug("Registry REMOVE: %s from %s", key, self.address)

    async def keys(self) -> list[str]:
        return await self._read()

    async def remove_many(self, keys: list[str]) -> None:
        doomed = set(keys)
        async with self._lock:
            registry = [k for k in await self._read() if k not in doomed]
            if registry:
                await self.store.forever(self.address, registry)
                logger.debug(
                    "Registry REMOVE: %s keys from %s (%s left)", len(doomed), self.address, len(registry)
                )
                return
            await self.store.forget(self.address)
            logger.debug("Registry CLEARED: %s", self.address)


class RedisSetKeyRegistry:
    """Registry stored as a Redis set (no expiry); each update is atomic."""

    def __init__(self, store: RedisCacheStore, address: str) -> None:
        self.store = store
        self.address = address

    async def add(self, key: str) -> None:
        await self.store.execute("registry_add", self.address, lambda r: r.sadd(self.address, key))
        logger.debug("Registry ADD: %s -> %s", key, self.address)

    async def remove(self, key: str) -> None:
        await self.store.execute(
            "registry_remove", self.address, lambda r: r.srem(self.address, key)
        )
        logger.debug("Registry REMOVE: %s from %s", key, self.address)

    async def keys(self) -> list[str]:
        members = await self.store.execute(
            "registry_keys", self.address, lambda r: r.smembers(self.address)
        )
        return sorted(members or ())

    async def remove_many(self, keys: list[str]) -> None:
        # Redis drops a set once SREM empties it
        if not keys:
            return
        await self.store.execute(
            "registry_remove", self.address, lambda r: r.srem(self.address, *keys)
        )
        logger.debug("Registry REMOVE: %s keys from %s", len(keys), self.address)
