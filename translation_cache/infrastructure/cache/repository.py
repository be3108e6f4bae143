"""Registry-backed translation cache repository.

Caches one opaque payload per (locale, group, namespace) in a flat
key-value store and records every written key in a registry entry, so
that flush_all can invalidate exactly the translation keys and nothing
else sharing the store.

Invariant: every key written by put and not yet flushed is in the
registry. put therefore records the key before writing the value; a
failure in between leaves a registry entry pointing at nothing, which
get/flush treat as absent.

put, flush and flush_all run one at a time per repository instance, so a
flush_all never drops the registry entry of a key that a concurrent put
is writing. Instances in other processes are not coordinated.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from translation_cache.core.constants import SECONDS_PER_MINUTE
from translation_cache.domain.exceptions import InvalidArgumentError
from translation_cache.infrastructure.cache.keys import (
    registry_key,
    translation_key,
    validate_prefix,
)
from translation_cache.infrastructure.cache.registry import (
    KeyRegistryProtocol,
    StoreKeyRegistry,
)
from translation_cache.infrastructure.cache.store_protocol import CacheStoreProtocol
from translation_cache.shared.telemetry.tracing import add_span_attributes, traced

logger = logging.getLogger(__name__)


def _validate_ttl_minutes(ttl_minutes: Any) -> int:
    """Return ttl_minutes if it is a positive int; raise InvalidArgumentError otherwise."""
    if isinstance(ttl_minutes, bool) or not isinstance(ttl_minutes, int):
        raise InvalidArgumentError(
            f"ttl_minutes must be an integer, got {type(ttl_minutes).__name__}",
            field="ttl_minutes",
        )
    if ttl_minutes < 1:
        raise InvalidArgumentError(
            f"ttl_minutes must be >= 1, got {ttl_minutes}", field="ttl_minutes"
        )
    return ttl_minutes


class TranslationCacheRepository:
    """Translation cache over a CacheStoreProtocol store, with a key registry.

    Two instances with the same prefix and store derive the same keys and
    share the same registry.
    """

    def __init__(
        self,
        store: CacheStoreProtocol,
        prefix: str,
        registry: KeyRegistryProtocol | None = None,
    ) -> None:
        """Initialize the repository.

        Args:
            store: Backing key-value store.
            prefix: Namespace for this cache instance's keys and registry address.
            registry: Optional registry; defaults to a StoreKeyRegistry in the same store.

        Raises:
            InvalidArgumentError: Empty prefix.
        """
        validate_prefix(prefix)
        self.store = store
        self.prefix = prefix
        self.registry = registry or StoreKeyRegistry(store, registry_key(prefix))
        self._lock = asyncio.Lock()

    def cache_key(self, locale: str, group: str, namespace: str) -> str:
        """Return the store address for a triple (validates the components)."""
        return translation_key(self.prefix, locale, group, namespace)

    @traced("translation_cache.has")
    async def has(self, locale: str, group: str, namespace: str) -> bool:
        """Return True if get() on the same triple would return a value."""
        return await self.get(locale, group, namespace) is not None

    @traced("translation_cache.get")
    async def get(self, locale: str, group: str, namespace: str) -> Any | None:
        """Return the cached payload, or None when absent or expired."""
        key = self.cache_key(locale, group, namespace)
        value = await self.store.get(key)
        logger.debug(
            "Translation cache %s: %s/%s/%s", "HIT" if value is not None else "MISS",
            locale, group, namespace,
        )
        return value

    @traced("translation_cache.put")
    async def put(
        self,
        locale: str,
        group: str,
        namespace: str,
        value: Any,
        ttl_minutes: int,
    ) -> None:
        """Cache value for the triple for ttl_minutes and record its key in the registry.

        Raises:
            InvalidArgumentError: Bad component or non-positive TTL (store untouched).
        """
        ttl_minutes = _validate_ttl_minutes(ttl_minutes)
        key = self.cache_key(locale, group, namespace)
        async with self._lock:
            await self.registry.add(key)
            await self.store.put(key, value, ttl_minutes * SECONDS_PER_MINUTE)
        logger.debug(
            "Translation cache PUT: %s/%s/%s (TTL: %s min)", locale, group, namespace, ttl_minutes
        )

    @traced("translation_cache.flush")
    async def flush(self, locale: str, group: str, namespace: str) -> None:
        """Remove one entry and its registry reference. No-op when absent."""
        key = self.cache_key(locale, group, namespace)
        async with self._lock:
            await self.store.forget(key)
            await self.registry.remove(key)
        logger.debug("Translation cache FLUSH: %s/%s/%s", locale, group, namespace)

    @traced("translation_cache.flush_all")
    async def flush_all(self) -> int:
        """Remove every registered entry, then those keys from the registry.

        Keys not in the registry are never touched. Entries that already
        expired are forgotten without error. If the store fails midway the
        registry still lists every key, so a retry picks them up again.

        Returns:
            Number of registered keys that were forgotten.
        """
        async with self._lock:
            keys = await self.registry.keys()
            for key in keys:
                await self.store.forget(key)
            await self.registry.remove_many(keys)
        add_span_attributes(count=len(keys))
        logger.info("Translation cache FLUSH ALL: %s (%s keys)", self.prefix, len(keys))
        return len(keys)
