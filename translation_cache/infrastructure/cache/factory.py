"""Translation cache factory: builds store, registry and repository from settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from translation_cache.domain.exceptions import RegistryConfigurationError
from translation_cache.infrastructure.cache.keys import registry_key
from translation_cache.infrastructure.cache.registry import (
    KeyRegistryProtocol,
    RedisSetKeyRegistry,
    StoreKeyRegistry,
)
from translation_cache.infrastructure.cache.repository import TranslationCacheRepository
from translation_cache.infrastructure.cache.store_protocol import CacheStoreProtocol

if TYPE_CHECKING:
    from translation_cache.core.config import Settings


class TranslationCacheFactory:
    """Factory for translation cache components based on configuration."""

    @staticmethod
    def create_store(settings: "Settings | None" = None) -> CacheStoreProtocol:
        """Create the key-value store from settings.

        The Redis store is returned unconnected; call connect() before use.

        Args:
            settings: Settings; if None, uses get_settings().

        Returns:
            MemoryCacheStore or RedisCacheStore.

        Raises:
            ValueError: Unknown store.
        """
        from translation_cache.core.config import get_settings

        s = settings or get_settings()
        backend = s.translation_cache_store.lower()

        if backend == "memory":
            from translation_cache.infrastructure.cache.memory_store import MemoryCacheStore

            return MemoryCacheStore()
        if backend == "redis":
            from translation_cache.infrastructure.cache.redis_store import RedisCacheStore

            return RedisCacheStore(settings=s)
        raise ValueError(f"Unknown translation cache store: {backend}. Supported: 'redis', 'memory'")

    @staticmethod
    def create_registry(
        store: CacheStoreProtocol, settings: "Settings | None" = None
    ) -> KeyRegistryProtocol:
        """Create the key registry for store.

        Raises:
            RegistryConfigurationError: 'native' mode with a non-Redis store.
            ValueError: Unknown registry mode.
        """
        from translation_cache.core.config import get_settings
        from translation_cache.infrastructure.cache.redis_store import RedisCacheStore

        s = settings or get_settings()
        mode = s.translation_cache_registry_mode.lower()
        address = registry_key(s.translation_cache_prefix)

        if mode == "store":
            return StoreKeyRegistry(store, address)
        if mode == "native":
            if not isinstance(store, RedisCacheStore):
                raise RegistryConfigurationError(
                    f"Native registry requires a Redis store, got {type(store).__name__}"
                )
            return RedisSetKeyRegistry(store, address)
        raise ValueError(f"Unknown registry mode: {mode}. Supported: 'store', 'native'")

    @classmethod
    def create_repository(
        cls,
        store: CacheStoreProtocol | None = None,
        settings: "Settings | None" = None,
    ) -> TranslationCacheRepository:
        """Create a repository with the configured prefix and registry.

        Args:
            store: Existing store; if None, one is created with create_store().
            settings: Settings; if None, uses get_settings().
        """
        from translation_cache.core.config import get_settings

        s = settings or get_settings()
        store = store if store is not None else cls.create_store(s)
        return TranslationCacheRepository(
            store,
            s.translation_cache_prefix,
            registry=cls.create_registry(store, s),
        )
