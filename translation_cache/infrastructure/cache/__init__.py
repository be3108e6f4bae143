"""Cache: stores, key registry and the translation cache repository.

Key format lives in keys.py (DRY); TranslationCacheFactory wires the
pieces from translation_cache.core.config.
"""

from translation_cache.infrastructure.cache.factory import TranslationCacheFactory
from translation_cache.infrastructure.cache.keys import registry_key, translation_key
from translation_cache.infrastructure.cache.memory_store import MemoryCacheStore
from translation_cache.infrastructure.cache.redis_store import RedisCacheStore
from translation_cache.infrastructure.cache.registry import (
    KeyRegistryProtocol,
    RedisSetKeyRegistry,
    StoreKeyRegistry,
)
from translation_cache.infrastructure.cache.repository import TranslationCacheRepository
from translation_cache.infrastructure.cache.store_protocol import CacheStoreProtocol

__all__ = [
    "CacheStoreProtocol",
    "KeyRegistryProtocol",
    "MemoryCacheStore",
    "RedisCacheStore",
    "RedisSetKeyRegistry",
    "StoreKeyRegistry",
    "TranslationCacheFactory",
    "TranslationCacheRepository",
    "registry_key",
    "translation_key",
]
