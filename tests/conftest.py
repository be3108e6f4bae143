"""Pytest configuration and fixtures for translation_cache.

Unit tests run against MemoryCacheStore; Redis is replaced by AsyncMock
clients, so no server is needed.
"""

import asyncio
from collections.abc import Iterator
from typing import Any

import pytest

from translation_cache.core.config import Settings, get_settings
from translation_cache.infrastructure.cache.memory_store import MemoryCacheStore
from translation_cache.infrastructure.cache.repository import TranslationCacheRepository


class FakeClock:
    """Manually advanced monotonic clock for TTL tests."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class YieldingStore:
    """MemoryCacheStore wrapper that yields to the event loop around every call.

    Lets asyncio.gather interleave coroutines between a read and the
    matching write, the way a networked store would.
    """

    def __init__(self, backing: MemoryCacheStore) -> None:
        self.backing = backing

    async def get(self, key: str) -> Any | None:
        value = await self.backing.get(key)
        await asyncio.sleep(0)
        return value

    async def put(self, key: str, value: Any, ttl_seconds: int) -> None:
        await asyncio.sleep(0)
        await self.backing.put(key, value, ttl_seconds)

    async def forever(self, key: str, value: Any) -> None:
        await asyncio.sleep(0)
        await self.backing.forever(key, value)

    async def forget(self, key: str) -> None:
        await asyncio.sleep(0)
        await self.backing.forget(key)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock: FakeClock) -> MemoryCacheStore:
    """Empty in-memory store driven by the fake clock."""
    return MemoryCacheStore(clock=clock)


@pytest.fixture
def yielding_store(store: MemoryCacheStore) -> YieldingStore:
    """Yielding view over the memory store fixture."""
    return YieldingStore(store)


@pytest.fixture
def repo(store: MemoryCacheStore) -> TranslationCacheRepository:
    """Repository with prefix 'translation' over the memory store."""
    return TranslationCacheRepository(store, "translation")


@pytest.fixture
def memory_settings() -> Settings:
    """Settings selecting the memory store, independent of environment."""
    return Settings(
        _env_file=None,
        translation_cache_store="memory",
        translation_cache_prefix="translation",
        translation_cache_registry_mode="store",
    )


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Iterator[None]:
    """Drop cached settings so env overrides in one test don't leak into another."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
