"""Tests for StoreKeyRegistry and RedisSetKeyRegistry."""

import asyncio
from unittest.mock import AsyncMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from translation_cache.core.config import Settings
from translation_cache.domain.exceptions import StoreUnavailableError
from translation_cache.infrastructure.cache.memory_store import MemoryCacheStore
from translation_cache.infrastructure.cache.redis_store import RedisCacheStore
from translation_cache.infrastructure.cache.registry import (
    RedisSetKeyRegistry,
    StoreKeyRegistry,
)

ADDRESS = "translation_registry"


class TestStoreKeyRegistry:
    """Registry kept as a no-TTL list value in a generic store."""

    @pytest.mark.asyncio
    async def test_absent_registry_is_empty(self, store: MemoryCacheStore) -> None:
        assert await StoreKeyRegistry(store, ADDRESS).keys() == []

    @pytest.mark.asyncio
    async def test_add_is_deduplicated(self, store: MemoryCacheStore) -> None:
        registry = StoreKeyRegistry(store, ADDRESS)
        await registry.add("k1")
        await registry.add("k2")
        await registry.add("k1")
        assert await registry.keys() == ["k1", "k2"]

    @pytest.mark.asyncio
    async def test_add_existing_key_does_not_rewrite(self) -> None:
        store = AsyncMock()
        store.get.return_value = ["k1"]
        await StoreKeyRegistry(store, ADDRESS).add("k1")
        store.forever.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_add_writes_with_forever(self) -> None:
        store = AsyncMock()
        store.get.return_value = None
        await StoreKeyRegistry(store, ADDRESS).add("k1")
        store.forever.assert_awaited_once_with(ADDRESS, ["k1"])
        store.put.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_remove(self, store: MemoryCacheStore) -> None:
        registry = StoreKeyRegistry(store, ADDRESS)
        await registry.add("k1")
        await registry.add("k2")
        await registry.remove("k1")
        assert await registry.keys() == ["k2"]

    @pytest.mark.asyncio
    async def test_remove_absent_key_does_not_write(self) -> None:
        store = AsyncMock()
        store.get.return_value = ["k1"]
        await StoreKeyRegistry(store, ADDRESS).remove("other")
        store.forever.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_remove_many_forgets_entry_when_emptied(self, store: MemoryCacheStore) -> None:
        registry = StoreKeyRegistry(store, ADDRESS)
        await registry.add("k1")
        await registry.add("k2")
        await registry.remove_many(["k1", "k2"])
        assert await store.get(ADDRESS) is None
        assert await registry.keys() == []

    @pytest.mark.asyncio
    async def test_remove_many_keeps_keys_not_listed(self, store: MemoryCacheStore) -> None:
        registry = StoreKeyRegistry(store, ADDRESS)
        for key in ("k1", "k2", "k3"):
            await registry.add(key)
        await registry.remove_many(["k1", "k3", "missing"])
        assert await registry.keys() == ["k2"]

    @pytest.mark.asyncio
    async def test_remove_many_on_absent_registry(self, store: MemoryCacheStore) -> None:
        await StoreKeyRegistry(store, ADDRESS).remove_many([])
        assert store.keys() == []

    @pytest.mark.asyncio
    async def test_malformed_value_treated_as_empty(self, store: MemoryCacheStore) -> None:
        await store.forever(ADDRESS, "not-a-list")
        registry = StoreKeyRegistry(store, ADDRESS)
        assert await registry.keys() == []
        await registry.add("k1")
        assert await registry.keys() == ["k1"]

    @pytest.mark.asyncio
    async def test_duplicates_in_stored_value_are_collapsed(self, store: MemoryCacheStore) -> None:
        await store.forever(ADDRESS, ["k1", "k1", "k2"])
        assert await StoreKeyRegistry(store, ADDRESS).keys() == ["k1", "k2"]

    @pytest.mark.asyncio
    async def test_concurrent_adds_do_not_lose_updates(self, yielding_store) -> None:
        """Interleaving read-modify-write cycles are serialized by the registry lock."""
        registry = StoreKeyRegistry(yielding_store, ADDRESS)
        await asyncio.gather(*(registry.add(f"k{i}") for i in range(10)))
        assert sorted(await registry.keys()) == sorted(f"k{i}" for i in range(10))

    @pytest.mark.asyncio
    async def test_add_during_remove_many_is_kept(self, yielding_store) -> None:
        registry = StoreKeyRegistry(yielding_store, ADDRESS)
        await registry.add("k1")
        snapshot = await registry.keys()

        await asyncio.gather(registry.remove_many(snapshot), registry.add("k2"))

        assert await registry.keys() == ["k2"]


class TestRedisSetKeyRegistry:
    """Registry kept as a Redis set with atomic SADD/SREM."""

    @pytest.fixture
    def redis_client(self) -> AsyncMock:
        return AsyncMock()

    @pytest.fixture
    def registry(self, redis_client: AsyncMock, memory_settings: Settings) -> RedisSetKeyRegistry:
        store = RedisCacheStore(redis_client=redis_client, settings=memory_settings)
        return RedisSetKeyRegistry(store, ADDRESS)

    @pytest.mark.asyncio
    async def test_add_uses_sadd(self, registry: RedisSetKeyRegistry, redis_client: AsyncMock) -> None:
        await registry.add("k1")
        redis_client.sadd.assert_awaited_once_with(ADDRESS, "k1")

    @pytest.mark.asyncio
    async def test_remove_uses_srem(self, registry: RedisSetKeyRegistry, redis_client: AsyncMock) -> None:
        await registry.remove("k1")
        redis_client.srem.assert_awaited_once_with(ADDRESS, "k1")

    @pytest.mark.asyncio
    async def test_keys_uses_smembers(self, registry: RedisSetKeyRegistry, redis_client: AsyncMock) -> None:
        redis_client.smembers.return_value = {"k2", "k1"}
        assert await registry.keys() == ["k1", "k2"]

    @pytest.mark.asyncio
    async def test_keys_absent_set(self, registry: RedisSetKeyRegistry, redis_client: AsyncMock) -> None:
        redis_client.smembers.return_value = set()
        assert await registry.keys() == []

    @pytest.mark.asyncio
    async def test_remove_many_uses_one_srem(
        self, registry: RedisSetKeyRegistry, redis_client: AsyncMock
    ) -> None:
        await registry.remove_many(["k1", "k2"])
        redis_client.srem.assert_awaited_once_with(ADDRESS, "k1", "k2")
        redis_client.delete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_remove_many_nothing_sends_no_command(
        self, registry: RedisSetKeyRegistry, redis_client: AsyncMock
    ) -> None:
        await registry.remove_many([])
        redis_client.srem.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_redis_error_raises_store_unavailable(
        self, registry: RedisSetKeyRegistry, redis_client: AsyncMock
    ) -> None:
        redis_client.sadd.side_effect = RedisConnectionError("refused")
        with pytest.raises(StoreUnavailableError) as exc_info:
            await registry.add("k1")
        assert exc_info.value.details["operation"] == "registry_add"
