"""Redis-backed key-value store for the translation cache.

Async Redis store with TTL support. Values are JSON-serialized. Unlike a
best-effort cache, every Redis failure surfaces as StoreUnavailableError:
the registry must never silently miss a write.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, TypeVar

import redis.asyncio as redis

from translation_cache.domain.exceptions import StoreUnavailableError

if TYPE_CHECKING:
    from translation_cache.core.config import Settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RedisCacheStore:
    """Async Redis store implementing CacheStoreProtocol.

    Call connect() before use (or inject a client) and disconnect() at
    shutdown. Connection settings come from translation_cache.core.config.
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            redis_client: Optional Redis client for testing or DI; treated as connected.
            settings: Settings for connect(); defaults to get_settings().
        """
        if settings is None:
            from translation_cache.core.config import get_settings

            settings = get_settings()
        self.settings = settings
        self.redis = redis_client
        self._connected = redis_client is not None

    async def connect(self) -> None:
        """Establish the Redis connection and ping it.

        Raises:
            StoreUnavailableError: Redis did not answer the ping.
        """
        if self.redis is not None and self._connected:
            return
        self.redis = redis.Redis(
            host=self.settings.redis_host,
            port=self.settings.redis_port,
            db=self.settings.redis_db,
            password=self.settings.redis_password.get_secret_value()
            if self.settings.redis_password
            else None,
            decode_responses=True,
            socket_connect_timeout=self.settings.redis_socket_timeout,
            socket_timeout=self.settings.redis_socket_timeout,
            socket_keepalive=True,
        )
        try:
            await self.redis.ping()
        except redis.RedisError as e:
            logger.warning(
                "Redis connection failed: %s:%s (%s)",
                self.settings.redis_host,
                self.settings.redis_port,
                e,
            )
            await self.redis.aclose()
            self.redis = None
            raise StoreUnavailableError("connect", reason=str(e)) from e
        self._connected = True
        logger.info(
            "Redis cache store connected: %s:%s",
            self.settings.redis_host,
            self.settings.redis_port,
        )

    async def disconnect(self) -> None:
        """Close the Redis connection."""
        if self.redis is not None:
            await self.redis.aclose()
            self.redis = None
            self._connected = False
            logger.info("Redis cache store disconnected")

    def is_available(self) -> bool:
        """Return True if Redis is connected and usable."""
        return self._connected and self.redis is not None

    @property
    def client(self) -> redis.Redis:
        """Connected Redis client (used by the native set registry).

        Raises:
            StoreUnavailableError: Not connected.
        """
        if not self.is_available() or self.redis is None:
            raise StoreUnavailableError("client", reason="Redis store is not connected")
        return self.redis

    async def execute(
        self,
        operation: str,
        key: str,
        command: Callable[[redis.Redis], Awaitable[T]],
    ) -> T:
        """Run one Redis command, mapping Redis failures to StoreUnavailableError.

        Args:
            operation: Name used in logs and in the raised error.
            key: Key the command touches.
            command: Callable receiving the client and returning an awaitable.
        """
        client = self.client
        try:
            return await command(client)
        except redis.RedisError as e:
            logger.exception("Cache %s error for key %s", operation, key)
            raise StoreUnavailableError(operation, key, str(e)) from e

    async def get(self, key: str) -> Any | None:
        """Return cached value (JSON-deserialized) or None if missing/expired."""
        value = await self.execute("get", key, lambda r: r.get(key))
        if value is None:
            logger.debug("Cache MISS: %s", key)
            return None
        logger.debug("Cache HIT: %s", key)
        return json.loads(value)

    async def put(self, key: str, value: Any, ttl_seconds: int) -> None:
        """Store value with TTL (SETEX). A non-positive TTL deletes the key."""
        if ttl_seconds <= 0:
            await self.forget(key)
            return
        serialized = json.dumps(value)
        await self.execute("put", key, lambda r: r.setex(key, ttl_seconds, serialized))
        logger.debug("Cache SET: %s (TTL: %ss)", key, ttl_seconds)

    async def forever(self, key: str, value: Any) -> None:
        """Store value with no expiration (SET without EX)."""
        serialized = json.dumps(value)
        await self.execute("forever", key, lambda r: r.set(key, serialized))
        logger.debug("Cache SET: %s (no expiry)", key)

    async def forget(self, key: str) -> None:
        """Delete key (DEL). Missing keys are not an error."""
        await self.execute("forget", key, lambda r: r.delete(key))
        logger.debug("Cache DELETE: %s", key)
