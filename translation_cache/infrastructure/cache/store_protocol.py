"""Key-value store contract consumed by the translation cache repository (DIP).

Only flat single-key operations are assumed; stores are not expected to
enumerate or pattern-delete their keys.
"""

from typing import Any, Protocol


class CacheStoreProtocol(Protocol):
    """Protocol for flat key-value stores (e.g. Redis, in-memory)."""

    async def get(self, key: str) -> Any:
        """Return stored value, or None when absent or expired."""
        ...

    async def put(self, key: str, value: Any, ttl_seconds: int) -> None:
        """Store value with a TTL in seconds."""
        ...

    async def forever(self, key: str, value: Any) -> None:
        """Store value with no expiration."""
        ...

    async def forget(self, key: str) -> None:
        """Remove key. Missing keys are not an error."""
        ...
