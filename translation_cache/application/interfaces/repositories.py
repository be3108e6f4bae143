"""Repository interfaces (ports) for the application layer."""

from __future__ import annotations

from typing import Any, Protocol


# Translation cache repository interface
class ITranslationCacheRepository(Protocol):
    """Protocol for the translation cache keyed by (locale, group, namespace)."""

    async def has(self, locale: str, group: str, namespace: str) -> bool:
        """Return True if an unexpired entry exists for the triple."""

    async def get(self, locale: str, group: str, namespace: str) -> Any | None:
        """Return the cached payload or None."""

    async def put(
        self, locale: str, group: str, namespace: str, value: Any, ttl_minutes: int
    ) -> None:
        """Cache value for ttl_minutes (>= 1)."""

    async def flush(self, locale: str, group: str, namespace: str) -> None:
        """Remove one entry. No-op when absent."""

    async def flush_all(self) -> int:
        """Remove every entry written through this repository; return key count."""
