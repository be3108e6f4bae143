"""Flush the translation cache: one entry or everything.

Decides the scope only; the repository does the work.
"""

from __future__ import annotations

import logging

from translation_cache.application.dtos.flush import FlushResult, FlushScope
from translation_cache.application.interfaces.repositories import (
    ITranslationCacheRepository,
)
from translation_cache.core.constants import WILDCARD_NAMESPACE

logger = logging.getLogger(__name__)


class FlushTranslationCache:
    """Flush one (locale, group, namespace) entry, or all entries.

    When the cache is administratively disabled nothing is touched.
    """

    def __init__(
        self,
        repository: ITranslationCacheRepository | None,
        cache_enabled: bool,
    ) -> None:
        self.repository = repository
        self.cache_enabled = cache_enabled

    async def execute(
        self,
        locale: str | None = None,
        group: str | None = None,
        namespace: str | None = None,
    ) -> FlushResult:
        """Flush a single entry when locale and group are both given, else flush all.

        Args:
            locale: Optional locale.
            group: Optional group.
            namespace: Optional namespace; defaults to the wildcard "*".

        Returns:
            FlushResult describing the cleared scope.
        """
        if not self.cache_enabled or self.repository is None:
            return FlushResult(FlushScope.DISABLED, "The translation cache is disabled.")

        namespace = namespace or WILDCARD_NAMESPACE
        if locale and group:
            await self.repository.flush(locale, group, namespace)
            logger.info("Flushed translation cache entry %s/%s/%s", locale, group, namespace)
            return FlushResult(
                FlushScope.ENTRY,
                f"Translation cache cleared for: {locale}/{group}/{namespace}",
            )

        count = await self.repository.flush_all()
        logger.info("Flushed all translation cache entries (%s keys)", count)
        return FlushResult(
            FlushScope.ALL,
            "All translation cache has been cleared.",
            keys_cleared=count,
        )
